from .ladder import count_differences, is_one_letter_different, is_valid_ladder
from .validation import ErrorCode, check_move
from .words import FIXED_START, FIXED_TARGET, choose_pair
from .game import Flags, WordLadderGame

__all__ = [
    "count_differences", "is_one_letter_different", "is_valid_ladder",
    "ErrorCode", "check_move", "FIXED_START", "FIXED_TARGET", "choose_pair",
    "Flags", "WordLadderGame",
]

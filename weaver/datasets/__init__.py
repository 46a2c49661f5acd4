from .dictionary import WORD_LENGTH, load_dictionary, default_dictionary_path
from .validator import validate_dictionary, pretty_summary
from .io import read_text, write_words

__all__ = [
    "WORD_LENGTH", "load_dictionary", "default_dictionary_path",
    "validate_dictionary", "pretty_summary", "write_words",
]

import pytest
from weaver.engine import count_differences, is_one_letter_different, is_valid_ladder, check_move
from weaver.engine import ErrorCode

DICT = {"east", "vast", "vest", "west", "nest", "last"}


@pytest.mark.parametrize("a,b,expected", [
    ("east", "vast", 1),
    ("east", "nest", 2),
    ("east", "east", 0),
    ("east", "WEST", 1),
    ("abcd", "dcba", 4),
])
def test_count_differences(a, b, expected):
    assert count_differences(a, b) == expected


@pytest.mark.parametrize("a,b,expected", [
    ("east", "vast", True),
    ("EAST", "vast", True),
    ("east", "nest", False),
    ("east", "east", False),
    ("east", "aest", False),   # transposition is two differences
    ("east", "eats", False),
    ("east", "feast", False),  # length change
])
def test_is_one_letter_different(a, b, expected):
    assert is_one_letter_different(a, b) is expected


def test_is_valid_ladder():
    assert is_valid_ladder(["east", "vast", "vest", "west"])
    assert is_valid_ladder(["east"])
    assert is_valid_ladder([])
    assert not is_valid_ladder(["east", "nest"])


@pytest.mark.parametrize("word,expected", [
    ("eas", ErrorCode.INVALID_LENGTH),
    ("eastt", ErrorCode.INVALID_LENGTH),
    ("zzzz", ErrorCode.NOT_IN_DICTIONARY),
    ("east", ErrorCode.NO_CHANGE),
    ("nest", ErrorCode.TOO_MANY_DIFFERENCES),
    ("vast", None),
    ("last", None),
])
def test_check_move(word, expected):
    assert check_move(word, "east", DICT, 4) is expected


def test_check_move_order_first_failure_wins():
    # "abcd" is both absent from the dictionary and 4 letters off; dictionary check comes first
    assert check_move("abcd", "east", DICT, 4) is ErrorCode.NOT_IN_DICTIONARY

import numpy as np
from weaver.engine import choose_pair
from weaver.engine.words import random_pair


def test_fixed_pair_when_not_random():
    rng = np.random.default_rng(0)
    assert choose_pair({"lamp", "limp"}, random_words=False, rng=rng) == ("east", "west")


def test_random_pair_empty_dictionary_falls_back():
    rng = np.random.default_rng(0)
    assert choose_pair(frozenset(), random_words=True, rng=rng) == ("east", "west")


def test_random_pair_single_word_is_degenerate():
    rng = np.random.default_rng(0)
    assert random_pair({"lamp"}, rng) == ("lamp", "lamp")


def test_random_pair_distinct_members():
    words = {"lamp", "limp", "lump", "damp"}
    rng = np.random.default_rng(123)
    for _ in range(50):
        s, t = random_pair(words, rng)
        assert s != t
        assert s in words and t in words


def test_random_pair_reproducible_by_seed():
    words = {"lamp", "limp", "lump", "damp", "camp", "ramp"}
    a = [random_pair(words, np.random.default_rng(7)) for _ in range(3)]
    b = [random_pair(words, np.random.default_rng(7)) for _ in range(3)]
    assert a == b


def test_random_pair_skips_ineligible_words():
    words = {"LAMP", "lamps", "ab1c", "limp", "lump"}
    rng = np.random.default_rng(4)
    for _ in range(20):
        s, t = random_pair(words, rng)
        assert {s, t} <= {"limp", "lump"}
        assert s != t


def test_random_pair_no_eligible_words_falls_back():
    rng = np.random.default_rng(0)
    assert random_pair({"LAMP", "lamps"}, rng) == ("east", "west")

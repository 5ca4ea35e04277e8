import random

import pytest

from between import Alphabet, init, key_after, key_before, key_between, midpoint


@pytest.fixture
def binary():
    return Alphabet("01")


@pytest.fixture
def abc():
    return Alphabet("abc")


def test_two_char_sets(binary):
    assert binary.valid("") is False
    assert binary.valid("abc") is False
    assert binary.valid("010") is True

    result = binary.between("0", "001")
    assert result == "0001"
    assert binary.low < result < binary.high
    assert "0" < result < "001"

    assert binary.between("001", "0") is None
    assert binary.between("001", "") is None
    assert binary.between("", "001") == "0001"


def test_binary_between(binary):
    assert binary.between("0", "1") == "01"
    assert binary.between("", "1") == "01"


def test_binary_after(binary):
    assert binary.after("") == "01"
    assert binary.after("0") == "01"
    assert binary.after("00") == "01"
    assert binary.after("1") is None
    assert binary.after("11") is None


def test_binary_before(binary):
    assert binary.before("") is None
    assert binary.before("0") is None
    assert binary.before("000") is None
    assert binary.before("1") == "01"
    assert binary.before("11") == "001"


def test_three_symbols(abc):
    assert abc.between("a", "c") == "b"
    assert abc.between("a", "aa") is None


def test_default_alphabet_midpoint_rounds_up():
    alphabet = init()
    assert alphabet.between("A", "B") == "AV"
    assert alphabet.after("") == "V"
    assert alphabet.after("V") == "k"
    assert alphabet.before("V") == "F"


def test_rejects_unordered_bounds():
    alphabet = init()
    assert alphabet.between("b", "a") is None
    assert alphabet.between("abc", "abc") is None
    # trailing low symbols are insignificant
    assert alphabet.between("abc", "abc!!") is None


def test_rejects_foreign_characters():
    alphabet = init()
    assert alphabet.between("a$", "b") is None
    assert alphabet.between("a", "b$") is None
    assert alphabet.after("a b") is None
    assert alphabet.before("#") is None


def test_empty_upper_bound_is_rejected():
    alphabet = init()
    assert alphabet.between("", "") is None
    assert alphabet.between("", "!!!") is None


def test_after_repeated_high_is_none():
    alphabet = init()
    for n in range(1, 5):
        assert alphabet.after("~" * n) is None


def test_before_repeated_low_is_none():
    alphabet = init()
    for n in range(0, 5):
        assert alphabet.before("!" * n) is None


def test_module_functions_match_methods(abc):
    assert key_between(abc, "a", "c") == abc.between("a", "c")
    assert key_after(abc, "b") == abc.after("b")
    assert key_before(abc, "b") == abc.before("b")


def test_deterministic():
    alphabet = init()
    assert alphabet.between("Hello", "World") == alphabet.between("Hello", "World")


def test_midpoint_unbounded_sides():
    alphabet = init()
    assert midpoint(alphabet, None, None) == "V"
    assert midpoint(alphabet, "V", None) == "k"
    assert midpoint(alphabet, None, "V") == "F"
    assert midpoint(alphabet, "A", "B") == "AV"
    assert midpoint(alphabet, "B", "A") is None


def test_after_chain_is_strictly_increasing():
    alphabet = init()
    key = ""
    for _ in range(200):
        nxt = alphabet.after(key)
        assert nxt is not None
        assert key < nxt
        assert alphabet.valid(nxt)
        key = nxt


def test_before_chain_is_strictly_decreasing():
    alphabet = init()
    key = "~"
    for _ in range(200):
        prev = alphabet.before(key)
        assert prev is not None
        assert prev < key
        assert alphabet.valid(prev)
        key = prev


def test_repeated_insertion_towards_lower_bound():
    alphabet = init()
    left, right = "V", "W"
    for _ in range(30):
        key = alphabet.between(left, right)
        assert key is not None
        assert left < key < right
        right = key


def test_results_lie_strictly_between_random_bounds():
    alphabet = Alphabet("abcdef")
    rng = random.Random(1234)
    found = 0
    for _ in range(500):
        a = "".join(rng.choice("abcdef") for _ in range(rng.randint(0, 6)))
        b = "".join(rng.choice("abcdef") for _ in range(rng.randint(1, 6)))
        lo, hi = min(a, b), max(a, b)
        key = alphabet.between(lo, hi)
        if key is None:
            continue
        found += 1
        assert lo < key < hi
        assert alphabet.valid(key)
        assert not key.endswith(alphabet.low)
    assert found > 0

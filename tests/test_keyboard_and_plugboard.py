import pytest

from errors import ConfigurationError
from keyboard_and_plugboard import ALPHABET, Keyboard, Plugboard


def test_keyboard_maps_both_cases():
    kb = Keyboard()
    assert kb.forward("A") == 0
    assert kb.forward("z") == 25
    assert kb.backward(7) == "H"
    assert "q" in kb and "Q" in kb
    assert " " not in kb and "1" not in kb and "É" not in kb


def test_keyboard_rejects_unknown_symbols():
    kb = Keyboard()
    with pytest.raises(ValueError):
        kb.forward("?")
    with pytest.raises(ValueError):
        kb.backward(26)


def test_empty_plugboard_is_identity():
    pb = Plugboard()
    assert [pb.swap(i) for i in range(26)] == list(range(26))
    assert pb.pairs == []


def test_plugboard_swaps_both_ways():
    pb = Plugboard(["AB", ("x", "y")])
    assert pb.swap(0) == 1
    assert pb.swap(1) == 0
    assert pb.swap(ALPHABET.index("X")) == ALPHABET.index("Y")
    assert pb.swap(ALPHABET.index("C")) == ALPHABET.index("C")
    assert pb.pairs == ["AB", "XY"]


@pytest.mark.parametrize("pairs", [
    [],
    ["AZ"],
    ["QW", "ER", "TY", "UI", "OP", "AS", "DF", "GH", "JK", "LZ"],
    ["AB", "CD", "EF", "GH", "IJ", "KL", "MN", "OP", "QR", "ST", "UV", "WX", "YZ"],
])
def test_plugboard_is_an_involution(pairs):
    pb = Plugboard(pairs)
    for i in range(26):
        assert pb.swap(pb.swap(i)) == i


@pytest.mark.parametrize("pairs", [
    ["AA"],                 # self pair
    ["AB", "BC"],           # B used twice
    ["AB", "BA"],
    ["A1"],                 # outside alphabet
    ["A "],
    ["ABC"],                # not a pair
    ["A"],
    [("A", "B", "C")],
    [42],
    [["AB", "CD"]],         # multi-letter sides
    [["", "B"]],
    [["ST", "B"]],
    [("A", "BC")],
])
def test_bad_plugboard_pairs(pairs):
    with pytest.raises(ConfigurationError):
        Plugboard(pairs)


def test_configuration_error_is_a_value_error():
    with pytest.raises(ValueError):
        Plugboard(["AA"])


@pytest.mark.parametrize("pairs", [None, 42])
def test_plugboard_pairs_must_be_iterable(pairs):
    with pytest.raises(ConfigurationError):
        Plugboard(pairs)

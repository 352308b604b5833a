import pytest

from keyboard_and_plugboard import ALPHABET
from rotor_and_reflector import Reflector, Rotor, inverse_of
from wheels import REFLECTOR_TABLE, build_rotor, reflector


def idx(letter):
    return ALPHABET.index(letter)


def test_rotor_forward_at_rest():
    rotor = build_rotor("I")
    assert rotor.forward(idx("A")) == idx("E")
    assert rotor.backward(idx("E")) == idx("A")


def test_rotor_forward_after_one_step():
    rotor = build_rotor("I", position=1)
    # contact B is wired to K, seen one place back from the window
    assert rotor.forward(idx("A")) == idx("J")


def test_ring_setting_shifts_the_wiring():
    rotor = build_rotor("I", ring_setting=1)
    assert rotor.forward(idx("A")) == idx("K")


@pytest.mark.parametrize("rotor_id", [0, 1, 2, 3, 4, 5, 6, 7])
@pytest.mark.parametrize("position,ring", [(0, 0), (5, 0), (0, 7), (13, 25)])
def test_backward_undoes_forward(rotor_id, position, ring):
    rotor = build_rotor(rotor_id, position, ring)
    for i in range(26):
        assert rotor.backward(rotor.forward(i)) == i


def test_step_wraps_around():
    rotor = build_rotor(0, position=25)
    rotor.step()
    assert rotor.position == 0
    assert rotor.window == "A"


def test_at_notch_reads_current_position():
    rotor = build_rotor("I", position=idx("P"))
    assert not rotor.at_notch()
    rotor.step()
    assert rotor.at_notch()        # Q
    rotor.step()
    assert not rotor.at_notch()


def test_two_notch_wheel():
    rotor = build_rotor("VI", position=idx("M"))
    assert rotor.at_notch()
    rotor.position = idx("Z")
    assert rotor.at_notch()


def test_rotor_normalises_out_of_range_dials():
    rotor = build_rotor(0, position=27, ring_setting=-1)
    assert rotor.position == 1
    assert rotor.ring_setting == 25


def test_rotor_rejects_non_permutation():
    with pytest.raises(ValueError):
        Rotor((0, 0, 1), ())


def test_inverse_of():
    table = (2, 0, 1)
    assert inverse_of(table) == (1, 2, 0)


def test_reflector_is_fixed_point_free_involution():
    ukw = reflector()
    for i in range(26):
        assert ukw.reflect(i) != i
        assert ukw.reflect(ukw.reflect(i)) == i


def test_reflector_b_table():
    assert reflector().reflect(idx("A")) == idx("Y")
    assert len(REFLECTOR_TABLE) == 26


@pytest.mark.parametrize("table", [
    (1, 0, 2, 3),           # fixed points
    (1, 2, 3, 0),           # not an involution
    (0, 1),
])
def test_reflector_rejects_bad_tables(table):
    with pytest.raises(ValueError):
        Reflector(table)

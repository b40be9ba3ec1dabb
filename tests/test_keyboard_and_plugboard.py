import pytest

from errors import InvalidCharacterError, PlugboardConflictError, PlugboardError
from keyboard_and_plugboard import Keyboard, Plugboard, normalise_wire


def test_keyboard_maps_letters_both_ways() -> None:
    kb = Keyboard()
    assert kb.forward("A") == 0
    assert kb.forward("Z") == 25
    assert kb.backward(17) == "R"


def test_keyboard_rejects_unknown_symbols() -> None:
    kb = Keyboard()
    for bad in ("a", "1", " ", "AB"):
        with pytest.raises(InvalidCharacterError) as exc:
            kb.forward(bad)
        assert exc.value.char == bad
    with pytest.raises(ValueError):
        kb.backward(26)


def test_keyboard_validate_stops_on_first_bad_symbol() -> None:
    kb = Keyboard()
    kb.validate("HELLO")
    with pytest.raises(InvalidCharacterError) as exc:
        kb.validate("HE!LO?")
    assert exc.value.char == "!"


def test_new_plugboard_is_identity() -> None:
    pb = Plugboard()
    assert [pb.encode_index(i) for i in range(26)] == list(range(26))
    assert pb.wires == []


def test_add_wire_swaps_both_ways() -> None:
    pb = Plugboard()
    assert pb.add_wire("A", "R") == ("A", "R")
    assert pb.forward(0) == 17
    assert pb.backward(17) == 0
    assert pb.mapped_letter("R") == "A"
    assert pb.wires == [("A", "R")]


def test_conflicting_wire_is_rejected_and_state_kept() -> None:
    pb = Plugboard()
    pb.add_wire("A", "R")

    with pytest.raises(PlugboardConflictError) as exc:
        pb.add_wire("A", "B")
    assert exc.value.wire == ("A", "B")

    assert pb.mapped_letter("A") == "R"
    assert pb.mapped_letter("R") == "A"
    assert pb.mapped_letter("B") == "B"

    # the second letter being taken counts too
    with pytest.raises(PlugboardConflictError):
        pb.add_wire("C", "R")
    assert len(pb) == 1


def test_self_wire_and_bad_symbols_are_rejected() -> None:
    pb = Plugboard()
    with pytest.raises(PlugboardError):
        pb.add_wire("A", "A")
    with pytest.raises(InvalidCharacterError):
        pb.add_wire("A", "1")
    with pytest.raises(InvalidCharacterError):
        pb.add_wire("AB", "C")
    assert pb.wires == []


def test_board_stays_an_involution() -> None:
    pb = Plugboard(["AR", ("Q", "Z"), "MT"])
    assert all(pb.encode_index(pb.encode_index(i)) == i for i in range(26))
    assert repr(pb) == "<Plugboard AR MT QZ>"


def test_normalise_wire_shapes() -> None:
    assert normalise_wire("AR") == ("A", "R")
    assert normalise_wire(["A", "R"]) == ("A", "R")
    with pytest.raises(PlugboardError):
        normalise_wire("ABC")
    with pytest.raises(PlugboardError):
        normalise_wire(("A",))


def test_keyboard_membership() -> None:
    kb = Keyboard()
    assert "Q" in kb
    assert "q" not in kb
    assert "AB" not in kb

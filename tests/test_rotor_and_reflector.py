"""Tests for Rotor, Reflector and their catalog specs."""

import pytest

from alphabet_and_plugboard import Alphabet
from errors import ConfigurationError, LengthMismatchError, UnknownSymbolError
from rotor_and_reflector import Reflector, Rotor, RotorSpec
from wheels import REFLECTORS, ROTORS


def rotor(name: str) -> Rotor:
    return ROTORS[name].build()


class TestRotorPassage:
    """Signal passage through a rotor."""

    def test_unrotated_matches_wiring(self, latin):
        r = rotor("I")
        for i, ch in enumerate(ROTORS["I"].wiring):
            assert r.pass_inward(i) == latin.index_of(ch)

    def test_rotation_shifts_contacts(self):
        """Rotor III at B: A enters contact B, wired to D, leaves at C."""
        r = rotor("III").set_rotation("B")
        assert r.pass_inward(0) == 2

    def test_ring_setting(self):
        """Rotor I, ring B, position A: A enciphers to K."""
        r = rotor("I").set_ring("B")
        assert r.pass_inward(0) == 10

    def test_round_trip_every_state(self, latin):
        """pass_outward undoes pass_inward for every ring and rotation."""
        r = rotor("VI")
        for ring in latin:
            for rot in latin:
                r.set_ring(ring).set_rotation(rot)
                for i in range(latin.size):
                    assert r.pass_outward(r.pass_inward(i)) == i
                    assert r.pass_inward(r.pass_outward(i)) == i

    def test_ring_and_rotation_compose(self, latin):
        """Only rotation minus ring matters for the signal path."""
        a = rotor("II").set_ring("C").set_rotation("H")
        b = rotor("II").set_ring("A").set_rotation("F")
        assert [a.pass_inward(i) for i in range(26)] == [b.pass_inward(i) for i in range(26)]

    def test_setters_are_absolute(self):
        r = rotor("I").set_rotation("D").set_rotation("B")
        assert r.rotation_offset == 1
        assert r.position == "B"

    def test_unknown_setting_symbol(self):
        with pytest.raises(UnknownSymbolError):
            rotor("I").set_ring("?")


class TestRotorStepping:
    """Stepping and turnover notches."""

    def test_step_increments(self):
        r = rotor("I")
        r.step()
        assert r.position == "B"
        assert r.rotation_offset == 1

    def test_wraps(self):
        r = rotor("I").set_rotation("Z")
        r.step()
        assert r.position == "A"

    def test_carry_when_leaving_notch(self):
        """Rotor I carries on Q → R and at no other step."""
        r = rotor("I").set_rotation("P")
        assert r.step() is False     # P → Q
        assert r.at_notch
        assert r.step() is True      # Q → R
        assert not r.at_notch
        carries = sum(r.step() for _ in range(26))
        assert carries == 1

    def test_two_notches(self):
        r = rotor("VI")
        assert sum(r.step() for _ in range(26)) == 2

    def test_notch_ignores_ring(self):
        """The notch travels with the window letter, not the wiring."""
        r = rotor("II").set_ring("K").set_rotation("E")
        assert r.at_notch

    def test_is_turnover_holes(self):
        """At position A, hole 16 carries rotor I's Q notch."""
        r = rotor("I")
        assert [n for n in range(26) if r.is_turnover(n)] == [16]
        r.step()
        assert [n for n in range(26) if r.is_turnover(n)] == [15]

    def test_no_notches(self):
        r = rotor("BETA")
        assert not any(r.step() for _ in range(52))


class TestReflector:
    """Tests for Reflector."""

    def test_involution(self, latin):
        for spec in REFLECTORS.values():
            refl = spec.build()
            for i in range(latin.size):
                assert refl.reflect(refl.reflect(i)) == i

    def test_reflector_b(self, latin):
        refl = REFLECTORS["B"].build()
        assert refl.reflect(latin.index_of("A")) == latin.index_of("Y")

    def test_rejects_non_involution(self, latin):
        with pytest.raises(ConfigurationError):
            Reflector(latin, ROTORS["I"].wiring)

    def test_tolerates_fixed_points(self, latin):
        """Only self-inverse is enforced."""
        refl = Reflector(latin, latin.symbols)
        assert refl.reflect(5) == 5

    def test_length_mismatch(self, latin):
        with pytest.raises(LengthMismatchError):
            Reflector(latin, "BA")


class TestSpecs:
    """Catalog specs produce independent parts."""

    def test_build_is_fresh(self):
        spec = ROTORS["I"]
        a, b = spec.build(), spec.build()
        assert a is not b
        a.step()
        assert b.position == "A"

    def test_spec_is_immutable(self):
        with pytest.raises(AttributeError):
            ROTORS["I"].wiring = "X"

    def test_custom_alphabet(self, iroha):
        sym = iroha.symbols
        spec = RotorSpec("shift3", sym[3:] + sym[:3], sym[0], alphabet=sym)
        r = spec.build()
        assert r.alphabet == iroha
        assert r.pass_inward(0) == 3
        assert isinstance(spec.build(Alphabet(sym)), Rotor)

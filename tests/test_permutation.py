"""Tests for PermutationTable."""

import pytest

from errors import ConfigurationError, LengthMismatchError, UnknownSymbolError
from permutation import PermutationTable
from wheels import ROTORS


class TestPermutationTable:
    """Tests for PermutationTable."""

    def test_offsets(self, latin):
        """Rotor I sends A (0) to E (4): forward offset 4."""
        table = PermutationTable(latin, ROTORS["I"].wiring)
        assert table.forward[0] == 4
        assert table.pass_forward(0) == 4
        # E comes back to A
        assert table.inverse[4] == 22
        assert table.pass_backward(4) == 0

    def test_inverse_correctness(self, latin):
        for spec in ROTORS.values():
            table = PermutationTable(latin, spec.wiring)
            for i in range(latin.size):
                assert table.pass_backward(table.pass_forward(i)) == i
                assert table.pass_forward(table.pass_backward(i)) == i

    def test_inverse_table_identity(self, latin):
        """inverse[(i + forward[i]) mod n] == -forward[i] mod n."""
        table = PermutationTable(latin, ROTORS["VIII"].wiring)
        n = latin.size
        for i in range(n):
            assert table.inverse[(i + table.forward[i]) % n] == -table.forward[i] % n

    def test_any_integer_input(self, latin):
        table = PermutationTable(latin, ROTORS["II"].wiring)
        for i in range(latin.size):
            assert table.pass_forward(i - 26) == table.pass_forward(i)
            assert table.pass_forward(i + 52) == table.pass_forward(i)
            assert table.pass_backward(-i) == table.pass_backward(26 - i)

    def test_wiring_round_trip(self, latin):
        table = PermutationTable(latin, ROTORS["III"].wiring)
        assert table.wiring() == ROTORS["III"].wiring

    def test_length_mismatch(self, latin):
        with pytest.raises(LengthMismatchError):
            PermutationTable(latin, "ABC")

    def test_duplicate_symbols_rejected(self, latin):
        wiring = "A" + latin.symbols[:-1]
        with pytest.raises(ConfigurationError):
            PermutationTable(latin, wiring)

    def test_unknown_symbols_rejected(self, latin):
        with pytest.raises(UnknownSymbolError):
            PermutationTable(latin, "1" + latin.symbols[1:])

    def test_involution_check(self, latin):
        assert PermutationTable(latin, "YRUHQSLDPXNGOKMIEBFZCWVJAT").is_involution()
        assert not PermutationTable(latin, ROTORS["I"].wiring).is_involution()

# permutation.py
from __future__ import annotations

from collections.abc import Sequence
from alphabet_and_plugboard import Alphabet
from errors import ConfigurationError, LengthMismatchError


class PermutationTable:
    """
    Fixed bijection over alphabet indices, stored as offsets.

    ``forward[i] = (j - i) mod size`` means a signal entering at ``i`` leaves
    at ``j``; ``inverse`` is built so that
    ``inverse[(i + forward[i]) mod size] = -forward[i] mod size``.
    Storing offsets rather than targets lets a rotor shift the whole table
    by its ring and rotation without rebuilding it.
    """

    __slots__ = ("alphabet", "size", "_forward", "_inverse")

    def __init__(self, alphabet: Alphabet, wiring: Sequence[str]) -> None:
        if len(wiring) != alphabet.size:
            raise LengthMismatchError(
                f"Wiring has {len(wiring)} symbols, alphabet has {alphabet.size}"
            )

        targets = [alphabet.index_of(ch) for ch in wiring]
        if len(set(targets)) != len(targets):
            dup = next(ch for ch in wiring if list(wiring).count(ch) > 1)
            raise ConfigurationError(
                f"Wiring must be a permutation of the alphabet ({dup!r} repeats)"
            )

        size = alphabet.size
        forward = [(j - i) % size for i, j in enumerate(targets)]
        inverse = [0] * size
        for i, off in enumerate(forward):
            inverse[(i + off) % size] = -off % size

        self.alphabet = alphabet
        self.size = size
        self._forward: tuple[int, ...] = tuple(forward)
        self._inverse: tuple[int, ...] = tuple(inverse)

    @property
    def forward(self) -> tuple[int, ...]:
        return self._forward

    @property
    def inverse(self) -> tuple[int, ...]:
        return self._inverse

    def pass_forward(self, n: int) -> int:
        n %= self.size
        return (n + self._forward[n]) % self.size

    def pass_backward(self, n: int) -> int:
        n %= self.size
        return (n + self._inverse[n]) % self.size

    def is_involution(self) -> bool:
        return all(
            self.pass_forward(self.pass_forward(i)) == i for i in range(self.size)
        )

    def wiring(self) -> str:
        """The table written back as a wiring string."""
        sym = self.alphabet.symbols
        return "".join(sym[self.pass_forward(i)] for i in range(self.size))

    def __repr__(self) -> str:
        return f"<PermutationTable {self.wiring()}>"

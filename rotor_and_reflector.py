# rotor_and_reflector.py
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from alphabet_and_plugboard import Alphabet
from debug import Debug
from errors import ConfigurationError
from permutation import PermutationTable
from suites import LATIN

debug = Debug()


class Rotor:
    """
    A wheel: wiring table, ring setting, rotation and turnover notches.

    Hole numbers are counted in the machine's frame: after one step the hole
    that was ``n`` becomes ``n - 1``. A notch carries the neighbouring wheel
    when its hole moves from ``0`` to ``size - 1``.
    """

    def __init__(
        self,
        alphabet: Alphabet,
        wiring: Sequence[str],
        turnovers: Sequence[str] = "",
    ) -> None:
        self.alphabet = alphabet
        self.size = alphabet.size
        self.table = PermutationTable(alphabet, wiring)

        # positions in the unrotated frame
        self.turnovers: frozenset[int] = frozenset(alphabet.index_of(c) for c in turnovers)
        self.ring_offset = 0
        self.rotation_offset = 0

    # ── ring & rotation ───────────────────────────────────────────
    def set_ring(self, symbol: str) -> "Rotor":
        self.ring_offset = self.alphabet.index_of(symbol)
        return self

    def set_rotation(self, symbol: str) -> "Rotor":
        self.rotation_offset = self.alphabet.index_of(symbol)
        return self

    @property
    def position(self) -> str:
        """Symbol showing in the window."""
        return self.alphabet.symbols[self.rotation_offset]

    @property
    def ring(self) -> str:
        return self.alphabet.symbols[self.ring_offset]

    # ── notches ───────────────────────────────────────────────────
    def is_turnover(self, n: int) -> bool:
        """True when hole ``n`` currently carries a notch."""
        return any(
            (n + self.rotation_offset - t) % self.size == 0 for t in self.turnovers
        )

    @property
    def at_notch(self) -> bool:
        """The next step will carry the neighbouring wheel."""
        return self.is_turnover(0)

    # ── stepping --------------------------------------------------
    def step(self) -> bool:
        """Advance one and return True if a notch was just passed."""
        self.rotation_offset = (self.rotation_offset + 1) % self.size
        carried = self.is_turnover(-1)
        debug.log("rotor", f"pos {self.position}, carried={carried}")
        return carried

    # ── signal paths ---------------------------------------------
    def _shift(self) -> int:
        return self.rotation_offset - self.ring_offset

    def pass_inward(self, n: int) -> int:
        """Plugboard side → reflector side."""
        shift = self._shift()
        return (self.table.pass_forward(n + shift) - shift) % self.size

    def pass_outward(self, n: int) -> int:
        """Reflector side → plugboard side."""
        shift = self._shift()
        return (self.table.pass_backward(n + shift) - shift) % self.size

    # ── niceties --------------------------------------------------
    def __repr__(self) -> str:
        return f"<Rotor pos={self.position} ring={self.ring}>"


class Reflector:
    """Fixed self-inverse wiring that sends the signal back out."""

    def __init__(self, alphabet: Alphabet, wiring: Sequence[str]) -> None:
        self.alphabet = alphabet
        self.size = alphabet.size
        self.table = PermutationTable(alphabet, wiring)

        # fixed points are tolerated; only the involution is required
        if not self.table.is_involution():
            raise ConfigurationError("Reflector wiring must be its own inverse")

    def reflect(self, n: int) -> int:
        out = self.table.pass_forward(n)
        debug.log("reflector", f"{n}->{out}")
        return out

    def wiring(self) -> str:
        return self.table.wiring()

    def __repr__(self) -> str:
        return f"<Reflector {self.wiring()}>"


# ── catalog entries ───────────────────────────────────────────────
@dataclass(frozen=True, slots=True)
class RotorSpec:
    """Immutable description of a wheel type; ``build()`` makes a fresh one."""

    name: str
    wiring: str
    turnovers: str = ""
    alphabet: str = LATIN

    def build(self, alphabet: Alphabet | None = None) -> Rotor:
        return Rotor(alphabet or Alphabet(self.alphabet), self.wiring, self.turnovers)


@dataclass(frozen=True, slots=True)
class ReflectorSpec:
    name: str
    wiring: str
    alphabet: str = LATIN

    def build(self, alphabet: Alphabet | None = None) -> Reflector:
        return Reflector(alphabet or Alphabet(self.alphabet), self.wiring)

# engine.py  ───────────────────────────────────────────────────────
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from alphabet_and_plugboard import Alphabet, PlugBoard
from debug import Debug
from errors import ConfigurationError, LengthMismatchError
from rotor_and_reflector import Reflector, Rotor

debug = Debug()

STEPPING_MODES = ("cascade", "pawl")


@dataclass(frozen=True, slots=True)
class SignalPath:
    """Holes a single keystroke passes through, plugboard to plugboard."""

    plug_to_rotor: int
    rotors_inward: tuple[int, ...]     # leaving each rotor, plugboard-nearest first
    reflected: int
    rotors_outward: tuple[int, ...]    # leaving each rotor, reflector-nearest first
    plug_to_out: int


class CipherEngine:
    """
    Plugboard → rotors → reflector → rotors → plugboard.

    ``rotors`` are ordered plugboard-nearest first, and character ``i`` of
    ``ring_setting`` / ``rotation_setting`` belongs to ``rotors[i]``. The
    engine takes ownership of the rotors it is given and mutates them on
    every keystroke; build fresh ones for every engine.
    """

    def __init__(
        self,
        plugboard: PlugBoard,
        rotors: Sequence[Rotor],
        reflector: Reflector,
        ring_setting: str,
        rotation_setting: str,
        *,
        stepping: str = "cascade",
    ) -> None:
        alphabet = plugboard.alphabet
        if not rotors:
            raise ConfigurationError("A machine needs at least one rotor")
        if any(part.alphabet != alphabet for part in (*rotors, reflector)):
            raise ConfigurationError(
                "Plugboard, rotors and reflector must share one alphabet"
            )
        if len(ring_setting) != len(rotors) or len(rotation_setting) != len(rotors):
            raise LengthMismatchError(
                f"{len(rotors)} rotors need {len(rotors)}-symbol ring and "
                f"rotation settings, got {ring_setting!r} / {rotation_setting!r}"
            )
        if len({id(r) for r in rotors}) != len(rotors):
            raise ConfigurationError("The same rotor object appears twice in the stack")
        if stepping not in STEPPING_MODES:
            raise ConfigurationError(
                f"Unknown stepping {stepping!r}. Expected one of {list(STEPPING_MODES)}"
            )

        self._alphabet = alphabet
        self._plugboard = plugboard
        self._rotors = tuple(rotors)
        self._reflector = reflector
        self.stepping = stepping

        self.set_rings(ring_setting)
        self.set_key(rotation_setting)
        self._start = rotation_setting

    # ── accessors ───────────────────────────────────────────────

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def plugboard(self) -> PlugBoard:
        return self._plugboard

    @property
    def rotors(self) -> tuple[Rotor, ...]:
        return self._rotors

    @property
    def reflector(self) -> Reflector:
        return self._reflector

    @property
    def positions(self) -> str:
        """Window symbols, plugboard-nearest rotor first."""
        return "".join(r.position for r in self._rotors)

    # ── key & ring helpers ──────────────────────────────────────

    def set_rings(self, rings: str) -> None:
        for rotor, symbol in zip(self._rotors, rings):
            rotor.set_ring(symbol)

    def set_key(self, key: str) -> None:
        """Turn each rotor to its window symbol."""
        for rotor, symbol in zip(self._rotors, key):
            rotor.set_rotation(symbol)

    def rewind(self) -> None:
        """Return the rotors to the rotation setting given at construction."""
        self.set_key(self._start)

    # ── stepping logic  ─────────────────────────────────────────

    def _step_rotors(self) -> None:
        """
        Advance rotors one key-press.

        ``cascade`` steps the plugboard-nearest rotor and carries outward for
        as long as the rotor just stepped reports a turnover. ``pawl`` is the
        opt-in mechanical model, where a rotor resting on its notch is pushed
        together with its neighbour (the middle-rotor double step).
        """
        if self.stepping == "cascade":
            for rotor in self._rotors:
                if not rotor.step():
                    break
        else:
            # decide which rotors step before moving any (two-phase)
            engaged = [r.at_notch for r in self._rotors]
            last = len(self._rotors) - 1
            for i, rotor in enumerate(self._rotors):
                pushed_by_neighbour = i > 0 and engaged[i - 1]
                pushed_by_own_pawl = i < last and engaged[i]
                if i == 0 or pushed_by_neighbour or pushed_by_own_pawl:
                    rotor.step()
        debug.log("stepping", f"positions {self.positions}")

    # ── signal path  ────────────────────────────────────────────

    def get_path(self, symbol: str) -> SignalPath:
        """Trace ``symbol`` through the machine in its current state."""
        plug_to_rotor = self._plugboard.forward(self._alphabet.index_of(symbol))

        inward: list[int] = []
        signal = plug_to_rotor
        for rotor in self._rotors:
            signal = rotor.pass_inward(signal)
            inward.append(signal)

        reflected = self._reflector.reflect(signal)

        outward: list[int] = []
        signal = reflected
        for rotor in reversed(self._rotors):
            signal = rotor.pass_outward(signal)
            outward.append(signal)

        return SignalPath(
            plug_to_rotor=plug_to_rotor,
            rotors_inward=tuple(inward),
            reflected=reflected,
            rotors_outward=tuple(outward),
            plug_to_out=self._plugboard.backward(signal),
        )

    def output_of(self, path: SignalPath) -> str:
        return self._alphabet.symbols[path.plug_to_out]

    # ── encipher  ───────────────────────────────────────────────

    def encrypt_symbol(self, symbol: str) -> str:
        self._alphabet.index_of(symbol)     # reject before the rotors move
        self._step_rotors()
        path = self.get_path(symbol)
        out = self.output_of(path)
        debug.log("encipher", f"{symbol}->{out} {path}")
        return out

    def encrypt(self, text: str) -> str:
        return "".join(self.encrypt_symbol(ch) for ch in text)

    # reciprocal cipher: deciphering is enciphering with the same settings
    decrypt = encrypt

    def __repr__(self) -> str:
        return f"<CipherEngine rotors={len(self._rotors)} pos={self.positions}>"

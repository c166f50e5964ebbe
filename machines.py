# machines.py
"""
Assembly of the concrete machine variants.

Each function instantiates fresh wheels from catalog specs (or custom
wirings) and hands them to a single ``CipherEngine``; the variants differ
only in how the parts are put together.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from alphabet_and_plugboard import Alphabet, PlugBoard
from debug import Debug
from engine import CipherEngine
from errors import ConfigurationError, LengthMismatchError
from rotor_and_reflector import Reflector, ReflectorSpec, Rotor, RotorSpec
from suites import LATIN, suite
from wheels import reflector_spec, rotor_spec

debug = Debug()

Pairs = Sequence[str | tuple[str, str]]


def composite_reflector(additional: Rotor, base: Reflector) -> Reflector:
    """
    Fold a static extra wheel and a reflector into one reflector.

    The wheel's ring and rotation must already be set; the result wires hole
    ``i`` to ``additional.pass_outward(base.reflect(additional.pass_inward(i)))``.
    """
    if additional.alphabet != base.alphabet:
        raise ConfigurationError("Additional rotor and reflector must share one alphabet")

    alpha = base.alphabet
    wiring = "".join(
        alpha.symbols[additional.pass_outward(base.reflect(additional.pass_inward(i)))]
        for i in range(alpha.size)
    )
    debug.log("reflector", f"composite wiring {wiring}")
    return Reflector(alpha, wiring)


def _rotor(item: str | RotorSpec, alphabet: Alphabet) -> Rotor:
    spec = rotor_spec(item) if isinstance(item, str) else item
    return spec.build(alphabet)


def _reflector(item: str | ReflectorSpec, alphabet: Alphabet) -> Reflector:
    spec = reflector_spec(item) if isinstance(item, str) else item
    return spec.build(alphabet)


def enigma_i(
    rotors: Sequence[str | RotorSpec],
    reflector: str | ReflectorSpec,
    ring_setting: str,
    rotation_setting: str,
    plugs: Pairs = (),
    *,
    stepping: str = "cascade",
) -> CipherEngine:
    """Three-wheel army machine; ``rotors`` plugboard-nearest first."""
    alphabet = Alphabet(LATIN)
    return CipherEngine(
        PlugBoard(alphabet, plugs),
        [_rotor(r, alphabet) for r in rotors],
        _reflector(reflector, alphabet),
        ring_setting,
        rotation_setting,
        stepping=stepping,
    )


def m4(
    rotors: Sequence[str | RotorSpec],
    additional: str | RotorSpec,
    reflector: str | ReflectorSpec,
    ring_setting: str,
    rotation_setting: str,
    plugs: Pairs = (),
    *,
    stepping: str = "cascade",
) -> CipherEngine:
    """
    Naval four-wheel machine.

    Settings are four symbols long; the fourth belongs to the ``additional``
    wheel, which is folded into a composite reflector and never steps.
    """
    if len(ring_setting) != 4 or len(rotation_setting) != 4:
        raise LengthMismatchError(
            f"M4 settings must be 4 symbols, got {ring_setting!r} / {rotation_setting!r}"
        )

    alphabet = Alphabet(LATIN)
    extra = _rotor(additional, alphabet)
    extra.set_ring(ring_setting[3]).set_rotation(rotation_setting[3])

    return CipherEngine(
        PlugBoard(alphabet, plugs),
        [_rotor(r, alphabet) for r in rotors],
        composite_reflector(extra, _reflector(reflector, alphabet)),
        ring_setting[:3],
        rotation_setting[:3],
        stepping=stepping,
    )


def _custom(cfg: Mapping[str, Any]) -> CipherEngine:
    """Machine over a configured alphabet with configured wheel wirings."""
    alphabet = Alphabet(cfg["alphabet"])
    wheels = cfg.get("wheels", {})
    rotor_table = wheels.get("rotors", {})
    refl_table = wheels.get("reflectors", {})

    def rotor(name: str) -> Rotor:
        try:
            entry = rotor_table[name]
        except KeyError:
            raise ConfigurationError(f"Rotor {name!r} not defined in config") from None
        return Rotor(alphabet, entry["wiring"], entry.get("turnovers", ""))

    try:
        refl_wiring = refl_table[cfg["reflector"]]
    except KeyError:
        raise ConfigurationError(f"Reflector {cfg['reflector']!r} not defined in config") from None

    return CipherEngine(
        PlugBoard(alphabet, cfg.get("plugs", [])),
        [rotor(name) for name in cfg["rotors"]],
        Reflector(alphabet, refl_wiring),
        cfg["ring_setting"],
        cfg["rotation_setting"],
        stepping=cfg.get("stepping", "cascade"),
    )


def build_from_config(cfg: Mapping[str, Any]) -> CipherEngine:
    """Build a machine from a settings dictionary (see ``main.load_config``)."""
    if "alphabet" in cfg:
        return _custom(cfg)

    model = str(cfg["model"]).upper()
    info = suite(model)
    rotors = list(cfg["rotors"])
    stepping = cfg.get("stepping", "cascade")
    plugs = cfg.get("plugs", [])
    debug.log("config", f"{info['name']}: rotors {rotors}, reflector {cfg['reflector']}")

    if model == "M4":
        additional = cfg.get("additional")
        if additional is None:
            if len(rotors) != 4:
                raise ConfigurationError("M4 needs three rotors plus an additional wheel")
            rotors, additional = rotors[:3], rotors[3]
        return m4(
            rotors, additional, cfg["reflector"],
            cfg["ring_setting"], cfg["rotation_setting"], plugs,
            stepping=stepping,
        )

    if len(rotors) != info["rotors"]:
        raise ConfigurationError(f"{info['name']} takes {info['rotors']} rotors")
    return enigma_i(
        rotors, cfg["reflector"],
        cfg["ring_setting"], cfg["rotation_setting"], plugs,
        stepping=stepping,
    )

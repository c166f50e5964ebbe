# wheels.py
"""
Historical wheel wirings, as read-only catalog entries.

Entries are immutable specs; call ``.build()`` for a fresh mutable part.
Never hand one built rotor to two machines.
"""
from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

from errors import ConfigurationError
from rotor_and_reflector import ReflectorSpec, RotorSpec

_num_re = re.compile(r"^([A-Za-z]+)(\d+)$")

_ROTORS = [
    RotorSpec("I",     "EKMFLGDQVZNTOWYHXUSPAIBRCJ", "Q"),
    RotorSpec("II",    "AJDKSIRUXBLHWTMCQGZNPYFVOE", "E"),
    RotorSpec("III",   "BDFHJLCPRTXVZNYEIWGAKMUSQO", "V"),
    RotorSpec("IV",    "ESOVPZJAYQUIRHXLNFTGKDCMWB", "J"),
    RotorSpec("V",     "VZBRGITYUPSDNHLXAWMJQOFECK", "Z"),
    RotorSpec("VI",    "JPGVOUMFYQBENHZRDKASXLICTW", "ZM"),
    RotorSpec("VII",   "NZJHGRCXMYSWBOUFAIVLPEKQDT", "ZM"),
    RotorSpec("VIII",  "FKQHTLXOCBJSPDZRAMEWNIUYGV", "ZM"),
    # M4 fourth wheels: no notches, never step
    RotorSpec("BETA",  "LEYJVCNIXWPBQMDRTAKZGFUHOS"),
    RotorSpec("GAMMA", "FSOKANUERHMBTIYCWLQPZXVGJD"),
]

_REFLECTORS = [
    ReflectorSpec("A",      "EJMZALYXVBWFCRQUONTSPIKHGD"),
    ReflectorSpec("B",      "YRUHQSLDPXNGOKMIEBFZCWVJAT"),
    ReflectorSpec("C",      "FVPJIAOYEDRZXWGCTKUQSBNMHL"),
    ReflectorSpec("B-THIN", "ENKQAUYWJICOPBLMDXZVFTHRGS"),
    ReflectorSpec("C-THIN", "RDOBJNTKVEHMLFCWZAXGYIPSUQ"),
]

ROTORS: Mapping[str, RotorSpec] = MappingProxyType({s.name: s for s in _ROTORS})
REFLECTORS: Mapping[str, ReflectorSpec] = MappingProxyType({s.name: s for s in _REFLECTORS})

ENIGMA_I_ROTORS = ("I", "II", "III", "IV", "V")
ENIGMA_I_REFLECTORS = ("A", "B", "C")
M4_ROTORS = ("I", "II", "III", "IV", "V", "VI", "VII", "VIII")
M4_ADDITIONAL = ("BETA", "GAMMA")
M4_REFLECTORS = ("B-THIN", "C-THIN")


def _lookup(table: Mapping, kind: str, name: str):
    try:
        return table[name.strip().upper()]
    except KeyError:
        raise ConfigurationError(
            f"Unknown {kind} {name!r}. Expected one of {', '.join(table)}"
        ) from None


def rotor_spec(name: str) -> RotorSpec:
    return _lookup(ROTORS, "rotor", name)


def reflector_spec(name: str) -> ReflectorSpec:
    return _lookup(REFLECTORS, "reflector", name)


def nat_key(name: str):
    """Natural‑sort wheel names so R1, R2, …, R10 and I, II, … sort sanely."""
    m = _num_re.match(name)
    if m:
        prefix, num = m.groups()
        return (0, prefix, int(num))
    return (1, name, 0)

# utilities.py
from __future__ import annotations

from typing import List

from alphabet_and_plugboard import Alphabet
from engine import CipherEngine, SignalPath


# ────────────────────────────────────────────────────────────────────────
#  1. Text preprocessing
# ────────────────────────────────────────────────────────────────────────


def normalise_case(msg: str, alpha: Alphabet) -> str:
    """Upper‑case *msg* unless the alphabet itself uses lower‑case symbols."""
    return msg.upper() if alpha.symbols == alpha.symbols.upper() else msg


def preprocess_message(msg: str, alpha: Alphabet) -> str:
    """Upper‑case, replace spaces (→ 'X' if supported) and drop non‑alphabet chars."""
    text = normalise_case(msg, alpha)
    text = text.replace(" ", "X" if "X" in alpha else "")
    return "".join(ch for ch in text if ch in alpha)


def encrypt_passthrough(engine: CipherEngine, msg: str) -> str:
    """Encipher alphabet symbols, copy every other character unchanged.

    Foreign characters never reach the engine, so they do not move the rotors.
    """
    text = normalise_case(msg, engine.alphabet)
    return "".join(
        engine.encrypt_symbol(ch) if ch in engine.alphabet else ch for ch in text
    )


# ────────────────────────────────────────────────────────────────────────
#  2. Settings parsing
# ────────────────────────────────────────────────────────────────────────


def parse_plugs(raw: str | List[str]) -> List[str]:
    """``"AB CD"`` or ``["AB", "CD"]`` → ``["AB", "CD"]`` (upper‑cased)."""
    items = raw.split() if isinstance(raw, str) else raw
    return [p.strip().upper() for p in items if p.strip()]


# ────────────────────────────────────────────────────────────────────────
#  3. Display helpers
# ────────────────────────────────────────────────────────────────────────


def group(text: str, block: int = 5) -> str:
    if block <= 0:
        return text
    return " ".join(text[i : i + block] for i in range(0, len(text), block))


def describe_path(engine: CipherEngine, symbol: str, path: SignalPath) -> str:
    """One‑line rendering of a keystroke's holes, for ``--trace``."""
    sym = engine.alphabet.symbols
    inward = " ".join(sym[i] for i in path.rotors_inward)
    outward = " ".join(sym[i] for i in path.rotors_outward)
    return (
        f"[{engine.positions}] {symbol} → {sym[path.plug_to_rotor]} | {inward} | "
        f"{sym[path.reflected]} | {outward} | {sym[path.plug_to_out]}"
    )

# main.py
from __future__ import annotations

import argparse, json, sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List

from debug import Debug
from engine import CipherEngine, STEPPING_MODES
from errors import EnigmaError
from machines import build_from_config
from suites import SUITES
from wheels import REFLECTORS, ROTORS, nat_key
from utilities import (
    describe_path,
    encrypt_passthrough,
    group,
    normalise_case,
    parse_plugs,
    preprocess_message,
)

# ────────────────────────────────────────────────────────────────────────
#  0. Configuration & logging
# ────────────────────────────────────────────────────────────────────────


debug = Debug()

REQUIRED_KEYS = {"model", "rotors", "reflector", "ring_setting", "rotation_setting"}


@dataclass(slots=True)
class Config:
    """Runtime switches for the front end; the cipher never sees these."""

    block: int = 5                  # display group size, 0 = ungrouped
    drop_foreign: bool = False      # strip non‑alphabet chars instead of copying them
    trace: bool = False             # print the signal path of every keystroke


# ────────────────────────────────────────────────────────────────────────
#  1. JSON loading helpers
# ────────────────────────────────────────────────────────────────────────


def load_config(path: str | Path) -> dict:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    required = REQUIRED_KEYS - ({"model"} if "alphabet" in data else set())
    missing = required - data.keys()
    if missing:
        raise ValueError(f"Missing keys in config: {', '.join(sorted(missing))}")
    debug.log("config", f"loaded {path}")
    return data


def settings_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    """Build the same dictionary a JSON file would provide."""
    cfg: Dict[str, Any] = {
        "model": args.model,
        "rotors": args.rotors,
        "reflector": args.reflector,
        "ring_setting": args.rings,
        "rotation_setting": args.positions,
        "plugs": parse_plugs(args.plugs or []),
        "stepping": args.stepping,
    }
    if args.additional:
        cfg["additional"] = args.additional
    return cfg


# ────────────────────────────────────────────────────────────────────────
#  2. Enciphering with the front‑end switches
# ────────────────────────────────────────────────────────────────────────


def run(engine: CipherEngine, msg: str, cfg: Config) -> str:
    """Encipher *msg* from the start position, honouring the front‑end switches."""
    engine.rewind()
    if cfg.drop_foreign:
        msg = preprocess_message(msg, engine.alphabet)

    if not cfg.trace:
        return encrypt_passthrough(engine, msg)

    out: List[str] = []
    for ch in normalise_case(msg, engine.alphabet):
        if ch not in engine.alphabet:
            out.append(ch)
            continue
        out.append(engine.encrypt_symbol(ch))
        print(describe_path(engine, ch, engine.get_path(ch)))
    return "".join(out)


# ────────────────────────────────────────────────────────────────────────
#  3. CLI helpers
# ────────────────────────────────────────────────────────────────────────


def _names(table) -> str:
    return " ".join(sorted(table, key=nat_key))


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Encrypt or decrypt with an Enigma I or M4")
    p.add_argument("-m", "--message", metavar="TEXT", help="Text to encipher. If omitted, an interactive REPL starts.")
    p.add_argument("--config", metavar="FILE", help="Load machine settings from JSON instead of the flags below.")
    p.add_argument("--model", choices=sorted(SUITES), default="I", help="Machine model. Default: I")
    p.add_argument("--rotors", nargs="+", default=["III", "II", "I"], metavar="NAME", help=f"Rotor names, plugboard-nearest first, from: {_names(ROTORS)}. Default: III II I")
    p.add_argument("--additional", metavar="NAME", help="M4 fourth wheel (BETA or GAMMA).")
    p.add_argument("--reflector", default="B", help=f"Reflector name, from: {_names(REFLECTORS)}. Default: B")
    p.add_argument("--rings", default="AAA", help="Ring setting, one symbol per rotor. Default: AAA")
    p.add_argument("--positions", default="AAA", help="Start positions, one symbol per rotor. Default: AAA")
    p.add_argument("--plugs", nargs="*", metavar="PAIR", help="Plugboard pairs, e.g. AB CD EF")
    p.add_argument("--stepping", choices=STEPPING_MODES, default="cascade", help="cascade (carry while a rotor turns over) or pawl (mechanical double-step). Default: cascade")
    p.add_argument("--trace", action="store_true", help="Print the signal path of every keystroke.")
    p.add_argument("--drop-foreign", action="store_true", help="Drop characters outside the alphabet instead of copying them.")
    p.add_argument("--block", type=int, default=5, help="Output group size, 0 for none. Default: 5")
    p.add_argument("--debug", nargs="+", metavar="COMPONENT", default=[], help=f"Enable debug logging for components: {', '.join(debug.status())}")
    return p.parse_args(argv)


# ────────────────────────────────────────────────────────────────────────
#  4. Main entry point
# ────────────────────────────────────────────────────────────────────────


def main(argv: List[str] | None = None) -> None:
    args = parse_args(argv)

    if args.debug:
        Debug.configure()
        try:
            debug.enable(*args.debug)
        except ValueError as e:
            sys.exit(f"❌  {e}")

    try:
        settings = load_config(args.config) if args.config else settings_from_args(args)
        engine = build_from_config(settings)
    except (OSError, ValueError, KeyError) as e:
        sys.exit(f"❌  Failed to build machine: {e}")

    cfg = Config(block=args.block, drop_foreign=args.drop_foreign, trace=args.trace)

    # one‑shot mode ------------------------------------------------------
    if args.message is not None:
        try:
            print(group(run(engine, args.message, cfg), cfg.block))
        except EnigmaError as e:
            sys.exit(f"❌  {e}")
        return

    # interactive REPL ---------------------------------------------------
    print(f"\nLoaded {len(engine.rotors)}-rotor machine at {engine.positions}.")
    print("Type blank line to quit.\n")
    while True:
        txt = input("Message > ")
        if not txt.strip():
            break
        print(group(run(engine, txt, cfg), cfg.block))


if __name__ == "__main__":
    main()

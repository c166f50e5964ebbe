# errors.py
from __future__ import annotations


class EnigmaError(ValueError):
    """Base class for every error raised by the machine parts."""


class UnknownSymbolError(EnigmaError):
    def __init__(self, symbol: str, alphabet: str = "") -> None:
        self.symbol = symbol
        msg = f"Symbol {symbol!r} not in alphabet"
        if alphabet:
            msg += f" {alphabet!r}"
        super().__init__(msg)


class ConfigurationError(EnigmaError):
    """The parts handed to a machine cannot be assembled."""


class LengthMismatchError(ConfigurationError):
    """A wiring or setting string has the wrong length."""

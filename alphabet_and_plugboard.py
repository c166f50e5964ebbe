# alphabet_and_plugboard.py
from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from debug import Debug
from errors import ConfigurationError, UnknownSymbolError

debug = Debug()


# ── Alphabet ──────────────────────────────────────────────────────
class Alphabet:
    """
    Ordered set of symbols that defines the signal space.

    Repeated symbols are dropped, keeping the first occurrence, so
    ``Alphabet("EBXBD")`` is the four symbols ``E B X D``.
    """

    __slots__ = ("_symbols", "_indices")

    def __init__(self, symbols: Iterable[str]) -> None:
        unique = "".join(dict.fromkeys(symbols))
        if len(unique) < 2:
            raise ConfigurationError("An alphabet needs at least two symbols")

        self._symbols: str = unique
        self._indices: dict[str, int] = {ch: i for i, ch in enumerate(unique)}
        debug.log("alphabet", f"{len(unique)} symbols: {unique}")

    @property
    def symbols(self) -> str:
        return self._symbols

    @property
    def size(self) -> int:
        return len(self._symbols)

    # index → symbol
    def at(self, index: int) -> str | None:
        if 0 <= index < len(self._symbols):
            return self._symbols[index]
        return None

    # symbol → index
    def index_of(self, symbol: str) -> int:
        try:
            return self._indices[symbol]
        except KeyError:
            raise UnknownSymbolError(symbol, self._symbols) from None

    def contains(self, symbol: str) -> bool:
        return symbol in self._indices

    __contains__ = contains

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    # structural equality: same symbols in the same order
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._symbols == other._symbols

    def __hash__(self) -> int:
        return hash(self._symbols)

    def __repr__(self) -> str:
        return f"<Alphabet {self._symbols!r}>"


# ── Plugboard ─────────────────────────────────────────────────────
class PlugBoard:
    """
    Exchange of symbols applied on entry and again on exit.

    Pairs are plugged in order, each one swapping whatever the two sockets
    currently map to. ``[("A", "J"), ("J", "Q")]`` therefore sends A→J, J→Q
    and Q→A rather than failing. A pair of one symbol with itself changes
    nothing. The same exchange table is consulted in both directions, so
    only disjoint pairs (the historical case) keep the machine reciprocal.
    """

    def __init__(
        self,
        alphabet: Alphabet,
        pairs: Sequence[str | tuple[str, str]] = (),
    ) -> None:
        self.alphabet: Alphabet = alphabet
        table = list(range(alphabet.size))

        for raw in pairs:
            if len(raw) != 2:
                raise ConfigurationError(f"Pair {raw!r} must be exactly 2 symbols")
            a, b = raw

            i, j = alphabet.index_of(a), alphabet.index_of(b)
            table[i], table[j] = table[j], table[i]

        self._exchange: tuple[int, ...] = tuple(table)
        debug.log("plugboard", f"exchange table {self._exchange}")

    @property
    def exchange_table(self) -> tuple[int, ...]:
        return self._exchange

    @property
    def is_involution(self) -> bool:
        ex = self._exchange
        return all(ex[j] == i for i, j in enumerate(ex))

    def swap(self, signal: int) -> int:
        return self._exchange[signal]

    forward = swap        # alias: signal in
    backward = swap       # alias: signal out

    def pairs(self) -> list[tuple[str, str]]:
        """Effective cable connections (2-cycles of the table), for display."""
        sym = self.alphabet.symbols
        ex = self._exchange
        return [(sym[i], sym[j]) for i, j in enumerate(ex) if i < j and ex[j] == i]

    # nicety for debugging
    def __repr__(self) -> str:
        swaps = [a + b for a, b in self.pairs()]
        return f"<PlugBoard {' '.join(swaps)}>"

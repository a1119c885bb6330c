from __future__ import annotations
import sys


class Symbol:
    """A Bel symbol. There is one Symbol object per name, so `id` can compare by identity."""

    __slots__ = ("id",)
    _table: dict[str, Symbol] = {}

    def __new__(cls, name: str) -> Symbol:
        symbol = cls._table.get(name)
        if symbol is None:
            symbol = super().__new__(cls)
            symbol.id = sys.intern(name)
            cls._table[symbol.id] = symbol
        return symbol

    @property
    def name(self) -> str:
        return self.id

    def __eq__(self, other: object) -> bool:
        return self is other or (isinstance(other, Symbol) and self.id == other.id)

    def __hash__(self) -> int:
        return hash(self.id)

    def __reduce__(self):
        return Symbol, (self.id,)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id

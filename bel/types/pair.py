from __future__ import annotations


class Pair:
    """An ordered (car . cdr) cell. Chains ending in nil are proper lists."""

    __slots__ = ("car", "cdr")

    def __init__(self, car, cdr):
        self.car = car
        self.cdr = cdr

    def __eq__(self, other: object) -> bool:
        # Walk the cdr spine iteratively so long lists do not recurse per cell
        a, b = self, other
        while isinstance(a, Pair):
            if not isinstance(b, Pair):
                return False
            if a.car != b.car:
                return False
            a, b = a.cdr, b.cdr
        return a == b

    def __hash__(self) -> int:
        h = hash("pair")
        cell = self
        while isinstance(cell, Pair):
            h = hash((h, cell.car))
            cell = cell.cdr
        return hash((h, cell))

    def __repr__(self):
        return f"Pair({self.car!r}, {self.cdr!r})"

    def __str__(self):
        from bel.types.object import format_object
        return format_object(self)

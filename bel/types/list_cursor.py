"""Stepwise decomposition of a proper list.

A cursor hands out the elements of a chain of pairs one at a time and fails
as soon as it reaches a tail that is neither a pair nor nil, instead of
silently stopping there.
"""

from __future__ import annotations

from typing import Optional

from bel.errors import BelMalformedList
from bel.types.nil import Nil
from bel.types.pair import Pair


class ListCursor:
    __slots__ = ("_rest",)

    def __init__(self, obj):
        self._rest = obj

    def step(self) -> Optional[object]:
        """Return the next element and advance, or None at the end of the list.

        Raises BelMalformedList if the remaining value is not a list.
        """
        rest = self._rest
        if rest == Nil:
            return None
        if isinstance(rest, Pair):
            self._rest = rest.cdr
            return rest.car
        raise BelMalformedList(f"list: invalid object: {rest!r}")

    def __iter__(self):
        return self

    def __next__(self):
        item = self.step()
        if item is None:
            raise StopIteration
        return item

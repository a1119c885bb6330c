"""Canonical truth values.

Bel has no separate nil type: the empty list and false are both the symbol
``nil``. Everything else is true, with ``t`` as the conventional true value.
"""

from __future__ import annotations

from bel.types.symbol import Symbol

Nil = Symbol("nil")
T = Symbol("t")


def is_nil(obj) -> bool:
    return obj == Nil


def is_true(obj) -> bool:
    return obj != Nil


def truth(flag: bool) -> Symbol:
    """Map a Python bool onto t / nil."""
    return T if flag else Nil

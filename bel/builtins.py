"""Primitive functions.

A primitive receives its already-evaluated arguments as a single proper
list and returns one object. Primitives never touch the globals or the
caller's locals. Missing arguments read as nil; surplus arguments are an
error.
"""

from __future__ import annotations

from typing import Callable

from bel import Object
from bel.errors import BelArityMismatch, BelTypeMismatch, BelUnknownPrimitive
from bel.types.list_cursor import ListCursor
from bel.types.nil import Nil, truth
from bel.types.object import format_object, join, type_name
from bel.types.pair import Pair
from bel.types.symbol import Symbol

Primitive = Callable[[Object], Object]


def _args(name: str, args: Object, arity: int) -> list[Object]:
    # Pad with nil up to arity; reject extras
    cursor = ListCursor(args)
    values: list[Object] = []
    while (item := cursor.step()) is not None:
        if len(values) == arity:
            raise BelArityMismatch(f"{name} takes at most {arity} argument(s): {format_object(args)}")
        values.append(item)
    values.extend([Nil] * (arity - len(values)))
    return values


# -------------------------------
# Identity
# -------------------------------
def prim_id(args: Object) -> Object:
    # t only for two symbols with the same name; pairs are never identical
    a, b = _args("id", args, 2)
    return truth(isinstance(a, Symbol) and isinstance(b, Symbol) and a == b)


# -------------------------------
# Pairs
# -------------------------------
def prim_join(args: Object) -> Object:
    a, b = _args("join", args, 2)
    return join(a, b)


def prim_car(args: Object) -> Object:
    (x,) = _args("car", args, 1)
    if x == Nil:
        return Nil
    if isinstance(x, Pair):
        return x.car
    raise BelTypeMismatch(f"car: expected a pair or nil, found {type_name(x)}: {format_object(x)}")


def prim_cdr(args: Object) -> Object:
    (x,) = _args("cdr", args, 1)
    if x == Nil:
        return Nil
    if isinstance(x, Pair):
        return x.cdr
    raise BelTypeMismatch(f"cdr: expected a pair or nil, found {type_name(x)}: {format_object(x)}")


PRIMITIVES: dict[str, Primitive] = {
    "id": prim_id,
    "join": prim_join,
    "car": prim_car,
    "cdr": prim_cdr,
}


def get_primitive(name: str, registry: dict[str, Primitive] | None = None) -> Primitive:
    table = PRIMITIVES if registry is None else registry
    try:
        return table[name]
    except KeyError:
        raise BelUnknownPrimitive(f"unknown primitive {name}") from None

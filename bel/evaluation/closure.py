"""Closure literals.

A user function is stored in globals as the five-element list

    (lit clo nil <params> <body>)

and a macro as that list wrapped once more, ``(lit mac <closure>)``. The
environment slot is always nil: closures capture nothing, and free variables
in a body resolve through globals when the body runs.
"""

from __future__ import annotations

from bel import Object
from bel.errors import BelArityMismatch, BelMalformedFunction, BelMalformedList, BelTypeMismatch
from bel.types.function import Function
from bel.types.list_cursor import ListCursor
from bel.types.nil import Nil
from bel.types.object import format_object, from_list, to_list
from bel.types.symbol import Symbol

LIT = Symbol("lit")
CLO = Symbol("clo")
MAC = Symbol("mac")

_CLOSURE_PREFIX = (LIT, CLO, Nil)
_MACRO_PREFIX = (LIT, MAC)


def define_closure(args: Object, form: str = "def") -> tuple[str, Object]:
    """Turn the arguments of ``(def name params body)`` into ``(name, literal)``."""
    items = to_list(args)
    if len(items) != 3:
        raise BelArityMismatch(f"invalid {form}: expected (name params body), found {format_object(args)}")
    name, params, body = items
    if not isinstance(name, Symbol):
        raise BelTypeMismatch(f"invalid {form} name {format_object(name)}")
    return name.id, closure_literal(params, body)


def closure_literal(params: Object, body: Object) -> Object:
    return from_list([*_CLOSURE_PREFIX, params, body])


def macro_literal(closure: Object) -> Object:
    return from_list([*_MACRO_PREFIX, closure])


def _expect_prefix(cursor: ListCursor, prefix: tuple[Symbol, ...], name: str) -> None:
    for expected in prefix:
        obj = cursor.step()
        if obj is None:
            raise BelMalformedFunction(f"{name}: unexpected end of list")
        if not isinstance(obj, Symbol):
            raise BelMalformedFunction(f"{name}: unexpected object: {format_object(obj)}")
        if obj != expected:
            raise BelMalformedFunction(f"{name}: unexpected symbol: {obj}; expected {expected}")


def parse_function(name: str, obj: Object) -> Function:
    """Read a closure literal back into a Function.

    Raises BelMalformedFunction unless ``obj`` is exactly
    ``(lit clo nil params body)``.
    """
    cursor = ListCursor(obj)
    try:
        _expect_prefix(cursor, _CLOSURE_PREFIX, name)
        parameters = cursor.step()
        if parameters is None:
            raise BelMalformedFunction(f"{name}: fn list terminates before parameters")
        body = cursor.step()
        if body is None:
            raise BelMalformedFunction(f"{name}: fn list terminates before body")
        if cursor.step() is not None:
            raise BelMalformedFunction(f"{name}: unexpected objects after body: {format_object(obj)}")
    except BelMalformedList as err:
        raise BelMalformedFunction(f"{name}: not a closure literal: {format_object(obj)}") from err
    return Function(name, parameters, body)


def parse_macro(name: str, obj: Object) -> Function:
    """Read a ``(lit mac <closure>)`` literal back into the Function it wraps."""
    cursor = ListCursor(obj)
    try:
        _expect_prefix(cursor, _MACRO_PREFIX, name)
        closure = cursor.step()
        if closure is None:
            raise BelMalformedFunction(f"{name}: mac list terminates before closure")
        if cursor.step() is not None:
            raise BelMalformedFunction(f"{name}: unexpected objects after closure: {format_object(obj)}")
    except BelMalformedList as err:
        raise BelMalformedFunction(f"{name}: not a macro literal: {format_object(obj)}") from err
    return parse_function(name, closure)

"""Helpers over the Object tagged union.

Objects are one of Symbol, Pair, Char or Stream. These functions name the
variant of a value, build and take apart pairs, convert between proper
lists and Python lists, and render objects as Bel source text.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable

from bel import Object
from bel.errors import BelTypeMismatch
from bel.types.char import Char
from bel.types.list_cursor import ListCursor
from bel.types.nil import Nil
from bel.types.pair import Pair
from bel.types.stream import Stream
from bel.types.symbol import Symbol

_TYPE_NAMES = {
    Symbol: "symbol",
    Pair: "pair",
    Char: "char",
    Stream: "stream",
}


def type_name(obj: Object) -> str:
    try:
        return _TYPE_NAMES[type(obj)]
    except KeyError:
        raise BelTypeMismatch(f"not a Bel object: {obj!r}") from None


def join(car: Object, cdr: Object) -> Pair:
    """Build a new pair. The tail is taken as given, never copied."""
    return Pair(car, cdr)


def extract_pair(obj: Object) -> tuple[Object, Object]:
    if not isinstance(obj, Pair):
        raise BelTypeMismatch(f"expected a pair, found {type_name(obj)}: {format_object(obj)}")
    return obj.car, obj.cdr


def from_list(items: Iterable[Object], tail: Object = Nil) -> Object:
    """Build a proper list (or a dotted one, given ``tail``) from a sequence."""
    result = tail
    for item in reversed(list(items)):
        result = join(item, result)
    return result


def to_list(obj: Object) -> list[Object]:
    """Flatten a proper list into a Python list.

    Raises BelMalformedList if ``obj`` is not nil or a nil-terminated pair chain.
    """
    return list(ListCursor(obj))


def is_list(obj: Object) -> bool:
    while isinstance(obj, Pair):
        obj = obj.cdr
    return obj == Nil


def list_length(obj: Object) -> int:
    count = 0
    cursor = ListCursor(obj)
    while cursor.step() is not None:
        count += 1
    return count


def format_object(obj: Object) -> str:
    with StringIO() as buffer:
        _write(obj, buffer)
        return buffer.getvalue()


def _write(obj: Object, buffer: StringIO) -> None:
    if not isinstance(obj, Pair):
        buffer.write(str(obj))
        return
    buffer.write("(")
    _write(obj.car, buffer)
    rest = obj.cdr
    while isinstance(rest, Pair):
        buffer.write(" ")
        _write(rest.car, buffer)
        rest = rest.cdr
    if rest != Nil:
        buffer.write(" . ")
        _write(rest, buffer)
    buffer.write(")")

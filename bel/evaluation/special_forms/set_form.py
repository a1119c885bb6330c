import logging

from bel import EvaluatorFn, Object
from bel.errors import BelTypeMismatch
from bel.runtime_context import RuntimeContext
from bel.types.environment import Environment
from bel.types.list_cursor import ListCursor
from bel.types.nil import Nil
from bel.types.object import format_object, type_name
from bel.types.symbol import Symbol

logger = logging.getLogger(__name__)


def set_form(
    tail: Object,
    env: Environment,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> Object:
    """
    (set s1 v1 s2 v2 ... [sn])
    Binds each symbol to the object after it, unevaluated, in globals.
    A trailing symbol with no value is bound to nil.
    """
    cursor = ListCursor(tail)
    while (key := cursor.step()) is not None:
        if not isinstance(key, Symbol):
            raise BelTypeMismatch(
                f"invalid object: expected: symbol found: {type_name(key)} ({format_object(key)})"
            )
        value = cursor.step()
        if value is None:
            value = Nil
        logger.debug("set: %s = %s", key, format_object(value))
        ctx.globals.define(key, value)

    return Nil

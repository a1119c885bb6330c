"""Core evaluator for the Bel interpreter.

A recursive tree walker. Symbols resolve through the call's locals and then
globals; pairs are routed by their head symbol to a special form, a
primitive, a user function or a macro, and anything else is evaluated as a
plain list. Characters and streams cannot be evaluated.

Every pair evaluation is counted against the context's recursion limit, so
runaway recursion fails with BelRecursionLimitExceeded instead of
exhausting the Python stack. Symbol lookups are leaves and are not counted.
"""

from __future__ import annotations

import logging
from typing import Optional

from bel import Object
from bel.errors import BelNotImplemented
from bel.evaluation.apply import apply_function, apply_macro, apply_primitive
from bel.evaluation.dispatch import DispatchKind, resolve_operator
from bel.runtime_context import RuntimeContext
from bel.types.char import Char
from bel.types.environment import Environment
from bel.types.list_cursor import ListCursor
from bel.types.nil import Nil
from bel.types.object import format_object, join
from bel.types.pair import Pair
from bel.types.stream import Stream
from bel.types.symbol import Symbol

logger = logging.getLogger(__name__)


def evaluate(expr: Object, env: Optional[Environment], ctx: RuntimeContext) -> Object:
    """
    Evaluate `expr` with `env` as the locals table.
    """
    if env is None:
        env = Environment()

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("eval: exp = %s; locals = %s", format_object(expr), env)

    match expr:
        case Symbol():
            output = ctx.lookup(env, expr)
        case Pair():
            with ctx.nested():
                output = evaluate_pair(expr, env, ctx)
        case Char():
            raise BelNotImplemented(f"Char not implemented: {expr}")
        case Stream():
            raise BelNotImplemented("Stream not implemented")
        case _:
            raise BelNotImplemented(f"cannot evaluate {expr!r}")

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("eval: exp = %s; output = %s", format_object(expr), format_object(output))
    return output


def evaluate_pair(pair: Pair, env: Environment, ctx: RuntimeContext) -> Object:
    head, tail = pair.car, pair.cdr
    if not isinstance(head, Symbol):
        return evaluate_list(pair, env, ctx)

    dispatch = resolve_operator(head, ctx)
    match dispatch.kind:
        case DispatchKind.RESERVED:
            return dispatch.handler(tail, env, ctx, evaluate)
        case DispatchKind.PRIMITIVE:
            return apply_primitive(dispatch.name, evaluate_list(tail, env, ctx), ctx)
        case DispatchKind.FUNCTION:
            return apply_function(dispatch.name, evaluate_list(tail, env, ctx), ctx, evaluate)
        case DispatchKind.MACRO:
            # Macros take their arguments unevaluated
            return apply_macro(dispatch.name, tail, ctx)
        case _:
            # Unknown head: the form is data, evaluated element by element
            return evaluate_list(pair, env, ctx)


def evaluate_list(obj: Object, env: Environment, ctx: RuntimeContext) -> Object:
    """Evaluate each element of a proper list, left to right, into a new list.

    Raises BelMalformedList if `obj` is not a proper list.
    """
    values: list[Object] = []
    for item in ListCursor(obj):
        values.append(evaluate(item, env, ctx))

    # Consing builds the list back to front
    result: Object = Nil
    for value in reversed(values):
        result = join(value, result)
    return result

from bel import EvaluatorFn, Object
from bel.errors import BelArityMismatch, BelTypeMismatch
from bel.runtime_context import RuntimeContext
from bel.types.environment import Environment
from bel.types.nil import Nil
from bel.types.object import format_object, type_name
from bel.types.pair import Pair
from bel.types.symbol import Symbol


def _single(tail: Object, form: str) -> Object:
    if not isinstance(tail, Pair) or tail.cdr != Nil:
        raise BelTypeMismatch(f"{form} expects a single element list; found {format_object(tail)}")
    return tail.car


def quote_form(
    tail: Object, env: Environment, ctx: RuntimeContext, evaluate_fn: EvaluatorFn
) -> Object:
    return _single(tail, "quote")


def type_form(
    tail: Object, env: Environment, ctx: RuntimeContext, evaluate_fn: EvaluatorFn
) -> Object:
    """(type x) evaluates x and names its variant: symbol, pair, char or stream."""
    if not isinstance(tail, Pair) or tail.cdr != Nil:
        raise BelArityMismatch(f"type expects a single element list; found {format_object(tail)}")
    return Symbol(type_name(evaluate_fn(tail.car, env, ctx)))

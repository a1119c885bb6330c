import logging

from bel import EvaluatorFn, Object
from bel.runtime_context import RuntimeContext
from bel.types.environment import Environment
from bel.types.list_cursor import ListCursor
from bel.types.nil import Nil, is_true
from bel.types.object import format_object

logger = logging.getLogger(__name__)


def if_form(
    tail: Object,
    env: Environment,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> Object:
    """
    (if a1 a2 a3 a4 ... [an])
    Tests a1, a3, ... in order and evaluates the expression after the first
    true one. An odd final argument is the else branch; without one the
    result is nil. Nothing after the chosen branch is evaluated.
    """
    logger.debug("if: %s", format_object(tail))
    cursor = ListCursor(tail)

    while (test := cursor.step()) is not None:
        consequent = cursor.step()
        if consequent is None:
            return evaluate_fn(test, env, ctx)
        if is_true(evaluate_fn(test, env, ctx)):
            return evaluate_fn(consequent, env, ctx)

    return Nil

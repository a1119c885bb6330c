"""Application engine for Bel.

This module centralizes call semantics for the interpreter:
- Primitives receive the evaluated argument list and nothing else.
- User functions are rebuilt from their closure literal in globals, bound
  to a fresh locals table and evaluated there; globals stay visible, which
  is what lets a body call its own name.
- Macros are recognized but cannot be applied yet.

Arguments arrive already evaluated, except for macros which would take
them unevaluated.
"""

import logging

from bel import EvaluatorFn, Object
from bel.builtins import get_primitive
from bel.errors import BelNotImplemented, BelUnknownFunction
from bel.evaluation.closure import parse_function, parse_macro
from bel.runtime_context import RuntimeContext
from bel.types.object import format_object
from bel.types.symbol import Symbol

logger = logging.getLogger(__name__)


def apply_primitive(name: str, args: Object, ctx: RuntimeContext) -> Object:
    logger.debug("apply_primitive: %s %s", name, format_object(args))
    return get_primitive(name, ctx.primitives)(args)


def apply_function(
    name: str,
    args: Object,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> Object:
    """Call the user function bound to `name` with evaluated `args`.

    Raises:
    - BelUnknownFunction if `name` has no global binding.
    - BelMalformedFunction if the binding is not a closure literal.
    - BelArityMismatch if there are more arguments than parameters.
    """
    literal = ctx.globals.get(Symbol(name))
    if literal is None:
        raise BelUnknownFunction(f"unknown function {name}")

    function = parse_function(name, literal)
    local_env = function.bind(args)
    logger.debug("apply_function: f_name = %s, args = %s, locals = %s",
                 name, format_object(args), local_env)
    return evaluate_fn(function.body, local_env, ctx)


def apply_macro(name: str, args: Object, ctx: RuntimeContext) -> Object:
    """Macro calls are not supported; the literal is still checked first."""
    literal = ctx.globals.get(Symbol(name))
    if literal is None:
        raise BelUnknownFunction(f"unknown macro {name}")
    parse_macro(name, literal)
    raise BelNotImplemented(f"macro application not implemented: ({name} . {format_object(args)})")

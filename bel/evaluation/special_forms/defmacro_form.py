"""Special form: mac.

Stores a macro literal in globals and records the name as a macro.
"""

from __future__ import annotations

from bel import EvaluatorFn, Object
from bel.evaluation.closure import define_closure, macro_literal
from bel.evaluation.special_forms.set_form import set_form
from bel.runtime_context import RuntimeContext
from bel.types.environment import Environment
from bel.types.object import from_list
from bel.types.symbol import Symbol


def defmacro_form(
    tail: Object,
    env: Environment,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> Object:
    """(mac name params body) is (set name (lit mac (lit clo nil params body)))."""
    name, closure = define_closure(tail, "mac")
    ctx.register_macro(name)
    return set_form(from_list([Symbol(name), macro_literal(closure)]), env, ctx, evaluate_fn)

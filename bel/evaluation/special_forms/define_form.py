from bel import EvaluatorFn, Object
from bel.evaluation.closure import define_closure
from bel.evaluation.special_forms.set_form import set_form
from bel.runtime_context import RuntimeContext
from bel.types.environment import Environment
from bel.types.object import from_list
from bel.types.symbol import Symbol


def define_form(
    tail: Object,
    env: Environment,
    ctx: RuntimeContext,
    evaluate_fn: EvaluatorFn,
) -> Object:
    """
    (def name params body)
    An abbreviation for (set name (lit clo nil params body)) that also
    registers `name` as a function for dispatch.
    """
    name, closure = define_closure(tail, "def")
    ctx.register_function(name)
    return set_form(from_list([Symbol(name), closure]), env, ctx, evaluate_fn)

"""Registry of special forms for the Bel evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before primitives and user definitions, so
these names cannot be redefined. Every handler takes the unevaluated argument
list, the call's locals, the runtime context and the evaluator.
"""

from bel.types.symbol import Symbol
from bel.evaluation.special_forms.set_form import set_form
from bel.evaluation.special_forms.define_form import define_form
from bel.evaluation.special_forms.defmacro_form import defmacro_form
from bel.evaluation.special_forms.if_form import if_form
from bel.evaluation.special_forms.quote_forms import quote_form, type_form

SPECIAL_FORMS = {
    Symbol("set"): set_form,
    Symbol("def"): define_form,
    Symbol("mac"): defmacro_form,
    Symbol("if"): if_form,
    Symbol("quote"): quote_form,
    Symbol("type"): type_form,
}

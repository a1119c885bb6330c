# Core type aliases for the Bel data model.
# Code and data share one representation: the four Object variants defined
# under bel.types (Symbol, Pair, Char, Stream). Nil is Symbol("nil").
#
# Naming guidance:
# - Object:      any value of the tagged union, evaluated or not.
# - EvaluatorFn: the evaluator callable handed to special forms and apply.

from typing import Callable, Union

from bel.types.symbol import Symbol
from bel.types.pair import Pair
from bel.types.char import Char
from bel.types.stream import Stream

Object = Union[Symbol, Pair, Char, Stream]

# Evaluator function type: (expr, env, ctx) -> Object
EvaluatorFn = Callable[..., Object]

__all__ = ["Object", "EvaluatorFn", "Symbol", "Pair", "Char", "Stream"]

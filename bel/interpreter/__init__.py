from __future__ import annotations

from pathlib import Path
from typing import Literal, Mapping, Optional

from bel import Object
from bel.builtins import Primitive
from bel.errors import BelRecursionLimitExceeded, BelUnboundSymbol, BelUnknownFunction
from bel.evaluation.closure import parse_function, parse_macro
from bel.evaluation.evaluator import evaluate
from bel.reader.parser import parse_all
from bel.runtime_context import RuntimeContext
from bel.types.environment import Environment
from bel.types.function import Function
from bel.types.nil import Nil
from bel.types.symbol import Symbol


class Interpreter:
    """
    Orchestrates reading and evaluating Bel code.
    Owns one RuntimeContext (globals and registries) across calls; every
    top-level form is evaluated with a fresh, empty locals table.
    """

    def __init__(
        self,
        prelude: str | None | Literal['auto'] = None,
        *,
        primitives: Optional[Mapping[str, Primitive]] = None,
        recursion_limit: Optional[int] = None,
    ):
        self.ctx: RuntimeContext = RuntimeContext(primitives, recursion_limit)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            # Lazy import to avoid circular imports
            from bel.modules.source_loader import load_prelude
            load_prelude(self)
        elif prelude:
            self.eval_source(prelude)

    @property
    def globals(self) -> Environment:
        return self.ctx.globals

    def eval_expr(self, expr: Object, env: Optional[Environment] = None) -> Object:
        depth = self.ctx.depth
        try:
            return evaluate(expr, Environment() if env is None else env, self.ctx)
        except RecursionError:
            # Python's stack ran out first; the counter may not have unwound
            self.ctx.depth = depth
            raise BelRecursionLimitExceeded(
                f"evaluation nested deeper than the Python stack allows "
                f"(recursion limit {self.ctx.recursion_limit})"
            ) from None

    def eval_source(self, code: str) -> Object:
        result: Object = Nil
        for expr in parse_all(code):
            result = self.eval_expr(expr)
        return result

    def eval(self, code: str) -> Object:
        """Evaluate every form in `code`; return the last value, nil if there are none."""
        return self.eval_source(code)

    def load(self, path: str | Path, limit: Optional[int] = None) -> int:
        from bel.modules.source_loader import load_source
        return load_source(self, path, limit)

    # --- Inspection (read-only) ---
    def global_names(self) -> list[str]:
        return sorted(s.id for s in self.ctx.globals)

    def primitive_names(self) -> list[str]:
        return sorted(self.ctx.primitives)

    def function_names(self) -> list[str]:
        return sorted(self.ctx.function_names)

    def macro_names(self) -> list[str]:
        return sorted(self.ctx.macro_names)

    def get(self, name: str) -> Object:
        value = self.ctx.globals.get(Symbol(name))
        if value is None:
            raise BelUnboundSymbol(f"unknown key: {name}")
        return value

    def function(self, name: str) -> Function:
        """The Function bound to a def'd or mac'd name."""
        if name in self.ctx.function_names:
            return parse_function(name, self.get(name))
        if name in self.ctx.macro_names:
            return parse_macro(name, self.get(name))
        raise BelUnknownFunction(f"{name} is not a function")

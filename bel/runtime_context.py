from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Iterator, Mapping, Optional

from bel import Object
from bel.builtins import PRIMITIVES, Primitive
from bel.config import get_recursion_limit
from bel.errors import BelRecursionLimitExceeded, BelUnboundSymbol
from bel.types.environment import Environment
from bel.types.nil import Nil, T
from bel.types.symbol import Symbol

logger = logging.getLogger(__name__)

# Symbols that evaluate to themselves from the start
SELF_BOUND = (Nil, T, Symbol("o"), Symbol("apply"))

# Python frames used by one level of pair evaluation (evaluate, evaluate_pair,
# the form or apply handler) plus slack for the frames below the interpreter
_FRAMES_PER_LEVEL = 4
_STACK_MARGIN = 200
# Never ask the host for more than this; deeper programs hit RecursionError,
# which the interpreter reports as BelRecursionLimitExceeded
_PYTHON_RECURSION_CEILING = 10000


def reserve_python_stack(limit: int) -> None:
    """Raise the host recursion limit so `limit` Bel levels fit on the Python stack."""
    wanted = min(limit * _FRAMES_PER_LEVEL + _STACK_MARGIN, _PYTHON_RECURSION_CEILING)
    current = sys.getrecursionlimit()
    if wanted > current:
        logger.debug("recursion limit is %d; setting it to %d", current, wanted)
        sys.setrecursionlimit(wanted)


class RuntimeContext:
    """
    State owned by one interpreter instance: the globals table, the
    primitive registry, the names registered by def/mac, and the current
    evaluation depth. Nothing here is shared between instances.

    Single-threaded: callers that share a context across threads must
    serialize evaluations themselves.
    """

    __slots__ = (
        "globals",
        "primitives",
        "function_names",
        "macro_names",
        "recursion_limit",
        "depth",
    )

    def __init__(
        self,
        primitives: Optional[Mapping[str, Primitive]] = None,
        recursion_limit: Optional[int] = None,
    ):
        self.globals: Environment = Environment({s: s for s in SELF_BOUND})
        self.primitives: dict[str, Primitive] = dict(PRIMITIVES if primitives is None else primitives)
        self.function_names: set[str] = set()
        self.macro_names: set[str] = set()
        self.recursion_limit: int = recursion_limit if recursion_limit is not None else get_recursion_limit()
        self.depth: int = 0
        reserve_python_stack(self.recursion_limit)

    def lookup(self, env: Environment, name: Symbol) -> Object:
        """Resolve `name` in the call's locals, then in globals."""
        value = env.get(name)
        if value is not None:
            return value
        value = self.globals.get(name)
        if value is not None:
            return value
        raise BelUnboundSymbol(f"unbound symbol: {name}")

    def register_function(self, name: str) -> None:
        self.macro_names.discard(name)
        self.function_names.add(name)

    def register_macro(self, name: str) -> None:
        self.function_names.discard(name)
        self.macro_names.add(name)

    @contextmanager
    def nested(self) -> Iterator[int]:
        """Track one level of pair evaluation for the duration of the block."""
        if self.depth >= self.recursion_limit:
            raise BelRecursionLimitExceeded(
                f"evaluation nested deeper than {self.recursion_limit} levels"
            )
        self.depth += 1
        try:
            yield self.depth
        finally:
            self.depth -= 1

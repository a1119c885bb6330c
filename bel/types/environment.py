"""Symbol tables for Bel.

An Environment stores bindings of Symbols to Bel objects. The interpreter
uses two of them at any time: the process-wide globals owned by the
runtime context, and a locals table built fresh for each function call.
Lookup consults the locals first and the globals second; see
``RuntimeContext.lookup``.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Mapping, Optional

from bel import Object
from bel.errors import BelTypeMismatch, BelUnboundSymbol
from bel.types.symbol import Symbol


class Environment:
    """Flat mapping from Symbols to Bel objects."""

    __slots__ = ("vars",)

    def __init__(self, bindings: Optional[Mapping[Symbol, Object]] = None):
        self.vars: dict[Symbol, Object] = {}
        if bindings:
            self.update(bindings)

    def define(self, name: Symbol, value: Object) -> None:
        """Bind `name` to `value`, replacing any previous binding.

        Raises BelTypeMismatch if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise BelTypeMismatch(f"Cannot define {name} as a symbol")
        self.vars[name] = value

    def get(self, name: Symbol, default: Optional[Object] = None) -> Optional[Object]:
        return self.vars.get(name, default)

    def lookup(self, name: Symbol) -> Object:
        """Look up the value bound to `name`.

        Raises BelUnboundSymbol if not found.
        """
        try:
            return self.vars[name]
        except KeyError:
            raise BelUnboundSymbol(f"unbound symbol: {name}") from None

    def update(self, mapping: Mapping[Symbol, Object]) -> None:
        """Bulk-define a mapping of Symbol -> value."""
        for k, v in mapping.items():
            self.define(k, v)

    def __contains__(self, name: object) -> bool:
        return name in self.vars

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self.vars)

    def __len__(self) -> int:
        return len(self.vars)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            first = True
            for k, v in self.vars.items():
                if not first:
                    buffer.write("; ")
                buffer.write(f"{k} => {v}")
                first = False
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {self}>"

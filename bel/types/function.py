"""Function record derived from a closure literal."""

from __future__ import annotations

from io import StringIO

from bel import Object
from bel.types.object import format_object


class Function:
    """A user function as seen at call time: name, parameter list and body.

    Functions are not stored anywhere; they are rebuilt from the
    ``(lit clo nil params body)`` literal bound to ``name`` in globals.
    """

    __slots__ = ("name", "parameters", "body")

    def __init__(self, name: str, parameters: Object, body: Object):
        self.name: str = name
        self.parameters: Object = parameters
        self.body: Object = body

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Function)
            and self.name == other.name
            and self.parameters == other.parameters
            and self.body == other.body
        )

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(fn ")
            buffer.write(self.name)
            buffer.write(" ")
            buffer.write(format_object(self.parameters))
            buffer.write(" ")
            buffer.write(format_object(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)

    # --- Evaluation helpers ---
    def bind(self, args: Object):
        """Bind evaluated `args` to this function's parameters in a fresh Environment."""
        from bel.types.bind import bind_arguments
        return bind_arguments(self.parameters, args)

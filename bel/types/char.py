from __future__ import annotations


class Char:
    """A character atom, written ``\\a`` or ``\\space``. Not evaluable."""

    __slots__ = ("text",)

    def __init__(self, text: str):
        self.text = text

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Char) and self.text == other.text

    def __hash__(self) -> int:
        return hash(("char", self.text))

    def __repr__(self):
        return f"Char({self.text!r})"

    def __str__(self):
        return "\\" + self.text

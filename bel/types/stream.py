from __future__ import annotations


class Stream:
    """Opaque stream placeholder. Streams carry no state yet."""

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Stream)

    def __hash__(self) -> int:
        return hash("stream")

    def __repr__(self):
        return "Stream()"

    def __str__(self):
        return "<stream>"

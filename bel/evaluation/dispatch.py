"""Operator resolution.

The head symbol of a pair is resolved once into a Dispatch. Priority is a
single rule, highest first:

    reserved special form > primitive > user function > user macro > data

so a user definition can never shadow a special form, and a primitive
always wins over a function of the same name.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from bel.evaluation.special_forms import SPECIAL_FORMS
from bel.runtime_context import RuntimeContext
from bel.types.symbol import Symbol


class DispatchKind(Enum):
    RESERVED = "reserved"
    PRIMITIVE = "primitive"
    FUNCTION = "function"
    MACRO = "macro"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class Dispatch:
    kind: DispatchKind
    name: str
    handler: Optional[Callable[..., Any]] = None


def resolve_operator(head: Symbol, ctx: RuntimeContext) -> Dispatch:
    name = head.id
    form = SPECIAL_FORMS.get(head)
    if form is not None:
        return Dispatch(DispatchKind.RESERVED, name, form)
    primitive = ctx.primitives.get(name)
    if primitive is not None:
        return Dispatch(DispatchKind.PRIMITIVE, name, primitive)
    if name in ctx.function_names:
        return Dispatch(DispatchKind.FUNCTION, name)
    if name in ctx.macro_names:
        return Dispatch(DispatchKind.MACRO, name)
    return Dispatch(DispatchKind.UNRECOGNIZED, name)

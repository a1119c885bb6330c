from __future__ import annotations

import logging

from bel import Object
from bel.errors import BelArityMismatch, BelTypeMismatch
from bel.types.environment import Environment
from bel.types.list_cursor import ListCursor
from bel.types.nil import Nil
from bel.types.object import format_object, list_length
from bel.types.symbol import Symbol

logger = logging.getLogger(__name__)


def bind_arguments(parameters: Object, supplied_args: Object) -> Environment:
    """
    Pair a parameter list with an evaluated argument list, positionally.

    - Each parameter must be a Symbol.
    - Parameters left over once the arguments run out are bound to nil.
    - More arguments than parameters is an error; nothing is dropped.

    Both lists must be proper lists. Returns a new Environment holding only
    the call's bindings; it has no link to the caller's locals.
    """
    local_env = Environment()
    params = ListCursor(parameters)
    args = ListCursor(supplied_args)

    while (param := params.step()) is not None:
        if not isinstance(param, Symbol):
            raise BelTypeMismatch(f"invalid parameter: {format_object(param)}")
        arg = args.step()
        local_env.define(param, Nil if arg is None else arg)

    if args.step() is not None:
        raise BelArityMismatch(
            f"too many arguments: {list_length(supplied_args)}; "
            f"for {list_length(parameters)} parameters"
        )

    logger.debug("bind_arguments: params = %s, args = %s, locals = %s",
                 format_object(parameters), format_object(supplied_args), local_env)
    return local_env

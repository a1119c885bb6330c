from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional, Protocol

from bel import Object
from bel.config import get_source_path
from bel.errors import BelError, BelLoadError
from bel.reader.parser import parse

logger = logging.getLogger(__name__)

# Some published Bel sources start with a byte order mark
_BOM = "\ufeff"


class _HasEvalExpr(Protocol):
    def eval_expr(self, expr: Object) -> Object: ...


# Split a source file into top-level blocks separated by blank lines

def iter_blocks(lines: Iterable[str]) -> Iterator[str]:
    accum: list[str] = []
    for lineno, raw in enumerate(lines):
        line = raw.rstrip("\r\n")
        if lineno == 0:
            line = line.removeprefix(_BOM)
        if line.startswith(";"):
            continue
        if not line.strip():
            if accum:
                yield "\n".join(accum) + "\n"
                accum = []
            continue
        accum.append(line)
    if accum:
        yield "\n".join(accum) + "\n"


def load_source(itp: _HasEvalExpr, path: str | Path, limit: Optional[int] = None) -> int:
    """Evaluate the expressions of `path` in order; return how many were evaluated.

    Each blank-line-separated block must hold exactly one expression. Stops
    early after `limit` expressions. A block that fails to read or evaluate
    aborts the load with a BelLoadError carrying the block text.
    """
    p = Path(path)
    count = 0
    with p.open(encoding='utf-8') as source:
        for block in iter_blocks(source):
            if limit is not None and count >= limit:
                break
            try:
                itp.eval_expr(parse(block))
            except BelError as err:
                raise BelLoadError(f"{p}: expression {count + 1} failed: {err}\n\n{block}", block, count + 1) from err
            count += 1
            logger.debug("load_source: %s: evaluated expression %d", p, count)

    logger.info("load_source: %s: %d expression(s) evaluated", p, count)
    return count


# Prelude convenience loader (BEL_SOURCE_PATH)

def load_prelude(itp: _HasEvalExpr) -> int:
    path = get_source_path()
    if path is None:
        return 0
    if not path.is_file():
        raise FileNotFoundError(f"Cannot find Bel source '{path}' named by BEL_SOURCE_PATH")
    return load_source(itp, path)

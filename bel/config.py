from __future__ import annotations
import os
from pathlib import Path
from typing import Optional


# Defaults
_DEFAULT_RECURSION_LIMIT = 1000
_DEFAULT_LOG_LEVEL = 'WARNING'
_DEFAULT_HISTORY_FILE = Path.home() / '.bel_history'


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None


def get_recursion_limit() -> int:
    return int_from_env('BEL_RECURSION_LIMIT', _DEFAULT_RECURSION_LIMIT)


def get_log_level() -> str:
    return os.environ.get('BEL_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()


def get_history_file() -> Path:
    raw = os.environ.get('BEL_HISTORY_FILE')
    return Path(raw).expanduser() if raw else _DEFAULT_HISTORY_FILE


def get_source_path() -> Optional[Path]:
    # treat as single file; unset means no prelude
    raw = os.environ.get('BEL_SOURCE_PATH')
    return Path(raw).expanduser() if raw else None

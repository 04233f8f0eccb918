from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Iterable, List, Optional


# Defaults
_DEFAULT_PRELUDE_FILES: list[Path] = []
_DEFAULT_LOG_LEVEL = 'WARNING'


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_prelude_files() -> List[Path]:
    return paths_from_env('PROTOLISP_PRELUDE_PATH', _DEFAULT_PRELUDE_FILES)


def get_recursion_limit() -> Optional[int]:
    raw = os.environ.get('PROTOLISP_RECURSION_LIMIT')
    if not raw:
        return None
    try:
        limit = int(raw)
    except ValueError:
        raise ValueError(f"PROTOLISP_RECURSION_LIMIT must be an integer, got {raw!r}")
    if limit <= 0:
        raise ValueError(f"PROTOLISP_RECURSION_LIMIT must be positive, got {limit}")
    return limit


def get_log_level() -> int:
    raw = os.environ.get('PROTOLISP_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(raw)
    # getLevelName returns a string for unknown names
    return level if isinstance(level, int) else logging.WARNING

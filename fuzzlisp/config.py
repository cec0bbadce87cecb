from __future__ import annotations
import os
from typing import Optional


_DEFAULT_LOG_LEVEL = 'WARNING'


def int_from_env(var: str, default: Optional[int] = None) -> Optional[int]:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def get_max_depth() -> Optional[int]:
    # unset, malformed or non-positive means no limit
    depth = int_from_env('FUZZLISP_MAX_DEPTH')
    if depth is None or depth <= 0:
        return None
    return depth


def get_log_level() -> str:
    raw = os.environ.get('FUZZLISP_LOG_LEVEL')
    if not raw or not raw.strip():
        return _DEFAULT_LOG_LEVEL
    return raw.strip().upper()

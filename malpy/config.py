from __future__ import annotations
import os
from pathlib import Path
from typing import Optional


_DEFAULT_PROMPT = "user> "
_DEFAULT_CONTINUATION_PROMPT = "...> "
_DEFAULT_HISTORY_FILE = Path.home() / ".malpy_history"
_DEFAULT_LOG_LEVEL = "WARNING"


def get_prompt() -> str:
    return os.environ.get("MALPY_PROMPT", _DEFAULT_PROMPT)


def get_continuation_prompt() -> str:
    return os.environ.get("MALPY_CONTINUATION_PROMPT", _DEFAULT_CONTINUATION_PROMPT)


def get_history_file() -> Optional[Path]:
    # an explicitly empty value disables history
    raw = os.environ.get("MALPY_HISTORY_FILE")
    if raw is None:
        return _DEFAULT_HISTORY_FILE
    raw = raw.strip()
    return Path(raw).expanduser() if raw else None


def get_recursion_limit() -> Optional[int]:
    raw = os.environ.get("MALPY_RECURSION_LIMIT", "").strip()
    if not raw:
        return None
    try:
        limit = int(raw)
    except ValueError:
        raise ValueError(f"MALPY_RECURSION_LIMIT must be an integer, got {raw!r}") from None
    return limit if limit > 0 else None


def get_log_level() -> str:
    return os.environ.get("MALPY_LOG_LEVEL", _DEFAULT_LOG_LEVEL).upper()

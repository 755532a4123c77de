from __future__ import annotations
import logging
import os


# Defaults
_DEFAULT_RECURSION_LIMIT = 10000
_DEFAULT_PROMPT = "> "
_DEFAULT_LOG_LEVEL = "WARNING"


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None


def get_recursion_limit() -> int:
    return int_from_env('TINYLISP_RECURSION_LIMIT', _DEFAULT_RECURSION_LIMIT)


def get_prompt() -> str:
    return os.environ.get('TINYLISP_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> int:
    raw = os.environ.get('TINYLISP_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(raw)
    # getLevelName maps unknown names to the string "Level <name>"
    return level if isinstance(level, int) else logging.WARNING

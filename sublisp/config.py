from __future__ import annotations
import os
from pathlib import Path


# Defaults
_DEFAULT_HISTORY_FILE = Path("session.lisp")
_DEFAULT_HISTORY_LENGTH = 1000
_DEFAULT_PROMPT = "* "
_DEFAULT_LOG_LEVEL = "WARNING"


def path_from_env(var: str, default: Path) -> Path:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    return Path(raw.strip())


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def get_history_path() -> Path:
    return path_from_env('SUBLISP_HISTORY', _DEFAULT_HISTORY_FILE)


def get_history_length() -> int:
    return int_from_env('SUBLISP_HISTORY_LENGTH', _DEFAULT_HISTORY_LENGTH)


def get_prompt() -> str:
    return os.environ.get('SUBLISP_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> str:
    return os.environ.get('SUBLISP_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()

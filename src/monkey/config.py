"""Runtime configuration for monkey-lexer.

Values are read from the environment once at import:

- ``MONKEY_DEBUG_LOGS``  enable parser/lexer debug tracing (1/true/yes/on)
- ``MONKEY_LOG_LEVEL``   debug, info, warning or error (default: warning)
- ``MONKEY_PROMPT``      REPL prompt (default: ">> ")
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

_TRUTHY = ("1", "true", "yes", "on")


class Config:
    def __init__(self, enable_debug_logs: bool = False, log_level: str = "warning",
                 prompt: str = ">> "):
        self.enable_debug_logs = enable_debug_logs
        self.log_level = log_level.lower() if log_level.lower() in _LEVELS else "warning"
        self.prompt = prompt

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        env = os.environ if environ is None else environ
        return cls(
            enable_debug_logs=env.get("MONKEY_DEBUG_LOGS", "").strip().lower() in _TRUTHY,
            log_level=env.get("MONKEY_LOG_LEVEL", "warning").strip(),
            prompt=env.get("MONKEY_PROMPT", ">> "),
        )

    @property
    def logging_level(self) -> int:
        if self.enable_debug_logs:
            return logging.DEBUG
        return _LEVELS[self.log_level]

    def should_log(self, level: str) -> bool:
        """Whether a message at *level* passes the configured threshold."""
        wanted = _LEVELS.get(level.lower())
        if wanted is None:
            return False
        return wanted >= self.logging_level

    def __repr__(self):
        return (f"Config(enable_debug_logs={self.enable_debug_logs}, "
                f"log_level={self.log_level!r}, prompt={self.prompt!r})")


config = Config.from_env()

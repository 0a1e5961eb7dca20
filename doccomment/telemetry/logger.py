"""Structured run logging utilities.

Responsibilities:
- Emit concise, deterministic phase-level runtime logs through `loguru`.
- Keep normalized output on stdout free of log lines by defaulting to stderr.
"""

from __future__ import annotations

import re
import sys
from typing import TextIO

from loguru import logger as _loguru_logger


_UNSAFE_TOKEN_CHARACTER_RE = re.compile(r"[^\w\-.:/]")


def _context_token(value: object) -> str:
    """Render one context value as a shell-safe token, `none` when blank."""

    text = str(value).strip()
    return _UNSAFE_TOKEN_CHARACTER_RE.sub("_", text) if text else "none"


def _render_context(context: dict[str, object]) -> str:
    return "".join(f" {key}={_context_token(context[key])}" for key in sorted(context))


class RunLogger:
    """Emit deterministic phase logs for CLI-observable command activity."""

    def __init__(self, sink: TextIO | None = None, level: str = "INFO") -> None:
        """Initialize the logger sink and configure deterministic formatting."""

        self._sink = sink or sys.stderr
        _loguru_logger.remove()
        _loguru_logger.add(self._sink, format="{message}", level=level, colorize=False)

    def _emit(self, level: str, event: str, stage: str, **context: object) -> None:
        line = f"[phase] level={level} stage={stage} event={event}{_render_context(context)}"
        _loguru_logger.log(level, line)

    def log_stage_start(self, stage: str, **context: object) -> None:
        """Emit a stage-start runtime event."""

        self._emit("INFO", "start", stage, **context)

    def log_stage_complete(self, stage: str, **context: object) -> None:
        """Emit a stage-complete runtime event."""

        self._emit("INFO", "complete", stage, **context)

    def log_stage_detail(self, stage: str, **context: object) -> None:
        """Emit a debug-level event with per-item diagnostics."""

        self._emit("DEBUG", "detail", stage, **context)

    def log_stage_failure(self, stage: str, error_type: str) -> None:
        """Emit a stage-failure runtime event without sensitive payload details."""

        self._emit("ERROR", "failure", stage, error_type=error_type)

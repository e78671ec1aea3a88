import logging
import os
import sys
from typing import Any, Literal, TextIO

import structlog

LogFormat = Literal["json", "plain", "auto"]


def _should_use_json_format(stream: TextIO) -> bool:
    """Determine if JSON format should be used based on environment."""
    # Check if running in CI
    ci_vars = ["CI", "CONTINUOUS_INTEGRATION", "GITHUB_ACTIONS", "JENKINS_URL"]
    if any(os.environ.get(var) for var in ci_vars):
        return True

    # Check if the log stream is redirected (not a TTY)
    return bool(not stream.isatty())


def setup_logging(
    format_type: LogFormat = "auto", stream: TextIO | None = None, level: str = "INFO"
) -> None:
    """
    Setup structured logging with format control.

    Logs go to stderr by default; stdout carries segmented text.

    Args:
        format_type: "json" for JSON output, "plain" for human-readable,
                "auto" to auto-detect based on TTY/CI.
        stream: Destination for log lines.
        level: Minimum level name to emit (DEBUG, INFO, WARNING, ERROR).
    """
    use_json = format_type == "json" or (
        format_type == "auto" and _should_use_json_format(stream or sys.stderr)
    )

    if use_json:
        processors: list[Any] = [
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level.upper())),
        # stderr is looked up each time a logger is created
        logger_factory=lambda *args: structlog.PrintLogger(file=stream or sys.stderr),
        cache_logger_on_first_use=False,
    )


log = structlog.get_logger()

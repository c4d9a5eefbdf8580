"""Loguru logging configuration for the resolver and its CLI.

Everything goes to a human-readable stderr sink. Records bound with
``json_output=True`` (the confirmed address hand-off) are additionally
serialized as JSON, so a consumer can pick up confirmations from the log
stream. With a ``log_dir`` both streams are also written to rotating files.
"""

import sys
from pathlib import Path

from loguru import logger

_LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | {name}:{function}:{line} | {message}"

LOG_FILE_NAME = "address-resolver.log"
HANDOFF_FILE_NAME = "handoffs.jsonl"


def _is_handoff(record: dict) -> bool:
    return bool(record["extra"].get("json_output", False))


def setup_logging(log_level: str = "INFO", log_dir: str | None = None) -> None:
    """Configure Loguru sinks.

    Args:
        log_level: Minimum log level to emit, case-insensitive.
        log_dir: Optional directory for log files. When set, the text log
            and the JSON hand-off log are written there (rotated every
            24 hours, retained 7 days).
    """
    level = log_level.upper()

    logger.remove()
    logger.add(sys.stderr, level=level, format=_LOG_FORMAT, serialize=False)
    logger.add(sys.stderr, level=level, serialize=True, filter=_is_handoff)

    if not log_dir:
        return

    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    logger.add(log_path / LOG_FILE_NAME, level=level, format=_LOG_FORMAT, rotation="24h", retention="7 days")
    logger.add(
        log_path / HANDOFF_FILE_NAME,
        level=level,
        serialize=True,
        filter=_is_handoff,
        rotation="24h",
        retention="7 days",
    )

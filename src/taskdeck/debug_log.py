"""Debug logging with in-app viewer support.

Python logging records are captured into a ring buffer that the TUI can
show and export.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from taskdeck.constants import MAX_LOG_MESSAGE_LENGTH

if TYPE_CHECKING:
    from pathlib import Path

log = logging.getLogger(__name__)


@dataclass(slots=True)
class LogEntry:
    """A captured log entry."""

    group: str  # Level name (DEBUG, INFO, WARNING, ERROR, etc.)
    message: str
    timestamp: float


MAX_LOG_LINES = 2000
log_buffer: deque[LogEntry] = deque(maxlen=MAX_LOG_LINES)

_TRUNCATION_SUFFIX = "... [truncated]"


def _truncate(message: str) -> str:
    if len(message) > MAX_LOG_MESSAGE_LENGTH:
        return message[:MAX_LOG_MESSAGE_LENGTH] + _TRUNCATION_SUFFIX
    return message


class DebugLogHandler(logging.Handler):
    """Logging handler that captures logs to the debug buffer."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            log_buffer.append(
                LogEntry(
                    group=record.levelname,
                    message=_truncate(msg),
                    timestamp=record.created,
                )
            )
        except Exception:
            self.handleError(record)


_handler: DebugLogHandler | None = None


def setup_debug_logging(level: int = logging.INFO) -> None:
    """Attach the buffer handler to the ``taskdeck`` logger.

    Idempotent: later calls only adjust the level.
    """
    global _handler

    package_logger = logging.getLogger("taskdeck")
    package_logger.setLevel(level)
    if _handler is not None:
        return

    _handler = DebugLogHandler()
    _handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    package_logger.addHandler(_handler)
    log.info("Debug logging initialized - press F12 to export logs")


def clear_log_buffer() -> None:
    """Clear the log buffer."""
    log_buffer.clear()


def export_logs_to_file(file_path: Path) -> int:
    """Export all logs from the buffer to a file.

    Returns:
        Number of log entries written
    """
    file_path.parent.mkdir(parents=True, exist_ok=True)

    with file_path.open("w", encoding="utf-8") as f:
        f.write("# taskdeck debug log export\n")
        f.write(f"# Total entries: {len(log_buffer)}\n\n")
        for entry in log_buffer:
            ts = datetime.fromtimestamp(entry.timestamp).strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
            f.write(f"{ts} [{entry.group}] {entry.message}\n")

    return len(log_buffer)

"""Notice sinks for fruit and basket events."""

import logging
from typing import Protocol


class NoticeSink(Protocol):
    """Anything that can take a one-way textual notice."""

    def record(self, message: str) -> None: ...


class LoggingNotices:
    """Sink that writes every notice as an INFO log record."""

    def __init__(self, logger_name: str = "orchard"):
        self.logger = logging.getLogger(logger_name)

    def record(self, message: str) -> None:
        self.logger.info(message)


class NoticeLog:
    """Sink that keeps notices in memory, in the order they were recorded."""

    def __init__(self):
        self.messages: list[str] = []

    def record(self, message: str) -> None:
        self.messages.append(message)

    def drain(self) -> list[str]:
        """Return all recorded notices and start over with an empty log."""
        drained = self.messages
        self.messages = []
        return drained

    def __len__(self) -> int:
        return len(self.messages)

from __future__ import annotations
import logging
from typing import TYPE_CHECKING

from gaia_log.core.recorder import Severity

if TYPE_CHECKING:
    from gaia_log.client.log_client import LogClient


MILESTONE = 25
logging.addLevelName(MILESTONE, "MILESTONE")


def severity_for(levelno: int) -> Severity:
    if levelno >= logging.ERROR:
        return Severity.ERROR
    if levelno >= logging.WARNING:
        return Severity.WARNING
    if levelno == MILESTONE:
        return Severity.MILESTONE
    return Severity.MESSAGE


class LogClientHandler(logging.Handler):
    """Logging handler that forwards records to a LogClient.

    Levels map onto severities:
      ERROR and above -> Error
      WARNING         -> Warning
      MILESTONE (25)  -> Milestone
      anything else   -> Message
    """

    def __init__(self, client: "LogClient", level: int = logging.NOTSET):
        super().__init__(level)
        self.client = client

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.client.record(self.format(record), severity_for(record.levelno))
        except Exception:
            self.handleError(record)


def attach_log_client_handler(logger: logging.Logger, client: "LogClient") -> LogClientHandler:
    handler = LogClientHandler(client)
    handler.setFormatter(logging.Formatter(fmt='%(name)s: %(message)s'))
    logger.addHandler(handler)
    return handler

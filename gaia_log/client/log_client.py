from __future__ import annotations
from typing import Optional, Union

import redis

from gaia_log.core.config import CONFIG
from gaia_log.core.recorder import LogRecorder, Severity, generate_log_text
from gaia_log.core.redis_client import LogChannel, connect
from gaia_log.utils.logging_setup import setup_logging


class LogServerNotFound(ConnectionError):
    """Raised when a startup notice reaches no subscriber."""


class RemoteChannel:
    """Backend publishing every line to the log service channel."""

    def __init__(self, channel: LogChannel, owned: bool = True) -> None:
        self.channel = channel
        self.owned = owned

    def write(self, text: str) -> None:
        self.channel.publish_record(text)

    def close(self) -> None:
        # Adopted connections belong to whoever handed them over
        if self.owned:
            self.channel.close()


class LocalFile:
    """Backend appending every line to a local log file."""

    def __init__(self, recorder: LogRecorder) -> None:
        self.recorder = recorder

    def write(self, text: str) -> None:
        self.recorder.record_raw_text(text)

    def close(self) -> None:
        self.recorder.close()


Backend = Union[RemoteChannel, LocalFile]


class LogClient:
    """Client for the log service, publishing log lines to Redis.

    - Tries to connect and announce itself on construction; the announcement must reach
      at least one subscriber (a running log service).
    - If anything fails, falls back to a local log file for the rest of its life.
    - A connection passed in is adopted as-is, without the announcement.
    """

    def __init__(
        self,
        port: int = 6379,
        ip: str = "127.0.0.1",
        *,
        connection: Optional[redis.Redis] = None,
        author: str = "Anonymous",
        log_directory: Optional[str] = None,
    ) -> None:
        self.author = author
        self.print_to_console = False
        self.log = setup_logging("log-client")
        if connection is not None:
            self._backend: Backend = RemoteChannel(LogChannel(connection), owned=False)
        else:
            self._backend = self._connect_or_fallback(port, ip, log_directory)

    @classmethod
    def from_connection(cls, connection: redis.Redis, *, author: str = "Anonymous") -> "LogClient":
        """Reuse the connection to a Redis server."""
        return cls(connection=connection, author=author)

    def _connect_or_fallback(self, port: int, ip: str, log_directory: Optional[str]) -> Backend:
        channel: Optional[LogChannel] = None
        try:
            channel = LogChannel(connect(ip, port))
            receivers = channel.publish_record(
                generate_log_text("Log service client connected.", Severity.MESSAGE, self.author))
            if receivers < 1:
                raise LogServerNotFound(f"No log server detected on {ip}:{port}")
            return RemoteChannel(channel)
        except Exception as error:
            if channel is not None:
                channel.close()
            recorder = LogRecorder(log_directory or CONFIG.recorder.directory, print_to_console=False)
            recorder.record_error(str(error), self.author)
            recorder.record_error(f"Failed to connect the Redis server on {ip}:{port}")
            self.log.debug("Log server on %s:%s unavailable (%s), logging to %s", ip, port, error,
                             recorder.log_path)
            return LocalFile(recorder)

    @property
    def is_remote(self) -> bool:
        return isinstance(self._backend, RemoteChannel)

    @property
    def log_path(self) -> Optional[str]:
        if isinstance(self._backend, LocalFile):
            return self._backend.recorder.log_path
        return None

    def _record_raw_text(self, text: str) -> None:
        self._backend.write(text)
        if self.print_to_console:
            print(text)

    def record(self, text: str, severity: Severity) -> None:
        self._record_raw_text(generate_log_text(text, severity, self.author))

    def record_message(self, text: str) -> None:
        """Record a message log: simple output of a program."""
        self.record(text, Severity.MESSAGE)

    def record_milestone(self, text: str) -> None:
        """Record a milestone log: an important time point of a program."""
        self.record(text, Severity.MILESTONE)

    def record_warning(self, text: str) -> None:
        """Record a warning log: something that deserves attention."""
        self.record(text, Severity.WARNING)

    def record_error(self, text: str) -> None:
        """Record an error log: an abnormal situation of a program."""
        self.record(text, Severity.ERROR)

    def close(self) -> None:
        self._backend.close()

    def __enter__(self) -> "LogClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

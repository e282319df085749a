from __future__ import annotations
import threading
from typing import Any, Dict, Optional

import redis

from gaia_log.core.config import CONFIG
from gaia_log.core.recorder import LogRecorder
from gaia_log.core.redis_client import COMMAND_CHANNEL, RECORD_CHANNEL, LogChannel, connect
from gaia_log.utils.logging_setup import setup_logging


class LogService(threading.Thread):
    """Log service: subscribes to the log channels and writes every record to a local file.

    Channels:
      logs/record   lines to append verbatim
      logs/command  control commands ("shutdown")
    """

    def __init__(
        self,
        path: str = "./Logs",
        port: int = 6379,
        ip: str = "127.0.0.1",
        *,
        connection: Optional[redis.Redis] = None,
    ) -> None:
        super().__init__(daemon=True)
        self.log = setup_logging("log-service")
        self.stop_event = threading.Event()
        # Only a connection opened here is closed with the service
        self.owns_connection = connection is None
        self.channel = LogChannel(connection if connection is not None else connect(ip, port))
        self.pubsub = self.channel.subscribe()
        self.recorder = LogRecorder(path)
        self.records = 0
        self.error: Optional[BaseException] = None

    def handle_message(self, message: Dict[str, Any]) -> None:
        channel = _text(message.get("channel"))
        data = _text(message.get("data"))
        if channel == RECORD_CHANNEL:
            self.recorder.record_raw_text(data)
            self.records += 1
        elif channel == COMMAND_CHANNEL:
            self.handle_command(data)

    def handle_command(self, command: str) -> None:
        if command == "shutdown":
            self.log.info("Shutdown command received")
            self.stop()
        else:
            self.log.warning("Unknown command: %s", command)

    def run(self) -> None:
        self.log.info("Log service listening, writing to %s", self.recorder.log_path)
        try:
            while not self.stop_event.is_set():
                message = self.pubsub.get_message(ignore_subscribe_messages=True,
                                                  timeout=CONFIG.service.poll_timeout)
                if message is not None:
                    self.handle_message(message)
        except Exception as error:
            # Re-raised by the launcher, which restarts the service
            self.error = error
        finally:
            self.close()
        self.log.info("Log service stopped after %d records", self.records)

    def stop(self) -> None:
        self.stop_event.set()

    def close(self) -> None:
        self.pubsub.close()
        self.recorder.close()
        if self.owns_connection:
            self.channel.close()


def _text(value: Any) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return "" if value is None else str(value)

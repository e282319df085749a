from __future__ import annotations
import redis
from redis.backoff import NoBackoff
from redis.client import PubSub
from redis.retry import Retry

from .config import CONFIG, RedisConfig


RECORD_CHANNEL = "logs/record"
COMMAND_CHANNEL = "logs/command"


def connect(ip: str = "127.0.0.1", port: int = 6379, cfg: RedisConfig = CONFIG.redis) -> redis.Redis:
    """Build a Redis client for the log channels. Connects lazily, never retries."""
    return redis.Redis(
        host=ip,
        port=port,
        db=cfg.db,
        password=cfg.password,
        socket_connect_timeout=cfg.socket_connect_timeout,
        socket_timeout=cfg.socket_timeout,
        retry=Retry(NoBackoff(), 0),
        decode_responses=True,
        encoding_errors="replace",
    )


class LogChannel:
    """Simple wrapper around a Redis connection for the log service channels."""

    def __init__(self, connection: redis.Redis) -> None:
        self.r = connection

    def publish_record(self, text: str) -> int:
        return self.r.publish(RECORD_CHANNEL, text)

    def send_command(self, command: str) -> int:
        return self.r.publish(COMMAND_CHANNEL, command)

    def subscribe(self) -> PubSub:
        ps = self.r.pubsub()
        ps.subscribe(RECORD_CHANNEL, COMMAND_CHANNEL)
        return ps

    def close(self) -> None:
        self.r.close()

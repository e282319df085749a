import fakeredis
import pytest


@pytest.fixture
def redis_server():
    """In-process Redis shared by every connection a test opens."""
    return fakeredis.FakeServer()


@pytest.fixture
def make_connection(redis_server):
    def _make(*args, **kwargs):
        return fakeredis.FakeRedis(server=redis_server, decode_responses=True)
    return _make


@pytest.fixture
def log_listener(make_connection):
    """A subscriber on the record channel, standing in for a running log service."""
    pubsub = make_connection().pubsub()
    pubsub.subscribe("logs/record")
    pubsub.get_message(timeout=1)  # subscribe confirmation
    yield pubsub
    pubsub.close()


@pytest.fixture
def read_log_lines():
    def _read(directory):
        lines = []
        for path in sorted(directory.glob("*.log")):
            lines.extend(path.read_text(encoding="utf-8").splitlines())
        return lines
    return _read

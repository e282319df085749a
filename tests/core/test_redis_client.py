from gaia_log.core.redis_client import LogChannel, connect


def test_connect_is_lazy_and_tolerant():
    conn = connect("127.0.0.1", 9999)
    kwargs = conn.connection_pool.connection_kwargs
    assert (kwargs["host"], kwargs["port"]) == ("127.0.0.1", 9999)
    assert kwargs["decode_responses"] is True
    assert kwargs["encoding_errors"] == "replace"
    conn.close()


def test_channel_routes_to_fixed_channels(make_connection):
    listener = make_connection().pubsub()
    listener.subscribe("logs/record", "logs/command")
    channel = LogChannel(make_connection())
    assert channel.publish_record("line") == 1
    assert channel.send_command("shutdown") == 1
    received = []
    while True:
        message = listener.get_message(ignore_subscribe_messages=True, timeout=0.1)
        if message is None:
            break
        received.append((message["channel"], message["data"]))
    assert received == [("logs/record", "line"), ("logs/command", "shutdown")]
    listener.close()

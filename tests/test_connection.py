import asyncio

import httpx
import pytest

from cryptocompare_client.domain.errors import DecodeError, TransportError
from cryptocompare_client.infrastructure.connections.cryptocompare_connection import (
    CryptoCompareConnection,
)

from conftest import RecordingHandler


def run(coro):
    return asyncio.run(coro)


def test_api_key_sent_as_authorization_header(make_connection):
    handler = RecordingHandler({"USD": 1.0})
    conn = make_connection(handler, api_key="secret")

    payload, meta = run(conn.get_json("data/price?fsym=BTC"))

    assert payload == {"USD": 1.0}
    assert handler.last.headers["authorization"] == "Apikey secret"
    assert meta.url.startswith("https://min-api.cryptocompare.com/data/price")


def test_no_authorization_header_without_key(make_connection):
    handler = RecordingHandler({})
    conn = make_connection(handler)

    run(conn.get_json("data/price"))

    assert "authorization" not in handler.last.headers


def test_invalid_json_is_decode_error(make_connection):
    handler = RecordingHandler(b"<html>oops</html>", raw=True)
    conn = make_connection(handler)

    with pytest.raises(DecodeError) as exc_info:
        run(conn.get_json("data/price"))

    assert exc_info.value.meta.status_code == 200


def test_network_error_is_transport_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    conn = CryptoCompareConnection(
        {"api_root": "https://example.invalid/"}, transport=httpx.MockTransport(handler)
    )

    with pytest.raises(TransportError) as exc_info:
        run(conn.get_json("data/price"))

    assert exc_info.value.meta is None
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


def test_connect_and_disconnect_lifecycle(make_connection):
    conn = make_connection(RecordingHandler({}))

    async def scenario():
        assert await conn.is_healthy() is False
        async with conn:
            assert conn.connected
            assert await conn.is_healthy() is True
            assert conn.get_client() is not None
        assert conn.connected is False
        assert conn.get_client() is None

    run(scenario())


def test_defaults_when_config_is_sparse():
    conn = CryptoCompareConnection({})

    assert conn.get_base_url() == "https://min-api.cryptocompare.com/"
    assert conn.get_api_key() is None

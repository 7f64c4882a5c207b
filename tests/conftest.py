import json
import sys
from pathlib import Path

import httpx
import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if SRC.as_posix() not in sys.path:
    sys.path.insert(0, SRC.as_posix())

from cryptocompare_client.infrastructure.connections.cryptocompare_connection import (  # noqa: E402
    CryptoCompareConnection,
)

API_ROOT = "https://min-api.cryptocompare.com/"


class RecordingHandler:
    """httpx.MockTransport handler that answers with a fixed body and keeps requests."""

    def __init__(self, body, status_code: int = 200, raw: bool = False):
        self.body = body
        self.status_code = status_code
        self.raw = raw
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raw:
            return httpx.Response(self.status_code, content=self.body)
        return httpx.Response(
            self.status_code,
            content=json.dumps(self.body).encode(),
            headers={"Content-Type": "application/json"},
        )

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def make_connection():
    def _make(handler, api_key=None):
        config = {"api_root": API_ROOT, "api_key": api_key, "timeout": 5.0}
        return CryptoCompareConnection(config, transport=httpx.MockTransport(handler))

    return _make

"""Shared fixtures for the Animal Spotter tests."""

import io
import struct
import zlib
from typing import Callable, List, Optional

import httpx
import pytest
import pytest_asyncio
from PIL import Image

from animal_spotter.core.client import SpotterClient, SpotterClientConfig
from animal_spotter.core.session import Session

BASE_URL = "https://spotter.test/api"

FOX = {
    "id": 1,
    "name": "fox",
    "timeSeen": 0,
    "latitude": 1.0,
    "longitude": 2.0,
    "description": "d",
    "imageURL": "http://x/y.png",
}

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def sent_requests() -> List[httpx.Request]:
    """Every request that reached the mock transport."""
    return []


@pytest_asyncio.fixture
async def make_client(sent_requests):
    """Build clients whose requests are answered by ``handler``; all are closed afterwards."""
    clients: List[SpotterClient] = []

    def factory(handler: Handler, session: Optional[Session] = None) -> SpotterClient:
        def recording_handler(request: httpx.Request) -> httpx.Response:
            sent_requests.append(request)
            return handler(request)

        client = SpotterClient(
            SpotterClientConfig(base_url=BASE_URL),
            session=session,
            transport=httpx.MockTransport(recording_handler),
        )
        clients.append(client)
        return client

    yield factory

    for client in clients:
        await client.close()


@pytest.fixture
def fox_payload() -> dict:
    return dict(FOX)


@pytest.fixture
def png_bytes() -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (4, 3), color=(200, 120, 40)).save(buffer, format="PNG")
    return buffer.getvalue()


def _png_chunk(tag: bytes, data: bytes) -> bytes:
    return struct.pack(">I", len(data)) + tag + data + struct.pack(">I", zlib.crc32(tag + data))


@pytest.fixture
def oversized_png_bytes() -> bytes:
    """A header-only PNG claiming 30000x30000 pixels."""
    header = struct.pack(">IIBBBBB", 30000, 30000, 8, 2, 0, 0, 0)
    return b"\x89PNG\r\n\x1a\n" + _png_chunk(b"IHDR", header) + _png_chunk(b"IEND", b"")

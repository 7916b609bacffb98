# File: tests/conftest.py
from collections.abc import AsyncIterator
from typing import List

import pytest
from aiohttp import web

from link_scout.config import CrawlConfig

FIXTURE_BASE = "https://example.com/dir/index.html"

FIXTURE_HTML = b"""<!DOCTYPE html>
<html>
<head><title>Fixture</title></head>
<body>
  <a href="/page1">Page 1</a>
  <img src="img.png">
  <script src="https://cdn.example/x.js"></script>
  <div data-x="ignored"></div>
</body>
</html>
"""


async def chunked(data: bytes, size: int = 16) -> AsyncIterator[bytes]:
    """Yield *data* in *size*-byte pieces, like a streamed response body."""
    for i in range(0, len(data), size):
        yield data[i:i + size]


async def serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "127.0.0.1", port)
    await site.start()
    try:
        yield f"http://127.0.0.1:{port}"
    finally:
        await runner.cleanup()


def html_page(*links: str) -> web.Response:
    body = "".join(f'<a href="{link}">{link}</a>' for link in links)
    return web.Response(text=f"<html><body>{body}</body></html>", content_type="text/html")


class HitCounter:
    """Records every path requested from a test server."""

    def __init__(self) -> None:
        self.paths: List[str] = []

    def count(self, path: str) -> int:
        return self.paths.count(path)

    @web.middleware
    async def middleware(self, request, handler):
        self.paths.append(request.path)
        return await handler(request)


@pytest.fixture()
def hits() -> HitCounter:
    return HitCounter()


@pytest.fixture()
def basic_config() -> CrawlConfig:
    """Return a basic valid CrawlConfig for crawler tests."""
    return CrawlConfig(timeout=5.0, user_agent="TestAgent/1.0", concurrency=5)

from typing import Dict, List, Tuple

import pytest
import pytest_asyncio
from aiohttp import web, test_utils

from p2pb2b import Client


class FakeExchange:
    """A local HTTP server recording every request it receives."""

    def __init__(self):
        self.requests: List[dict] = []
        self.responses: Dict[str, Tuple[int, str]] = {}
        self.server: test_utils.TestServer = None

    def respond(self, path: str, status: int, text: str) -> None:
        self.responses[path] = (status, text)

    @property
    def url(self) -> str:
        return f"http://{self.server.host}:{self.server.port}"

    async def handler(self, request: web.Request) -> web.Response:
        self.requests.append({
            "method": request.method,
            "path": request.path,
            "query": dict(request.query),
            "headers": request.headers,
            "body": await request.read()
        })
        status, text = self.responses.get(request.path, (200, "ok"))

        return web.Response(status=status, text=text)

    async def start(self) -> None:
        app = web.Application()
        app.router.add_route("*", "/{tail:.*}", self.handler)
        self.server = test_utils.TestServer(app)
        await self.server.start_server()

    async def close(self) -> None:
        await self.server.close()


@pytest_asyncio.fixture
async def exchange():
    fake = FakeExchange()
    await fake.start()
    try:
        yield fake
    finally:
        await fake.close()


@pytest_asyncio.fixture
async def client(exchange):
    c = Client("key", "secret", endpoint=exchange.url)
    try:
        yield c
    finally:
        await c.close()


@pytest.fixture
def config_json() -> str:
    return '{"api-key": "file-key", "api-secret": "file-secret"}'

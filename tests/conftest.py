# File: tests/conftest.py
import socket
from typing import Awaitable, Callable, List

import pytest
import pytest_asyncio
from aiohttp import web

from site_crawler.config import CrawlerConfig


@pytest_asyncio.fixture
async def serve_app() -> Callable[[web.Application], Awaitable[str]]:
    """
    Start aiohttp applications on an ephemeral localhost port.
    Returns a coroutine function: app -> base URL. Everything is cleaned up after the test.
    """
    runners: List[web.AppRunner] = []

    async def _serve(app: web.Application) -> str:
        runner = web.AppRunner(app)
        await runner.setup()
        site = web.TCPSite(runner, "127.0.0.1", 0)
        await site.start()
        runners.append(runner)
        host, port = runner.addresses[0][:2]
        return f"http://{host}:{port}"

    yield _serve

    for runner in runners:
        await runner.cleanup()


@pytest.fixture()
def closed_port() -> int:
    """A localhost port nothing listens on."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


@pytest.fixture()
def make_config() -> Callable[..., CrawlerConfig]:
    """
    Build a CrawlerConfig for crawler tests (no politeness delay, short timeout).
    """

    def _make(seed_url: str, **kwargs) -> CrawlerConfig:
        kwargs.setdefault("fetch_timeout", 2.0)
        kwargs.setdefault("politeness_delay", 0)
        kwargs.setdefault("user_agent", "TestAgent/1.0")
        return CrawlerConfig(seed_url=seed_url, **kwargs)

    return _make


@pytest.fixture()
def sample_html() -> str:
    """Page whose links are split between parsed markup and a comment."""
    return (
        "<html><head><link rel='stylesheet' href='/style.css'>"
        '<script src="/app.js"></script></head>'
        '<body><a href="/link1">L1</a><a href="http://external.com/">X</a>'
        "<!-- <a href='/commented'>old</a> -->"
        "</body></html>"
    )

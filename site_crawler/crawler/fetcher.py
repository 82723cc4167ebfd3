# site_crawler/crawler/fetcher.py
"""
Fetcher module: one GET per URL, classification by declared content type.
"""
from __future__ import annotations

import asyncio

from aiohttp import ClientError, ClientSession

from site_crawler.config import CrawlerConfig
from site_crawler.crawler.models import FetchOutcome

HTML_CONTENT_TYPE = "text/html"


class FetchError(Exception):
    """Transport-level failure for a single URL."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(message)
        self.url = url
        self.message = message


class Fetcher:
    """Issues GET requests through a shared session and classifies responses."""

    def __init__(self, session: ClientSession, config: CrawlerConfig) -> None:
        self.session = session
        self.config = config

    async def fetch(self, url: str) -> FetchOutcome:
        """
        Fetch *url* once.

        ``text/html…`` responses (case-sensitive prefix of the raw header) are
        returned with a decoded text body, everything else with raw bytes.
        HTTP error statuses are not failures. Raises FetchError on timeout,
        connection, protocol or body-read failure.
        """
        try:
            async with self.session.get(url) as resp:
                content_type = resp.headers.get("Content-Type", "")
                raw = await resp.read()
                body: str | bytes = raw
                if content_type.startswith(HTML_CONTENT_TYPE):
                    body = _decode(raw, resp.get_encoding())
                return FetchOutcome(url, resp.status, content_type, body)
        except asyncio.TimeoutError as exc:
            raise FetchError(url, f"request timed out after {self.config.fetch_timeout} s") from exc
        except (ClientError, ValueError) as exc:
            raise FetchError(url, _describe(exc)) from exc


def _decode(raw: bytes, encoding: str) -> str:
    # labels like "base64" pass codecs.lookup but are not text encodings
    try:
        return raw.decode(encoding, errors="replace")
    except LookupError:
        return raw.decode("utf-8", errors="replace")


def _describe(exc: BaseException) -> str:
    text = str(exc)
    return f"{type(exc).__name__}: {text}" if text else type(exc).__name__

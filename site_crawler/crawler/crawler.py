# === FILE: site_crawler/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import time
from typing import List, Optional

from aiohttp import ClientSession, ClientTimeout

from site_crawler.config import CrawlerConfig
from site_crawler.crawler.fetcher import Fetcher, FetchError
from site_crawler.crawler.frontier import Frontier
from site_crawler.crawler.link_extractor import extract_links
from site_crawler.crawler.models import CrawlResult, ErrorResult, FileResult, HtmlResult
from site_crawler.logger import logger
from site_crawler.utils import DomainFilter, canonical_seed

__all__ = ("AsyncCrawler",)


class AsyncCrawler:
    """Sequential same-domain crawler: one URL is fully processed before the next."""

    def __init__(self, config: CrawlerConfig, session: Optional[ClientSession] = None) -> None:
        self.config = config
        self.scope = DomainFilter.from_seed(config.seed_url)
        self.frontier = Frontier([canonical_seed(config.seed_url)])
        self.results: List[CrawlResult] = []
        self.session = session
        self._owns_session = session is None
        self.fetcher: Optional[Fetcher] = None if session is None else Fetcher(session, config)

    @property
    def base_domain(self) -> str:
        return self.scope.base_domain

    async def __aenter__(self) -> AsyncCrawler:
        if self.session is None:
            self.session = ClientSession(
                timeout=ClientTimeout(total=self.config.fetch_timeout),
                headers={"User-Agent": self.config.user_agent},
                raise_for_status=False,
            )
            self.fetcher = Fetcher(self.session, self.config)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()

    def is_in_scope(self, url: str) -> bool:
        return self.scope.is_in_scope(url)

    async def crawl(self) -> List[CrawlResult]:
        """Run until the frontier is drained and return results in processing order."""
        if self.fetcher is None:
            raise RuntimeError("Session not initialized")
        logger.info("Старт обхода: %s (домен %s)", self.config.seed_url, self.base_domain)
        start = time.monotonic()
        while self.frontier:
            url = self.frontier.pop()
            if url is None:
                break
            if self.frontier.is_visited(url):
                continue
            self.frontier.mark_visited(url)
            logger.info("Crawling: %s", url)
            self.results.append(await self._process(url))
            await asyncio.sleep(self.config.politeness_delay)
        duration = time.monotonic() - start
        logger.info("Завершено: %d URL за %.2f с", len(self.results), duration)
        return list(self.results)

    async def _process(self, url: str) -> CrawlResult:
        fetcher = self.fetcher
        if fetcher is None:
            raise RuntimeError("Session not initialized")
        try:
            outcome = await fetcher.fetch(url)
        except FetchError as exc:
            logger.warning("Failed %s: %s", url, exc.message)
            return ErrorResult(url, exc.message)

        if not outcome.is_html:
            return FileResult(url, outcome.content_type, bytes(outcome.body))

        links = extract_links(url, str(outcome.body))
        for link in links:
            if not self.frontier.is_visited(link) and self.is_in_scope(link):
                self.frontier.push(link)
        return HtmlResult(url, tuple(links))

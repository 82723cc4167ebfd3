# File: site_crawler/engine.py
"""site_crawler.engine: точка запуска обхода для CLI и тестов."""

from __future__ import annotations

from typing import List

from site_crawler.config import CrawlerConfig
from site_crawler.crawler.crawler import AsyncCrawler
from site_crawler.crawler.models import CrawlResult

__all__ = ["start_crawl"]


async def start_crawl(config: CrawlerConfig) -> List[CrawlResult]:
    """
    Открывает AsyncCrawler в контексте и возвращает результаты в порядке обработки.

    Parameters
    ----------
    config : CrawlerConfig
        Конфигурация обхода.
    """
    async with AsyncCrawler(config) as crawler:
        return await crawler.crawl()

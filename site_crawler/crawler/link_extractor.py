# site_crawler/crawler/link_extractor.py
"""
Link extraction for SiteCrawler.

Two independent strategies run over every HTML page and their results are
concatenated (duplicates are kept):

* structural – BeautifulSoup tree, ``href`` (or ``src``) of link-bearing tags;
* pattern    – regular expression over the raw markup, which also sees links
  inside comments, inline scripts and broken tags.

Both are pure functions of ``(base_url, html)``.
"""
from __future__ import annotations

import re
from typing import List

from bs4 import BeautifulSoup, ParserRejectedMarkup
from bs4.element import Tag

from site_crawler.logger import logger
from site_crawler.utils import normalize_url

__all__ = ("extract_links", "extract_links_structural", "extract_links_pattern")

LINK_SELECTOR = "a, link, script, img, source"
LINK_ATTR_RE = re.compile(r"""(?:href|src)=["']([^"']+)["']""", re.IGNORECASE)


def extract_links_structural(base_url: str, html: str) -> List[str]:
    """Absolute URLs from ``href``/``src`` of ``a, link, script, img, source`` elements."""
    try:
        soup = BeautifulSoup(html, "html.parser")
    except ParserRejectedMarkup as exc:
        logger.debug("Markup of %s rejected by parser: %s", base_url, exc)
        return []

    links: List[str] = []
    for tag in soup.select(LINK_SELECTOR):
        if not isinstance(tag, Tag):
            continue
        value = tag.get("href")
        if value is None:
            value = tag.get("src")
        if not isinstance(value, str):
            continue
        url = normalize_url(base_url, value)
        if url is not None:
            links.append(url)
    return links


def extract_links_pattern(base_url: str, html: str) -> List[str]:
    """Absolute URLs from every ``href="…"``/``src='…'`` occurrence in the raw text."""
    links: List[str] = []
    for match in LINK_ATTR_RE.finditer(html):
        url = normalize_url(base_url, match.group(1))
        if url is not None:
            links.append(url)
    return links


def extract_links(base_url: str, html: str) -> List[str]:
    """Structural links followed by pattern links."""
    links = extract_links_structural(base_url, html)
    links.extend(extract_links_pattern(base_url, html))
    logger.debug("Extracted %d links from %s", len(links), base_url)
    return links

# site_crawler/crawler/models.py
"""
Data models for the SiteCrawler crawler.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Tuple, Union

__all__ = ("FetchOutcome", "HtmlResult", "FileResult", "ErrorResult", "CrawlResult")


@dataclass(frozen=True, slots=True)
class FetchOutcome:
    """A successful HTTP response: text body for HTML, raw bytes for everything else."""

    url: str
    status: int
    content_type: str
    body: Union[str, bytes]

    @property
    def is_html(self) -> bool:
        return isinstance(self.body, str)


@dataclass(frozen=True, slots=True)
class HtmlResult:
    """Fetched HTML page with every link extracted from it (raw, unfiltered)."""

    kind: ClassVar[str] = "html"

    url: str
    links: Tuple[str, ...]


@dataclass(frozen=True, slots=True)
class FileResult:
    """Fetched non-HTML resource."""

    kind: ClassVar[str] = "file"

    url: str
    content_type: str
    content: bytes


@dataclass(frozen=True, slots=True)
class ErrorResult:
    """URL whose fetch failed."""

    kind: ClassVar[str] = "error"

    url: str
    error: str


CrawlResult = Union[HtmlResult, FileResult, ErrorResult]

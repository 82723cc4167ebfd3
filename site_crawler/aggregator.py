# File: site_crawler/aggregator.py
"""site_crawler.aggregator: сводный отчёт по результатам обхода."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from typing import Dict, List, Sequence, TypedDict

from site_crawler.crawler.models import CrawlResult, ErrorResult, FileResult, HtmlResult


class PageInfo(TypedDict):
    """HTML-страница и извлечённые из неё ссылки."""

    url: str
    links: List[str]


class FileInfo(TypedDict):
    """Загруженный не-HTML ресурс."""

    url: str
    content_type: str
    size: int


class ErrorInfo(TypedDict):
    """URL, который не удалось загрузить."""

    url: str
    error: str


@dataclass(slots=True)
class CrawlReport:
    """Итоги обхода, сгруппированные по типу результата (в порядке обработки)."""

    pages: List[PageInfo] = field(default_factory=list)
    files: List[FileInfo] = field(default_factory=list)
    errors: List[ErrorInfo] = field(default_factory=list)

    @property
    def summary(self) -> Dict[str, int]:
        return {
            "total": len(self.pages) + len(self.files) + len(self.errors),
            "pages": len(self.pages),
            "files": len(self.files),
            "errors": len(self.errors),
        }

    def json(self, *, pretty: bool = False) -> str:
        """Возвращает JSON-представление отчёта вместе со сводкой."""
        output = {"summary": self.summary, **asdict(self)}
        return json.dumps(output, ensure_ascii=False, indent=2 if pretty else None)


def aggregate_results(results: Sequence[CrawlResult]) -> CrawlReport:
    """Раскладывает результаты обхода по разделам отчёта."""
    report = CrawlReport()
    for result in results:
        if isinstance(result, HtmlResult):
            report.pages.append({"url": result.url, "links": list(result.links)})
        elif isinstance(result, FileResult):
            report.files.append(
                {"url": result.url, "content_type": result.content_type, "size": len(result.content)}
            )
        elif isinstance(result, ErrorResult):
            report.errors.append({"url": result.url, "error": result.error})
        else:
            raise TypeError(f"Неизвестный тип результата: {type(result).__name__}")
    return report

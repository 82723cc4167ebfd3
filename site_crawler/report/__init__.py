"""site_crawler.report: сохранение отчётов об обходе."""

from site_crawler.report.json_report import render_json

__all__ = ["render_json"]

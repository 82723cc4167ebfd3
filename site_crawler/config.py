# === FILE: site_crawler/config.py ===
"""
Загрузка и валидация конфигурации краулера SiteCrawler.
Схема описана моделью Pydantic; источник — YAML/JSON-файл и/или явные переопределения.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from site_crawler.utils import DomainFilter


class CrawlerConfig(BaseModel):
    """Конфигурация одного обхода."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    seed_url: str = Field(..., min_length=1, description="Стартовый URL; его хост задаёт домен обхода.")
    fetch_timeout: float = Field(30.0, gt=0, description="Таймаут на один запрос (секунд).")
    politeness_delay: float = Field(0.001, ge=0, description="Пауза между запросами (секунд).")
    user_agent: str = Field("SiteCrawler/0.1", min_length=1, description="Заголовок User-Agent.")

    @field_validator("seed_url")
    @classmethod
    def _check_seed(cls, v: str) -> str:
        DomainFilter.from_seed(v)
        return v


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None] = None, **overrides: Any) -> CrawlerConfig:
    """
    Читает YAML или JSON (если задан path), накладывает непустые overrides
    и возвращает проверенный CrawlerConfig.
    """
    data: dict[str, Any] = {}
    if path is not None:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

        suffix = path_obj.suffix.lower()
        if suffix in (".yaml", ".yml"):
            data = _read_yaml(path_obj)
        elif suffix == ".json":
            data = _read_json(path_obj)
        else:
            raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")

    data.update({key: value for key, value in overrides.items() if value is not None})
    return CrawlerConfig(**data)

# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from site_crawler.config import CrawlerConfig, load_config


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("seed_url: http://example.com\nfetch_timeout: 5", ".yaml", None),
        (json.dumps({"seed_url": "http://example.com", "fetch_timeout": 5}), ".json", None),
        ("{}", ".json", ValidationError),
        ("not: a: mapping", ".yaml", ValueError),
        ("- just\n- a list", ".yml", TypeError),
        ("{broken", ".json", ValueError),
        ("seed_url = 'x'", ".toml", ValueError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, CrawlerConfig)
        assert cfg.seed_url == "http://example.com"
        assert cfg.fetch_timeout == 5


def test_defaults():
    cfg = CrawlerConfig(seed_url="https://example.com/")
    assert cfg.fetch_timeout == 30.0
    assert cfg.politeness_delay == 0.001
    assert cfg.user_agent


def test_overrides_win_over_file(tmp_path):
    cfg_path = write_file(tmp_path, "seed_url: http://example.com\npoliteness_delay: 1", ".yaml")
    cfg = load_config(cfg_path, seed_url="https://other.com/", politeness_delay=None)
    assert cfg.seed_url == "https://other.com/"
    assert cfg.politeness_delay == 1


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.yaml")


@pytest.mark.parametrize(
    "field,value",
    [
        ("seed_url", "example.com/no-scheme"),
        ("seed_url", "ftp://example.com/"),
        ("seed_url", "http://example.com:abc/"),
        ("fetch_timeout", 0),
        ("politeness_delay", -1),
        ("user_agent", ""),
        ("max_depth", 3),
    ],
)
def test_invalid_values(field, value):
    data = {"seed_url": "https://example.com/", field: value}
    with pytest.raises(ValidationError):
        CrawlerConfig(**data)


def test_config_is_frozen():
    cfg = CrawlerConfig(seed_url="https://example.com/")
    with pytest.raises(ValidationError):
        cfg.fetch_timeout = 1.0

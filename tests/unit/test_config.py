from pathlib import Path

import pytest

from nuget_client.core.config import DEFAULT_INDEX_URL_V3, Config


def test_load_reads_environment(monkeypatch):
    monkeypatch.setenv("NUGET_DEFAULT_INDEX_URL", "https://feed.example.org/v3/index.json")
    monkeypatch.setenv("NUGET_DEFAULT_PAGE_SIZE", "25")
    monkeypatch.setenv("NUGET_REQUEST_TIMEOUT", "0")
    monkeypatch.setenv("NUGET_CONFIG_PATH", "/etc/nuget/NuGet.Config")
    monkeypatch.setenv("NUGET_LOG_LEVEL", "debug")

    cfg = Config.load()

    assert cfg.default_index_url == "https://feed.example.org/v3/index.json"
    assert cfg.default_page_size == 25
    assert cfg.request_timeout is None
    assert cfg.nuget_config_path == Path("/etc/nuget/NuGet.Config")
    assert cfg.log_level == "DEBUG"


def test_defaults_are_valid():
    cfg = Config()
    assert cfg.default_index_url == DEFAULT_INDEX_URL_V3
    assert cfg.default_page_size == 10
    assert cfg.request_timeout == 30.0
    assert cfg.validate() == []


def test_validate_reports_problems():
    cfg = Config(default_index_url="ftp://x", default_page_size=0, request_timeout_seconds=-1)
    assert len(cfg.validate()) == 3


def test_config_is_frozen():
    cfg = Config()
    with pytest.raises(AttributeError):
        cfg.default_page_size = 5

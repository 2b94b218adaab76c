from pathlib import Path

import pytest

from doccatalog.config import load_config

ENV_KEYS = (
    "DOCCATALOG_LOCALE",
    "DOCCATALOG_LOG_LEVEL",
    "DOCCATALOG_ID_STRATEGY",
    "DOCCATALOG_START_DIR",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults() -> None:
    config = load_config()

    assert config.locale == "ru"
    assert config.log_level == "INFO"
    assert config.id_strategy == "uuid"
    assert config.start_dir == Path.cwd()


def test_reads_environment(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("DOCCATALOG_LOCALE", "en-US")
    monkeypatch.setenv("DOCCATALOG_LOG_LEVEL", "debug")
    monkeypatch.setenv("DOCCATALOG_ID_STRATEGY", "COUNTER")
    monkeypatch.setenv("DOCCATALOG_START_DIR", str(tmp_path))

    config = load_config()

    assert config.locale == "en"
    assert config.log_level == "DEBUG"
    assert config.id_strategy == "counter"
    assert config.start_dir == tmp_path


def test_invalid_values_fall_back_with_warning(monkeypatch, caplog) -> None:
    monkeypatch.setenv("DOCCATALOG_LOG_LEVEL", "chatty")
    monkeypatch.setenv("DOCCATALOG_ID_STRATEGY", "random")
    monkeypatch.setenv("DOCCATALOG_LOCALE", "")

    config = load_config()

    assert config.log_level == "INFO"
    assert config.id_strategy == "uuid"
    assert config.locale == "ru"
    assert "DOCCATALOG_ID_STRATEGY" in caplog.text


def test_override_ignores_none(tmp_path) -> None:
    config = load_config()

    changed = config.override(locale="en_GB", start_dir=str(tmp_path), id_strategy=None)

    assert changed.locale == "en"
    assert changed.start_dir == tmp_path
    assert changed.id_strategy == config.id_strategy

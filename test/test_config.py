import sys
from pathlib import Path

import pytest
from loguru import logger

from songtable.config import get_config
from songtable.errors import InvalidEnvironmentVariableError
from songtable.logsetup import setup_logger


def test_config_defaults() -> None:
    config = get_config()
    assert config.log_level == "INFO"
    assert config.log_file is None


def test_config_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SONGTABLE_LOG_LEVEL", "debug")
    monkeypatch.setenv("SONGTABLE_LOG_FILE", "songtable.log")
    config = get_config()
    assert config.log_level == "DEBUG"
    assert config.log_file == "songtable.log"


def test_config_is_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    first = get_config()
    monkeypatch.setenv("SONGTABLE_LOG_LEVEL", "ERROR")
    assert get_config() is first
    assert get_config().log_level == "INFO"


def test_config_invalid_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SONGTABLE_LOG_LEVEL", "LOUD")
    with pytest.raises(InvalidEnvironmentVariableError):
        get_config()


def test_setup_logger_file_sink(tmp_path: Path) -> None:
    log_file = tmp_path / "songtable.log"
    setup_logger(logger, "INFO", str(log_file))
    try:
        logger.debug("below the level")
        logger.info("Wrote {} songs", 5)
    finally:
        logger.remove()
        logger.add(sys.stderr)

    written = log_file.read_text(encoding="utf-8")
    assert "Wrote 5 songs" in written
    assert "below the level" not in written

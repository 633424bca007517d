import os

from loguru import logger

from songtable.errors import InvalidEnvironmentVariableError

DEFAULT_INPUT_PATH = "./songs.csv"
DEFAULT_FILTERED_PATH = "./songs_new.csv"
LOCAL_ARTISTS_PATH = "russian_artists.txt"
FOREIGN_ARTISTS_PATH = "foreign_artists.txt"

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Config:
    def __init__(self) -> None:
        self._log_level: str = os.environ.get("SONGTABLE_LOG_LEVEL", "INFO").upper()
        if self._log_level not in LOG_LEVELS:
            raise InvalidEnvironmentVariableError(
                "SONGTABLE_LOG_LEVEL", self._log_level
            )
        logger.debug("log_level={}", self._log_level)

        self._log_file: str | None = os.environ.get("SONGTABLE_LOG_FILE") or None
        logger.debug("log_file={}", self._log_file)

    @property
    def log_level(self) -> str:
        return self._log_level

    @property
    def log_file(self) -> str | None:
        return self._log_file


_config: Config | None = None


def get_config() -> Config:
    global _config  # noqa: PLW0603
    if not _config:
        _config = Config()
    return _config

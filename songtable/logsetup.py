import sys

from loguru import logger


def setup_logger(
    loguru_logger: logger, level: str = "INFO", log_file: str | None = None
) -> None:
    loguru_logger.remove()
    # stdout belongs to the tools (prompts, counts), logs go to stderr
    loguru_logger.add(sys.stderr, colorize=True, level=level)
    if log_file:
        loguru_logger.add(log_file, level=level, encoding="utf-8")

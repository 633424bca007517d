from collections.abc import Callable, Iterator
from pathlib import Path
from typing import TypeVar

from loguru import logger

from songtable.data import Song, parse_song

T = TypeVar("T")

DEFAULT_DELIMITER = ";"
DEFAULT_HEADER_ROW_COUNT = 1


def load_data(
    filepath: str | Path,
    parser: Callable[[list[str]], T],
    delimiter: str = DEFAULT_DELIMITER,
    header_row_count: int = DEFAULT_HEADER_ROW_COUNT,
) -> Iterator[T]:
    # Header lines are dropped unparsed, fields split as-is with no quoting.
    # The file stays open only while the iterator is being consumed.
    logger.debug("Reading rows from: {}", filepath)
    with Path(filepath).open("r", encoding="utf-8-sig") as file_in:
        for line_number, line in enumerate(file_in, start=1):
            if line_number <= header_row_count:
                continue

            row = line.rstrip("\r\n")
            if not row:
                continue

            try:
                record = parser(row.split(delimiter))
            except (IndexError, ValueError) as error:
                error.add_note(f"Line {line_number} of {filepath}")
                logger.error("Failed to parse line {} of {}", line_number, filepath)
                raise
            yield record


def load_songs(
    filepath: str | Path,
    delimiter: str = DEFAULT_DELIMITER,
    header_row_count: int = DEFAULT_HEADER_ROW_COUNT,
) -> Iterator[Song]:
    return load_data(filepath, parse_song, delimiter, header_row_count)

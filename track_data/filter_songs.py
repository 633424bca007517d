import sys
from collections.abc import Iterable, Iterator, Sequence
from datetime import date
from pathlib import Path
from typing import TextIO

from loguru import logger

from songtable.config import DEFAULT_FILTERED_PATH, DEFAULT_INPUT_PATH, get_config
from songtable.data import ARTIST_SEPARATOR, Song, parse_date
from songtable.loader import load_songs
from songtable.logsetup import setup_logger

CUTOFF_DATE = parse_date("01.01.2002")
FALLBACK_MULTIPLIER = 10_000

OUTPUT_SEPARATOR = " - "
OUTPUT_HEADER = OUTPUT_SEPARATOR.join(["track_name", "artist_name", "streams"])


def normalize_artist_name(artists: Sequence[str]) -> str:
    if len(artists) == 1:
        return artists[0]
    return ARTIST_SEPARATOR.join(artists)


def fallback_view_count(song: Song, base_date: date = CUTOFF_DATE) -> int:
    # Truncating division, empty artist plus empty title raises ZeroDivisionError
    elapsed_days = abs(base_date.toordinal() - song.release_date.toordinal())
    name_length = len(normalize_artist_name(song.artists)) + len(song.name)
    return (elapsed_days // name_length) * FALLBACK_MULTIPLIER


def filter_songs(songs: Iterable[Song], cutoff: date = CUTOFF_DATE) -> Iterator[Song]:
    for song in songs:
        if song.release_date > cutoff:
            continue

        if song.view_count == 0:
            yield song.with_view_count(fallback_view_count(song, cutoff))
        else:
            yield song


def format_song(song: Song) -> str:
    # Only the first artist makes it into the output
    return OUTPUT_SEPARATOR.join([song.name, song.artists[0], str(song.view_count)])


def write_songs(songs: Iterable[Song], csv_out: TextIO) -> int:
    csv_out.write(f"{OUTPUT_HEADER}\n")
    written = 0
    for song in songs:
        csv_out.write(f"{format_song(song)}\n")
        written += 1
    return written


def main(
    in_path: str = DEFAULT_INPUT_PATH, out_path: str = DEFAULT_FILTERED_PATH
) -> int:
    logger.info(
        "Filtering songs released on or before {} from {}", CUTOFF_DATE, in_path
    )
    with Path(out_path).open("w", encoding="utf-8") as csv_out:
        try:
            written = write_songs(filter_songs(load_songs(in_path)), csv_out)
        except (OSError, ValueError, ZeroDivisionError):
            logger.error("Filtering {} into {} failed", in_path, out_path)
            raise
    logger.info("Wrote {} songs to {}", written, out_path)
    return written


def paths_from_args(args: Sequence[str]) -> tuple[str, str]:
    in_path, out_path = DEFAULT_INPUT_PATH, DEFAULT_FILTERED_PATH
    if len(args) == 1:
        in_path = args[0]
    elif len(args) == 2:  # noqa: PLR2004
        in_path, out_path = args
    return in_path, out_path


def cli() -> None:
    config = get_config()
    setup_logger(logger, config.log_level, config.log_file)
    main(*paths_from_args(sys.argv[1:]))


if __name__ == "__main__":
    cli()

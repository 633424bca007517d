from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from songtable.config import (
    DEFAULT_INPUT_PATH,
    FOREIGN_ARTISTS_PATH,
    LOCAL_ARTISTS_PATH,
    get_config,
)
from songtable.data import Song
from songtable.loader import load_songs
from songtable.logsetup import setup_logger

# Lowercase only, "ДДТ" has no match and counts as foreign
LOCAL_ALPHABET = "абвгдеёжзийклмнопрстуфхцчшщъыьэюя"


@dataclass
class ArtistPartition:
    local: list[str] = field(default_factory=list)
    foreign: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.local) + len(self.foreign)


def is_local_name(artist: str) -> bool:
    return any(char in LOCAL_ALPHABET for char in artist)


def partition_artists(songs: Iterable[Song]) -> ArtistPartition:
    # Exact string dedup, "Кино" and "кино " are two artists
    partition = ArtistPartition()
    placed: set[str] = set()
    for song in songs:
        for artist in song.artists:
            if artist in placed:
                continue
            placed.add(artist)

            if is_local_name(artist):
                partition.local.append(artist)
            else:
                partition.foreign.append(artist)
    return partition


def append_lines(filepath: str | Path, lines: Iterable[str]) -> None:
    with Path(filepath).open("a", encoding="utf-8") as file_out:
        for line in lines:
            file_out.write(f"{line}\n")


def main(
    in_path: str = DEFAULT_INPUT_PATH,
    local_path: str = LOCAL_ARTISTS_PATH,
    foreign_path: str = FOREIGN_ARTISTS_PATH,
) -> ArtistPartition:
    logger.info("Splitting artists from {}", in_path)
    partition = partition_artists(load_songs(in_path))

    print(f"Local artists: {len(partition.local)}")  # noqa: T201
    print(f"Foreign artists: {len(partition.foreign)}")  # noqa: T201

    append_lines(local_path, partition.local)
    append_lines(foreign_path, partition.foreign)
    logger.info("Appended artists to {} and {}", local_path, foreign_path)
    return partition


def cli() -> None:
    config = get_config()
    setup_logger(logger, config.log_level, config.log_file)
    main()


if __name__ == "__main__":
    cli()

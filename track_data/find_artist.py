import sys
import time
from collections.abc import Callable, Sequence

from loguru import logger

from songtable.config import DEFAULT_INPUT_PATH, get_config
from songtable.data import Song
from songtable.loader import load_songs
from songtable.logsetup import setup_logger

EXIT_TOKEN = "0"
PROMPT = "Enter an artist name: "
# Consecutive end-of-input reads tolerated before giving up on a closed stdin
MAX_CLOSED_READS = 100


def find_song_by_artist(songs: Sequence[Song], artist_name: str) -> Song | None:
    # O(n) scan, first exact (case-sensitive) match wins
    return next((song for song in songs if artist_name in song.artists), None)


def lookup_loop(
    songs: Sequence[Song],
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> int:
    # Blank lines and end of input re-prompt, only the exit token ends the loop
    write(f"Type {EXIT_TOKEN} to exit")
    lookups = 0
    closed_reads = 0
    while True:
        try:
            user_input = read_line(PROMPT)
        except EOFError:
            closed_reads += 1
            if closed_reads >= MAX_CLOSED_READS:
                logger.error("Input stayed closed for {} reads", closed_reads)
                raise
            continue
        closed_reads = 0

        if user_input == EXIT_TOKEN:
            break
        if not user_input:
            continue

        lookups += 1
        song = find_song_by_artist(songs, user_input)
        if song is None:
            write(f"Nothing found for {user_input}")
            continue
        write(f"Found a song by {user_input}: {song.name}")

    return lookups


def main(in_path: str = DEFAULT_INPUT_PATH) -> None:
    print(f"Loading songs from {in_path}, please wait...")  # noqa: T201
    started = time.perf_counter()
    songs = list(load_songs(in_path))
    elapsed_ms = (time.perf_counter() - started) * 1000
    print(f"Done! Loaded {len(songs)} songs in {elapsed_ms:.2f} ms")  # noqa: T201

    lookups = lookup_loop(songs, read_line=input, write=print)
    logger.debug("Finished after {} lookups", lookups)
    print("Goodbye")  # noqa: T201


def cli() -> None:
    config = get_config()
    setup_logger(logger, config.log_level, config.log_file)
    args = sys.argv[1:]
    main(args[0] if len(args) == 1 else DEFAULT_INPUT_PATH)


if __name__ == "__main__":
    cli()

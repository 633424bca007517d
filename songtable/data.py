import re
from collections.abc import Sequence
from dataclasses import dataclass, replace
from datetime import date, datetime

from songtable.errors import MalformedRowError

ARTIST_SEPARATOR = " & "
DATE_FORMAT = "%d.%m.%Y"
# ASCII digits only, an optional plus sign and surrounding whitespace
STREAMS_PATTERN = re.compile(r"\s*\+?\d+\s*", re.ASCII)
MAX_STREAMS = 2**64 - 1

# Column order in the source table: streams;artist_name;track_name;date
STREAMS_COLUMN = 0
ARTIST_COLUMN = 1
TRACK_COLUMN = 2
DATE_COLUMN = 3


@dataclass(frozen=True)
class Song:
    name: str
    # Never empty once parsed, an empty field gives ("",)
    artists: tuple[str, ...]
    # 0 means the source had no stream count
    view_count: int
    release_date: date

    def with_view_count(self, view_count: int) -> "Song":
        return replace(self, view_count=view_count)


def parse_date(raw: str) -> date:
    return datetime.strptime(raw.strip(), DATE_FORMAT).date()  # noqa: DTZ007


def parse_streams(raw: str) -> int:
    if not STREAMS_PATTERN.fullmatch(raw):
        raise ValueError(f"invalid stream count {raw!r}")
    view_count = int(raw)
    if view_count > MAX_STREAMS:
        raise ValueError(f"stream count {view_count} is out of range")
    return view_count


def parse_song(columns: Sequence[str]) -> Song:
    try:
        view_count = parse_streams(columns[STREAMS_COLUMN])
        artists = tuple(columns[ARTIST_COLUMN].split(ARTIST_SEPARATOR))
        name = columns[TRACK_COLUMN]
        release_date = parse_date(columns[DATE_COLUMN])
    except (IndexError, ValueError) as error:
        raise MalformedRowError(columns, str(error)) from error

    return Song(
        name=name,
        artists=artists,
        view_count=view_count,
        release_date=release_date,
    )

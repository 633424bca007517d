from collections.abc import Iterator
from datetime import date
from pathlib import Path

import pytest
from pytest_socket import disable_socket

from songtable import config
from songtable.data import Song

PATH_SHORT_DATA = Path(__file__).parent / "data" / "songs_short.csv"


def pytest_runtest_setup() -> None:
    disable_socket()


@pytest.fixture(autouse=True)
def reset_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv("SONGTABLE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("SONGTABLE_LOG_FILE", raising=False)
    monkeypatch.setattr(config, "_config", None)
    yield


@pytest.fixture
def short_songs_path() -> Path:
    return PATH_SHORT_DATA


@pytest.fixture
def write_csv(tmp_path: Path):  # noqa: ANN201
    def _write(lines: list[str], name: str = "songs.csv") -> Path:
        csv_path = tmp_path / name
        csv_path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return csv_path

    return _write


@pytest.fixture
def fake_songs() -> list[Song]:
    return [
        Song(
            name=f"track-{i}",
            artists=(f"artist-{i}", "shared-artist"),
            view_count=i,
            release_date=date(2000, 1, i + 1),
        )
        for i in range(5)
    ]

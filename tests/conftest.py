"""Shared fixtures for Podcast Explorer tests."""

import json
import logging
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import httpx
import pytest

from podexplorer.catalog.models import PodcastDetail, PodcastSummary
from podexplorer.ui.theme import reset_theme

API_BASE_URL = "https://podcast-api.test"

# Listed out of alphabetical order on purpose
CATALOG_TITLES = [
    "Quiet Hours",
    "Apollo Stories",
    "Mystery Lane",
    "Business Brew",
    "Hidden History",
    "Kids Corner",
    "Zebra Talk",
    "Everyday Comedy",
    "News at Nine",
    "Laugh Track",
    "Fiction Factory",
    "Deep Dive",
    "Garden Gossip",
    "Investigated",
    "Open Mic",
    "Jazz Notes",
    "Ocean Voices",
    "Campfire Tales",
    "Retro Radio",
    "Wild Ideas",
]

# ids whose podcasts are tagged with genre 5 (Entertainment)
ENTERTAINMENT_IDS = {"3", "11", "17"}


def summary_payload(
    podcast_id: str,
    title: str,
    genres: list[Any] | None = None,
    updated: str = "2023-01-01T00:00:00.000Z",
    seasons: int = 1,
) -> dict[str, Any]:
    """Build a listing record the way the API returns it."""
    return {
        "id": podcast_id,
        "title": title,
        "description": f"All about {title}.",
        "seasons": seasons,
        "image": f"https://images.example.com/{podcast_id}.jpg",
        "genres": [1] if genres is None else genres,
        "updated": updated,
    }


def detail_payload(
    podcast_id: str = "10716",
    title: str = "Something Was Wrong",
    season_numbers: tuple[int, ...] = (1, 2),
    episodes_per_season: int = 2,
) -> dict[str, Any]:
    """Build a detail record the way the API returns it."""
    return {
        "id": podcast_id,
        "title": title,
        "description": "An award-winning docuseries.",
        "image": f"https://images.example.com/{podcast_id}.jpg",
        "genres": ["Investigative Journalism", "History"],
        "updated": "2022-11-03T07:00:00.000Z",
        "seasons": [
            {
                "season": number,
                "title": f"Season {number}",
                "image": f"https://images.example.com/{podcast_id}-s{number}.jpg",
                "episodes": [
                    {
                        "title": f"S{number} Episode {ep}",
                        "description": f"Episode {ep} of season {number}.",
                        "episode": ep,
                        "file": "https://podcast-api.netlify.app/placeholder-audio.mp3",
                    }
                    for ep in range(1, episodes_per_season + 1)
                ],
            }
            for number in season_numbers
        ],
    }


@pytest.fixture
def catalog_payload() -> list[dict[str, Any]]:
    """Twenty listing records; ids 3, 11 and 17 are Entertainment (genre 5)."""
    records = []
    for index, title in enumerate(CATALOG_TITLES, 1):
        podcast_id = str(index)
        genres = [5, 1] if podcast_id in ENTERTAINMENT_IDS else [1 + index % 4]
        records.append(
            summary_payload(
                podcast_id,
                title,
                genres=genres,
                updated=f"2023-03-{index:02d}T12:00:00.000Z",
                seasons=1 + index % 3,
            )
        )
    return records


@pytest.fixture
def catalog(catalog_payload: list[dict[str, Any]]) -> list[PodcastSummary]:
    return [PodcastSummary.model_validate(record) for record in catalog_payload]


@pytest.fixture
def detail() -> PodcastDetail:
    return PodcastDetail.model_validate(detail_payload())


@pytest.fixture
def api_routes(catalog_payload: list[dict[str, Any]]) -> dict[str, Any]:
    """Mutable route table for the mocked API: path -> payload or status code."""
    return {
        "/": catalog_payload,
        "/id/10716": detail_payload(),
    }


@pytest.fixture
def mock_transport(api_routes: dict[str, Any]) -> httpx.MockTransport:
    """httpx transport serving ``api_routes``; unknown paths return 404.

    An ``int`` route value is returned as a bare status code, a ``str`` as a
    raw (non-JSON) body.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        route = api_routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"error": "not found"})
        if isinstance(route, int):
            return httpx.Response(route)
        if isinstance(route, str):
            return httpx.Response(200, content=route.encode())
        return httpx.Response(200, content=json.dumps(route).encode())

    return httpx.MockTransport(handler)


@pytest.fixture
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the config directory at a temporary path."""
    directory = tmp_path / "config"
    monkeypatch.setenv("PODEXPLORER_CONFIG_DIR", str(directory))
    return directory


@pytest.fixture(autouse=True)
def _reset_theme() -> None:
    reset_theme()


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Undo handlers installed by setup_logging (the CLI callback runs it)."""
    yield
    logger = logging.getLogger("podexplorer")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def make_summary_payload() -> Callable[..., dict[str, Any]]:
    return summary_payload


@pytest.fixture
def make_detail_payload() -> Callable[..., dict[str, Any]]:
    return detail_payload

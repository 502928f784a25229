import sys
from pathlib import Path
from typing import List, Optional

import pytest

# Ensure root path is available for imports
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from rutracker_anime.models.torrent import AnimeTorrent  # noqa: E402
from rutracker_anime.scrapers.torapi.base import SearchConfig  # noqa: E402
from rutracker_anime.utils.http_client import HTTPClient  # noqa: E402

BASE_URL = "https://torapi.test/api"
SEARCH_URL = f"{BASE_URL}/search/title/rutracker"
DETAIL_URL = f"{BASE_URL}/search/id/rutracker"


@pytest.fixture(autouse=True)
def reset_http_client():
    """Each test gets a fresh shared AsyncClient bound to its own event loop."""
    http_client = HTTPClient()
    http_client._client = None
    yield
    http_client._client = None


@pytest.fixture
def search_config() -> SearchConfig:
    return SearchConfig(base_url=BASE_URL, source="rutracker")


def make_candidate(item_id, name: str = "Show", category: str = "Аниме (HD Video)", **overrides) -> dict:
    candidate = {
        "Id": item_id,
        "Name": name,
        "Size": "1.5 GB",
        "Seeds": 12,
        "Peers": 3,
        "Date": "25-Dec-25",
        "Category": category,
        "Url": f"https://rutracker.org/forum/viewtopic.php?t={item_id}",
        "Torrent": f"https://rutracker.org/forum/dl.php?t={item_id}",
        "Download_Count": 100,
    }
    candidate.update(overrides)
    return candidate


def make_torrent(name: str, magnet: Optional[str] = None, info_hash: str = "") -> AnimeTorrent:
    return AnimeTorrent(
        name=name,
        date="2025-12-25T00:00:00+00:00",
        size=1024,
        formatted_size="1 KB",
        magnet_link=magnet if magnet is not None else f"magnet:?xt=urn:btih:{name}",
        info_hash=info_hash,
    )


class FakeAssembler:
    """Records the queries it receives and returns a fixed result list."""

    def __init__(self, results: Optional[List[AnimeTorrent]] = None):
        self.results = results or []
        self.queries: List[str] = []

    async def fetch_results(self, query):
        self.queries.append(query)
        return list(self.results)

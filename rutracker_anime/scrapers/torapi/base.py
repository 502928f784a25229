from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

import httpx
from pydantic import ValidationError

from rutracker_anime.config.settings import Settings, settings
from rutracker_anime.models.torrent import RawCandidate, RemoteDetail
from rutracker_anime.utils.http_client import HTTPClient, http_client
from rutracker_anime.utils.logger import scraper_logger
from rutracker_anime.utils.outcome import Failure, Outcome, Success


# ===========================
# Search Configuration
# ===========================
@dataclass(frozen=True)
class SearchConfig:
    base_url: str = "https://torapi.vercel.app/api"
    source: str = "rutracker"
    page: int = 0
    max_results: int = 10
    category_markers: Tuple[str, ...] = field(default=("Аниме", "Онгоинги"))

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None) -> "SearchConfig":
        config = config or settings
        return cls(
            base_url=config.TORAPI_URL,
            source=config.TORAPI_SOURCE,
            page=config.SEARCH_PAGE,
            max_results=config.SEARCH_MAX_RESULTS,
            category_markers=tuple(config.ANIME_CATEGORY_MARKERS)
        )

    @property
    def search_url(self) -> str:
        return f"{self.base_url}/search/title/{self.source}"

    @property
    def detail_url(self) -> str:
        return f"{self.base_url}/search/id/{self.source}"


# ===========================
# Base TorAPI Client Class
# ===========================
class BaseTorAPI:

    def __init__(self, config: Optional[SearchConfig] = None, client: Optional[HTTPClient] = None):
        self.config = config or SearchConfig.from_settings()
        self.client = client or http_client

    async def _fetch_list(self, url: str, params: dict) -> Outcome[List[Any]]:
        try:
            data = await self.client.get_json(url, params=params)
        except httpx.HTTPStatusError as e:
            return Failure(f"HTTP {e.response.status_code}")
        except httpx.HTTPError as e:
            return Failure(f"transport error: {type(e).__name__}")
        except ValueError:
            return Failure("invalid JSON")

        if not isinstance(data, list):
            return Failure(f"expected list, got {type(data).__name__}")

        return Success(data)

    async def search_by_title(self, query: str) -> Outcome[List[RawCandidate]]:
        query = (query or "").strip()
        if not query:
            return Success([])

        params = {"query": query, "page": self.config.page}
        scraper_logger.debug(f"Searching title: '{query}'")

        outcome = await self._fetch_list(self.config.search_url, params)
        if isinstance(outcome, Failure):
            scraper_logger.debug(f"Search failed for '{query}': {outcome.reason}")
            return outcome

        candidates = []
        for item in outcome.value:
            if not isinstance(item, dict):
                continue
            try:
                candidates.append(RawCandidate.model_validate(item))
            except ValidationError:
                scraper_logger.debug(f"Skipping malformed search item: {item.get('Id')}")
                continue

        scraper_logger.debug(f"Found {len(candidates)} results for '{query}'")
        return Success(candidates)

    async def get_details(self, item_id: Optional[str]) -> Outcome[RemoteDetail]:
        if not item_id:
            return Failure("missing identifier")

        outcome = await self._fetch_list(self.config.detail_url, {"query": item_id})
        if isinstance(outcome, Failure):
            scraper_logger.debug(f"Detail lookup failed for {item_id}: {outcome.reason}")
            return outcome

        if not outcome.value:
            return Failure("empty detail list")

        first = outcome.value[0]
        if not isinstance(first, dict):
            return Failure("malformed detail")

        try:
            detail = RemoteDetail.model_validate(first)
        except ValidationError:
            return Failure("malformed detail")

        if not detail.magnet:
            scraper_logger.debug(f"No magnet for {item_id}")
            return Failure("no magnet")

        return Success(detail)

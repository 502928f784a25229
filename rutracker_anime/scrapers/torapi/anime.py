from typing import List

from rutracker_anime.models.torrent import RawCandidate
from rutracker_anime.scrapers.torapi.base import BaseTorAPI
from rutracker_anime.utils.logger import scraper_logger
from rutracker_anime.utils.outcome import Failure, Outcome, Success


# ===========================
# Anime Scraper Class
# ===========================
class AnimeScraper(BaseTorAPI):

    def is_anime_category(self, candidate: RawCandidate) -> bool:
        category = candidate.category or ""
        return any(marker in category for marker in self.config.category_markers)

    def filter_candidates(self, candidates: List[RawCandidate]) -> List[RawCandidate]:
        anime_candidates = [candidate for candidate in candidates if self.is_anime_category(candidate)]
        return anime_candidates[:self.config.max_results]

    async def search(self, query: str) -> Outcome[List[RawCandidate]]:
        outcome = await self.search_by_title(query)
        if isinstance(outcome, Failure):
            return outcome

        filtered = self.filter_candidates(outcome.value)
        scraper_logger.debug(f"Anime category filter: {len(outcome.value)} → {len(filtered)}")
        return Success(filtered)


# ===========================
# Singleton Instance
# ===========================
anime_scraper = AnimeScraper()

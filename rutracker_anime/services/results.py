import asyncio
from typing import List, Optional

from rutracker_anime.models.torrent import AnimeTorrent, RawCandidate, RemoteDetail
from rutracker_anime.scrapers.torapi.anime import AnimeScraper, anime_scraper
from rutracker_anime.utils.helpers import normalize_date, parse_size_to_bytes, safe_int
from rutracker_anime.utils.logger import pipeline_logger
from rutracker_anime.utils.outcome import Failure, Success


# ===========================
# Result Assembler Class
# ===========================
class ResultAssembler:
    """Search, resolve every candidate's magnet concurrently, and build normalized records.

    Never raises: failed searches degrade to an empty list and candidates whose
    detail lookup fails are dropped while the survivors keep their order.
    """

    def __init__(self, scraper: Optional[AnimeScraper] = None):
        self.scraper = scraper or anime_scraper

    @staticmethod
    def build_torrent(candidate: RawCandidate, detail: RemoteDetail) -> AnimeTorrent:
        return AnimeTorrent(
            name=candidate.name,
            date=normalize_date(candidate.date),
            size=parse_size_to_bytes(candidate.size),
            formatted_size=candidate.size,
            seeders=safe_int(candidate.seeds),
            leechers=safe_int(candidate.peers),
            download_count=safe_int(candidate.download_count),
            link=candidate.url or "",
            magnet_link=detail.magnet,
            info_hash=detail.hash or "",
            is_batch=False,
            episode_number=-1,
            is_best_release=False,
            confirmed=False
        )

    async def fetch_results(self, query: Optional[str]) -> List[AnimeTorrent]:
        query = (query or "").strip()
        if not query:
            return []

        try:
            search_outcome = await self.scraper.search(query)
            if isinstance(search_outcome, Failure):
                pipeline_logger.debug(f"No candidates for '{query}': {search_outcome.reason}")
                return []

            candidates = search_outcome.value
            if not candidates:
                pipeline_logger.debug(f"No anime candidates for '{query}'")
                return []

            detail_tasks = [self.scraper.get_details(candidate.id) for candidate in candidates]
            detail_outcomes = await asyncio.gather(*detail_tasks, return_exceptions=True)

            results = []
            for candidate, outcome in zip(candidates, detail_outcomes):
                if isinstance(outcome, Exception):
                    pipeline_logger.error(f"Detail lookup error for {candidate.id}: {type(outcome).__name__}")
                    continue

                if not isinstance(outcome, Success) or not outcome.value.magnet:
                    continue

                try:
                    results.append(self.build_torrent(candidate, outcome.value))
                except Exception as e:
                    pipeline_logger.error(f"Record build error for {candidate.id}: {type(e).__name__}")
                    continue

            pipeline_logger.debug(f"Assembled {len(results)}/{len(candidates)} torrents for '{query}'")
            return results

        except Exception as e:
            pipeline_logger.error(f"fetch_results error for '{query}': {type(e).__name__}")
            return []


# ===========================
# Singleton Instance
# ===========================
result_assembler = ResultAssembler()

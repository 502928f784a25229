from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from rutracker_anime.config.settings import settings
from rutracker_anime.models.torrent import AnimeTorrent, ProviderSettings, SmartSearchOptions
from rutracker_anime.services.results import ResultAssembler, result_assembler
from rutracker_anime.utils.filters import filter_by_episode
from rutracker_anime.utils.logger import provider_logger


# ===========================
# Anime Torrent Provider Class
# ===========================
class Provider:

    def __init__(self, assembler: Optional[ResultAssembler] = None):
        self.assembler = assembler or result_assembler

    async def get_settings(self) -> ProviderSettings:
        return ProviderSettings.model_validate(settings.PROVIDER_SETTINGS)

    async def search(self, query: Optional[str]) -> List[AnimeTorrent]:
        provider_logger.info(f"Search: '{query}'")
        results = await self.assembler.fetch_results(query)
        provider_logger.info(f"Search '{query}': {len(results)} torrents")
        return results

    async def smart_search(self, options: Union[SmartSearchOptions, Dict[str, Any], None] = None, **kwargs) -> List[AnimeTorrent]:
        if options is None:
            options = SmartSearchOptions.model_validate(kwargs)
        elif isinstance(options, dict):
            options = SmartSearchOptions.model_validate(options)

        query = options.resolve_query()
        provider_logger.info(f"SmartSearch: '{query}' (episode: {options.episode_number}, batch: {options.batch})")

        results = await self.assembler.fetch_results(query)

        if options.episode_number > 0 and not options.batch:
            results = filter_by_episode(results, options.episode_number)

        provider_logger.info(f"SmartSearch '{query}': {len(results)} torrents")
        return results

    async def get_latest(self) -> List[AnimeTorrent]:
        year = settings.LATEST_QUERY_YEAR or datetime.now().year
        query = f"{settings.LATEST_QUERY_TERM} {year}"
        provider_logger.info(f"Latest: '{query}'")
        return await self.assembler.fetch_results(query)

    async def get_torrent_info_hash(self, torrent: AnimeTorrent) -> str:
        return torrent.info_hash or ""

    async def get_torrent_magnet_link(self, torrent: AnimeTorrent) -> str:
        return torrent.magnet_link or ""


# ===========================
# Provider Instance
# ===========================
provider = Provider()

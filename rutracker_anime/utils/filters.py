from typing import List

from rutracker_anime.models.torrent import AnimeTorrent
from rutracker_anime.utils.helpers import format_episode_marker
from rutracker_anime.utils.logger import provider_logger


# ===========================
# Episode Filtering
# ===========================
def filter_by_episode(results: List[AnimeTorrent], episode_number: int) -> List[AnimeTorrent]:
    if episode_number <= 0:
        return results

    marker = format_episode_marker(episode_number)
    filtered_results = [result for result in results if marker in result.name]

    provider_logger.debug(f"Episode filter ({marker}): {len(results)} → {len(filtered_results)}")
    return filtered_results

from typing import List

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from rutracker_anime.models.torrent import AnimeTorrent, SmartSearchOptions
from rutracker_anime.services.provider import provider
from rutracker_anime.utils.logger import api_logger


# ===========================
# Router Instance
# ===========================
router = APIRouter()


# ===========================
# Serialization
# ===========================
def torrents_response(torrents: List[AnimeTorrent]) -> JSONResponse:
    return JSONResponse(content=[torrent.model_dump(by_alias=True) for torrent in torrents])


# ===========================
# Provider Endpoints
# ===========================
@router.get("/settings", summary="Provider settings", description="Returns the provider capability declaration")
async def get_settings():
    provider_settings = await provider.get_settings()
    return JSONResponse(content=provider_settings.model_dump(by_alias=True))


@router.get("/search", summary="Search", description="Plain search by free-text query")
async def search(query: str = Query("", description="Search query")):
    api_logger.debug(f"Search: '{query}'")
    return torrents_response(await provider.search(query))


@router.post("/smart-search", summary="Smart search", description="Search derived from media and episode context")
async def smart_search(options: SmartSearchOptions):
    api_logger.debug(f"SmartSearch: episode {options.episode_number}, batch {options.batch}")
    return torrents_response(await provider.smart_search(options))


@router.get("/latest", summary="Latest", description="Latest anime releases")
async def get_latest():
    return torrents_response(await provider.get_latest())


@router.post("/torrent/info-hash", summary="Info hash", description="Extracts the info hash of a torrent record")
async def get_torrent_info_hash(torrent: AnimeTorrent):
    return JSONResponse(content={"infoHash": await provider.get_torrent_info_hash(torrent)})


@router.post("/torrent/magnet-link", summary="Magnet link", description="Extracts the magnet link of a torrent record")
async def get_torrent_magnet_link(torrent: AnimeTorrent):
    return JSONResponse(content={"magnetLink": await provider.get_torrent_magnet_link(torrent)})


# ===========================
# Health Check Endpoint
# ===========================
@router.get("/health", summary="Health check", description="Checks that the service is up")
async def health():
    return JSONResponse(content={"status": "ok"})

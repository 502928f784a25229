from datetime import datetime

import pytest

from conftest import FakeAssembler, make_torrent
from rutracker_anime.config.settings import settings
from rutracker_anime.models.torrent import AnimeMedia, SmartSearchOptions
from rutracker_anime.services.provider import Provider


@pytest.mark.asyncio
async def test_get_settings_declares_capabilities():
    provider_settings = await Provider(FakeAssembler()).get_settings()

    assert provider_settings.can_smart_search is True
    assert provider_settings.supports_adult is False
    assert provider_settings.type == "main"
    assert provider_settings.smart_search_filters == ["batch", "episodeNumber", "resolution", "query"]


@pytest.mark.asyncio
async def test_search_delegates_query():
    assembler = FakeAssembler([make_torrent("Show - 01")])

    results = await Provider(assembler).search("Frieren")

    assert assembler.queries == ["Frieren"]
    assert [torrent.name for torrent in results] == ["Show - 01"]


@pytest.mark.asyncio
async def test_smart_search_filters_by_episode():
    assembler = FakeAssembler([make_torrent("Show - 07"), make_torrent("Show - 08")])

    results = await Provider(assembler).smart_search(
        SmartSearchOptions(query="Show", episode_number=7, batch=False)
    )

    assert [torrent.name for torrent in results] == ["Show - 07"]


@pytest.mark.asyncio
async def test_smart_search_batch_skips_episode_filter():
    assembler = FakeAssembler([make_torrent("Show - 07"), make_torrent("Show - 08")])

    results = await Provider(assembler).smart_search(
        SmartSearchOptions(query="Show", episode_number=7, batch=True)
    )

    assert [torrent.name for torrent in results] == ["Show - 07", "Show - 08"]


@pytest.mark.asyncio
async def test_smart_search_without_episode_returns_everything():
    assembler = FakeAssembler([make_torrent("Show - 07"), make_torrent("Show - 08")])

    results = await Provider(assembler).smart_search(SmartSearchOptions(query="Show"))

    assert len(results) == 2


@pytest.mark.asyncio
async def test_smart_search_accepts_keyword_arguments():
    assembler = FakeAssembler([make_torrent("Show - 07"), make_torrent("Show - 08")])

    results = await Provider(assembler).smart_search(query="Show", episodeNumber=8, batch=False)

    assert [torrent.name for torrent in results] == ["Show - 08"]


@pytest.mark.asyncio
async def test_smart_search_falls_back_to_media_titles():
    assembler = FakeAssembler()
    options = SmartSearchOptions(
        query="  ",
        media=AnimeMedia(romajiTitle="", englishTitle="Frieren: Beyond Journey's End"),
    )

    await Provider(assembler).smart_search(options)

    assert assembler.queries == ["Frieren: Beyond Journey's End"]


@pytest.mark.asyncio
async def test_smart_search_prefers_romaji_then_ranked_fallbacks():
    assembler = FakeAssembler()
    provider = Provider(assembler)

    await provider.smart_search(
        SmartSearchOptions(media=AnimeMedia(romaji_title="Sousou no Frieren", english_title="Frieren"))
    )
    await provider.smart_search(SmartSearchOptions(media_titles=["", "Frieren"]))
    await provider.smart_search(SmartSearchOptions())

    assert assembler.queries == ["Sousou no Frieren", "Frieren", ""]


@pytest.mark.asyncio
async def test_smart_search_resolution_does_not_change_results():
    assembler = FakeAssembler([make_torrent("Show - 07 [BDRip]"), make_torrent("Show - 07 [1080p]")])

    results = await Provider(assembler).smart_search(
        SmartSearchOptions(query="Show", episode_number=7, resolution="1080")
    )

    assert [torrent.name for torrent in results] == ["Show - 07 [BDRip]", "Show - 07 [1080p]"]


@pytest.mark.asyncio
async def test_get_latest_uses_default_term_and_configured_year(monkeypatch):
    monkeypatch.setattr(settings, "LATEST_QUERY_YEAR", 2025)
    assembler = FakeAssembler()

    await Provider(assembler).get_latest()

    assert assembler.queries == ["Аниме 2025"]


@pytest.mark.asyncio
async def test_get_latest_defaults_to_current_year(monkeypatch):
    monkeypatch.setattr(settings, "LATEST_QUERY_YEAR", None)
    assembler = FakeAssembler()

    await Provider(assembler).get_latest()

    assert assembler.queries == [f"Аниме {datetime.now().year}"]


@pytest.mark.asyncio
async def test_torrent_accessors():
    provider = Provider(FakeAssembler())
    torrent = make_torrent("Show", magnet="magnet:?xt=urn:btih:ABC", info_hash="ABC")
    bare = make_torrent("Show", magnet="")

    assert await provider.get_torrent_info_hash(torrent) == "ABC"
    assert await provider.get_torrent_magnet_link(torrent) == "magnet:?xt=urn:btih:ABC"
    assert await provider.get_torrent_info_hash(bare) == ""
    assert await provider.get_torrent_magnet_link(bare) == ""

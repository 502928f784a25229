from rutracker_anime.config.settings import Settings
from rutracker_anime.scrapers.torapi.base import SearchConfig


def test_defaults():
    config = Settings(_env_file=None)

    assert config.TORAPI_URL == "https://torapi.vercel.app/api"
    assert config.TORAPI_SOURCE == "rutracker"
    assert config.SEARCH_PAGE == 0
    assert config.SEARCH_MAX_RESULTS == 10
    assert config.ANIME_CATEGORY_MARKERS == ["Аниме", "Онгоинги"]
    assert config.PROVIDER_SETTINGS["type"] == "main"
    assert config.PROVIDER_SETTINGS["supportsAdult"] is False


def test_environment_overrides_are_normalized(monkeypatch):
    monkeypatch.setenv("TORAPI_URL", "https://mirror.example/api/")
    monkeypatch.setenv("TORAPI_SOURCE", " RuTracker ")
    monkeypatch.setenv("SEARCH_MAX_RESULTS", "5")
    monkeypatch.setenv("ANIME_CATEGORY_MARKERS", '["Anime"]')
    monkeypatch.setenv("log_level", "debug")

    config = Settings(_env_file=None)

    assert config.TORAPI_URL == "https://mirror.example/api"
    assert config.TORAPI_SOURCE == "rutracker"
    assert config.SEARCH_MAX_RESULTS == 5
    assert config.ANIME_CATEGORY_MARKERS == ["Anime"]
    assert config.LOG_LEVEL == "DEBUG"


def test_search_config_from_settings(monkeypatch):
    monkeypatch.setenv("TORAPI_URL", "https://mirror.example/api")
    monkeypatch.setenv("SEARCH_PAGE", "2")

    search_config = SearchConfig.from_settings(Settings(_env_file=None))

    assert search_config.search_url == "https://mirror.example/api/search/title/rutracker"
    assert search_config.detail_url == "https://mirror.example/api/search/id/rutracker"
    assert search_config.page == 2
    assert search_config.max_results == 10
    assert search_config.category_markers == ("Аниме", "Онгоинги")

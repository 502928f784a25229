from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ===========================
# Raw Search Candidate
# ===========================
class RawCandidate(BaseModel):

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: Optional[str] = Field(default=None, alias="Id")
    name: str = Field(default="", alias="Name")
    size: str = Field(default="", alias="Size")
    seeds: Any = Field(default=0, alias="Seeds")
    peers: Any = Field(default=0, alias="Peers")
    date: str = Field(default="", alias="Date")
    category: str = Field(default="", alias="Category")
    url: str = Field(default="", alias="Url")
    torrent: str = Field(default="", alias="Torrent")
    download_count: Any = Field(default=0, alias="Download_Count")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        if v is None or isinstance(v, str):
            return v
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("name", "size", "date", "category", "url", "torrent", mode="before")
    @classmethod
    def coerce_text(cls, v):
        if v is None:
            return ""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


# ===========================
# Per-Candidate Detail
# ===========================
class RemoteDetail(BaseModel):

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    magnet: Optional[str] = Field(default=None, alias="Magnet")
    hash: Optional[str] = Field(default=None, alias="Hash")


# ===========================
# Normalized Torrent Record
# ===========================
class AnimeTorrent(BaseModel):

    model_config = ConfigDict(populate_by_name=True)

    name: str
    date: str
    size: int = 0
    formatted_size: str = Field(default="", alias="formattedSize")
    seeders: int = 0
    leechers: int = 0
    download_count: int = Field(default=0, alias="downloadCount")
    link: str = ""
    magnet_link: str = Field(default="", alias="magnetLink")
    info_hash: str = Field(default="", alias="infoHash")
    is_batch: bool = Field(default=False, alias="isBatch")
    episode_number: int = Field(default=-1, alias="episodeNumber")
    is_best_release: bool = Field(default=False, alias="isBestRelease")
    confirmed: bool = False


# ===========================
# Structured Media Titles
# ===========================
class AnimeMedia(BaseModel):

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    romaji_title: Optional[str] = Field(default=None, alias="romajiTitle")
    english_title: Optional[str] = Field(default=None, alias="englishTitle")
    synonyms: List[str] = Field(default_factory=list)

    def search_titles(self) -> List[str]:
        titles = []
        for title in [self.romaji_title, self.english_title, *self.synonyms]:
            if title and title.strip() and title.strip() not in titles:
                titles.append(title.strip())
        return titles


# ===========================
# Smart Search Intent
# ===========================
class SmartSearchOptions(BaseModel):

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    query: Optional[str] = None
    episode_number: int = Field(default=0, alias="episodeNumber")
    batch: bool = False
    resolution: Optional[str] = None
    media: Optional[AnimeMedia] = None
    media_titles: List[str] = Field(default_factory=list, alias="mediaTitles")

    def resolve_query(self) -> str:
        if self.query and self.query.strip():
            return self.query.strip()

        fallbacks = self.media.search_titles() if self.media else []
        fallbacks += [title.strip() for title in self.media_titles if title and title.strip()]
        return fallbacks[0] if fallbacks else ""


# ===========================
# Provider Capabilities
# ===========================
class ProviderSettings(BaseModel):

    model_config = ConfigDict(populate_by_name=True)

    can_smart_search: bool = Field(default=True, alias="canSmartSearch")
    smart_search_filters: List[str] = Field(default_factory=list, alias="smartSearchFilters")
    supports_adult: bool = Field(default=False, alias="supportsAdult")
    type: str = "main"

from typing import Any, Dict, Optional

import httpx

from rutracker_anime.config.settings import settings

# ===========================
# Default Headers
# ===========================
DEFAULT_HEADERS = {
    "Accept": "application/json",
    "User-Agent": "rutracker-anime/1.0"
}

# ===========================
# HTTP Client Singleton
# ===========================
class HTTPClient:

    _instance: Optional['HTTPClient'] = None
    _client: Optional[httpx.AsyncClient] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    async def get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            client_args = {
                "timeout": httpx.Timeout(float(settings.HTTP_TIMEOUT)),
                "follow_redirects": True,
                "headers": DEFAULT_HEADERS,
                "limits": httpx.Limits(max_connections=None, max_keepalive_connections=None)
            }
            if settings.PROXY_URL:
                client_args["proxy"] = settings.PROXY_URL
            self._client = httpx.AsyncClient(**client_args)
        return self._client

    async def get(self, url: str, **kwargs) -> httpx.Response:
        client = await self.get_client()
        return await client.get(url, **kwargs)

    # Raises httpx.HTTPError on transport failure or non-2xx status, ValueError on a non-JSON body
    async def get_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> Any:
        response = await self.get(url, params=params)
        response.raise_for_status()
        return response.json()

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None

# ===========================
# Global HTTP Client Instance
# ===========================
http_client = HTTPClient()

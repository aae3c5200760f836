import logging
from typing import Any, Dict, List, Optional

import httpx

from ..config import Settings

logger = logging.getLogger(__name__)

class TMDBClient:
    """Popular-movie listing and watch-provider lookups against the TMDB API."""

    def __init__(self, settings: Settings, *, http_client: Optional[httpx.AsyncClient] = None):
        if not settings.TMDB_API_KEY:
            raise ValueError("TMDB API key is not configured.")
        self.api_key = settings.TMDB_API_KEY
        self.base_url = settings.TMDB_BASE_URL.rstrip("/")
        self.image_base_url = settings.TMDB_IMAGE_BASE_URL.rstrip("/")
        self.region = settings.TMDB_REGION
        self._client = http_client or httpx.AsyncClient(timeout=settings.TMDB_TIMEOUT_SECONDS)

    async def fetch_popular_movies(self, page: int = 1) -> List[Dict[str, Any]]:
        """One page of popular movies. A failed request yields an empty page."""
        try:
            data = await self._request_json(
                "/movie/popular",
                {"language": "en-US", "page": page, "region": self.region}
            )
        except (httpx.HTTPError, ValueError) as exc:
            logger.error(f"Error fetching page {page} of popular movies: {exc}", extra={"page": page})
            return []
        results = data.get("results")
        if not isinstance(results, list):
            return []
        return [movie for movie in results if isinstance(movie, dict)]

    async def fetch_movie_providers(self, movie_id: int) -> List[str]:
        """Flat-rate streaming provider names in the configured region."""
        try:
            data = await self._request_json(f"/movie/{movie_id}/watch/providers")
        except (httpx.HTTPError, ValueError) as exc:
            logger.debug(f"Provider lookup failed for {movie_id}: {exc}", extra={"movie_id": movie_id})
            return []
        regions = data.get("results")
        region = regions.get(self.region) if isinstance(regions, dict) else None
        flatrate = region.get("flatrate") if isinstance(region, dict) else None
        if not isinstance(flatrate, list):
            return []
        return [
            p["provider_name"] for p in flatrate
            if isinstance(p, dict) and isinstance(p.get("provider_name"), str)
        ]

    def poster_url(self, poster_path: str) -> str:
        return f"{self.image_base_url}{poster_path}"

    async def close(self) -> None:
        await self._client.aclose()

    async def _request_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """GET `path` and decode a JSON object. Bodies that are not one raise ValueError."""
        params = dict(params or {})
        params["api_key"] = self.api_key
        response = await self._client.get(f"{self.base_url}{path}", params=params)
        response.raise_for_status()
        data = response.json()
        if not isinstance(data, dict):
            raise ValueError(f"Unexpected TMDB payload for {path}: {type(data).__name__}")
        return data

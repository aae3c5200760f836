"""
Populate the catalog store from TMDB.

Walks the popular-movie listing page by page, keeps movies that have a poster,
enough popularity and at least one flat-rate streaming provider in the
configured region, and upserts them into the `movies` table.

    python -m movienight.ingest [--start-page N] [--end-page M]
"""

import argparse
import asyncio
import logging
from typing import Any, Dict, List, Optional

import asyncpg

from .config import Settings, settings as default_settings
from .logging_config import setup_logging
from .models.movie import schema_statements
from .repositories.movie_repository import MovieRepository
from .services.tmdb_client import TMDBClient

logger = logging.getLogger(__name__)


def build_movie_record(movie: Dict[str, Any], platforms: List[str], client: TMDBClient) -> Dict[str, Any]:
    return {
        "title": movie["title"],
        "poster_url": client.poster_url(movie["poster_path"]),
        "imdb_rating": float(movie.get("vote_average") or 0.0),
        "genres": list(movie.get("genre_ids") or []),
        "platforms": platforms,
        "achievements": [],
    }


class CatalogIngestor:
    def __init__(self, repo: MovieRepository, client: TMDBClient, min_popularity: float):
        self.repo = repo
        self.client = client
        self.min_popularity = min_popularity

    async def ingest_page(self, page: int) -> int:
        logger.info(f"Fetching movies from page {page}...", extra={"page": page})
        added = 0
        for movie in await self.client.fetch_popular_movies(page):
            if not movie.get("poster_path") or (movie.get("popularity") or 0) < self.min_popularity:
                continue
            platforms = await self.client.fetch_movie_providers(movie["id"])
            if not platforms:
                continue

            await self.repo.upsert_movie(str(movie["id"]), build_movie_record(movie, platforms, self.client))
            added += 1
            logger.info(f"Added: {movie['title']}", extra={"movie_id": str(movie["id"])})
        return added

    async def run(self, start_page: int, end_page: int) -> int:
        total = 0
        for page in range(start_page, end_page + 1):
            total += await self.ingest_page(page)
        return total


async def populate(settings: Settings, start_page: Optional[int] = None, end_page: Optional[int] = None) -> int:
    start_page = start_page or settings.INGEST_START_PAGE
    end_page = end_page or settings.INGEST_END_PAGE

    # Fails fast on a missing API key, before any connection is opened
    client = TMDBClient(settings)
    try:
        conn = await asyncpg.connect(settings.DATABASE_URL)
        try:
            repo = MovieRepository(conn)
            await repo.create_schema(schema_statements())

            ingestor = CatalogIngestor(repo, client, settings.INGEST_MIN_POPULARITY)
            total = await ingestor.run(start_page, end_page)
        finally:
            await conn.close()
    finally:
        await client.close()

    logger.info(f"Population complete: {total} movies added", extra={"count": total})
    return total


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Populate the movie catalog from TMDB")
    parser.add_argument("--start-page", type=int, default=None)
    parser.add_argument("--end-page", type=int, default=None)
    args = parser.parse_args(argv)

    setup_logging()
    asyncio.run(populate(default_settings, args.start_page, args.end_page))


if __name__ == "__main__":
    main()

import json
from typing import Iterable, List, Dict, Optional, Any
from asyncpg import Pool

class MovieRepository:
    def __init__(self, db: Pool):
        self.db = db

    async def find_by_platforms(self, platforms: Iterable[str], min_rating: Optional[float] = None) -> List[Dict]:
        """
        Movies available on any of `platforms`, optionally rated at least `min_rating`.
        Both predicates run in the store; genre filtering is left to the caller.
        """
        conditions = ["platforms ?| $1::text[]"]
        args: List[Any] = [sorted(platforms)]

        if min_rating is not None:
            args.append(min_rating)
            conditions.append(f"imdb_rating >= ${len(args)}")

        query = f"""
            SELECT movie_id, title, poster_url, imdb_rating,
                   genres, platforms, achievements
            FROM movies
            WHERE {' AND '.join(conditions)}
        """
        rows = await self.db.fetch(query, *args)
        return [dict(row) for row in rows]

    async def upsert_movie(self, movie_id: str, movie: Dict[str, Any]) -> None:
        query = """
            INSERT INTO movies (
                movie_id, title, poster_url, imdb_rating,
                genres, platforms, achievements
            ) VALUES ($1, $2, $3, $4, $5::jsonb, $6::jsonb, $7::jsonb)
            ON CONFLICT (movie_id) DO UPDATE SET
                title = EXCLUDED.title,
                poster_url = EXCLUDED.poster_url,
                imdb_rating = EXCLUDED.imdb_rating,
                genres = EXCLUDED.genres,
                platforms = EXCLUDED.platforms,
                achievements = EXCLUDED.achievements
        """
        await self.db.execute(
            query,
            movie_id,
            movie['title'],
            movie['poster_url'],
            movie['imdb_rating'],
            json.dumps(movie['genres']),
            json.dumps(movie['platforms']),
            json.dumps(movie['achievements'])
        )

    async def create_schema(self, statements: Iterable[str]) -> None:
        for statement in statements:
            await self.db.execute(statement)

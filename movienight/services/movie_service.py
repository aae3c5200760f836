import json
from typing import List, Dict, Any

from ..exceptions import InvalidRequest, ServiceError
from ..repositories.movie_repository import MovieRepository
from ..schemas.movie import FilterCriteria

def _json_list(value: Any) -> List:
    if value is None:
        return []
    return json.loads(value) if isinstance(value, str) else list(value)

class MovieService:
    def __init__(self, movie_repo: MovieRepository):
        self.movie_repo = movie_repo

    async def find_movies(self, criteria: FilterCriteria) -> List[Dict[str, Any]]:
        """
        Movies matching the criteria.
        Strategy:
        1. One store query: platforms any-of AND imdb_rating >= min_rating
        2. Genre any-of refinement in memory
        The store query cannot carry a second any-of predicate, so genres
        are never pushed into it.
        """
        if not criteria.platforms:
            raise InvalidRequest("Platforms are required")

        try:
            rows = await self.movie_repo.find_by_platforms(criteria.platforms, criteria.min_rating)
            movies = [self._format(row) for row in rows]
        except Exception as exc:
            # Logged with its cause by the ServiceError handler
            raise ServiceError() from exc

        if criteria.genre_codes:
            movies = [
                movie for movie in movies
                if not criteria.genre_codes.isdisjoint(movie['genres'])
            ]

        return movies

    def _format(self, row: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "id": row['movie_id'],
            "title": row['title'],
            "poster_url": row['poster_url'],
            "imdb_rating": float(row['imdb_rating']) if row['imdb_rating'] is not None else 0.0,
            "genres": _json_list(row['genres']),
            "platforms": _json_list(row['platforms']),
            "achievements": _json_list(row.get('achievements')),
        }

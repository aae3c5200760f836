import random
from typing import Any, Dict, Optional

from ..genres import resolve_genre_names
from ..schemas.movie import FilterCriteria, split_csv
from .movie_service import MovieService
from .suggestion import SuggestionPicker

class ResultsService:
    """Results page backend: genre names in, filtered movies and an optional pick out."""

    def __init__(self, movie_service: MovieService, strict_genres: bool = False, rng: Optional[random.Random] = None):
        self.movie_service = movie_service
        self.strict_genres = strict_genres
        self.picker = SuggestionPicker(rng)

    async def get_results(
        self,
        platforms: Optional[str],
        genre_names: Optional[str],
        rating: Optional[str],
        suggest: bool
    ) -> Dict[str, Any]:
        criteria = FilterCriteria.from_query(platforms, None, rating)

        resolution = resolve_genre_names(split_csv(genre_names), strict=self.strict_genres)
        if resolution.codes:
            criteria = criteria.model_copy(update={"genre_codes": frozenset(resolution.codes)})

        movies = await self.movie_service.find_movies(criteria)

        suggested = self.picker.pick(movies, suggest)
        return {
            "movies": movies,
            "count": len(movies),
            "suggest": suggest,
            "suggested_id": suggested['id'] if suggested else None,
            "ignored_genres": list(resolution.ignored)
        }

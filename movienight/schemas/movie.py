from pydantic import BaseModel, ConfigDict
from typing import FrozenSet, List, Optional

from ..exceptions import InvalidRequest

class MovieRecord(BaseModel):
    """Movie as stored in the catalog and returned by the API"""
    id: str
    title: str
    poster_url: Optional[str] = None
    imdb_rating: float = 0.0
    genres: List[int] = []
    platforms: List[str] = []
    achievements: List[str] = []

class GenreItem(BaseModel):
    name: str
    code: int

class ResultsResponse(BaseModel):
    """Filtered movies plus the optional random pick"""
    movies: List[MovieRecord]
    count: int
    suggest: bool
    suggested_id: Optional[str] = None
    ignored_genres: List[str] = []


def split_csv(value: Optional[str]) -> List[str]:
    """Split a comma-separated query value, dropping blank entries."""
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


class FilterCriteria(BaseModel):
    """
    Immutable filter set passed from request parsing to the query service.
    """
    model_config = ConfigDict(frozen=True)

    platforms: FrozenSet[str]
    genre_codes: Optional[FrozenSet[int]] = None
    min_rating: Optional[float] = None

    @classmethod
    def from_query(
        cls,
        platforms: Optional[str],
        genres: Optional[str] = None,
        rating: Optional[str] = None,
    ) -> "FilterCriteria":
        platform_names = split_csv(platforms)
        if not platform_names:
            raise InvalidRequest("Platforms are required")

        genre_codes = None
        genre_values = split_csv(genres)
        if genre_values:
            try:
                genre_codes = frozenset(int(value) for value in genre_values)
            except ValueError:
                raise InvalidRequest("Genres must be integer codes")

        min_rating = None
        if rating is not None and rating.strip():
            try:
                min_rating = float(rating)
            except ValueError:
                raise InvalidRequest("Rating must be a number")
            if min_rating != min_rating:  # NaN
                raise InvalidRequest("Rating must be a number")

        return cls(
            platforms=frozenset(platform_names),
            genre_codes=genre_codes,
            min_rating=min_rating,
        )

from fastapi import APIRouter, Depends, Request
from typing import List, Optional

from ..config import settings
from ..schemas.movie import FilterCriteria, MovieRecord, GenreItem, ResultsResponse
from ..dependencies import get_db_pool
from ..genres import genre_catalogue
from ..repositories.movie_repository import MovieRepository
from ..services.movie_service import MovieService
from ..services.results_service import ResultsService
from ..limiter import limiter

router = APIRouter()

async def get_movie_service(db = Depends(get_db_pool)) -> MovieService:
    return MovieService(MovieRepository(db))

async def get_results_service(
    movie_service: MovieService = Depends(get_movie_service)
) -> ResultsService:
    return ResultsService(movie_service, strict_genres=settings.STRICT_GENRE_NAMES)

@router.get("/api/movies", response_model=List[MovieRecord])
@limiter.limit(settings.RATE_LIMIT)
async def get_movies(
    request: Request, # Required for limiter
    platforms: Optional[str] = None,
    genres: Optional[str] = None,
    rating: Optional[str] = None,
    service: MovieService = Depends(get_movie_service)
):
    """
    Movies on any of the comma-separated `platforms`, optionally limited to
    any of the `genres` codes and a minimum `rating`.
    """
    criteria = FilterCriteria.from_query(platforms, genres, rating)
    return await service.find_movies(criteria)

@router.get("/api/results", response_model=ResultsResponse)
@limiter.limit(settings.RATE_LIMIT)
async def get_results(
    request: Request, # Required for limiter
    platforms: Optional[str] = None,
    genres: Optional[str] = None,
    rating: Optional[str] = None,
    suggest: bool = False,
    service: ResultsService = Depends(get_results_service)
):
    """
    Same filters as /api/movies with genres given by name, plus one random
    pick when `suggest` is set.
    """
    return await service.get_results(platforms, genres, rating, suggest)

@router.get("/api/genres", response_model=List[GenreItem])
async def get_genres():
    """Genre names accepted by /api/results and their codes"""
    return genre_catalogue()

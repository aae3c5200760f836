import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from unittest.mock import AsyncMock
from movienight.main import app
from movienight.dependencies import get_db_pool
from movienight.limiter import limiter

@pytest.fixture
def mock_db_pool():
    pool = AsyncMock()
    pool.fetch.return_value = []
    return pool

@pytest.fixture
def movie_rows():
    return [
        {
            "movie_id": "27205",
            "title": "Inception",
            "poster_url": "https://image.tmdb.org/t/p/w500/inception.jpg",
            "imdb_rating": 8.4,
            "genres": "[28, 878, 12]",
            "platforms": '["Netflix"]',
            "achievements": "[]",
        },
        {
            "movie_id": "496243",
            "title": "Parasite",
            "poster_url": "https://image.tmdb.org/t/p/w500/parasite.jpg",
            "imdb_rating": 8.5,
            "genres": [35, 53, 18],
            "platforms": ["Netflix", "zee5"],
            "achievements": ["Best Picture"],
        },
        {
            "movie_id": "346698",
            "title": "Barbie",
            "poster_url": "https://image.tmdb.org/t/p/w500/barbie.jpg",
            "imdb_rating": 7.1,
            "genres": [35, 12, 14],
            "platforms": ["zee5"],
            "achievements": [],
        },
    ]

@pytest_asyncio.fixture
async def client(mock_db_pool):
    # Override dependencies
    app.dependency_overrides[get_db_pool] = lambda: mock_db_pool

    transport = ASGITransport(app=app)
    limiter.enabled = False
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    limiter.enabled = True

    app.dependency_overrides = {}

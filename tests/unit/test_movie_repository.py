import json
import pytest
from unittest.mock import AsyncMock
from movienight.models.movie import schema_statements
from movienight.repositories.movie_repository import MovieRepository

@pytest.mark.asyncio
async def test_find_by_platforms_uses_any_of_predicate():
    db = AsyncMock()
    db.fetch.return_value = [{"movie_id": "1"}]
    repo = MovieRepository(db)

    rows = await repo.find_by_platforms({"zee5", "Netflix"})

    query, *args = db.fetch.await_args.args
    assert "platforms ?| $1::text[]" in query
    assert "imdb_rating" not in query.split("WHERE")[1]
    assert "genres" not in query.split("WHERE")[1]
    assert args == [["Netflix", "zee5"]]
    assert rows == [{"movie_id": "1"}]

@pytest.mark.asyncio
async def test_find_by_platforms_adds_rating_threshold():
    db = AsyncMock()
    db.fetch.return_value = []
    repo = MovieRepository(db)

    await repo.find_by_platforms({"Netflix"}, 7.5)

    query, *args = db.fetch.await_args.args
    assert "imdb_rating >= $2" in query
    assert args == [["Netflix"], 7.5]

@pytest.mark.asyncio
async def test_upsert_movie_serializes_list_columns():
    db = AsyncMock()
    repo = MovieRepository(db)

    await repo.upsert_movie("603", {
        "title": "The Matrix",
        "poster_url": "https://image/matrix.jpg",
        "imdb_rating": 8.2,
        "genres": [28, 878],
        "platforms": ["Netflix"],
        "achievements": [],
    })

    query, *args = db.execute.await_args.args
    assert "ON CONFLICT (movie_id) DO UPDATE" in query
    assert args[0] == "603"
    assert json.loads(args[4]) == [28, 878]
    assert json.loads(args[5]) == ["Netflix"]

def test_schema_statements_create_table_and_platform_index():
    statements = schema_statements()

    assert statements[0].strip().startswith("CREATE TABLE IF NOT EXISTS movies")
    assert any("ix_movies_platforms" in s and "USING gin" in s for s in statements)

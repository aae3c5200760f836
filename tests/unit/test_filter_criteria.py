import pytest
from pydantic import ValidationError

from movienight.exceptions import InvalidRequest
from movienight.schemas.movie import FilterCriteria, split_csv


def test_split_csv_drops_blank_entries():
    assert split_csv(" Netflix, ,zee5,") == ["Netflix", "zee5"]
    assert split_csv("") == []
    assert split_csv(None) == []


def test_from_query_parses_all_filters():
    criteria = FilterCriteria.from_query("Netflix,zee5", "28,12", "7.5")

    assert criteria.platforms == frozenset({"Netflix", "zee5"})
    assert criteria.genre_codes == frozenset({28, 12})
    assert criteria.min_rating == 7.5


def test_from_query_optional_filters_absent():
    criteria = FilterCriteria.from_query("Netflix")

    assert criteria.genre_codes is None
    assert criteria.min_rating is None


def test_empty_genres_and_rating_are_treated_as_absent():
    criteria = FilterCriteria.from_query("Netflix", "", "  ")

    assert criteria.genre_codes is None
    assert criteria.min_rating is None


@pytest.mark.parametrize("platforms", [None, "", " , ,"])
def test_missing_platforms_is_invalid(platforms):
    with pytest.raises(InvalidRequest) as exc:
        FilterCriteria.from_query(platforms, "28", "7")
    assert exc.value.message == "Platforms are required"
    assert exc.value.status_code == 400


def test_non_integer_genre_is_invalid():
    with pytest.raises(InvalidRequest) as exc:
        FilterCriteria.from_query("Netflix", "28,Action")
    assert exc.value.message == "Genres must be integer codes"


@pytest.mark.parametrize("rating", ["seven", "nan"])
def test_non_numeric_rating_is_invalid(rating):
    with pytest.raises(InvalidRequest) as exc:
        FilterCriteria.from_query("Netflix", None, rating)
    assert exc.value.message == "Rating must be a number"


def test_criteria_is_immutable():
    criteria = FilterCriteria.from_query("Netflix")
    with pytest.raises(ValidationError):
        criteria.min_rating = 9.0

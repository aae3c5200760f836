import random
from collections import Counter

from movienight.services.suggestion import SuggestionPicker, choose_suggestion


def test_choose_suggestion_empty_sequence():
    assert choose_suggestion([]) is None


def test_choose_suggestion_is_roughly_uniform():
    movies = ["a", "b", "c", "d"]
    rng = random.Random(1234)
    draws = 20000

    counts = Counter(choose_suggestion(movies, rng) for _ in range(draws))

    assert set(counts) == set(movies)
    for movie in movies:
        assert abs(counts[movie] / draws - 1 / len(movies)) < 0.02


def test_picker_is_stable_for_the_same_result_sequence():
    picker = SuggestionPicker(random.Random(7))
    movies = [{"id": str(i)} for i in range(50)]

    first = picker.pick(movies, True)

    assert first in movies
    for _ in range(20):
        assert picker.pick(movies, True) is first


def test_picker_rerolls_on_a_fresh_fetch():
    picker = SuggestionPicker(random.Random(7))
    movies = [{"id": str(i)} for i in range(50)]

    picks = set()
    for _ in range(20):
        fetched = list(movies)
        picks.add(picker.pick(fetched, True)["id"])

    assert len(picks) > 1


def test_picker_without_suggest_flag_picks_nothing():
    picker = SuggestionPicker()
    assert picker.pick([{"id": "1"}], False) is None

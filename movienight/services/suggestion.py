import random
from typing import Any, Optional, Sequence


def choose_suggestion(movies: Sequence[Any], rng: Optional[random.Random] = None) -> Optional[Any]:
    """Uniformly random element of `movies`, or None when it is empty."""
    if not movies:
        return None
    rng = rng or random
    return movies[rng.randrange(len(movies))]


class SuggestionPicker:
    """
    Remembers the pick for the last result sequence it was shown.

    Asking again with the same sequence object and flag returns the same movie;
    a newly fetched sequence gets a fresh draw.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()
        self._movies: Optional[Sequence[Any]] = None
        self._suggest: Optional[bool] = None
        self._pick: Optional[Any] = None

    def pick(self, movies: Sequence[Any], suggest: bool) -> Optional[Any]:
        if movies is self._movies and suggest == self._suggest:
            return self._pick

        self._movies = movies
        self._suggest = suggest
        self._pick = choose_suggestion(movies, self._rng) if suggest else None
        return self._pick

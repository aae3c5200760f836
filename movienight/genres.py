"""
Genre names shown to users and the TMDB genre codes stored on movie records.

The catalog stores TMDB codes only, so every layer that accepts genre names
goes through this mapping.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from .exceptions import InvalidRequest

logger = logging.getLogger(__name__)

GENRE_CODES: Dict[str, int] = {
    "Action": 28,
    "Adventure": 12,
    "Animation": 16,
    "Comedy": 35,
    "Drama": 18,
    "Fantasy": 14,
    "Horror": 27,
    "Romance": 10749,
    "Sci-Fi": 878,
    "Thriller": 53,
}


@dataclass(frozen=True)
class GenreResolution:
    codes: Tuple[int, ...] = ()
    ignored: Tuple[str, ...] = ()


def resolve_genre_names(names: Iterable[str], strict: bool = False) -> GenreResolution:
    """
    Translate genre names to TMDB codes, keeping the order of first appearance.

    Names are matched exactly as listed in GENRE_CODES. Unknown names are
    dropped and reported in ``ignored``, or rejected with InvalidRequest when
    ``strict`` is set.
    """
    codes: List[int] = []
    ignored: List[str] = []
    for raw in names:
        name = raw.strip()
        if not name:
            continue
        code = GENRE_CODES.get(name)
        if code is None:
            if strict:
                raise InvalidRequest(f"Unknown genre: {name}")
            ignored.append(name)
            continue
        if code not in codes:
            codes.append(code)

    if ignored:
        logger.info(f"Ignoring unknown genres: {', '.join(ignored)}")
    return GenreResolution(codes=tuple(codes), ignored=tuple(ignored))


def genre_catalogue() -> List[Dict]:
    return [{"name": name, "code": code} for name, code in GENRE_CODES.items()]

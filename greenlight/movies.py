"""The movie record and its validation rules."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from greenlight.runtime import Runtime
from greenlight.validator import Validator, unique


@dataclass
class Movie:
    """A movie as served by the API."""

    id: int = 0
    created_at: datetime | None = None
    title: str = ""
    year: int = 0
    runtime: Runtime = Runtime(0)
    genres: list[str] | None = None
    version: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form, leaving out the creation time and empty fields."""
        result: dict[str, Any] = {"id": self.id, "title": self.title}
        if self.year:
            result["year"] = self.year
        result["runtime"] = Runtime(self.runtime).to_json()
        if self.genres:
            result["Genres"] = list(self.genres)
        result["version"] = self.version
        return result


def validate_movie(v: Validator, movie: Movie) -> None:
    """Record in ``v`` every rule that ``movie`` breaks."""
    genres = movie.genres or []
    v.check(movie.title != "", "title", "must be provided")
    v.check(len(movie.title.encode()) <= 500, "title", "must not be more than 500 bytes long")
    v.check(movie.year != 0, "year", "must be provided")
    v.check(movie.year >= 1888, "year", "must be greater than 1888")
    v.check(movie.year <= datetime.now().year, "year", "must not be in the future")
    v.check(movie.runtime != 0, "runtime", "must be provided")
    v.check(movie.runtime > 0, "runtime", "must be a positive integer")
    v.check(movie.genres is not None, "genres", "must be provided")
    v.check(len(genres) >= 1, "genres", "must contain at least 1 genre")
    v.check(len(genres) <= 5, "genres", "must not contain more than 5 genres")
    v.check(unique(genres), "genres", "must not contain duplicate values")
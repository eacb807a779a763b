"""Models for the public recipe database."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MealSummary:
    """Meal list entry as returned by category filters."""

    id: str
    name: str
    thumbnail: str | None

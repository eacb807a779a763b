"""Domain models for recipe impact analysis."""

from dataclasses import dataclass, field
from enum import StrEnum


class MatchPolicy(StrEnum):
    """How overlapping animal-product keywords are counted."""

    SUBSTRING = "substring"
    LONGEST = "longest"


@dataclass(frozen=True)
class AnimalImpact:
    """Estimated animals affected per year by one ingredient."""

    animal: str
    count: float


@dataclass(frozen=True)
class ImpactFinding:
    """One keyword match and its contribution to the estimate.

    ``yearly_impact`` is a two-decimal string for animal products found in
    the recipe and a float for detected vegan substitutes.
    """

    ingredient: str
    animal: str
    yearly_impact: str | float

    def as_dict(self) -> dict[str, object]:
        return {
            "ingredient": self.ingredient,
            "animal": self.animal,
            "yearly_impact": self.yearly_impact,
        }


@dataclass(frozen=True)
class ImpactResult:
    """Outcome of analysing a recipe text."""

    animals_saved: int
    potential_yearly_impact: str | float
    comment: str
    details: list[ImpactFinding] = field(default_factory=list)

    def as_dict(self) -> dict[str, object]:
        return {
            "animals_saved": self.animals_saved,
            "potential_yearly_impact": self.potential_yearly_impact,
            "comment": self.comment,
            "details": [finding.as_dict() for finding in self.details],
        }

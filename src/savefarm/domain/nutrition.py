"""Nutrition log domain models."""

from dataclasses import dataclass

NUTRIENT_KEYS = ("calories", "protein", "carbs", "fat", "fiber")

DEFAULT_GOALS: dict[str, float] = {
    "calories": 2000,
    "protein": 50,
    "carbs": 250,
    "fat": 70,
    "fiber": 30,
    "iron": 18,
    "calcium": 1000,
    "vitaminB12": 2.4,
    "vitaminD": 15,
    "omega3": 1.6,
    "zinc": 11,
}


@dataclass(frozen=True)
class NutritionLogEntry:
    """Single logged meal inside a date bucket."""

    id: str
    meal_name: str
    nutrition: dict[str, object]
    timestamp: str

    def as_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "mealName": self.meal_name,
            "nutrition": self.nutrition,
            "timestamp": self.timestamp,
        }


@dataclass(frozen=True)
class DailySummary:
    """Totals for one date compared against the nutrition goals."""

    date: str
    totals: dict[str, float]
    goals: dict[str, float]
    remaining: dict[str, float]

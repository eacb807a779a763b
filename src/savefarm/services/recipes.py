"""Recipe library backed by TheMealDB."""

import asyncio
import logging
import random
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field

from savefarm.adapters.mealdb_client import MealDbClient
from savefarm.domain.errors import NotFoundError, UpstreamError
from savefarm.domain.recipes import MealSummary
from savefarm.services.cache import Cache

VEGAN_CATEGORIES = ("Vegan", "Vegetarian", "Starter", "Breakfast")
INGREDIENT_SLOTS = 20

_VEGAN_MEALS_KEY = "mealdb:vegan"

_logger = logging.getLogger(__name__)


@dataclass
class RecipeLibraryService:
    """Browse vegan-friendly recipes from the public database."""

    client: MealDbClient
    cache: Cache
    list_ttl_seconds: int = 3600
    meal_ttl_seconds: int = 86400
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3
    rng: random.Random = field(default_factory=random.Random)

    async def vegan_meals(self) -> list[MealSummary]:
        """Return meals from the vegan-friendly categories, without duplicates."""
        cached = self.cache.get(_VEGAN_MEALS_KEY)
        if isinstance(cached, list):
            return cached

        meals: dict[str, MealSummary] = {}
        for category in VEGAN_CATEGORIES:
            payload = await self._call_with_retry(
                lambda category=category: self.client.filter_by_category(category),
                action=f"filter:{category}",
            )
            for row in payload.get("meals") or []:
                meal_id = str(row.get("idMeal", ""))
                if meal_id and meal_id not in meals:
                    meals[meal_id] = MealSummary(
                        id=meal_id,
                        name=row.get("strMeal", ""),
                        thumbnail=row.get("strMealThumb"),
                    )
        result = list(meals.values())
        self.cache.set(_VEGAN_MEALS_KEY, result, ttl_seconds=self.list_ttl_seconds)
        return result

    async def random_vegan_meal(self) -> dict[str, object]:
        """Pick a random vegan-friendly meal and return its full details."""
        meals = await self.vegan_meals()
        if not meals:
            raise NotFoundError("No vegan meals available")
        choice = self.rng.choice(meals)
        try:
            return await self.meal_by_id(choice.id)
        except NotFoundError:
            self.cache.invalidate(_VEGAN_MEALS_KEY)
            raise

    async def meal_by_id(self, meal_id: str) -> dict[str, object]:
        """Return full meal details."""
        cache_key = f"mealdb:meal:{meal_id}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, dict):
            return cached

        payload = await self._call_with_retry(
            lambda: self.client.lookup(meal_id), action=f"lookup:{meal_id}"
        )
        meals = payload.get("meals") or []
        if not meals:
            raise NotFoundError("Meal not found")
        meal = meals[0]
        self.cache.set(cache_key, meal, ttl_seconds=self.meal_ttl_seconds)
        return meal

    async def search(self, query: str) -> list[dict[str, object]]:
        """Search all meals by name, vegan or not."""
        if not query.strip():
            return []
        payload = await self._call_with_retry(
            lambda: self.client.search(query), action="search"
        )
        return list(payload.get("meals") or [])

    async def _call_with_retry(
        self, func: Callable[[], Awaitable[dict[str, object]]], *, action: str
    ) -> dict[str, object]:
        """Call the recipe database with a short retry."""
        attempt = 0
        while True:
            try:
                return await func()
            except Exception as exc:
                attempt += 1
                _logger.warning(
                    "Recipe database %s failed (attempt %s/%s): %s",
                    action,
                    attempt,
                    self.retry_attempts + 1,
                    exc,
                )
                if attempt > self.retry_attempts:
                    raise UpstreamError("Recipe database unavailable") from exc
                await asyncio.sleep(self.retry_delay_seconds)


def format_for_analyzer(meal: Mapping[str, object] | None) -> str:
    """Render a meal as plain recipe text for the impact analyzer."""
    if not meal:
        return ""
    lines = [
        f"{meal.get('strMeal', '')}",
        "",
        f"Category: {meal.get('strCategory', '')}",
        f"Area: {meal.get('strArea', '')}",
        "",
        "Ingredients:",
    ]
    for slot in range(1, INGREDIENT_SLOTS + 1):
        ingredient = meal.get(f"strIngredient{slot}")
        if not ingredient or not str(ingredient).strip():
            continue
        measure = str(meal.get(f"strMeasure{slot}") or "").strip()
        lines.append(f"- {measure} {ingredient}" if measure else f"- {ingredient}")
    lines.extend(["", "Instructions:", f"{meal.get('strInstructions', '')}"])
    return "\n".join(lines)

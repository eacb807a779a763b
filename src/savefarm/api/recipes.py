"""Public recipe database endpoints."""

from fastapi import APIRouter, Depends

from savefarm.api.dependencies import get_container
from savefarm.containers import AppContainer
from savefarm.services.recipes import format_for_analyzer

router = APIRouter(prefix="/api/recipes", tags=["recipes"])


@router.get("/vegan")
async def vegan_meals(
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """List vegan-friendly meals."""
    meals = await container.recipe_library_service.vegan_meals()
    return {
        "meals": [
            {"idMeal": meal.id, "strMeal": meal.name, "strMealThumb": meal.thumbnail}
            for meal in meals
        ]
    }


@router.get("/random")
async def random_meal(
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return a random vegan-friendly meal ready for analysis."""
    meal = await container.recipe_library_service.random_vegan_meal()
    return {"meal": meal, "analyzerText": format_for_analyzer(meal)}


@router.get("/search")
async def search_meals(
    q: str = "", container: AppContainer = Depends(get_container)
) -> dict[str, object]:
    """Search every meal by name."""
    return {"meals": await container.recipe_library_service.search(q)}


@router.get("/{meal_id}")
async def meal_detail(
    meal_id: str, container: AppContainer = Depends(get_container)
) -> dict[str, object]:
    """Return one meal ready for analysis."""
    meal = await container.recipe_library_service.meal_by_id(meal_id)
    return {"meal": meal, "analyzerText": format_for_analyzer(meal)}

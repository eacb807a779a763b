"""Leaderboard and shared recipe endpoints."""

from fastapi import APIRouter, Depends

from savefarm.api.dependencies import get_container, session_token
from savefarm.api.models import CommentIn, ShareRecipeIn
from savefarm.containers import AppContainer

router = APIRouter(prefix="/api/community", tags=["community"])


@router.get("/leaderboard")
async def leaderboard(
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Rank all accounts by animals saved."""
    entries = container.community_service.leaderboard()
    return {
        "leaderboard": [
            {
                "username": entry.username,
                "totalAnimals": entry.total_animals,
                "animals": entry.animals,
                "joinedAt": entry.joined_at,
            }
            for entry in entries
        ]
    }


@router.post("/share-recipe")
async def share_recipe(
    payload: ShareRecipeIn,
    token: str | None = Depends(session_token),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Publish a recipe to the community feed."""
    recipe = container.community_service.share_recipe(
        token,
        recipe_name=payload.recipe_name,
        recipe_text=payload.recipe_text,
        description=payload.description,
        animals_saved=payload.animals_saved,
    )
    return {"success": True, "recipe": recipe.as_dict()}


@router.get("/recipes")
async def list_recipes(
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return every shared recipe, newest first."""
    recipes = container.community_service.list_recipes()
    return {"recipes": [recipe.as_dict() for recipe in recipes]}


@router.post("/like/{recipe_id}")
async def like_recipe(
    recipe_id: str,
    token: str | None = Depends(session_token),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Add a like to a shared recipe."""
    likes = container.community_service.like_recipe(token, recipe_id)
    return {"success": True, "likes": likes}


@router.post("/comment/{recipe_id}")
async def comment_on_recipe(
    recipe_id: str,
    payload: CommentIn,
    token: str | None = Depends(session_token),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Append a comment to a shared recipe."""
    comment = container.community_service.comment_on(
        token, recipe_id, payload.comment
    )
    return {"success": True, "comment": comment.as_dict()}

"""JSON-document-backed shared recipe repository."""

from dataclasses import dataclass

from savefarm.adapters.json_document import JsonDocument
from savefarm.domain.community import RecipeComment, SharedRecipe
from savefarm.services.community import RecipeRepository

EMPTY_RECIPES: dict[str, object] = {"recipes": []}


@dataclass
class JsonRecipeRepository(RecipeRepository):
    """Stores shared recipes as ``{"recipes": [...]}``, newest first."""

    document: JsonDocument

    def list_recipes(self) -> list[SharedRecipe]:
        """Return all shared recipes."""
        return [_row_to_recipe(row) for row in _recipes(self.document.read())]

    def add_recipe(self, recipe: SharedRecipe) -> None:
        """Prepend a recipe."""

        def mutate(data: dict[str, object]) -> None:
            _recipes(data).insert(0, recipe.as_dict())

        self.document.update(mutate)

    def increment_likes(self, recipe_id: str) -> int | None:
        """Add one like to a recipe."""

        def mutate(data: dict[str, object]) -> int | None:
            row = _find(data, recipe_id)
            if row is None:
                return None
            row["likes"] = int(row.get("likes") or 0) + 1
            return row["likes"]

        return self.document.update(mutate)

    def add_comment(self, recipe_id: str, comment: RecipeComment) -> bool:
        """Append a comment to a recipe."""

        def mutate(data: dict[str, object]) -> bool:
            row = _find(data, recipe_id)
            if row is None:
                return False
            row.setdefault("comments", []).append(comment.as_dict())
            return True

        return self.document.update(mutate)


def _recipes(data: dict[str, object]) -> list[dict[str, object]]:
    return data.setdefault("recipes", [])


def _find(data: dict[str, object], recipe_id: str) -> dict[str, object] | None:
    return next((row for row in _recipes(data) if row.get("id") == recipe_id), None)


def _row_to_recipe(row: dict[str, object]) -> SharedRecipe:
    return SharedRecipe(
        id=str(row.get("id", "")),
        username=str(row.get("username", "")),
        recipe_name=str(row.get("recipeName", "")),
        recipe_text=str(row.get("recipeText", "")),
        description=str(row.get("description") or ""),
        animals_saved=dict(row.get("animalsSaved") or {}),
        shared_at=str(row.get("sharedAt", "")),
        likes=int(row.get("likes") or 0),
        comments=[
            RecipeComment(
                id=str(item.get("id", "")),
                username=str(item.get("username", "")),
                text=str(item.get("text", "")),
                created_at=str(item.get("createdAt", "")),
            )
            for item in row.get("comments") or []
        ],
    )

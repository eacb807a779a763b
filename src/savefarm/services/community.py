"""Community features: leaderboard and shared recipes."""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import uuid4

from savefarm.domain.accounts import LeaderboardEntry
from savefarm.domain.community import RecipeComment, SharedRecipe
from savefarm.domain.errors import BadRequestError, NotFoundError
from savefarm.services.accounts import AccountRepository
from savefarm.services.sessions import SessionStore, require_username


class RecipeRepository(Protocol):
    """Persistence interface for shared recipes."""

    def list_recipes(self) -> list[SharedRecipe]:
        """Return all shared recipes, newest first."""

    def add_recipe(self, recipe: SharedRecipe) -> None:
        """Store a recipe at the front of the collection."""

    def increment_likes(self, recipe_id: str) -> int | None:
        """Add one like and return the new count, or None if unknown."""

    def add_comment(self, recipe_id: str, comment: RecipeComment) -> bool:
        """Append a comment; return False when the recipe is unknown."""


@dataclass
class CommunityService:
    """Application service for the leaderboard and shared recipes."""

    recipes: RecipeRepository
    accounts: AccountRepository
    sessions: SessionStore

    def leaderboard(self) -> list[LeaderboardEntry]:
        """Rank every account by total animals saved, highest first."""
        entries = [
            LeaderboardEntry(
                username=account.username,
                total_animals=round(sum(account.animals.values()), 2),
                animals=account.animals,
                joined_at=account.created_at,
            )
            for account in self.accounts.list_accounts()
        ]
        return sorted(entries, key=lambda entry: entry.total_animals, reverse=True)

    def share_recipe(
        self,
        token: str | None,
        recipe_name: str | None,
        recipe_text: str | None,
        description: str | None = None,
        animals_saved: Mapping[str, object] | None = None,
    ) -> SharedRecipe:
        """Publish a recipe under the caller's name."""
        username = require_username(self.sessions, token)
        if not recipe_name or not recipe_text:
            raise BadRequestError("Recipe name and text required")
        recipe = SharedRecipe(
            id=str(uuid4()),
            username=username,
            recipe_name=recipe_name,
            recipe_text=recipe_text,
            description=description or "",
            animals_saved=dict(animals_saved or {}),
            shared_at=_now(),
        )
        self.recipes.add_recipe(recipe)
        return recipe

    def list_recipes(self) -> list[SharedRecipe]:
        """Return all shared recipes, newest first."""
        return self.recipes.list_recipes()

    def like_recipe(self, token: str | None, recipe_id: str) -> int:
        """Add a like; repeated likes from one user all count."""
        require_username(self.sessions, token)
        likes = self.recipes.increment_likes(recipe_id)
        if likes is None:
            raise NotFoundError("Recipe not found")
        return likes

    def comment_on(
        self, token: str | None, recipe_id: str, text: str | None
    ) -> RecipeComment:
        """Append a comment to a shared recipe."""
        username = require_username(self.sessions, token)
        if not text or not text.strip():
            raise BadRequestError("Comment cannot be empty")
        comment = RecipeComment(
            id=str(uuid4()), username=username, text=text, created_at=_now()
        )
        if not self.recipes.add_comment(recipe_id, comment):
            raise NotFoundError("Recipe not found")
        return comment


def _now() -> str:
    return datetime.now(tz=UTC).isoformat()

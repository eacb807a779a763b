"""Domain models for shared community recipes."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RecipeComment:
    """Comment left on a shared recipe."""

    id: str
    username: str
    text: str
    created_at: str

    def as_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "username": self.username,
            "text": self.text,
            "createdAt": self.created_at,
        }


@dataclass(frozen=True)
class SharedRecipe:
    """Recipe shared with the community, stored newest first."""

    id: str
    username: str
    recipe_name: str
    recipe_text: str
    description: str
    animals_saved: dict[str, object]
    shared_at: str
    likes: int = 0
    comments: list[RecipeComment] = field(default_factory=list)

    def as_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "username": self.username,
            "recipeName": self.recipe_name,
            "recipeText": self.recipe_text,
            "description": self.description,
            "animalsSaved": self.animals_saved,
            "sharedAt": self.shared_at,
            "likes": self.likes,
            "comments": [comment.as_dict() for comment in self.comments],
        }

"""Request bodies for the JSON API.

Every field is optional so that missing values reach the services, which
report them as 400 errors with the same messages for every client.
"""

from pydantic import BaseModel, ConfigDict, Field


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class CredentialsIn(_CamelModel):
    """Registration or login form."""

    username: str | None = None
    password: str | None = None


class AnimalsIn(_CamelModel):
    """Full replacement of the animal tally."""

    animals: dict[str, float] | None = None


class ShareRecipeIn(_CamelModel):
    """Recipe to publish to the community."""

    recipe_name: str | None = Field(default=None, alias="recipeName")
    recipe_text: str | None = Field(default=None, alias="recipeText")
    description: str | None = None
    animals_saved: dict[str, object] | None = Field(default=None, alias="animalsSaved")


class CommentIn(_CamelModel):
    """Comment on a shared recipe."""

    comment: str | None = None


class NutritionLogIn(_CamelModel):
    """Meal to append to the nutrition log."""

    date: str | None = None
    meal_name: str | None = Field(default=None, alias="mealName")
    nutrition: dict[str, object] | None = None


class GoalsIn(_CamelModel):
    """Replacement nutrition goals."""

    goals: dict[str, float] | None = None


class AnalyzeIn(_CamelModel):
    """Recipe text to analyse, optionally adding the result to the tally."""

    recipe_text: str | None = Field(default=None, alias="recipeText")
    record: bool = False

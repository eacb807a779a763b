"""Shared test fixtures."""

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from savefarm.adapters.huggingface_client import InferenceClient, InferenceReply
from savefarm.adapters.json_account_repository import (
    EMPTY_ACCOUNTS,
    JsonAccountRepository,
)
from savefarm.adapters.json_document import JsonDocument
from savefarm.adapters.json_nutrition_repository import JsonNutritionRepository
from savefarm.adapters.json_recipe_repository import (
    EMPTY_RECIPES,
    JsonRecipeRepository,
)
from savefarm.adapters.mealdb_client import MealDbClient
from savefarm.config import Settings
from savefarm.containers import AppContainer
from savefarm.services.accounts import AccountService
from savefarm.services.analysis import AnalysisService
from savefarm.services.cache import InMemoryCache
from savefarm.services.community import CommunityService
from savefarm.services.nutrition import NutritionService
from savefarm.services.passwords import PasswordHasher
from savefarm.services.recipes import RecipeLibraryService
from savefarm.services.sessions import InMemorySessionStore


@dataclass
class FakeInferenceClient(InferenceClient):
    """Fake inference client replaying canned replies per model."""

    replies: dict[str, InferenceReply] = field(default_factory=dict)
    default: InferenceReply = field(
        default_factory=lambda: InferenceReply(status_code=404, text="Not Found")
    )
    calls: list[tuple[str, str]] = field(default_factory=list)

    async def generate(self, model: str, prompt: str) -> InferenceReply:
        self.calls.append((model, prompt))
        return self.replies.get(model, self.default)


def _meal(meal_id: str, name: str) -> dict[str, object]:
    return {"idMeal": meal_id, "strMeal": name, "strMealThumb": f"{name}.jpg"}


@dataclass
class FakeMealDbClient(MealDbClient):
    """Fake TheMealDB client with in-memory responses."""

    categories: dict[str, list[dict[str, object]]] = field(
        default_factory=lambda: {
            "Vegan": [_meal("1", "Vegan Chili"), _meal("2", "Tofu Stir Fry")],
            "Vegetarian": [_meal("2", "Tofu Stir Fry"), _meal("3", "Dal")],
            "Starter": [],
            "Breakfast": [_meal("4", "Oat Porridge")],
        }
    )
    meals: dict[str, dict[str, object]] = field(
        default_factory=lambda: {
            "2": {
                "idMeal": "2",
                "strMeal": "Tofu Stir Fry",
                "strCategory": "Vegan",
                "strArea": "Chinese",
                "strInstructions": "Fry the tofu. Add the vegetables.",
                "strIngredient1": "Tofu",
                "strMeasure1": "400g",
                "strIngredient2": "Broccoli",
                "strMeasure2": "1 head",
                "strIngredient3": "",
                "strMeasure3": "",
            }
        }
    )
    failures: int = 0
    calls: list[str] = field(default_factory=list)

    async def filter_by_category(self, category: str) -> dict[str, object]:
        self._maybe_fail(f"filter:{category}")
        return {"meals": self.categories.get(category) or None}

    async def lookup(self, meal_id: str) -> dict[str, object]:
        self._maybe_fail(f"lookup:{meal_id}")
        meal = self.meals.get(meal_id)
        return {"meals": [meal] if meal else None}

    async def search(self, query: str) -> dict[str, object]:
        self._maybe_fail(f"search:{query}")
        found = [
            meal
            for meal in self.meals.values()
            if query.lower() in str(meal["strMeal"]).lower()
        ]
        return {"meals": found or None}

    def _maybe_fail(self, call: str) -> None:
        self.calls.append(call)
        if self.failures > 0:
            self.failures -= 1
            raise RuntimeError("recipe database down")


def build_accounts_document(data_dir: Path) -> JsonDocument:
    document = JsonDocument(data_dir / "users.json", EMPTY_ACCOUNTS)
    document.ensure_exists()
    return document


def build_recipes_document(data_dir: Path) -> JsonDocument:
    document = JsonDocument(data_dir / "shared_recipes.json", EMPTY_RECIPES)
    document.ensure_exists()
    return document


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(data_dir=tmp_path, hf_token=None)


@pytest.fixture
def sessions() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture
def accounts_document(tmp_path: Path) -> JsonDocument:
    return build_accounts_document(tmp_path)


@pytest.fixture
def recipes_document(tmp_path: Path) -> JsonDocument:
    return build_recipes_document(tmp_path)


@pytest.fixture
def account_service(
    accounts_document: JsonDocument, sessions: InMemorySessionStore
) -> AccountService:
    return AccountService(
        repository=JsonAccountRepository(accounts_document),
        sessions=sessions,
        hasher=PasswordHasher(),
    )


@pytest.fixture
def nutrition_service(
    accounts_document: JsonDocument, sessions: InMemorySessionStore
) -> NutritionService:
    return NutritionService(
        repository=JsonNutritionRepository(accounts_document),
        sessions=sessions,
    )


@pytest.fixture
def community_service(
    accounts_document: JsonDocument,
    recipes_document: JsonDocument,
    sessions: InMemorySessionStore,
) -> CommunityService:
    return CommunityService(
        recipes=JsonRecipeRepository(recipes_document),
        accounts=JsonAccountRepository(accounts_document),
        sessions=sessions,
    )


@pytest.fixture
def mealdb_client() -> FakeMealDbClient:
    return FakeMealDbClient()


@pytest.fixture
def container(
    settings: Settings,
    account_service: AccountService,
    nutrition_service: NutritionService,
    community_service: CommunityService,
    mealdb_client: FakeMealDbClient,
) -> AppContainer:
    analysis_service = AnalysisService(client=None, model=settings.hf_model)
    recipe_library_service = RecipeLibraryService(
        client=mealdb_client,
        cache=InMemoryCache(),
        retry_delay_seconds=0,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        account_service=account_service,
        nutrition_service=nutrition_service,
        community_service=community_service,
        analysis_service=analysis_service,
        recipe_library_service=recipe_library_service,
        close_resources=close_resources,
    )

"""Dependency container wiring for the application."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from savefarm.adapters.huggingface_client import HttpxHuggingFaceClient
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
from savefarm.adapters.json_session_store import EMPTY_SESSIONS, JsonSessionStore
from savefarm.adapters.mealdb_client import HttpxMealDbClient
from savefarm.config import Settings, has_usable_hf_token
from savefarm.domain.impact import MatchPolicy
from savefarm.services.accounts import AccountService
from savefarm.services.analysis import AnalysisService
from savefarm.services.cache import InMemoryCache
from savefarm.services.community import CommunityService
from savefarm.services.nutrition import NutritionService
from savefarm.services.passwords import PasswordHasher
from savefarm.services.recipes import RecipeLibraryService
from savefarm.services.sessions import InMemorySessionStore, SessionStore

_logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    account_service: AccountService
    nutrition_service: NutritionService
    community_service: CommunityService
    analysis_service: AnalysisService
    recipe_library_service: RecipeLibraryService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    accounts_document = JsonDocument(resolved_settings.users_path, EMPTY_ACCOUNTS)
    recipes_document = JsonDocument(resolved_settings.recipes_path, EMPTY_RECIPES)
    accounts_document.ensure_exists()
    recipes_document.ensure_exists()

    sessions = _build_session_store(resolved_settings)
    account_repository = JsonAccountRepository(accounts_document)
    account_service = AccountService(
        repository=account_repository,
        sessions=sessions,
        hasher=PasswordHasher(),
    )
    nutrition_service = NutritionService(
        repository=JsonNutritionRepository(accounts_document),
        sessions=sessions,
    )
    community_service = CommunityService(
        recipes=JsonRecipeRepository(recipes_document),
        accounts=account_repository,
        sessions=sessions,
    )

    inference_client = None
    if has_usable_hf_token(resolved_settings.hf_token):
        inference_client = HttpxHuggingFaceClient.create(
            token=resolved_settings.hf_token,
            base_url=resolved_settings.hf_base_url,
        )
    else:
        _logger.info("No Hugging Face token configured; analysing recipes locally")
    analysis_service = AnalysisService(
        client=inference_client,
        model=resolved_settings.hf_model,
        match_policy=MatchPolicy(resolved_settings.keyword_match_policy),
    )

    mealdb_client = HttpxMealDbClient.create(resolved_settings.mealdb_base_url)
    recipe_library_service = RecipeLibraryService(
        client=mealdb_client,
        cache=InMemoryCache(),
    )

    async def close_resources() -> None:
        await mealdb_client.close()
        if inference_client is not None:
            await inference_client.close()

    return AppContainer(
        settings=resolved_settings,
        account_service=account_service,
        nutrition_service=nutrition_service,
        community_service=community_service,
        analysis_service=analysis_service,
        recipe_library_service=recipe_library_service,
        close_resources=close_resources,
    )


def _build_session_store(settings: Settings) -> SessionStore:
    if settings.session_backend == "file":
        document = JsonDocument(settings.sessions_path, EMPTY_SESSIONS)
        document.ensure_exists()
        return JsonSessionStore(document)
    if settings.session_backend != "memory":
        raise ValueError(f"Unknown session backend: {settings.session_backend}")
    return InMemorySessionStore()

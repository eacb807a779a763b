"""Tests for the community service."""

import pytest

from savefarm.domain.errors import BadRequestError, NotFoundError, UnauthenticatedError
from savefarm.services.accounts import AccountService
from savefarm.services.community import CommunityService


@pytest.fixture
def session(account_service: AccountService) -> str:
    return account_service.register("alice", "pw").session_id


def test_leaderboard_orders_by_total_descending(
    account_service: AccountService, community_service: CommunityService
) -> None:
    for username, animals in (
        ("five", {"cow": 2.5, "chicken": 2.5}),
        ("twelve", {"fish": 12.0, "pig": 0.5}),
        ("zero", {}),
    ):
        session = account_service.register(username, "pw").session_id
        account_service.set_animals(session, animals)

    board = community_service.leaderboard()

    assert [entry.username for entry in board] == ["twelve", "five", "zero"]
    assert [entry.total_animals for entry in board] == [12.5, 5.0, 0]
    assert board[0].animals == {"fish": 12.0, "pig": 0.5}
    assert board[0].joined_at


def test_leaderboard_rounds_totals(
    account_service: AccountService, community_service: CommunityService
) -> None:
    session = account_service.register("alice", "pw").session_id
    account_service.set_animals(session, {"cow": 0.1, "pig": 0.2})

    assert community_service.leaderboard()[0].total_animals == 0.3


def test_share_recipe_prepends_newest(
    community_service: CommunityService, session: str
) -> None:
    older = community_service.share_recipe(session, "Chili", "Beans and spice")
    newer = community_service.share_recipe(
        session,
        "Tofu Wings",
        "Tofu, hot sauce",
        description="Game day",
        animals_saved={"chicken": 1.0},
    )

    recipes = community_service.list_recipes()

    assert [recipe.id for recipe in recipes] == [newer.id, older.id]
    assert recipes[0] == newer
    assert recipes[0].username == "alice"
    assert recipes[1].description == ""
    assert recipes[1].animals_saved == {}


@pytest.mark.parametrize(("name", "text"), [("", "text"), ("Name", None)])
def test_share_recipe_requires_name_and_text(
    community_service: CommunityService, session: str, name, text
) -> None:
    with pytest.raises(BadRequestError):
        community_service.share_recipe(session, name, text)


def test_share_recipe_requires_session(community_service: CommunityService) -> None:
    with pytest.raises(UnauthenticatedError):
        community_service.share_recipe(None, "Chili", "Beans")


def test_likes_are_not_deduplicated(
    community_service: CommunityService, session: str
) -> None:
    recipe = community_service.share_recipe(session, "Chili", "Beans")

    assert community_service.like_recipe(session, recipe.id) == 1
    assert community_service.like_recipe(session, recipe.id) == 2
    assert community_service.list_recipes()[0].likes == 2


def test_like_unknown_recipe(community_service: CommunityService, session: str) -> None:
    with pytest.raises(NotFoundError):
        community_service.like_recipe(session, "missing")


def test_comments_are_appended(
    community_service: CommunityService, session: str
) -> None:
    recipe = community_service.share_recipe(session, "Chili", "Beans")

    first = community_service.comment_on(session, recipe.id, "Looks great")
    second = community_service.comment_on(session, recipe.id, "  Made it twice ")

    comments = community_service.list_recipes()[0].comments
    assert comments == [first, second]
    assert second.text == "  Made it twice "
    assert second.username == "alice"


def test_blank_comment_is_rejected_before_lookup(
    community_service: CommunityService, session: str
) -> None:
    with pytest.raises(BadRequestError):
        community_service.comment_on(session, "missing", "   ")


def test_comment_on_unknown_recipe(
    community_service: CommunityService, session: str
) -> None:
    with pytest.raises(NotFoundError):
        community_service.comment_on(session, "missing", "Hello")

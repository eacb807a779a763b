"""Request-scoped dependencies shared by the routers."""

from fastapi import Header, Request

from savefarm.containers import AppContainer


def get_container(request: Request) -> AppContainer:
    """Return the container attached to the running app."""
    return request.app.state.container


async def session_token(x_session_id: str | None = Header(default=None)) -> str | None:
    """Read the session token from the ``x-session-id`` header."""
    return x_session_id

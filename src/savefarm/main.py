"""Command-line entrypoint running the API under uvicorn."""

import uvicorn

from savefarm.config import Settings


def main() -> None:
    """Serve the API on the configured host and port."""
    settings = Settings()
    uvicorn.run(
        "savefarm.api.asgi:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "local",
    )


if __name__ == "__main__":
    main()

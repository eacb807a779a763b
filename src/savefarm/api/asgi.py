"""ASGI entrypoint for the SaveFarm API."""

from savefarm.api.app import create_app
from savefarm.containers import build_container

app = create_app(build_container())

"""ASGI entrypoint for the EcoPlates API."""

from ecoplates.api.app import create_app
from ecoplates.containers import build_container

app = create_app(build_container())

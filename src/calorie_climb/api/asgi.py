"""ASGI entrypoint for the Calorie Climb API."""

from calorie_climb.api.app import create_app
from calorie_climb.containers import build_container

app = create_app(build_container())

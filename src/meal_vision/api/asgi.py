"""ASGI entrypoint for the meal vision API."""

from meal_vision.api.app import create_app
from meal_vision.containers import build_container

app = create_app(build_container())

"""ASGI entrypoint for the dish nutrition API."""

from dish_nutrition.api.app import create_app
from dish_nutrition.containers import build_container

app = create_app(build_container())

"""ASGI entrypoint for the meal calendar API."""

from meal_calendar.api.app import create_app
from meal_calendar.containers import build_container

app = create_app(build_container())

"""Serverless entrypoint exposing the ASGI app."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from meal_vision.api.asgi import app  # noqa: E402

__all__ = ["app"]

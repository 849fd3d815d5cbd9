"""FastAPI application for license plate search."""

from .config import get_settings
from .presentation.api import create_app
from .utils.logging import setup_logging

settings = get_settings()
setup_logging(settings)

app = create_app(settings=settings)

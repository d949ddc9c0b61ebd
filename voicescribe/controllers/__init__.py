"""FastAPI routers acting as controllers in the MVC architecture."""

from . import transcribe

__all__ = ["transcribe"]

"""Models used for API request and response payloads."""

from bookshelf_backend.api.models.book import BookPayload, BookResponse
from bookshelf_backend.api.models.health import HealthResponse

__all__ = ["BookPayload", "BookResponse", "HealthResponse"]

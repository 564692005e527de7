"""Liveness endpoint."""

from fastapi import APIRouter

from bookshelf_backend.api.models import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse()

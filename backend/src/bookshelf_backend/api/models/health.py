"""Pydantic model for the liveness probe."""

from typing import Literal

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Liveness payload shared by both applications."""

    status: Literal["ok"] = "ok"

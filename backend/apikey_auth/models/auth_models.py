from __future__ import annotations

from pydantic import BaseModel


class AuthCheckResponse(BaseModel):
    authenticated: bool
    scheme: str
    key_hint: str  # all but the last 4 characters masked


class HealthResponse(BaseModel):
    status: str

"""Shared response shapes."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body of every non-2xx API response."""

    error: str


class MessageResponse(BaseModel):
    message: str

"""
Generic response bodies.
"""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    """Body of every failed request."""
    error: str

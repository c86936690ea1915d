"""
Problem details payload for error responses.

Errors are reported using the RFC 9457 "problem details" shape: a
``type`` URI identifying the kind of problem, a short ``title``, the
HTTP ``status`` and a human readable ``detail``.  Unset optional
fields are left out of the serialized body.
"""

from http import HTTPStatus
from typing import Optional

from pydantic import BaseModel, Field

# Reference URIs for the status codes the API reports.
PROBLEM_TYPES = {
    400: "https://tools.ietf.org/html/rfc9110#section-15.5.1",
    404: "https://tools.ietf.org/html/rfc9110#section-15.5.5",
    405: "https://tools.ietf.org/html/rfc9110#section-15.5.6",
    422: "https://tools.ietf.org/html/rfc9110#section-15.5.21",
    500: "https://tools.ietf.org/html/rfc9110#section-15.6.1",
}


class ProblemDetails(BaseModel):
    """Schema for an error body."""

    type: Optional[str] = Field(None, examples=[PROBLEM_TYPES[404]])
    title: Optional[str] = Field(None, examples=["Not Found"])
    status: int = Field(..., examples=[404])
    detail: Optional[str] = Field(None, examples=["Star not found."])
    instance: Optional[str] = None

    @classmethod
    def for_status(cls, status: int, detail: Optional[str] = None) -> "ProblemDetails":
        """Build a problem for ``status`` with the standard type and title."""
        try:
            title = HTTPStatus(status).phrase
        except ValueError:
            title = None
        return cls(type=PROBLEM_TYPES.get(status), title=title, status=status, detail=detail)

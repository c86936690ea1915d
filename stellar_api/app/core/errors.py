"""
Error types and their HTTP rendering.

``NotFoundError`` is raised by endpoints when a name lookup finds no
record.  ``register_exception_handlers`` installs handlers on the
application that turn it, and the routing layer's own HTTP errors
(unknown path, wrong method), into problem details responses.
"""

import logging
from typing import Mapping, Optional

from fastapi import FastAPI, Request, status
from starlette.exceptions import HTTPException as StarletteHTTPException

from stellar_api.app.schemas.problem import ProblemDetails
from .responses import ProblemJSONResponse

logger = logging.getLogger(__name__)


class NotFoundError(Exception):
    """Raised when a catalog lookup yields no match."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


def problem_response(
    status_code: int,
    detail: Optional[str] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> ProblemJSONResponse:
    """Build a problem details response for ``status_code``."""
    problem = ProblemDetails.for_status(status_code, detail)
    return ProblemJSONResponse(
        status_code=status_code,
        content=problem.model_dump(exclude_none=True),
        headers=headers,
    )


async def not_found_handler(request: Request, exc: NotFoundError) -> ProblemJSONResponse:
    logger.info("%s %s: %s", request.method, request.url.path, exc.detail)
    return problem_response(exc.status_code, exc.detail)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> ProblemJSONResponse:
    # Starlette uses the reason phrase as detail when none is given.
    return problem_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the problem details handlers to ``app``."""
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

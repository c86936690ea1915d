"""
JSON response classes.

FastAPI's default ``JSONResponse`` writes compact JSON.  The API
returns indented JSON instead so that responses are readable in a
browser or terminal; ``IndentedJSONResponse`` is installed as the
application's default response class in ``main.create_app``.
"""

import json
from typing import Any

from fastapi.responses import JSONResponse

from .config import settings


class IndentedJSONResponse(JSONResponse):
    """JSON response rendered with ``settings.json_indent`` spaces."""

    def render(self, content: Any) -> bytes:
        return json.dumps(
            content,
            ensure_ascii=False,
            allow_nan=False,
            indent=settings.json_indent,
            separators=(",", ": "),
        ).encode("utf-8")


class ProblemJSONResponse(IndentedJSONResponse):
    """Indented JSON response carrying a problem details body."""

    media_type = "application/problem+json"

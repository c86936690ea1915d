"""
Main entrypoint for the Stellar API.

This module assembles the FastAPI application, sets up logging,
installs the JSON and problem details handling and includes the
versioned router.  The ``create_app`` function builds and configures
the app, which is then instantiated at module import time as ``app``
so it can be served directly, e.g.::

    uvicorn stellar_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.catalog import PLANETS, STARS
from .core.config import settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.responses import IndentedJSONResponse

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Logging is configured first, then the application is created with
    ``IndentedJSONResponse`` as its default response class so every
    endpoint returns indented JSON.  Lookup failures and routing errors
    are rendered as problem details.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        default_response_class=IndentedJSONResponse,
    )

    register_exception_handlers(app)

    # The v1 routes are served from the root: /stars, /planets.
    app.include_router(v1_router)

    logger.info("Catalog loaded: %d planets, %d stars", len(PLANETS), len(STARS))
    return app


app = create_app()

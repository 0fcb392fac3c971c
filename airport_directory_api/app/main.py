"""
Main entrypoint for the Airport Directory API.

This module assembles the FastAPI application, sets up logging, builds
the airport directory from the seed dataset and includes versioned
routers.  The ``create_app`` function builds and configures the app,
which is then instantiated at module import time as ``app``, e.g.::

    uvicorn airport_directory_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .services.airport_service import AirportDirectory


logger = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    """Render HTTP errors as a plain‑text body holding the error message."""
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


def create_app(
    settings: Optional[Settings] = None,
    directory: Optional[AirportDirectory] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use; the module‑level settings read from the
        environment are used when omitted.
    directory : Optional[AirportDirectory]
        Directory served by the routes.  When omitted, one is built
        from ``settings.seed_path``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings

    # Initialise logging before the directory is built so that seed
    # loading messages are visible.
    setup_logging(settings.log_level, settings.log_file)

    if directory is None:
        directory = AirportDirectory.from_seed(settings.seed_path)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings
    app.state.directory = directory

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.include_router(v1_router, prefix=settings.api_prefix)

    logger.info("%s %s ready with %d airports", settings.project_name, settings.api_version, directory.count())
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()

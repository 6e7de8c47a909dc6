"""
Main entrypoint for the Employee API.

This module assembles the FastAPI application: it sets up logging,
creates the in-memory employee store, registers the exception handlers
that produce the JSON failure envelope and includes the versioned
routers.  ``create_app`` builds a fresh application (and a fresh store)
on every call; ``app`` is instantiated at import time so it can be
served directly, e.g.::

    uvicorn employee_api.app.main:app --reload

Interactive documentation is served at ``settings.docs_url``
(``/api-docs`` by default).
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from .api.error_handlers import register_error_handlers
from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .services.employee_service import EmployeeService

tags_metadata = [
    {"name": "Employees", "description": "Employee records: CRUD and filtering."},
]


def create_app(
    app_settings: Optional[Settings] = None,
    service: Optional[EmployeeService] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use; defaults to the module-level ``settings``.
    service : Optional[EmployeeService]
        Store to serve.  When omitted a new one is created, seeded with
        the sample employees unless ``seed_employees`` is disabled.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    cfg = app_settings or default_settings
    # Initialise logging before anything else so that the setup below
    # can log.
    setup_logging(cfg.log_level, cfg.log_file or None)

    app = FastAPI(
        title=cfg.project_name,
        version=cfg.api_version,
        description=cfg.description,
        debug=cfg.debug,
        docs_url=cfg.docs_url,
        openapi_tags=tags_metadata,
    )

    if service is None:
        service = EmployeeService.seeded() if cfg.seed_employees else EmployeeService()
    app.state.employee_service = service
    app.state.settings = cfg

    register_error_handlers(app)

    @app.get("/", include_in_schema=False)
    async def root() -> RedirectResponse:
        return RedirectResponse(url=cfg.docs_url)

    app.include_router(v1_router, prefix=cfg.api_prefix)

    logging.getLogger(__name__).debug("Employee store ready with %d records", len(service))
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()

"""FastAPI application factory."""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.httpsredirect import HTTPSRedirectMiddleware

from .api.errors import install_error_handlers
from .api.router import router as api_router
from .config import Settings, get_settings
from .docs import build_openapi_document, install_swagger_ui, load_route_comments

LOGGER = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application instance.

    The API description is built here, once, from the routes registered
    below. A missing or malformed route comment file raises
    ``DocumentationSourceError`` so the process never starts serving.

    The document is served in every environment unless
    ``document_in_development_only`` is set; the Swagger UI is only ever
    mounted in development.
    """

    settings = settings or get_settings()
    comments = load_route_comments(settings.doc_comments_path)

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        description=settings.api_description,
        openapi_url=settings.openapi_url if settings.serves_document else None,
        docs_url=None,
        redoc_url=None,
    )
    app.state.settings = settings

    if settings.https_redirect:
        app.add_middleware(HTTPSRedirectMiddleware)

    install_error_handlers(app)
    app.include_router(api_router)

    if settings.is_development:
        install_swagger_ui(app, settings)

    document = build_openapi_document(app, settings, comments)
    app.openapi_schema = document
    app.openapi = lambda: document
    LOGGER.info("Application ready (environment=%s)", settings.environment)
    return app

"""Interactive documentation page served at the application root."""

import logging

from fastapi import FastAPI
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import HTMLResponse

from ..config import Settings

LOGGER = logging.getLogger(__name__)


def install_swagger_ui(app: FastAPI, settings: Settings, path: str = "/") -> None:
    """Serve Swagger UI at ``path`` pointing at the API description document."""

    openapi_url = settings.openapi_url
    title = settings.docs_title

    async def swagger_ui() -> HTMLResponse:
        return get_swagger_ui_html(openapi_url=openapi_url, title=title)

    app.add_api_route(path, swagger_ui, methods=["GET"], include_in_schema=False)
    LOGGER.info("Documentation UI available at %s (document %s)", path, openapi_url)

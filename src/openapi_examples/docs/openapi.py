"""Generation of the API description document."""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from ..api.errors import PROBLEM_CONTENT_TYPE
from ..config import Settings
from .comments import OperationComment, RouteComments

LOGGER = logging.getLogger(__name__)

HTTP_METHODS = {"get", "put", "post", "delete", "options", "head", "patch", "trace"}

# Default validation-error entries FastAPI adds for every route with parameters.
DEFAULT_VALIDATION_STATUS = "422"
DEFAULT_VALIDATION_SCHEMAS = ("HTTPValidationError", "ValidationError")


def build_openapi_document(app: FastAPI, settings: Settings, comments: RouteComments) -> Dict[str, Any]:
    """Introspect the registered routes and return the API description.

    Args:
        app: Application whose routes are described
        settings: Source of the title, version and contact/license metadata
        comments: Per-operation documentation merged into the result

    Returns:
        OpenAPI document as a plain dictionary
    """
    document = get_openapi(
        title=settings.api_title,
        version=settings.api_version,
        description=settings.api_description,
        routes=app.routes,
        terms_of_service=settings.terms_of_service_url,
        contact={
            "name": settings.contact_name,
            "email": settings.contact_email,
            "url": settings.contact_url,
        },
        license_info={"name": settings.license_name, "url": settings.license_url},
    )

    documented = set()
    for path, path_item in document.get("paths", {}).items():
        for method, operation in path_item.items():
            if method not in HTTP_METHODS:
                continue
            _replace_validation_response(operation)
            operation_id = operation.get("operationId")
            comment = comments.for_operation(operation_id) if operation_id else None
            if comment is None:
                LOGGER.debug("No route comment for %s %s", method.upper(), path)
                continue
            _apply_comment(operation, comment)
            documented.add(operation_id)

    for operation_id in sorted(set(comments.operations) - documented):
        LOGGER.warning("Route comment for unknown operation %r ignored", operation_id)

    _drop_default_validation_schemas(document)
    LOGGER.info(
        "Built API description '%s' v%s with %d path(s)",
        settings.api_title,
        settings.api_version,
        len(document.get("paths", {})),
    )
    return document


def _replace_validation_response(operation: Dict[str, Any]) -> None:
    responses = operation.get("responses", {})
    responses.pop(DEFAULT_VALIDATION_STATUS, None)
    problem = responses.get("400")
    if not problem:
        return
    content = problem.get("content", {})
    if "application/json" in content:
        content[PROBLEM_CONTENT_TYPE] = content.pop("application/json")


def _apply_comment(operation: Dict[str, Any], comment: OperationComment) -> None:
    operation["summary"] = comment.summary
    if comment.remarks:
        operation["description"] = comment.remarks
    for parameter in operation.get("parameters", []):
        description = comment.parameters.get(parameter.get("name"))
        if description:
            parameter["description"] = description
    success = operation.get("responses", {}).get("200")
    if success is not None and comment.returns:
        success["description"] = comment.returns


def _drop_default_validation_schemas(document: Dict[str, Any]) -> None:
    # Only the 422 responses dropped by _replace_validation_response use these.
    components = document.get("components", {})
    schemas = components.get("schemas", {})
    for name in DEFAULT_VALIDATION_SCHEMAS:
        schemas.pop(name, None)
    if "schemas" in components and not schemas:
        del components["schemas"]
    if "components" in document and not components:
        del document["components"]

"""API description generation and the interactive documentation UI."""

from .comments import DocumentationSourceError, OperationComment, RouteComments, load_route_comments
from .openapi import build_openapi_document
from .ui import install_swagger_ui

__all__ = [
    "DocumentationSourceError",
    "OperationComment",
    "RouteComments",
    "build_openapi_document",
    "install_swagger_ui",
    "load_route_comments",
]

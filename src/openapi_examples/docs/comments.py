"""Loading of the per-route documentation comments.

The comment file is the source-level documentation for the public routes. It
is keyed by operation id and merged into the generated API description at
startup, so a missing or malformed file stops the service from starting.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

LOGGER = logging.getLogger(__name__)


class DocumentationSourceError(RuntimeError):
    """Raised when the route comment source cannot be loaded."""


class OperationComment(BaseModel):
    """Documentation attached to a single operation."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    summary: str = Field(..., min_length=1)
    parameters: Dict[str, str] = Field(default_factory=dict)
    returns: Optional[str] = None
    remarks: Optional[str] = None


class RouteComments(BaseModel):
    """All operation comments, keyed by operation id."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    operations: Dict[str, OperationComment] = Field(default_factory=dict)

    def for_operation(self, operation_id: str) -> Optional[OperationComment]:
        return self.operations.get(operation_id)


def load_route_comments(path: Path) -> RouteComments:
    """Read and validate the comment file at ``path``.

    Args:
        path: Location of the JSON comment file

    Returns:
        Parsed route comments

    Raises:
        DocumentationSourceError: If the file is missing, is not valid JSON,
            or does not match the expected layout
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise DocumentationSourceError(f"Route comment file not found: {path}") from exc
    except OSError as exc:
        raise DocumentationSourceError(f"Unable to read route comment file {path}: {exc}") from exc

    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise DocumentationSourceError(f"Route comment file {path} is not valid JSON: {exc}") from exc

    try:
        comments = RouteComments.model_validate(payload)
    except ValidationError as exc:
        raise DocumentationSourceError(f"Route comment file {path} is malformed: {exc}") from exc

    LOGGER.debug("Loaded %d route comment(s) from %s", len(comments.operations), path)
    return comments

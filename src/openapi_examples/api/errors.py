"""Client error responses for requests rejected by parameter binding."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

LOGGER = logging.getLogger(__name__)

PROBLEM_CONTENT_TYPE = "application/problem+json"
PROBLEM_TYPE = "https://tools.ietf.org/html/rfc9110#section-15.5.1"
PROBLEM_TITLE = "One or more validation errors occurred."


class ValidationProblem(BaseModel):
    """Problem details body describing rejected request parameters."""

    type: str = Field(default=PROBLEM_TYPE)
    title: str = Field(default=PROBLEM_TITLE)
    status: int = Field(default=400)
    errors: Dict[str, List[str]] = Field(default_factory=dict)

    @classmethod
    def from_errors(cls, errors: List[Dict[str, Any]]) -> "ValidationProblem":
        grouped: Dict[str, List[str]] = {}
        for error in errors:
            loc = [str(part) for part in error.get("loc", ())]
            # Drop the location kind ("path", "query", ...) and keep the field name.
            name = ".".join(loc[1:]) if len(loc) > 1 else "".join(loc)
            message = error.get("msg", "Invalid value")
            if "input" in error:
                message = f"The value '{error['input']}' is not valid. {message}"
            grouped.setdefault(name, []).append(message)
        return cls(errors=grouped)


async def validation_problem_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    problem = ValidationProblem.from_errors(list(exc.errors()))
    LOGGER.info(
        "Rejected %s %s: invalid %s",
        request.method,
        request.url.path,
        ", ".join(problem.errors) or "request",
    )
    return JSONResponse(
        status_code=problem.status,
        content=jsonable_encoder(problem),
        media_type=PROBLEM_CONTENT_TYPE,
    )


def install_error_handlers(app: FastAPI) -> None:
    """Answer binder failures with 400 problem details instead of FastAPI's 422."""

    app.add_exception_handler(RequestValidationError, validation_problem_handler)

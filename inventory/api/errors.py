"""
Exception handlers - map domain and store errors to a JSON error envelope.
"""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from inventory.core.errors import MissingReferenceError


class ErrorEnvelope(JSONResponse):
    def __init__(self, *, status_code: int, code: str, message: str, details: Any | None = None) -> None:
        payload: dict[str, Any] = {"code": code, "message": message}
        if details is not None:
            payload["details"] = details
        super().__init__(payload, status_code=status_code)


async def missing_reference_handler(request: Request, exc: MissingReferenceError):
    return ErrorEnvelope(
        status_code=422,
        code="missing_reference",
        message=str(exc),
        details={"entity": exc.entity, "key": exc.key},
    )


async def store_error_handler(request: Request, exc: SQLAlchemyError):
    return ErrorEnvelope(status_code=503, code="store_unavailable", message="Backing store error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(MissingReferenceError, missing_reference_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)

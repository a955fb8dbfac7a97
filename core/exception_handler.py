import logging
from typing import Any

from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from fastapi.exceptions import RequestValidationError

from core.exceptions import BaseCustomException
from core.schemas import ApiResponse


def error_response(status_code: int, message: str, data: Any = None) -> JSONResponse:
    """
    Build an error envelope response.

    Parameters
    ----------
    status_code : int
        HTTP status code
    message : str
        Error message
    data : Any
        Optional diagnostic payload

    Returns
    -------
    JSONResponse
        Error response
    """
    envelope = ApiResponse[Any](status_code=status_code, message=message, data=data)
    return JSONResponse(
        status_code=status_code,
        content=envelope.model_dump(mode="json", by_alias=True)
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Handler for request validation errors.

    Parameters
    ----------
    request : Request
        FastAPI request
    exc : RequestValidationError
        Validation error

    Returns
    -------
    JSONResponse
        Error response
    """
    errors = []
    for error in exc.errors():
        field_path = ".".join(
            str(x) for x in error["loc"] if not isinstance(x, int) and x not in ("body", "query")
        )
        errors.append({
            "field": field_path or "query",
            "message": error["msg"],
            "type": error["type"]
        })

    return error_response(422, "Validation error", {"errors": errors})


async def http_exception_handler(request: Request, exc: HTTPException):
    """
    Handler for HTTP exceptions.

    Parameters
    ----------
    request : Request
        FastAPI request
    exc : HTTPException
        HTTP exception

    Returns
    -------
    JSONResponse
        Error response
    """
    return error_response(exc.status_code, str(exc.detail))


async def starlette_exception_handler(request: Request, exc: StarletteHTTPException):
    """
    Handler for Starlette HTTP exceptions.

    Parameters
    ----------
    request : Request
        FastAPI request
    exc : StarletteHTTPException
        Starlette HTTP exception

    Returns
    -------
    JSONResponse
        Error response
    """
    return await http_exception_handler(request, HTTPException(status_code=exc.status_code, detail=exc.detail))


async def custom_exception_handler(request: Request, exc: Exception):
    """
    Handler for custom exceptions.

    Parameters
    ----------
    request : Request
        FastAPI request
    exc : Exception
        Exception

    Returns
    -------
    JSONResponse
        Error response
    """
    if isinstance(exc, BaseCustomException):
        return error_response(exc.get_status_code(), exc.message, exc.data)

    logger = await request.app.state.dishka_container.get(logging.Logger, component="logger")
    logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=exc)
    return error_response(500, "Internal server error")

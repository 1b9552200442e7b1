# shop_api/api/errors.py
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from shop_api.utils.logging import get_logger

logger = get_logger(__name__)


def _describe(exc: RequestValidationError) -> str:
    err = exc.errors()[0]
    field = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
    return f"{field}: {err['msg']}" if field else err["msg"]


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # zle typy / zly JSON to tez blad klienta -> 400 zamiast 422
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": _describe(exc)})


async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.exception(f"Blad bazy danych: {request.method} {request.url.path}")
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": str(exc)})


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Nieobsluzony blad: {request.method} {request.url.path}")
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": str(exc)})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

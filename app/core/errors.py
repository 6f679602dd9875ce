import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Ошибка на сервере"


class ApiError(Exception):
    """Ошибка, которую обработчик превращает в ответ {message, error?}"""

    def __init__(self, status_code: int, message: str, error: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.error = error


def storage_error(exc: Exception) -> ApiError:
    return ApiError(500, SERVER_ERROR_MESSAGE, error=str(exc))


def error_response(status_code: int, message: str, error: str | None = None) -> JSONResponse:
    content = {"message": message}
    if error is not None:
        content["error"] = error
    return JSONResponse(status_code=status_code, content=content)


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message} ({exc.error})")
    else:
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return error_response(exc.status_code, exc.message, exc.error)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Тело запроса не JSON или не объект
    errors = exc.errors()
    detail = errors[0].get("msg", "Некорректный запрос") if errors else "Некорректный запрос"
    logger.info(f"{request.method} {request.url.path} -> 400: {detail}")
    return error_response(400, "Некорректное тело запроса", detail)


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    # Всё, что обработчик не поймал сам (например, переполнение целого в драйвере)
    logger.exception(f"{request.method} {request.url.path} -> 500: {exc}")
    return error_response(500, SERVER_ERROR_MESSAGE, str(exc))


def setup_error_handling(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

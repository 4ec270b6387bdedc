# api/main.py
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .docs import install_openapi, local_servers
from .endpoints import users
from .settings import Settings, settings as default_settings
from ..db.store import UserStore

WELCOME_MESSAGE = "Welcome to the API server with CRUD, Auth, and Swagger!"
INVALID_REQUEST_MESSAGE = "Invalid request"

# Базовая конфигурация логирования для всего приложения
logging.basicConfig(level=default_settings.LOG_LEVEL)


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    # Любая HTTP-ошибка отдаётся как {"message": ...}
    return JSONResponse({"message": exc.detail}, status_code=exc.status_code, headers=exc.headers)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    logging.warning(f"Invalid request {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse({"message": INVALID_REQUEST_MESSAGE}, status_code=400)


def create_app(settings: Optional[Settings] = None, store: Optional[UserStore] = None) -> FastAPI:
    """Собирает приложение со своей коллекцией пользователей."""
    settings = settings or default_settings
    if store is None:
        if settings.SEED_USERS:
            store = UserStore.seeded(id_assignment=settings.ID_ASSIGNMENT)
        else:
            store = UserStore(id_assignment=settings.ID_ASSIGNMENT)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description=settings.PROJECT_DESCRIPTION,
        version=settings.VERSION,
        servers=local_servers(settings.PORT),
        docs_url=settings.DOCS_URL,
        redoc_url=None,
    )
    app.state.settings = settings
    app.state.store = store

    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    # Регистрация маршрутов с указанием префикса и тегов для документации
    app.include_router(users.router, prefix=f"{settings.API_PREFIX}/users", tags=["users"])

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    def read_root():
        return WELCOME_MESSAGE

    install_openapi(app)
    return app


app = create_app()

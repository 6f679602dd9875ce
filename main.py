import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from app.api.users import router as users_router
from app.api.groups import router as groups_router
from app.core.config import DATABASE_URL, FRONT_ORIGIN, LOG_LEVEL, PORT
from app.core.db import Database
from app.core.errors import setup_error_handling
from app.core.events import build_lifespan

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)


def create_app(database: Database | None = None) -> FastAPI:
    if database is None:
        database = Database(DATABASE_URL)

    app = FastAPI(title="Users & Groups API", lifespan=build_lifespan(database))

    # Добавляем CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[FRONT_ORIGIN],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_error_handling(app)

    # Подключаем API-маршруты
    app.include_router(users_router, prefix="/api", tags=["Пользователи"])
    app.include_router(groups_router, prefix="/api", tags=["Группы"])

    @app.get("/", response_class=PlainTextResponse)
    def root():
        return "API работает"

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    logger.info(f"🚀 Сервер запускается на http://localhost:{PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)

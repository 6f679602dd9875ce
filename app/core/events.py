import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from app.core.db import Database
from app.models.group import Group  # noqa: F401  регистрируем таблицы в Base.metadata
from app.models.user import User  # noqa: F401

logger = logging.getLogger(__name__)


def init_database(database: Database) -> None:
    """
    Проверяет подключение и создаёт таблицы, если их ещё нет.
    Любая ошибка пробрасывается наружу: сервер не должен стартовать без схемы.
    """
    try:
        database.ping()
        logger.info("✅ Подключение к базе данных установлено")
        database.create_tables()
        logger.info(f"✅ Таблицы {Group.__tablename__} и {User.__tablename__} готовы")
    except Exception as e:
        logger.error(f"❌ Ошибка подключения к базе данных: {e}")
        raise


def build_lifespan(database: Database):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.database = database
        init_database(database)
        yield
        database.dispose()
        logger.info("Соединения с базой данных закрыты")

    return lifespan

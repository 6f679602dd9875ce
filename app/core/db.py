from sqlalchemy import create_engine, text
from sqlalchemy.orm import declarative_base
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi import Request

# Базовый класс для моделей
Base = declarative_base()


class Database:
    """
    Клиент хранилища: создаётся один раз при старте и живёт всё время работы процесса.
    Хранится в app.state.database, обработчики получают сессии через get_db.
    """

    def __init__(self, url: str):
        self.url = url
        if url.startswith("sqlite"):
            # Одна in-memory база на все потоки пула FastAPI
            self.engine = create_engine(
                url,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        else:
            self.engine = create_engine(url, pool_pre_ping=True)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def ping(self) -> None:
        with self.engine.connect() as connection:
            connection.execute(text("SELECT 1"))

    def create_tables(self) -> None:
        Base.metadata.create_all(bind=self.engine)

    def dispose(self) -> None:
        self.engine.dispose()


# Функция для получения сессии БД (используется в Depends)
def get_db(request: Request):
    db = request.app.state.database.SessionLocal()
    try:
        yield db
    finally:
        db.close()

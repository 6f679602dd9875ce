from sqlalchemy import Column, Integer, String, text
from app.core.db import Base
from app.core.config import TABLE_USERS


class User(Base):
    __tablename__ = TABLE_USERS
    __table_args__ = {
        "mysql_engine": "InnoDB",
        "mysql_charset": "utf8mb4",
        "sqlite_autoincrement": True,
    }

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(30), nullable=False)
    surname = Column(String(80), nullable=False)
    marks = Column(Integer, nullable=False, server_default=text("0"))
    # Ссылка на группу без внешнего ключа: существование группы не проверяется
    group_id = Column(Integer, nullable=False)

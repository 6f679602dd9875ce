from sqlalchemy import Column, Integer, String
from app.core.db import Base
from app.core.config import TABLE_GROUPS


class Group(Base):
    __tablename__ = TABLE_GROUPS
    __table_args__ = {
        "mysql_engine": "InnoDB",
        "mysql_charset": "utf8mb4",
        "sqlite_autoincrement": True,
    }

    id = Column(Integer, primary_key=True, autoincrement=True)
    group_name = Column(String(25), unique=True, nullable=False)

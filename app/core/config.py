import os
from dotenv import load_dotenv

# Загружаем переменные окружения
load_dotenv()

# Строка подключения к MariaDB/MySQL
MYSQL_URI = os.getenv("MYSQL_URI", "sqlite:///./users_groups.db")

# Имена таблиц
TABLE_USERS = os.getenv("TABLE_USERS", "users")
TABLE_GROUPS = os.getenv("TABLE_GROUPS", "groups")

# Разрешённый источник для CORS
FRONT_ORIGIN = os.getenv("FRONT_ORIGIN", "http://localhost:4200")

PORT = int(os.getenv("PORT", 5000))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def normalize_database_url(url: str) -> str:
    """mysql:// без драйвера SQLAlchemy не понимает, подставляем PyMySQL"""
    if url.startswith("mysql://"):
        return "mysql+pymysql://" + url[len("mysql://"):]
    if url.startswith("mariadb://"):
        return "mariadb+pymysql://" + url[len("mariadb://"):]
    return url


# Формируем строку подключения
DATABASE_URL = normalize_database_url(MYSQL_URI)

import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.models.group import Group
from app.models.user import User

logger = logging.getLogger(__name__)


# Код ошибки MySQL/MariaDB "Duplicate entry"
MYSQL_DUPLICATE_ENTRY = 1062


def is_unique_violation(exc: IntegrityError) -> bool:
    args = getattr(exc.orig, "args", ())
    if args and args[0] == MYSQL_DUPLICATE_ENTRY:
        return True
    return "UNIQUE constraint failed" in str(exc.orig)


class DuplicateGroupError(Exception):
    """Группа с таким именем уже существует"""

    def __init__(self, group_name: str, original: Exception):
        super().__init__(f"Группа '{group_name}' уже существует: {original}")
        self.group_name = group_name
        self.original = original


def list_users(db: Session) -> list[User]:
    return db.query(User).order_by(User.id.asc()).all()


def list_groups(db: Session) -> list[Group]:
    return db.query(Group).order_by(Group.id.asc()).all()


def create_user(db: Session, name: str, surname: str, marks: int, group_id: int) -> int:
    """Создаёт пользователя и возвращает присвоенный id"""
    new_user = User(name=name, surname=surname, marks=marks, group_id=group_id)
    try:
        db.add(new_user)
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(new_user)
    logger.info(f"Создан пользователь {new_user.id}")
    return new_user.id


def create_group(db: Session, group_name: str) -> int:
    """
    Создаёт группу и возвращает присвоенный id.
    Повтор имени ловится уникальным индексом и превращается в DuplicateGroupError.
    """
    new_group = Group(group_name=group_name)
    try:
        db.add(new_group)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if is_unique_violation(e):
            raise DuplicateGroupError(group_name, e) from e
        raise
    except Exception:
        db.rollback()
        raise
    db.refresh(new_group)
    logger.info(f"Создана группа {new_group.id}")
    return new_group.id


def update_user_marks(db: Session, user_id: int, marks: int) -> int:
    """Возвращает количество изменённых строк (0 или 1)"""
    try:
        affected = db.query(User).filter(User.id == user_id).update(
            {User.marks: marks}, synchronize_session=False
        )
        db.commit()
    except Exception:
        db.rollback()
        raise
    return affected


def delete_user(db: Session, user_id: int) -> int:
    """Возвращает количество удалённых строк (0 или 1)"""
    try:
        affected = db.query(User).filter(User.id == user_id).delete(synchronize_session=False)
        db.commit()
    except Exception:
        db.rollback()
        raise
    return affected

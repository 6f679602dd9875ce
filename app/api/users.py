import logging
from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.core.db import get_db
from app.core.errors import ApiError, storage_error
from app.schemas.user import (
    MarksUpdate,
    UserChangedResponse,
    UserCreate,
    UserCreatedResponse,
)
from app.services import gateway
from app.services.validation import is_present, parse_id, parse_integer

router = APIRouter()
logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Отсутствует одно из 4 обязательных полей"
INVALID_MARKS_MESSAGE = "Оценка пользователя должна быть целым числом."
NOT_FOUND_MESSAGE = "Пользователь не найден в базе данных"


@router.post("/user", status_code=201, response_model=UserCreatedResponse)
def create_user(user_data: UserCreate, db: Session = Depends(get_db)):
    """Создание пользователя"""
    if not (
        is_present(user_data.name)
        and is_present(user_data.surname)
        and user_data.marks is not None
        and is_present(user_data.groupId)
    ):
        raise ApiError(400, MISSING_FIELDS_MESSAGE)
    if not isinstance(user_data.name, str) or not isinstance(user_data.surname, str):
        raise ApiError(400, "Имя и фамилия должны быть строками.")

    marks = parse_integer(user_data.marks)
    if marks is None:
        raise ApiError(400, INVALID_MARKS_MESSAGE)
    group_id = parse_integer(user_data.groupId)
    if group_id is None:
        raise ApiError(400, "Идентификатор группы должен быть целым числом.")

    try:
        user_id = gateway.create_user(db, user_data.name, user_data.surname, marks, group_id)
    except SQLAlchemyError as e:
        raise storage_error(e) from e

    return {
        "message": "Пользователь успешно создан",
        "user": {
            "id": user_id,
            "name": user_data.name,
            "surname": user_data.surname,
            "marks": marks,
            "group_id": group_id,
        },
    }


@router.put("/user/{user_id}/marks", response_model=UserChangedResponse)
def update_user_marks(user_id: str, payload: MarksUpdate, db: Session = Depends(get_db)):
    """Изменение оценки пользователя"""
    parsed_id = parse_id(user_id)
    if parsed_id is None:
        raise ApiError(400, "Отсутствует id для изменения оценки")
    marks = parse_integer(payload.marks)
    if marks is None:
        raise ApiError(400, INVALID_MARKS_MESSAGE)

    try:
        affected = gateway.update_user_marks(db, parsed_id, marks)
    except SQLAlchemyError as e:
        raise storage_error(e) from e
    if affected == 0:
        raise ApiError(404, NOT_FOUND_MESSAGE)

    return {"message": f"Оценка пользователя изменена на: {marks}", "user": {"id": parsed_id}}


@router.delete("/user/{user_id}", response_model=UserChangedResponse)
def delete_user(user_id: str, db: Session = Depends(get_db)):
    """Удаление пользователя"""
    parsed_id = parse_id(user_id)
    if parsed_id is None:
        raise ApiError(400, "Отсутствует id для удаления")

    try:
        affected = gateway.delete_user(db, parsed_id)
    except SQLAlchemyError as e:
        raise storage_error(e) from e
    if affected == 0:
        raise ApiError(404, NOT_FOUND_MESSAGE)

    logger.info(f"Пользователь {parsed_id} удалён")
    return {"message": "Пользователь успешно удалён", "user": {"id": parsed_id}}

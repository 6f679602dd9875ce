from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.core.db import get_db
from app.core.errors import ApiError, storage_error
from app.schemas.group import GroupCreate, GroupCreatedResponse, GroupResponse, UsersGroupsResponse
from app.schemas.user import UserResponse
from app.services import gateway
from app.services.gateway import DuplicateGroupError
from app.services.validation import is_present

router = APIRouter()


@router.get("/users-groups", response_model=UsersGroupsResponse)
def get_users_groups(db: Session = Depends(get_db)):
    """
    Возвращает всех пользователей и все группы, отсортированные по id.
    """
    try:
        users = gateway.list_users(db)
        groups = gateway.list_groups(db)
    except SQLAlchemyError as e:
        raise storage_error(e) from e

    return UsersGroupsResponse(
        users=[UserResponse.model_validate(u) for u in users],
        groups=[GroupResponse.model_validate(g) for g in groups],
    )


@router.post("/group", status_code=201, response_model=GroupCreatedResponse)
def create_group(group_data: GroupCreate, db: Session = Depends(get_db)):
    """Создание группы. Повтор имени отклоняется базой данных."""
    if not is_present(group_data.groupName):
        raise ApiError(400, "Отсутствует обязательное поле")
    if not isinstance(group_data.groupName, str):
        raise ApiError(400, "Название группы должно быть строкой.")

    try:
        group_id = gateway.create_group(db, group_data.groupName)
    except (DuplicateGroupError, SQLAlchemyError) as e:
        raise storage_error(e) from e

    return {
        "message": "Группа успешно создана",
        "group": {"id": group_id, "group_name": group_data.groupName},
    }

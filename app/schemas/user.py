from typing import Any, Optional
from pydantic import BaseModel, ConfigDict


# Поля не типизируются строго: проверка и приведение делаются в обработчике,
# чтобы любая ошибка ввода давала 400, а не 422
class UserCreate(BaseModel):
    name: Optional[Any] = None
    surname: Optional[Any] = None
    marks: Optional[Any] = None
    groupId: Optional[Any] = None


class MarksUpdate(BaseModel):
    marks: Optional[Any] = None


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    surname: str
    marks: int
    group_id: int


class UserId(BaseModel):
    id: int


class UserCreatedResponse(BaseModel):
    message: str
    user: UserResponse


class UserChangedResponse(BaseModel):
    message: str
    user: UserId

from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict
from app.schemas.user import UserResponse


class GroupCreate(BaseModel):
    groupName: Optional[Any] = None


class GroupResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    group_name: str


class GroupCreatedResponse(BaseModel):
    message: str
    group: GroupResponse


class UsersGroupsResponse(BaseModel):
    users: List[UserResponse]
    groups: List[GroupResponse]

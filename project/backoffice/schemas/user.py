# backoffice/schemas/user.py

from pydantic import Field
from backoffice.models.user import Role
from backoffice.schemas.common import CamelModel

class UserCredentials(CamelModel):
    """
    Логин и пароль: используется для регистрации и входа.
    """
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

class UserCreate(UserCredentials):
    """
    Схема для создания пользователя администратором.
    Роль по умолчанию vendor.
    """
    role: Role = Role.VENDOR

class UserResponse(CamelModel):
    """
    Схема для ответа API: пароль наружу не отдаём.
    """
    id: int
    username: str
    role: Role

    model_config = {
        "from_attributes": True
    }

class TokenResponse(CamelModel):
    access_token: str
    token_type: str = "bearer"
    user: UserResponse

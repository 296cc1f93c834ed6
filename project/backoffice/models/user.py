# backoffice/models/user.py

from enum import Enum
from backoffice.models.base import Row


class Role(str, Enum):
    ADMIN = "admin"
    VENDOR = "vendor"


class User(Row):
    username: str                   # уникальный логин
    password: str                   # хэш пароля
    role: Role = Role.VENDOR

# backoffice/services/profile.py

from typing import Optional
from fastapi import Request

from backoffice.config import settings
from backoffice.models.user import Role, User
from backoffice.schemas.user import UserCreate
from backoffice.services.storage import Store
from backoffice.utils.security import hash_password, verify_password


class UsernameTakenError(Exception):
    """Логин уже занят другим пользователем."""


async def read_users_service(request: Request) -> list[User]:
    """
    Получение списка пользователей с логированием.
    """
    store: Store = request.state.store
    log = request.app.state.log

    users = store.get_users()
    await log.log_info("user", f"{len(users)} пользователей загружено")
    return users


async def read_user_by_username_service(username: str, request: Request) -> Optional[User]:
    store: Store = request.state.store
    return store.get_user_by_username(username)


async def create_user_service(user: UserCreate, request: Request) -> User:
    """
    Создание пользователя. Пароль хэшируется перед сохранением.
    Логин должен быть уникальным, иначе UsernameTakenError.
    """
    store: Store = request.state.store
    log = request.app.state.log

    if store.get_user_by_username(user.username) is not None:
        await log.log_warning("user", "Логин уже занят", {"username": user.username})
        raise UsernameTakenError(user.username)

    hashed = user.model_copy(update={"password": hash_password(user.password)})
    created = store.create_user(hashed)
    await log.log_info("user", "Пользователь создан", {"id": created.id, "role": created.role})
    return created


async def authenticate_user_service(username: str, password: str, request: Request) -> Optional[User]:
    """
    Проверка логина и пароля. Возвращает пользователя или None.
    """
    user = await read_user_by_username_service(username, request)
    if user is None or not verify_password(password, user.password):
        return None
    return user


def ensure_admin_user(store: Store) -> Optional[User]:
    """
    Если в хранилище нет ни одного администратора, создаёт его
    из ADMIN_LOGIN / ADMIN_PASSWORD. Возвращает созданного пользователя или None.
    """
    if store.has_admin() or not settings.ADMIN_LOGIN:
        return None

    return store.create_user(UserCreate(
        username=settings.ADMIN_LOGIN,
        password=hash_password(settings.ADMIN_PASSWORD),
        role=Role.ADMIN,
    ))

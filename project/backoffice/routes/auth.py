# backoffice/routes/auth.py

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.security import OAuth2PasswordBearer
from jwt import ExpiredSignatureError, InvalidTokenError
from typing import List, Optional

from backoffice.config import settings
from backoffice.models.user import Role, User
from backoffice.schemas.user import TokenResponse, UserCreate, UserCredentials, UserResponse
from backoffice.services.profile import (
    UsernameTakenError,
    authenticate_user_service,
    create_user_service,
    read_user_by_username_service,
    read_users_service,
)
from backoffice.utils.security import create_access_token, decode_access_token

router = APIRouter()

# ────────────── Токен: заголовок Bearer или cookie ──────────────
oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_PREFIX}/login", auto_error=False)


async def get_current_user(request: Request, token: Optional[str] = Depends(oauth2_scheme)) -> User:
    """
    Проверяет JWT токен (заголовок Authorization или cookie) и возвращает пользователя.

    **Статусы:**
    - 401 Unauthorized – токена нет, он истёк, неверный или пользователь не найден
    """
    log = request.app.state.log
    token = token or request.cookies.get(settings.AUTH_COOKIE_NAME)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        payload = decode_access_token(token)
    except ExpiredSignatureError:
        await log.log_warning("auth", "Токен истёк")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Token expired")
    except InvalidTokenError:
        await log.log_warning("auth", "Неверный токен")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Token invalid")

    username = payload.get("sub")
    if username is None:
        await log.log_error("auth", "Токен не содержит username")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")

    user = await read_user_by_username_service(username, request)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found")
    return user


async def admin_required(request: Request, user: User = Depends(get_current_user)) -> User:
    """Пропускает только администраторов, остальным 403."""
    if user.role is Role.ADMIN:
        return user
    if user.role is Role.VENDOR:
        await request.app.state.log.log_warning("auth", "Доступ запрещён: требуется администратор", {"user_id": user.id})
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Доступ запрещён: требуется администратор")
    raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=f"Неизвестная роль: {user.role}")


# ────────────── Регистрация ──────────────
@router.post(
    "/register",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Регистрация нового пользователя",
    responses={
        201: {"description": "Пользователь успешно зарегистрирован"},
        400: {"description": "Логин уже занят"},
        422: {"description": "Ошибка валидации"},
    },
)
async def register_user(request: Request, credentials: UserCredentials):
    """
    Регистрация нового пользователя.

    - Все новые пользователи **по умолчанию продавцы** (`role=vendor`).
    - Пароль хэшируется перед сохранением.
    """
    user = UserCreate(username=credentials.username, password=credentials.password, role=Role.VENDOR)
    try:
        return await create_user_service(user, request)
    except UsernameTakenError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Пользователь с логином '{user.username}' уже существует",
        )


# ────────────── Вход ──────────────
@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Вход: получение JWT токена",
    responses={
        200: {"description": "Токен выдан и записан в cookie"},
        401: {"description": "Неверный логин или пароль"},
        422: {"description": "Ошибка валидации входных данных"},
    },
)
async def login(request: Request, response: Response, credentials: UserCredentials):
    """
    Проверяет логин и пароль. Возвращает токен, его тип и данные пользователя;
    тот же токен кладётся в httpOnly cookie для браузерного клиента.
    """
    log = request.app.state.log
    user = await authenticate_user_service(credentials.username, credentials.password, request)
    if user is None:
        await log.log_warning("auth", "Неудачная попытка входа", {"username": credentials.username})
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Неверный логин или пароль",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = create_access_token(data={"sub": user.username})
    response.set_cookie(
        settings.AUTH_COOKIE_NAME,
        access_token,
        httponly=True,
        samesite="lax",
        max_age=settings.AUTH_TOKEN_EXPIRE_MINUTES * 60,
    )
    await log.log_info("auth", "Пользователь успешно авторизован", {"user_id": user.id})
    return TokenResponse(access_token=access_token, user=UserResponse.model_validate(user))


# ────────────── Выход ──────────────
@router.post("/logout", summary="Выход: удаление cookie с токеном")
async def logout(request: Request, response: Response):
    response.delete_cookie(settings.AUTH_COOKIE_NAME)
    await request.app.state.log.log_info("auth", "Выход пользователя")
    return {"status": "ok"}


# ────────────── Текущий пользователь ──────────────
@router.get(
    "/user",
    response_model=UserResponse,
    summary="Текущий пользователь",
    responses={401: {"description": "Не авторизован"}},
)
async def read_current_user(user: User = Depends(get_current_user)):
    return user


# ────────────── Пользователи (только администратор) ──────────────
@router.get(
    "/users",
    response_model=List[UserResponse],
    summary="Список всех пользователей (только админ)",
    responses={
        401: {"description": "Токен невалиден"},
        403: {"description": "Доступ запрещён для продавца"},
    },
)
async def get_users(request: Request, _: User = Depends(admin_required)):
    return await read_users_service(request)


@router.post(
    "/users",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Создание пользователя с любой ролью (только админ)",
    responses={
        401: {"description": "Токен невалиден"},
        403: {"description": "Доступ запрещён для продавца"},
        409: {"description": "Пользователь с таким логином уже существует"},
        422: {"description": "Ошибка валидации данных"},
    },
)
async def create_user(request: Request, user: UserCreate, _: User = Depends(admin_required)):
    try:
        return await create_user_service(user, request)
    except UsernameTakenError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Пользователь с логином '{user.username}' уже существует",
        )

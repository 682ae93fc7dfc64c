"""
Auth API Router - registration and login.

Request fields are optional in the schema so that a missing field produces
the same 400 message as a blank one.
"""

from logging import getLogger
from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, status
from pydantic import BaseModel

from konektz.application.commands.auth import (
    LoginUserCommand,
    LoginUserHandler,
    RegisterUserCommand,
    RegisterUserHandler,
)
from konektz.application.dto.user import PublicUserDTO

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class RegisterRequest(BaseModel):
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class UserPayload(BaseModel):
    user: PublicUserDTO


class RegisterResponse(BaseModel):
    status: str = "success"
    message: str = "User registered successfully"
    data: UserPayload


class LoginResponse(BaseModel):
    status: str = "success"
    message: str = "Login successful"
    token: str
    data: UserPayload


# ==================== ROUTER ====================

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def register(
    request: RegisterRequest,
    handler: FromDishka[RegisterUserHandler],
):
    """Create an account."""
    user = await handler.execute(
        RegisterUserCommand(
            username=request.username,
            email=request.email,
            password=request.password,
        )
    )
    return RegisterResponse(data=UserPayload(user=PublicUserDTO.from_entity(user)))


@router.post(
    "/login",
    response_model=LoginResponse,
    status_code=status.HTTP_200_OK,
)
@inject
async def login(
    request: LoginRequest,
    handler: FromDishka[LoginUserHandler],
):
    """Exchange email + password for a bearer token valid for seven days."""
    result = await handler.execute(
        LoginUserCommand(email=request.email, password=request.password)
    )
    logger.info(f"User {result.user.id.value} logged in")
    return LoginResponse(
        token=result.token,
        data=UserPayload(user=PublicUserDTO.from_entity(result.user)),
    )

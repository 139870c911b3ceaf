"""Authentication routes (register, login, me)."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, EmailStr, Field

from api.dependencies import get_user_repo
from api.models import UserResponse
from api.security import create_access_token, get_current_user_required, to_user_response
from domain.model.errors import DomainError, DuplicateError, ValidationError
from port.user_repository import UserRepository
from services import auth_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


class RegisterRequest(BaseModel):
    email: EmailStr
    password: str
    name: str | None = Field(None, max_length=100)


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class AuthResponse(BaseModel):
    token: str
    user: UserResponse


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(request: RegisterRequest, repo: UserRepository = Depends(get_user_repo)):
    """Register a reader and return a bearer token.

    Raises:
        HTTPException: 409 if the email is taken, 400 if the password is weak
    """
    try:
        user = auth_service.register(repo, request.email, request.password, request.name)
    except DuplicateError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except DomainError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))

    logger.info("User registered", extra={"userId": user.id})
    return AuthResponse(token=create_access_token(user.id), user=to_user_response(user))


@router.post("/login", response_model=AuthResponse)
async def login(request: LoginRequest, repo: UserRepository = Depends(get_user_repo)):
    """Login and return a bearer token.

    Raises:
        HTTPException: 401 if credentials are invalid
    """
    try:
        user = auth_service.authenticate(repo, request.email, request.password)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))

    logger.info("User logged in", extra={"userId": user.id})
    return AuthResponse(token=create_access_token(user.id), user=to_user_response(user))


@router.get("/me", response_model=UserResponse)
async def get_me(current_user: UserResponse = Depends(get_current_user_required)):
    return current_user

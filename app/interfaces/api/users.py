"""User API routes — register and list."""

from typing import List

from fastapi import APIRouter, Depends, status

from app.interfaces.deps import get_user_repository
from app.domain.repositories.user_repository import UserRepository
from app.domain.schemas.user import UserCreate, UserRead
from app.application.services.user_service import ensure_valid, list_users, register_user

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def create_user(
    body: UserCreate,
    repo: UserRepository = Depends(get_user_repository),
):
    """Register a new user. Email and phone must not already be in use."""
    ensure_valid(body)
    user = register_user(repo, body)
    return UserRead.model_validate(user)


@router.get("", response_model=List[UserRead])
def get_users(repo: UserRepository = Depends(get_user_repository)):
    """List all users, newest first."""
    return [UserRead.model_validate(u) for u in list_users(repo)]

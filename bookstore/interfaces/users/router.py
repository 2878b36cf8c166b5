"""
FastAPI router for users.

All routes delegate to UserService. No business logic here.
Responses carry the stored password hash, never the submitted password.
"""

from fastapi import APIRouter, Depends, status

from bookstore.application.dtos import UserCommand
from bookstore.application.user_service import UserService
from bookstore.domain.entities import User
from bookstore.interfaces.dependencies import get_user_service
from bookstore.interfaces.schemas import (
    DELETED_MESSAGE,
    UserRequest,
    UserResponse,
    UserUpdateRequest,
)

router = APIRouter(prefix="/users", tags=["users"])


def _response(user: User) -> UserResponse:
    return UserResponse(
        username=user.username,
        email=user.email,
        fullname=user.fullname,
        hashed_password=user.hashed_password,
        created_at=user.created_at,
    )


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a user",
)
def add_user(
    request: UserRequest,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    command = UserCommand(
        username=request.username,
        email=request.email,
        fullname=request.fullname,
        password=request.password,
    )
    return _response(service.add_user(command))


@router.get("/{username}", response_model=UserResponse, summary="Get a user")
def get_user(
    username: str,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    return _response(service.get_user(username))


@router.put("/{username}", response_model=UserResponse, summary="Replace a user")
def put_user(
    username: str,
    request: UserUpdateRequest,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Replace email, fullname and password of the user named in the path."""
    command = UserCommand(
        username=username,
        email=request.email,
        fullname=request.fullname,
        password=request.password,
    )
    return _response(service.put_user(username, command))


@router.delete("/{username}", response_model=str, summary="Delete a user")
def delete_user(
    username: str,
    service: UserService = Depends(get_user_service),
) -> str:
    service.delete_user(username)
    return DELETED_MESSAGE

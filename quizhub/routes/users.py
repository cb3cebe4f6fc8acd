import logging
from typing import Any, List

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session

from quizhub.core.database import get_db
from quizhub.core.exceptions import QuizHubError
from quizhub.routes.errors import internal_error, to_http_exception
from quizhub.schemas.user import UserDeleteResponse, UserResponse
from quizhub.services.user import UserService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=List[UserResponse])
def list_users(db: Session = Depends(get_db)):
    try:
        return UserService(db).list_users()
    except Exception as e:
        logger.exception("Failed to fetch users")
        raise internal_error("Server error", e)


@router.post(
    "",
    response_model=List[UserResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_users(payload: Any = Body(...), db: Session = Depends(get_db)):
    """
    Add one or more users.

    Accepts a single object, an array, or {"data": [...]}. Entries missing
    name or email are dropped; 409 if an email was already registered.
    """
    try:
        return UserService(db).create_users(payload)
    except QuizHubError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.exception("Error creating user")
        raise internal_error("Error creating user", e)


@router.delete("/{user_id}", response_model=UserDeleteResponse)
def delete_user(user_id: str, db: Session = Depends(get_db)):
    try:
        return UserService(db).delete_user(user_id)
    except QuizHubError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.exception("Error deleting user")
        raise internal_error("Error deleting user", e)

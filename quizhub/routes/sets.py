import logging
from typing import List, Union

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session

from quizhub.core.database import get_db
from quizhub.core.exceptions import QuizHubError
from quizhub.routes.errors import internal_error, to_http_exception
from quizhub.schemas.quiz_set import (
    MessageResponse,
    SetCreate,
    SetDeleteResponse,
    SetMessageResponse,
    SetResponse,
    SetUpdate,
)
from quizhub.services.quiz_set import SetService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/sets", tags=["sets"])


@router.get("", response_model=List[SetResponse])
def list_sets(db: Session = Depends(get_db)):
    """All sets, newest first"""
    try:
        return SetService(db).list_sets()
    except Exception as e:
        logger.exception("Failed to fetch sets")
        raise internal_error("Failed to fetch sets", e)


@router.get("/active", response_model=SetResponse)
def get_active_set(db: Session = Depends(get_db)):
    """The currently active set (404 when none is active)"""
    try:
        return SetService(db).get_active_set()
    except QuizHubError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.exception("Failed to fetch active set")
        raise internal_error("Failed to fetch active set", e)


@router.post(
    "",
    response_model=List[SetResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_sets(
    payload: Union[List[SetCreate], SetCreate] = Body(...),
    db: Session = Depends(get_db),
):
    """
    Create one set or a batch of sets.

    Names are trimmed and must be unique; if any name collides with an
    existing set the whole batch is rejected. New sets start inactive.
    """
    items = payload if isinstance(payload, list) else [payload]
    try:
        return SetService(db).create_sets(items)
    except QuizHubError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.exception("Error saving set(s)")
        raise internal_error("Error saving set(s)", e)


@router.put("/deactivate", response_model=MessageResponse)
def deactivate_all_sets(db: Session = Depends(get_db)):
    """Leave the registry with no active set"""
    try:
        return SetService(db).deactivate_all()
    except Exception as e:
        logger.exception("Error deactivating sets")
        raise internal_error("Error deactivating sets", e)


@router.put("/{set_id}", response_model=SetMessageResponse)
def rename_set(set_id: str, payload: SetUpdate, db: Session = Depends(get_db)):
    try:
        return SetService(db).rename_set(set_id, payload)
    except QuizHubError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.exception("Error updating set")
        raise internal_error("Error updating set", e)


@router.put("/{set_id}/activate", response_model=SetMessageResponse)
def activate_set(set_id: str, db: Session = Depends(get_db)):
    """Activate one set and deactivate every other set"""
    try:
        return SetService(db).activate_set(set_id)
    except QuizHubError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.exception("Error activating set")
        raise internal_error("Error activating set", e)


@router.delete("/{set_id}", response_model=SetDeleteResponse)
def delete_set(set_id: str, db: Session = Depends(get_db)):
    """Delete a set. Its questions are kept and will show `set: null`."""
    try:
        return SetService(db).delete_set(set_id)
    except QuizHubError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.exception("Error deleting set")
        raise internal_error("Error deleting set", e)

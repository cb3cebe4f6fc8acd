import logging
from typing import List, Union

from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.orm import Session

from quizhub.core.database import get_db
from quizhub.core.exceptions import QuizHubError
from quizhub.routes.errors import internal_error, to_http_exception
from quizhub.schemas.question import (
    DeleteBySetResponse,
    QuestionBatchResponse,
    QuestionCreate,
    QuestionMessageResponse,
    QuestionResponse,
    ToggleSetStatusResponse,
)
from quizhub.services.question import QuestionService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/questions", tags=["questions"])


@router.get("", response_model=List[QuestionResponse])
def list_questions(db: Session = Depends(get_db)):
    """All questions, newest first, each with its set summary (or null)"""
    try:
        return QuestionService(db).list_questions()
    except Exception as e:
        logger.exception("Failed to fetch questions")
        raise internal_error("Failed to fetch questions", e)


@router.get("/by-set/{set_id}", response_model=List[QuestionResponse])
def list_questions_by_set(
    set_id: str,
    include_inactive: bool = Query(False, alias="includeInactive"),
    db: Session = Depends(get_db),
):
    """
    Questions of one set.

    An inactive set returns an empty list unless includeInactive=true.
    """
    try:
        return QuestionService(db).list_by_set(set_id, include_inactive)
    except QuizHubError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.exception("Failed to fetch questions by set")
        raise internal_error("Failed to fetch questions by set", e)


@router.post(
    "",
    response_model=Union[QuestionBatchResponse, QuestionMessageResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_questions(
    payload: Union[List[QuestionCreate], QuestionCreate] = Body(...),
    db: Session = Depends(get_db),
):
    """
    Add one question or a batch.

    `set` may be a set name or a set ID. Every entry is validated before
    anything is stored.
    """
    try:
        service = QuestionService(db)
        if isinstance(payload, list):
            return service.create_questions(payload)
        return service.create_question(payload)
    except QuizHubError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.exception("Error saving question(s)")
        raise internal_error("Error saving question(s)", e)


@router.put("/{question_id}", response_model=QuestionMessageResponse)
def update_question(question_id: str, payload: QuestionCreate, db: Session = Depends(get_db)):
    try:
        return QuestionService(db).update_question(question_id, payload)
    except QuizHubError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.exception("Error updating question")
        raise internal_error("Error updating question", e)


@router.put("/{question_id}/toggle-set-status", response_model=ToggleSetStatusResponse)
def toggle_set_status(question_id: str, db: Session = Depends(get_db)):
    """Flip the active flag of the set this question belongs to"""
    try:
        return QuestionService(db).toggle_set_status(question_id)
    except QuizHubError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.exception("Error toggling set status")
        raise internal_error("Error toggling set status", e)


@router.delete("/by-set/{set_id}", response_model=DeleteBySetResponse)
def delete_questions_by_set(set_id: str, db: Session = Depends(get_db)):
    try:
        return QuestionService(db).delete_by_set(set_id)
    except QuizHubError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.exception("Error deleting questions by set")
        raise internal_error("Error deleting questions by set", e)


@router.delete("/{question_id}", response_model=QuestionMessageResponse)
def delete_question(question_id: str, db: Session = Depends(get_db)):
    try:
        return QuestionService(db).delete_question(question_id)
    except QuizHubError as e:
        raise to_http_exception(e)
    except Exception as e:
        logger.exception("Error deleting question")
        raise internal_error("Error deleting question", e)

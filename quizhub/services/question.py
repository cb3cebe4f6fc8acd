import logging
from typing import List

from sqlalchemy.orm import Session

from quizhub.core.exceptions import InvalidInputError, NotFoundError
from quizhub.domain.question_domain import QuestionDomain
from quizhub.models.question import Question
from quizhub.repositories.question_repository import QuestionRepository
from quizhub.repositories.set_repository import SetRepository
from quizhub.schemas.question import (
    DeleteBySetResponse,
    QuestionBatchResponse,
    QuestionCreate,
    QuestionMessageResponse,
    QuestionResponse,
    ToggleSetStatusResponse,
)
from quizhub.schemas.quiz_set import SetResponse
from quizhub.services.quiz_set import SetService

logger = logging.getLogger(__name__)

SINGLE_MESSAGES = {
    "missing": "All fields (including set) are required",
    "options": "At least two options are required",
    "answer": "Correct answer must be one of the options",
}

BATCH_MESSAGES = {
    "missing": "Each question must include question, options, correctAnswer, and set",
    "options": "Each question must have at least two options",
    "answer": "Correct answer must be one of the options",
}


def _blank(value) -> bool:
    return value is None or not value.strip()


class QuestionService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = QuestionRepository(db)
        self.set_repository = SetRepository(db)
        self.set_service = SetService(db)

    def _get_question(self, question_id: str) -> Question:
        question = self.repository.get_by_id(question_id)
        if question is None:
            raise NotFoundError("Question not found")
        return question

    def _populate(self, question: Question) -> QuestionResponse:
        return QuestionDomain.to_response(question, self.set_repository.get_by_id(question.set_id))

    def _populate_many(self, questions: List[Question]) -> List[QuestionResponse]:
        sets_by_id = self.set_repository.get_by_ids(q.set_id for q in questions)
        return QuestionDomain.to_response_list(questions, sets_by_id)

    def _validate(self, candidate: QuestionCreate, messages: dict, missing_hint: str) -> dict:
        """Check one candidate and return the column values to store"""
        if (
            _blank(candidate.question)
            or candidate.options is None
            or _blank(candidate.correct_answer)
            or _blank(candidate.set_ref)
        ):
            raise InvalidInputError(messages["missing"])

        if len(candidate.options) < 2:
            raise InvalidInputError(messages["options"])

        if candidate.correct_answer not in candidate.options:
            raise InvalidInputError(messages["answer"])

        quiz_set = self.set_service.resolve_reference(candidate.set_ref, missing_hint)
        return {
            "question": candidate.question,
            "options": list(candidate.options),
            "correct_answer": candidate.correct_answer,
            "set_id": quiz_set.id,
        }

    def list_questions(self) -> List[QuestionResponse]:
        return self._populate_many(self.repository.get_all())

    def list_by_set(self, set_id: str, include_inactive: bool = False) -> List[QuestionResponse]:
        """
        Questions of one set. Inactive sets hide their questions unless
        include_inactive is requested.
        """
        quiz_set = self.set_service.get_set(set_id)
        if not include_inactive and not quiz_set.is_active:
            return []
        questions = self.repository.get_by_set_id(quiz_set.id)
        return QuestionDomain.to_response_list(questions, {quiz_set.id: quiz_set})

    def create_question(self, candidate: QuestionCreate) -> QuestionMessageResponse:
        data = self._validate(candidate, SINGLE_MESSAGES, "Please create the set first.")
        saved = self.repository.create_bulk([data])[0]
        logger.info(f"Created question {saved.id} in set {saved.set_id}")
        return QuestionMessageResponse(message="Question added", question=self._populate(saved))

    def create_questions(self, candidates: List[QuestionCreate]) -> QuestionBatchResponse:
        """Validate every candidate first, then insert them together"""
        to_save = [
            self._validate(candidate, BATCH_MESSAGES, "Please create the set first.")
            for candidate in candidates
        ]
        saved = self.repository.create_bulk(to_save) if to_save else []
        logger.info(f"Created {len(saved)} question(s)")
        return QuestionBatchResponse(message="Questions added", questions=self._populate_many(saved))

    def update_question(self, question_id: str, candidate: QuestionCreate) -> QuestionMessageResponse:
        """Full replacement; every field must be resent"""
        data = self._validate(candidate, SINGLE_MESSAGES, "")
        question = self._get_question(question_id)
        updated = self.repository.update(question, data)
        return QuestionMessageResponse(message="Question updated", question=self._populate(updated))

    def toggle_set_status(self, question_id: str) -> ToggleSetStatusResponse:
        """
        Flip the active flag of the question's set.

        Only the linked set is touched; other sets keep their state, so
        this can leave zero or several sets active.
        """
        question = self._get_question(question_id)
        quiz_set = self.set_repository.get_by_id(question.set_id)
        if quiz_set is None:
            raise InvalidInputError("Associated set not found")

        updated_set = self.set_repository.toggle_active(quiz_set)
        state = "activated" if updated_set.is_active else "deactivated"
        logger.info(f"Toggled set {updated_set.id} via question {question.id}: {state}")
        return ToggleSetStatusResponse(
            message=f"Set {state}",
            question=QuestionDomain.to_response(question, updated_set),
            set=SetResponse.model_validate(updated_set),
        )

    def delete_question(self, question_id: str) -> QuestionMessageResponse:
        question = self._get_question(question_id)
        populated = self._populate(question)
        self.repository.delete(question)
        return QuestionMessageResponse(message="Question deleted", question=populated)

    def delete_by_set(self, set_id: str) -> DeleteBySetResponse:
        quiz_set = self.set_service.get_set(set_id)
        deleted_count = self.repository.delete_by_set_id(quiz_set.id)
        logger.info(f"Deleted {deleted_count} question(s) from set {quiz_set.id}")
        return DeleteBySetResponse(
            message=f"Deleted {deleted_count} questions from set",
            deleted_count=deleted_count,
        )

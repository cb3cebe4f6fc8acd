from typing import Dict, List, Optional

from quizhub.models.question import Question
from quizhub.models.quiz_set import QuizSet
from quizhub.schemas.question import QuestionResponse
from quizhub.schemas.quiz_set import SetSummary


class QuestionDomain:
    """Populate logic: attaches set summaries to questions without a join"""

    @staticmethod
    def summarize_set(quiz_set: Optional[QuizSet]) -> Optional[SetSummary]:
        if quiz_set is None:
            return None
        return SetSummary(id=quiz_set.id, name=quiz_set.name, is_active=quiz_set.is_active)

    @staticmethod
    def to_response(question: Question, quiz_set: Optional[QuizSet]) -> QuestionResponse:
        """
        Convert a Question model to QuestionResponse.

        quiz_set is the set looked up for question.set_id; None renders as
        `set: null` (the set was deleted after the question was written).
        """
        return QuestionResponse(
            id=question.id,
            question=question.question,
            options=list(question.options or []),
            correct_answer=question.correct_answer,
            set=QuestionDomain.summarize_set(quiz_set),
            created_at=question.created_at,
            updated_at=question.updated_at,
        )

    @staticmethod
    def to_response_list(
        questions: List[Question], sets_by_id: Dict[str, QuizSet]
    ) -> List[QuestionResponse]:
        """Convert questions using a pre-fetched id -> set lookup"""
        return [
            QuestionDomain.to_response(question, sets_by_id.get(question.set_id))
            for question in questions
        ]

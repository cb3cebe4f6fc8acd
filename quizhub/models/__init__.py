from .question import Question
from .quiz_set import QuizSet
from .user import User

__all__ = ["QuizSet", "Question", "User"]

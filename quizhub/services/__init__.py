from .question import QuestionService
from .quiz_set import SetService
from .user import UserService

__all__ = ["SetService", "QuestionService", "UserService"]

from .question_repository import QuestionRepository
from .set_repository import SetRepository
from .user_repository import UserRepository

__all__ = ["SetRepository", "QuestionRepository", "UserRepository"]

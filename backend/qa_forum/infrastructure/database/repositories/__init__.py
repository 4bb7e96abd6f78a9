from .question_repository import SQLAlchemyQuestionRepository
from .answer_repository import SQLAlchemyAnswerRepository

__all__ = [
    "SQLAlchemyQuestionRepository",
    "SQLAlchemyAnswerRepository",
]

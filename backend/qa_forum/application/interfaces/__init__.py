from .question_repository import QuestionRepository
from .answer_repository import AnswerRepository

__all__ = [
    "QuestionRepository",
    "AnswerRepository",
]

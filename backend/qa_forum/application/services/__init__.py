from .question_service import QuestionService
from .answer_service import AnswerService

__all__ = [
    "QuestionService",
    "AnswerService",
]

from .question import QuestionCreate, QuestionUpdate, QuestionResponse, MessageResponse
from .answer import AnswerCreate, AnswerResponse

__all__ = [
    "QuestionCreate",
    "QuestionUpdate",
    "QuestionResponse",
    "MessageResponse",
    "AnswerCreate",
    "AnswerResponse",
]

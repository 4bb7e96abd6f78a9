from .question import Question, QuestionStatus
from .answer import Answer
from .query import QuestionFilter

__all__ = [
    "Question",
    "QuestionStatus",
    "Answer",
    "QuestionFilter",
]

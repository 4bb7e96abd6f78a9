from .question import QuestionModel, QuestionTagModel
from .answer import AnswerModel

__all__ = [
    "QuestionModel",
    "QuestionTagModel",
    "AnswerModel",
]

from .base import Base
from .session import engine, async_session_factory, get_db_session
from .models import QuestionModel, QuestionTagModel, AnswerModel

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "get_db_session",
    "QuestionModel",
    "QuestionTagModel",
    "AnswerModel",
]

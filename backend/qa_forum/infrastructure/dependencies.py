"""FastAPI dependency injection: wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from qa_forum.application.services import AnswerService, QuestionService
from qa_forum.infrastructure.database.session import get_db_session
from qa_forum.infrastructure.database.repositories import (
    SQLAlchemyAnswerRepository,
    SQLAlchemyQuestionRepository,
)


async def get_question_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[QuestionService, None]:
    """Provides a QuestionService instance with its repository wired up."""
    repository = SQLAlchemyQuestionRepository(session)
    yield QuestionService(repository)


async def get_answer_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[AnswerService, None]:
    """Provides an AnswerService sharing one session with its question lookups."""
    yield AnswerService(
        repository=SQLAlchemyAnswerRepository(session),
        question_repository=SQLAlchemyQuestionRepository(session),
    )

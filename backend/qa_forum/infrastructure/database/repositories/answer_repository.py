"""Concrete answer repository backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from qa_forum.application.interfaces import AnswerRepository
from qa_forum.domain.entities import Answer
from qa_forum.infrastructure.database.models import AnswerModel


class SQLAlchemyAnswerRepository(AnswerRepository):
    """Implements the AnswerRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: AnswerModel) -> Answer:
        return Answer(
            id=model.id,
            question_id=model.question_id,
            body=model.body,
            author_id=model.author_id,
            upvotes=model.upvotes,
            created_at=model.created_at,
        )

    async def list_for_question(self, question_id: str) -> list[Answer]:
        stmt = (
            select(AnswerModel)
            .where(AnswerModel.question_id == question_id)
            .order_by(AnswerModel.created_at.asc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, answer: Answer) -> Answer:
        model = AnswerModel(
            id=answer.id,
            question_id=answer.question_id,
            body=answer.body,
            author_id=answer.author_id,
            upvotes=answer.upvotes,
            created_at=answer.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

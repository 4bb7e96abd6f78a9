"""Concrete question repository backed by SQLAlchemy."""

from sqlalchemy import ColumnElement, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from qa_forum.application.interfaces import QuestionRepository
from qa_forum.domain.entities import Question, QuestionFilter, QuestionStatus
from qa_forum.infrastructure.database.models import QuestionModel, QuestionTagModel


def build_filter_clauses(criteria: QuestionFilter) -> list[ColumnElement[bool]]:
    """Translate a QuestionFilter into WHERE clauses, implicitly ANDed together."""
    clauses: list[ColumnElement[bool]] = []

    if criteria.tags:
        tagged = select(QuestionTagModel.question_id).where(
            QuestionTagModel.tag.in_(criteria.tags)
        )
        clauses.append(QuestionModel.id.in_(tagged))
    if criteria.status is not None:
        clauses.append(QuestionModel.status == criteria.status)
    if criteria.search is not None:
        clauses.append(
            or_(
                QuestionModel.title.icontains(criteria.search, autoescape=True),
                QuestionModel.body.icontains(criteria.search, autoescape=True),
            )
        )
    if criteria.min_votes is not None:
        clauses.append(QuestionModel.upvotes >= criteria.min_votes)
    if criteria.max_votes is not None:
        clauses.append(QuestionModel.upvotes <= criteria.max_votes)

    return clauses


class SQLAlchemyQuestionRepository(QuestionRepository):
    """Implements the QuestionRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: QuestionModel) -> Question:
        """Map ORM model → domain entity."""
        return Question(
            id=model.id,
            title=model.title,
            body=model.body,
            tags=model.tags,
            status=QuestionStatus(model.status),
            upvotes=model.upvotes,
            author_id=model.author_id,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Question) -> QuestionModel:
        """Map domain entity → ORM model (for creation)."""
        return QuestionModel(
            id=entity.id,
            title=entity.title,
            body=entity.body,
            status=entity.status.value,
            upvotes=entity.upvotes,
            author_id=entity.author_id,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            tag_rows=[
                QuestionTagModel(tag=tag, position=index)
                for index, tag in enumerate(entity.tags)
            ],
        )

    async def get_by_id(self, question_id: str) -> Question | None:
        result = await self._session.get(QuestionModel, question_id)
        return self._to_entity(result) if result else None

    async def find(self, criteria: QuestionFilter) -> list[Question]:
        stmt = (
            select(QuestionModel)
            .where(*build_filter_clauses(criteria))
            .order_by(QuestionModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, question: Question) -> Question:
        model = self._to_model(question)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, question: Question) -> Question:
        model = await self._session.get(QuestionModel, question.id)
        if model is None:
            raise ValueError(f"Question {question.id} not found in database")
        model.title = question.title
        model.body = question.body
        model.status = question.status.value
        model.updated_at = question.updated_at
        self._sync_tags(model, question.tags)
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, question_id: str) -> bool:
        model = await self._session.get(QuestionModel, question_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True

    def _sync_tags(self, model: QuestionModel, tags: list[str]) -> None:
        """Replace the tag rows, reusing rows for tags that are kept."""
        existing = {row.tag: row for row in model.tag_rows}
        rows: list[QuestionTagModel] = []
        for index, tag in enumerate(tags):
            row = existing.get(tag) or QuestionTagModel(tag=tag)
            row.position = index
            rows.append(row)
        model.tag_rows = rows

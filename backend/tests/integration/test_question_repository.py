"""SQLAlchemy repository tests against an in-memory SQLite database."""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import func, select

from conftest import ALICE
from qa_forum.domain.entities import Answer, Question, QuestionFilter, QuestionStatus
from qa_forum.infrastructure.database.models import AnswerModel, QuestionTagModel
from qa_forum.infrastructure.database.repositories import (
    SQLAlchemyAnswerRepository,
    SQLAlchemyQuestionRepository,
)

BODY = "A body that is long enough to be a valid question."
NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


async def _seed(session, **overrides) -> Question:
    fields = dict(title="Seeded question", body=BODY, tags=["python"], author_id=ALICE)
    fields.update(overrides)
    return await SQLAlchemyQuestionRepository(session).create(Question(**fields))


@pytest.mark.asyncio
async def test_find_combines_conditions(session_factory):
    async with session_factory() as session:
        await _seed(session, title="Popular python", upvotes=10, created_at=NOW)
        await _seed(session, title="Unpopular python", upvotes=1, created_at=NOW + timedelta(seconds=1))
        await _seed(
            session,
            title="Popular rust",
            tags=["rust"],
            upvotes=10,
            created_at=NOW + timedelta(seconds=2),
        )
        await session.commit()

        repo = SQLAlchemyQuestionRepository(session)
        found = await repo.find(QuestionFilter.from_params(tags="python", min_votes="5"))
        assert [q.title for q in found] == ["Popular python"]

        ranged = await repo.find(QuestionFilter.from_params(min_votes="0", max_votes="5"))
        assert [q.title for q in ranged] == ["Unpopular python"]


@pytest.mark.asyncio
async def test_find_matches_any_listed_tag_and_exact_status(session_factory):
    async with session_factory() as session:
        await _seed(session, title="Python lists", tags=["python", "lists"], created_at=NOW)
        await _seed(
            session,
            title="Closed go",
            tags=["go"],
            status=QuestionStatus.CLOSED,
            created_at=NOW + timedelta(seconds=1),
        )
        await session.commit()

        repo = SQLAlchemyQuestionRepository(session)
        either = await repo.find(QuestionFilter.from_params(tags="rust,lists,go"))
        assert [q.title for q in either] == ["Closed go", "Python lists"]

        closed = await repo.find(QuestionFilter.from_params(status="closed"))
        assert [q.title for q in closed] == ["Closed go"]
        assert await repo.find(QuestionFilter.from_params(status="CLOSED")) == []


@pytest.mark.asyncio
async def test_vote_bounds_are_inclusive(session_factory):
    async with session_factory() as session:
        for votes in (2, 3, 5, 6):
            await _seed(session, title=f"Votes {votes}", upvotes=votes, created_at=NOW + timedelta(seconds=votes))
        await session.commit()

        found = await SQLAlchemyQuestionRepository(session).find(
            QuestionFilter.from_params(min_votes="3", max_votes="5")
        )
        assert [q.title for q in found] == ["Votes 5", "Votes 3"]


@pytest.mark.asyncio
async def test_out_of_range_vote_bounds_still_query(session_factory):
    async with session_factory() as session:
        await _seed(session, upvotes=7)
        await session.commit()

        repo = SQLAlchemyQuestionRepository(session)
        too_high = QuestionFilter.from_params(min_votes="99999999999999999999")
        too_low = QuestionFilter.from_params(max_votes="-99999999999999999999")
        unbounded = QuestionFilter.from_params(
            min_votes="-99999999999999999999", max_votes="99999999999999999999"
        )
        assert await repo.find(too_high) == []
        assert await repo.find(too_low) == []
        assert len(await repo.find(unbounded)) == 1


@pytest.mark.asyncio
async def test_find_orders_by_creation_descending(session_factory):
    async with session_factory() as session:
        for offset in (2, 0, 1):
            await _seed(session, title=f"Question {offset}", created_at=NOW + timedelta(minutes=offset))
        await session.commit()

        found = await SQLAlchemyQuestionRepository(session).find(QuestionFilter())
        assert [q.title for q in found] == ["Question 2", "Question 1", "Question 0"]


@pytest.mark.asyncio
async def test_search_treats_wildcards_literally(session_factory):
    async with session_factory() as session:
        await _seed(session, title="Discount of 50% off", created_at=NOW)
        await _seed(session, title="Fifty percent", created_at=NOW + timedelta(seconds=1))
        await session.commit()

        repo = SQLAlchemyQuestionRepository(session)
        found = await repo.find(QuestionFilter.from_params(search="50%"))
        assert [q.title for q in found] == ["Discount of 50% off"]

        assert await repo.find(QuestionFilter.from_params(search="_")) == []


@pytest.mark.asyncio
async def test_search_matches_body_case_insensitively(session_factory):
    async with session_factory() as session:
        await _seed(session, body="Mentions ASYNCIO somewhere in the body text.")
        await session.commit()

        found = await SQLAlchemyQuestionRepository(session).find(
            QuestionFilter.from_params(search="asyncio")
        )
        assert len(found) == 1


@pytest.mark.asyncio
async def test_update_replaces_status_and_tags(session_factory):
    async with session_factory() as session:
        question = await _seed(session, tags=["a", "b"])
        await session.commit()

    async with session_factory() as session:
        repo = SQLAlchemyQuestionRepository(session)
        stored = await repo.get_by_id(question.id)
        stored.update(tags=["b", "c"], status=QuestionStatus.CLOSED)
        await repo.update(stored)
        await session.commit()

    async with session_factory() as session:
        reloaded = await SQLAlchemyQuestionRepository(session).get_by_id(question.id)
        assert reloaded.tags == ["b", "c"]
        assert reloaded.status == QuestionStatus.CLOSED
        assert reloaded.title == "Seeded question"


@pytest.mark.asyncio
async def test_delete_cascades_to_tags_and_answers(session_factory):
    async with session_factory() as session:
        question = await _seed(session)
        await SQLAlchemyAnswerRepository(session).create(
            Answer(question_id=question.id, body=BODY, author_id=ALICE)
        )
        await session.commit()

    async with session_factory() as session:
        assert await SQLAlchemyQuestionRepository(session).delete(question.id) is True
        await session.commit()

    async with session_factory() as session:
        answers = await session.scalar(select(func.count()).select_from(AnswerModel))
        tags = await session.scalar(select(func.count()).select_from(QuestionTagModel))
        assert answers == 0
        assert tags == 0
        assert await SQLAlchemyQuestionRepository(session).delete(question.id) is False

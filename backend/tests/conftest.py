"""Shared fixtures: in-memory fakes for unit tests, SQLite-backed app for integration tests."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "test-secret")

from collections.abc import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from qa_forum.application.interfaces import AnswerRepository, QuestionRepository  # noqa: E402
from qa_forum.domain.entities import Answer, Question, QuestionFilter  # noqa: E402
from qa_forum.infrastructure.auth import create_access_token  # noqa: E402
from qa_forum.infrastructure.database import Base  # noqa: E402
from qa_forum.infrastructure.database.session import get_db_session  # noqa: E402
from qa_forum.main import app  # noqa: E402

ALICE = "11111111-1111-1111-1111-111111111111"
BOB = "22222222-2222-2222-2222-222222222222"


# ── Fakes ────────────────────────────────────────────────────────────


def _matches(criteria: QuestionFilter, question: Question) -> bool:
    """In-memory stand-in for the SQL predicate built from a QuestionFilter."""
    if criteria.tags and not set(criteria.tags) & set(question.tags):
        return False
    if criteria.status is not None and question.status.value != criteria.status:
        return False
    if criteria.search is not None:
        term = criteria.search.lower()
        if term not in question.title.lower() and term not in question.body.lower():
            return False
    if criteria.min_votes is not None and question.upvotes < criteria.min_votes:
        return False
    if criteria.max_votes is not None and question.upvotes > criteria.max_votes:
        return False
    return True


class FakeQuestionRepository(QuestionRepository):
    """In-memory fake repository for unit testing."""

    def __init__(self):
        self._questions: dict[str, Question] = {}
        self.writes = 0

    async def get_by_id(self, question_id: str) -> Question | None:
        return self._questions.get(question_id)

    async def find(self, criteria: QuestionFilter) -> list[Question]:
        matches = [q for q in self._questions.values() if _matches(criteria, q)]
        return sorted(matches, key=lambda q: q.created_at, reverse=True)

    async def create(self, question: Question) -> Question:
        self.writes += 1
        self._questions[question.id] = question
        return question

    async def update(self, question: Question) -> Question:
        if question.id not in self._questions:
            raise ValueError(f"Question {question.id} not found")
        self.writes += 1
        self._questions[question.id] = question
        return question

    async def delete(self, question_id: str) -> bool:
        if question_id in self._questions:
            self.writes += 1
            del self._questions[question_id]
            return True
        return False


class FakeAnswerRepository(AnswerRepository):
    """In-memory fake answer repository."""

    def __init__(self):
        self._answers: list[Answer] = []

    async def list_for_question(self, question_id: str) -> list[Answer]:
        return sorted(
            (a for a in self._answers if a.question_id == question_id),
            key=lambda a: a.created_at,
        )

    async def create(self, answer: Answer) -> Answer:
        self._answers.append(answer)
        return answer


@pytest.fixture
def question_repo() -> FakeQuestionRepository:
    return FakeQuestionRepository()


@pytest.fixture
def answer_repo() -> FakeAnswerRepository:
    return FakeAnswerRepository()


# ── Database-backed fixtures ─────────────────────────────────────────


@pytest_asyncio.fixture
async def session_factory() -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """A fresh in-memory SQLite schema per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest_asyncio.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client against the app, with the DB session bound to SQLite."""

    async def _override_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = _override_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


def auth_headers(user_id: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}


@pytest.fixture
def alice_headers() -> dict[str, str]:
    return auth_headers(ALICE)


@pytest.fixture
def bob_headers() -> dict[str, str]:
    return auth_headers(BOB)

"""Unit tests for the AnswerService."""

import pytest

from conftest import ALICE, BOB
from qa_forum.application.schemas import AnswerCreate, QuestionCreate
from qa_forum.application.services import AnswerService, QuestionService
from qa_forum.domain.exceptions import ContentValidationError, EntityNotFoundError

ANSWER = "Call list.reverse() to reverse it in place."


@pytest.fixture
def service(answer_repo, question_repo) -> AnswerService:
    return AnswerService(answer_repo, question_repo)


@pytest.fixture
def questions(question_repo) -> QuestionService:
    return QuestionService(question_repo)


async def _question_id(questions: QuestionService) -> str:
    question = await questions.create_question(
        QuestionCreate(
            title="Reverse a list",
            body="How do I reverse a list without copying it?",
            tags=["python"],
        ),
        author_id=ALICE,
    )
    return question.id


@pytest.mark.asyncio
async def test_post_answer(service: AnswerService, questions: QuestionService):
    question_id = await _question_id(questions)
    answer = await service.post_answer(question_id, AnswerCreate(body=ANSWER), author_id=BOB)
    assert answer.question_id == question_id
    assert answer.author_id == BOB
    assert answer.upvotes == 0
    assert await service.list_answers(question_id) == [answer]


@pytest.mark.asyncio
async def test_post_answer_to_missing_question(service: AnswerService):
    with pytest.raises(EntityNotFoundError):
        await service.post_answer("missing", AnswerCreate(body=ANSWER), author_id=BOB)


@pytest.mark.asyncio
async def test_short_answer_is_rejected(service: AnswerService, questions: QuestionService):
    question_id = await _question_id(questions)
    with pytest.raises(ContentValidationError):
        await service.post_answer(question_id, AnswerCreate(body="reversed()"), author_id=BOB)
    assert await service.list_answers(question_id) == []


@pytest.mark.asyncio
async def test_list_answers_for_missing_question(service: AnswerService):
    with pytest.raises(EntityNotFoundError):
        await service.list_answers("missing")

"""Application service (use case) for Answer operations."""

import logging

from qa_forum.application.interfaces import AnswerRepository, QuestionRepository
from qa_forum.application.schemas import AnswerCreate
from qa_forum.domain.entities import Answer
from qa_forum.domain.exceptions import EntityNotFoundError
from qa_forum.domain.ownership import normalize_identity
from qa_forum.domain.validation import validate_answer_body

logger = logging.getLogger(__name__)


class AnswerService:
    """Posts and lists answers. Every operation requires the parent question to exist."""

    def __init__(self, repository: AnswerRepository, question_repository: QuestionRepository):
        self._repository = repository
        self._question_repository = question_repository

    async def list_answers(self, question_id: str) -> list[Answer]:
        await self._require_question(question_id)
        return await self._repository.list_for_question(question_id)

    async def post_answer(self, question_id: str, data: AnswerCreate, author_id: str) -> Answer:
        body = validate_answer_body(data.body)
        await self._require_question(question_id)

        answer = Answer(
            question_id=question_id,
            body=body,
            author_id=normalize_identity(author_id),
        )
        created = await self._repository.create(answer)
        logger.info("Answer %s posted to question %s by %s", created.id, question_id, created.author_id)
        return created

    async def _require_question(self, question_id: str) -> None:
        if await self._question_repository.get_by_id(question_id) is None:
            raise EntityNotFoundError("Question", question_id)

"""Application service (use case) for Question operations."""

import logging

from qa_forum.application.interfaces import QuestionRepository
from qa_forum.application.schemas import QuestionCreate, QuestionUpdate
from qa_forum.domain.entities import Question, QuestionFilter
from qa_forum.domain.exceptions import EntityNotFoundError, PermissionDeniedError
from qa_forum.domain.ownership import is_owner, normalize_identity
from qa_forum.domain.validation import validate_new_question, validate_question_changes

logger = logging.getLogger(__name__)


class QuestionService:
    """Orchestrates question business logic. Depends on the repository port (DI)."""

    def __init__(self, repository: QuestionRepository):
        self._repository = repository

    async def get_question(self, question_id: str) -> Question:
        question = await self._repository.get_by_id(question_id)
        if question is None:
            raise EntityNotFoundError("Question", question_id)
        return question

    async def list_questions(self, criteria: QuestionFilter | None = None) -> list[Question]:
        """Return matching questions, most recent first. No match is an empty list."""
        return await self._repository.find(criteria or QuestionFilter())

    async def create_question(self, data: QuestionCreate, author_id: str) -> Question:
        title, body, tags = validate_new_question(data.title, data.body, data.tags)
        question = Question(
            title=title,
            body=body,
            tags=tags,
            author_id=normalize_identity(author_id),
        )
        created = await self._repository.create(question)
        logger.info("Question %s created by %s", created.id, created.author_id)
        return created

    async def update_question(
        self, question_id: str, data: QuestionUpdate, actor_id: str
    ) -> Question:
        changes = validate_question_changes(
            title=data.title,
            body=data.body,
            tags=data.tags,
            status=data.status,
        )
        question = await self.get_question(question_id)
        self._ensure_owner(question, actor_id, "update")

        question.update(**changes)
        updated = await self._repository.update(question)
        logger.info(
            "Question %s updated by %s (fields: %s)",
            question_id,
            actor_id,
            ", ".join(sorted(changes)) or "none",
        )
        return updated

    async def delete_question(self, question_id: str, actor_id: str) -> bool:
        question = await self.get_question(question_id)
        self._ensure_owner(question, actor_id, "delete")

        deleted = await self._repository.delete(question_id)
        logger.info("Question %s deleted by %s", question_id, actor_id)
        return deleted

    def _ensure_owner(self, question: Question, actor_id: str, action: str) -> None:
        if not is_owner(actor_id, question.author_id):
            logger.warning(
                "Rejected %s of question %s by non-owner %s", action, question.id, actor_id
            )
            raise PermissionDeniedError("Question", action)

"""Abstract repository interface (port) for Answer persistence."""

from abc import ABC, abstractmethod

from qa_forum.domain.entities import Answer


class AnswerRepository(ABC):
    """Port for answer persistence: implemented in the infrastructure layer."""

    @abstractmethod
    async def list_for_question(self, question_id: str) -> list[Answer]:
        """Retrieve the answers of a question, oldest first."""
        ...

    @abstractmethod
    async def create(self, answer: Answer) -> Answer:
        """Persist a new answer and return it."""
        ...

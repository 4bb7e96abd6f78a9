"""Abstract repository interfaces (ports): define the contract, not the implementation."""

from abc import ABC, abstractmethod

from qa_forum.domain.entities import Question, QuestionFilter


class QuestionRepository(ABC):
    """Port for question persistence: implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, question_id: str) -> Question | None:
        """Retrieve a single question by its ID."""
        ...

    @abstractmethod
    async def find(self, criteria: QuestionFilter) -> list[Question]:
        """Retrieve every question matching the filter, most recent first."""
        ...

    @abstractmethod
    async def create(self, question: Question) -> Question:
        """Persist a new question and return it as stored."""
        ...

    @abstractmethod
    async def update(self, question: Question) -> Question:
        """Replace the mutable fields of an existing question."""
        ...

    @abstractmethod
    async def delete(self, question_id: str) -> bool:
        """Delete a question and its answers. Returns True if deleted, False if not found."""
        ...

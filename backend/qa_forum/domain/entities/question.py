"""Domain entities: pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4


class QuestionStatus(str, Enum):
    """Lifecycle state of a question."""

    OPEN = "open"
    CLOSED = "closed"


@dataclass
class Question:
    """Core domain entity representing a posted question.

    ``author_id`` is assigned once from the acting identity and is the sole
    basis for authorizing updates and deletes.
    """

    title: str
    body: str
    tags: list[str]
    author_id: str
    id: str = field(default_factory=lambda: str(uuid4()))
    status: QuestionStatus = QuestionStatus.OPEN
    upvotes: int = 0
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(
        self,
        title: str | None = None,
        body: str | None = None,
        tags: list[str] | None = None,
        status: QuestionStatus | None = None,
    ) -> None:
        """Replace each supplied field and refresh the updated_at timestamp."""
        if title is not None:
            self.title = title
        if body is not None:
            self.body = body
        if tags is not None:
            self.tags = tags
        if status is not None:
            self.status = status
        self.updated_at = datetime.now(timezone.utc)

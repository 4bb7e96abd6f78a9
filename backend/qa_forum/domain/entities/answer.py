"""Domain entity for answers posted against a question."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4


@dataclass
class Answer:
    """An answer belongs to exactly one question and one author."""

    question_id: str
    body: str
    author_id: str
    id: str = field(default_factory=lambda: str(uuid4()))
    upvotes: int = 0
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

"""SQLAlchemy ORM model for the Answer entity."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from qa_forum.infrastructure.database.base import Base


class AnswerModel(Base):
    """ORM model: maps to the 'answers' table."""

    __tablename__ = "answers"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    question_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("questions.id", ondelete="CASCADE"), nullable=False
    )
    body: Mapped[str] = mapped_column(Text, nullable=False)
    author_id: Mapped[str] = mapped_column(String(255), nullable=False)
    upvotes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    question: Mapped["QuestionModel"] = relationship(back_populates="answers")  # noqa: F821

    __table_args__ = (Index("ix_answers_question", "question_id", "created_at"),)

    def __repr__(self) -> str:
        return f"<AnswerModel(id={self.id}, question_id={self.question_id})>"

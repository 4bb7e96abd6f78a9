"""SQLAlchemy ORM models for questions and their tags."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from qa_forum.infrastructure.database.base import Base


class QuestionModel(Base):
    """ORM model: maps to the 'questions' table."""

    __tablename__ = "questions"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="open")
    upvotes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    author_id: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    tag_rows: Mapped[list["QuestionTagModel"]] = relationship(
        back_populates="question",
        cascade="all, delete-orphan",
        order_by="QuestionTagModel.position",
        lazy="selectin",
    )
    answers: Mapped[list["AnswerModel"]] = relationship(  # noqa: F821
        back_populates="question",
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        Index("ix_questions_created_at", "created_at"),
        Index("ix_questions_status", "status"),
        Index("ix_questions_author", "author_id"),
    )

    @property
    def tags(self) -> list[str]:
        return [row.tag for row in self.tag_rows]

    def __repr__(self) -> str:
        return f"<QuestionModel(id={self.id}, title='{self.title}')>"


class QuestionTagModel(Base):
    """One row per (question, tag) so tag intersection is a plain IN query."""

    __tablename__ = "question_tags"

    question_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("questions.id", ondelete="CASCADE"), primary_key=True
    )
    tag: Mapped[str] = mapped_column(String(50), primary_key=True)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    question: Mapped[QuestionModel] = relationship(back_populates="tag_rows")

    __table_args__ = (Index("ix_question_tags_tag", "tag"),)

    def __repr__(self) -> str:
        return f"<QuestionTagModel(question_id={self.question_id}, tag='{self.tag}')>"

"""Pydantic DTOs for the Answer feature."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AnswerCreate(BaseModel):
    """Schema for posting an answer to a question."""

    body: str | None = Field(None, examples=["Use reversed() or slice with [::-1]."])


class AnswerResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    question_id: str
    body: str
    author_id: str
    upvotes: int
    created_at: datetime

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

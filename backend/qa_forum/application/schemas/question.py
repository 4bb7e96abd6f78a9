"""Pydantic DTOs (Data Transfer Objects) for the Question feature.

Request fields are loose (all optional) so that the domain
validation rules, not the schema, decide which minimum-content rule failed.
Responses are rendered with camelCase keys.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from qa_forum.domain.entities import QuestionStatus


class QuestionCreate(BaseModel):
    """Schema for posting a new question."""

    title: str | None = Field(None, examples=["How do I reverse a list?"])
    body: str | None = Field(
        None, examples=["I have a list of integers and need it in reverse order."]
    )
    tags: list[str] | None = Field(None, examples=[["python", "lists"]])


class QuestionUpdate(BaseModel):
    """Schema for updating a question: omitted or empty fields keep their value."""

    title: str | None = None
    body: str | None = None
    tags: list[str] | None = None
    status: str | None = Field(None, examples=["closed"])


class QuestionResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    title: str
    body: str
    tags: list[str]
    status: QuestionStatus
    upvotes: int
    author_id: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class MessageResponse(BaseModel):
    """Plain confirmation payload."""

    message: str

"""Minimum-content rules for questions and answers.

The same rule functions back both creation and partial updates, so a title
that is too short is rejected with the same message whichever path it
arrives on. Every check runs before anything is handed to a repository.
"""

from typing import Any

from qa_forum.domain.entities.question import QuestionStatus
from qa_forum.domain.exceptions import ContentValidationError

MIN_TITLE_LENGTH = 5
MAX_TITLE_LENGTH = 255
MIN_BODY_LENGTH = 20
MAX_TAG_LENGTH = 50


def validate_title(title: Any) -> str:
    if not isinstance(title, str) or len(title.strip()) < MIN_TITLE_LENGTH:
        raise ContentValidationError(
            "title", f"Title should be at least {MIN_TITLE_LENGTH} characters long."
        )
    if len(title.strip()) > MAX_TITLE_LENGTH:
        raise ContentValidationError(
            "title", f"Title should be at most {MAX_TITLE_LENGTH} characters long."
        )
    return title.strip()


def validate_body(body: Any) -> str:
    if not isinstance(body, str) or len(body.strip()) < MIN_BODY_LENGTH:
        raise ContentValidationError(
            "body", f"Body should be at least {MIN_BODY_LENGTH} characters long."
        )
    return body.strip()


def validate_tags(tags: Any) -> list[str]:
    """Normalize a tag list: strip labels, drop blanks and duplicates."""
    if not tags or not isinstance(tags, (list, tuple)):
        raise ContentValidationError("tags", "At least one tag is required.")

    cleaned: list[str] = []
    for tag in tags:
        if not isinstance(tag, str):
            raise ContentValidationError("tags", "Tags must be text labels.")
        label = tag.strip()
        if len(label) > MAX_TAG_LENGTH:
            raise ContentValidationError(
                "tags", f"Tags should be at most {MAX_TAG_LENGTH} characters long."
            )
        if label and label not in cleaned:
            cleaned.append(label)

    if not cleaned:
        raise ContentValidationError("tags", "At least one tag is required.")
    return cleaned


def validate_status(status: Any) -> QuestionStatus:
    try:
        return QuestionStatus(status)
    except ValueError:
        allowed = ", ".join(s.value for s in QuestionStatus)
        raise ContentValidationError("status", f"Status must be one of: {allowed}.")


def validate_new_question(title: Any, body: Any, tags: Any) -> tuple[str, str, list[str]]:
    """Check every creation rule and return the normalized values."""
    return validate_title(title), validate_body(body), validate_tags(tags)


def validate_question_changes(
    title: Any = None,
    body: Any = None,
    tags: Any = None,
    status: Any = None,
) -> dict[str, Any]:
    """Validate a partial update.

    Absent or empty values mean "keep the prior value" and are left out of
    the result. Tags follow replace-if-non-empty, so an update can never
    clear them.
    """
    changes: dict[str, Any] = {}
    if title:
        changes["title"] = validate_title(title)
    if body:
        changes["body"] = validate_body(body)
    if tags:
        changes["tags"] = validate_tags(tags)
    if status:
        changes["status"] = validate_status(status)
    return changes


def validate_answer_body(body: Any) -> str:
    if not isinstance(body, str) or len(body.strip()) < MIN_BODY_LENGTH:
        raise ContentValidationError(
            "body", f"Answer should be at least {MIN_BODY_LENGTH} characters long."
        )
    return body.strip()

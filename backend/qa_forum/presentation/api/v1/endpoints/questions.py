"""Question endpoints: listing with filters, and owner-guarded CRUD."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from qa_forum.application.schemas import (
    MessageResponse,
    QuestionCreate,
    QuestionResponse,
    QuestionUpdate,
)
from qa_forum.application.services import QuestionService
from qa_forum.domain.entities import QuestionFilter
from qa_forum.domain.exceptions import (
    ContentValidationError,
    EntityNotFoundError,
    PermissionDeniedError,
)
from qa_forum.infrastructure.auth import get_current_user_id
from qa_forum.infrastructure.dependencies import get_question_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/questions", tags=["Questions"])


@router.post("", response_model=QuestionResponse, status_code=status.HTTP_201_CREATED)
async def create_question(
    data: QuestionCreate,
    user_id: str = Depends(get_current_user_id),
    service: QuestionService = Depends(get_question_service),
) -> QuestionResponse:
    """Post a new question as the authenticated user."""
    try:
        question = await service.create_question(data, author_id=user_id)
    except ContentValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception:
        logger.exception("Failed to create question")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error while creating question",
        )
    return QuestionResponse.model_validate(question, from_attributes=True)


@router.get("", response_model=list[QuestionResponse])
async def list_questions(
    tags: str | None = Query(None, description="Comma-separated tags; any match"),
    status_filter: str | None = Query(None, alias="status", description="Exact status"),
    search: str | None = Query(None, description="Case-insensitive text in title or body"),
    min_votes: str | None = Query(None, alias="minVotes", description="Minimum upvotes"),
    max_votes: str | None = Query(None, alias="maxVotes", description="Maximum upvotes"),
    service: QuestionService = Depends(get_question_service),
) -> list[QuestionResponse]:
    """List questions, most recent first. No match is an empty list, not a 404."""
    criteria = QuestionFilter.from_params(
        tags=tags,
        status=status_filter,
        search=search,
        min_votes=min_votes,
        max_votes=max_votes,
    )
    try:
        questions = await service.list_questions(criteria)
    except Exception:
        logger.exception("Failed to list questions")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error while fetching questions",
        )
    return [QuestionResponse.model_validate(q, from_attributes=True) for q in questions]


@router.get("/{question_id}", response_model=QuestionResponse)
async def get_question(
    question_id: str,
    service: QuestionService = Depends(get_question_service),
) -> QuestionResponse:
    """Retrieve a single question by ID."""
    try:
        question = await service.get_question(question_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception:
        logger.exception("Failed to fetch question %s", question_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error while fetching question",
        )
    return QuestionResponse.model_validate(question, from_attributes=True)


@router.put("/{question_id}", response_model=QuestionResponse)
async def update_question(
    question_id: str,
    data: QuestionUpdate,
    user_id: str = Depends(get_current_user_id),
    service: QuestionService = Depends(get_question_service),
) -> QuestionResponse:
    """Update a question. Only its author may do so."""
    try:
        question = await service.update_question(question_id, data, actor_id=user_id)
    except ContentValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except PermissionDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception:
        logger.exception("Failed to update question %s", question_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error while updating question",
        )
    return QuestionResponse.model_validate(question, from_attributes=True)


@router.delete("/{question_id}", response_model=MessageResponse)
async def delete_question(
    question_id: str,
    user_id: str = Depends(get_current_user_id),
    service: QuestionService = Depends(get_question_service),
) -> MessageResponse:
    """Delete a question and its answers. Only its author may do so."""
    try:
        await service.delete_question(question_id, actor_id=user_id)
    except PermissionDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception:
        logger.exception("Failed to delete question %s", question_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error while deleting question",
        )
    return MessageResponse(message="Question deleted successfully")

"""Answer endpoints, nested under their question."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from qa_forum.application.schemas import AnswerCreate, AnswerResponse
from qa_forum.application.services import AnswerService
from qa_forum.domain.exceptions import ContentValidationError, EntityNotFoundError
from qa_forum.infrastructure.auth import get_current_user_id
from qa_forum.infrastructure.dependencies import get_answer_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/questions/{question_id}/answers", tags=["Answers"])


@router.get("", response_model=list[AnswerResponse])
async def list_answers(
    question_id: str,
    service: AnswerService = Depends(get_answer_service),
) -> list[AnswerResponse]:
    """List the answers to a question, oldest first."""
    try:
        answers = await service.list_answers(question_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return [AnswerResponse.model_validate(a, from_attributes=True) for a in answers]


@router.post("", response_model=AnswerResponse, status_code=status.HTTP_201_CREATED)
async def post_answer(
    question_id: str,
    data: AnswerCreate,
    user_id: str = Depends(get_current_user_id),
    service: AnswerService = Depends(get_answer_service),
) -> AnswerResponse:
    """Post an answer as the authenticated user."""
    try:
        answer = await service.post_answer(question_id, data, author_id=user_id)
    except ContentValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception:
        logger.exception("Failed to post answer to question %s", question_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error while posting answer",
        )
    return AnswerResponse.model_validate(answer, from_attributes=True)

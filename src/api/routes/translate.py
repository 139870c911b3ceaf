"""Translation API route.

Endpoints:
- POST /translate: Translate a word (and its context sentence) with the LLM

Failures answer with ``{"error": message}``: 400 for a missing word, 429 when
the provider rate limits, 402 when provider credits are exhausted, 500 for
anything else. Malformed model output is not a failure; the raw text
becomes the word translation.
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from api.dependencies import get_translation_service
from api.models import ErrorResponse, TranslateRequest, TranslateResponse, UserResponse
from api.security import get_current_user_required
from domain.model.errors import ValidationError
from port.llm import LLMError, LLMQuotaExceededError, LLMRateLimitError
from services.translation_service import TranslationRequest, TranslationService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/translate", tags=["translate"])

RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please try again later."
QUOTA_MESSAGE = "Translation credits exhausted. Please add credits to continue."


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.post(
    "",
    response_model=TranslateResponse,
    responses={
        400: {"model": ErrorResponse},
        402: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def translate(
    request: TranslateRequest,
    current_user: UserResponse = Depends(get_current_user_required),
    service: TranslationService = Depends(get_translation_service),
):
    """Translate a word, using its sentence as context when given."""
    try:
        result = await service.translate(TranslationRequest(
            word=request.word,
            context_sentence=request.contextSentence,
        ))
    except ValidationError as e:
        return error_response(status.HTTP_400_BAD_REQUEST, str(e))
    except LLMRateLimitError:
        logger.warning("Translation rate limited", extra={"user_id": current_user.id})
        return error_response(status.HTTP_429_TOO_MANY_REQUESTS, RATE_LIMIT_MESSAGE)
    except LLMQuotaExceededError:
        logger.warning("Translation quota exhausted", extra={"user_id": current_user.id})
        return error_response(status.HTTP_402_PAYMENT_REQUIRED, QUOTA_MESSAGE)
    except (LLMError, RuntimeError) as e:
        logger.error("Translation error", extra={
            "user_id": current_user.id, "error_type": type(e).__name__, "error": str(e)[:200],
        })
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Translation failed")

    return TranslateResponse.from_domain(result)

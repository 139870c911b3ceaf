"""Vocabulary export routes.

Endpoints:
- GET /export/csv: Download words as CSV
- GET /export/anki: Download words as an Anki plain-text import file
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import Response

from api.dependencies import get_word_repo
from api.models import UserResponse
from api.security import get_current_user_required
from port.word_repository import WordRepository
from services import export_service, vocabulary_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/export", tags=["export"])


def _words_to_export(repo: WordRepository, user_id: str, tag_id: str | None):
    words = vocabulary_service.list_words(repo, user_id, tag_id=tag_id)
    if not words:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No words to export")
    return words


def _attachment(content: str, media_type: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/csv")
async def export_csv(
    tag_id: str | None = None,
    include_context: bool = True,
    current_user: UserResponse = Depends(get_current_user_required),
    repo: WordRepository = Depends(get_word_repo),
):
    words = _words_to_export(repo, current_user.id, tag_id)
    logger.info("CSV export", extra={"word_count": len(words), "tag_id": tag_id, "user_id": current_user.id})
    return _attachment(
        export_service.to_csv(words, include_context),
        "text/csv; charset=utf-8",
        export_service.csv_filename(),
    )


@router.get("/anki")
async def export_anki(
    tag_id: str | None = None,
    include_context: bool = True,
    current_user: UserResponse = Depends(get_current_user_required),
    repo: WordRepository = Depends(get_word_repo),
):
    words = _words_to_export(repo, current_user.id, tag_id)
    logger.info("Anki export", extra={"word_count": len(words), "tag_id": tag_id, "user_id": current_user.id})
    return _attachment(
        export_service.to_anki(words, include_context),
        "text/plain; charset=utf-8",
        export_service.anki_filename(),
    )

"""Vocabulary word routes.

Endpoints:
- GET /words: List the reader's saved words (optional tag filter and search)
- POST /words: Save a word from the translation popup
- PATCH /words/{id}: Edit a saved word
- DELETE /words/{id}: Delete a saved word
- POST /words/{id}/tags/{tag_id}: Tag a word
- DELETE /words/{id}/tags/{tag_id}: Untag a word
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_tag_repo, get_word_repo
from api.models import UserResponse, WordRequest, WordResponse, WordUpdateRequest
from api.security import get_current_user_required
from domain.model.errors import DomainError, NotFoundError, PermissionDeniedError, ValidationError
from port.tag_repository import TagRepository
from port.word_repository import WordRepository
from services import vocabulary_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/words", tags=["vocabulary"])


def to_http_error(e: DomainError) -> HTTPException:
    """Map a domain error to the matching HTTP status."""
    if isinstance(e, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    if isinstance(e, PermissionDeniedError):
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    if isinstance(e, ValidationError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@router.get("", response_model=list[WordResponse])
async def list_words(
    tag_id: str | None = None,
    search: str | None = None,
    current_user: UserResponse = Depends(get_current_user_required),
    repo: WordRepository = Depends(get_word_repo),
):
    """List saved words, newest first."""
    words = vocabulary_service.list_words(repo, current_user.id, tag_id=tag_id, search=search)

    logger.info("Words retrieved", extra={
        "word_count": len(words), "tag_id": tag_id, "user_id": current_user.id,
    })
    return [WordResponse.from_domain(w) for w in words]


@router.post("", response_model=WordResponse, status_code=status.HTTP_201_CREATED)
async def add_word(
    request: WordRequest,
    current_user: UserResponse = Depends(get_current_user_required),
    repo: WordRepository = Depends(get_word_repo),
):
    """Save a word to the vocabulary."""
    try:
        word = vocabulary_service.add_word(
            repo,
            user_id=current_user.id,
            word=request.word,
            translation=request.translation,
            context_sentence=request.context_sentence,
            sentence_translation=request.sentence_translation,
            source_file_id=request.source_file_id,
            source_file_name=request.source_file_name,
        )
    except DomainError as e:
        raise to_http_error(e)

    logger.info("Word added", extra={
        "word_id": word.id, "source_file_id": word.source_file_id, "user_id": current_user.id,
    })
    return WordResponse.from_domain(word)


@router.patch("/{word_id}", response_model=WordResponse)
async def update_word(
    word_id: str,
    request: WordUpdateRequest,
    current_user: UserResponse = Depends(get_current_user_required),
    repo: WordRepository = Depends(get_word_repo),
):
    """Edit a saved word."""
    try:
        word = vocabulary_service.update_word(
            repo, current_user.id, word_id, request.model_dump(exclude_unset=True),
        )
    except DomainError as e:
        raise to_http_error(e)
    return WordResponse.from_domain(word)


@router.delete("/{word_id}")
async def delete_word(
    word_id: str,
    current_user: UserResponse = Depends(get_current_user_required),
    repo: WordRepository = Depends(get_word_repo),
):
    """Delete a saved word and its tag associations."""
    try:
        vocabulary_service.delete_word(repo, current_user.id, word_id)
    except DomainError as e:
        raise to_http_error(e)

    logger.info("Word deleted", extra={"word_id": word_id, "user_id": current_user.id})
    return {"message": "Word deleted"}


@router.post("/{word_id}/tags/{tag_id}", response_model=WordResponse)
async def add_tag_to_word(
    word_id: str,
    tag_id: str,
    current_user: UserResponse = Depends(get_current_user_required),
    words: WordRepository = Depends(get_word_repo),
    tags: TagRepository = Depends(get_tag_repo),
):
    try:
        word = vocabulary_service.tag_word(words, tags, current_user.id, word_id, tag_id)
    except DomainError as e:
        raise to_http_error(e)
    return WordResponse.from_domain(word)


@router.delete("/{word_id}/tags/{tag_id}", response_model=WordResponse)
async def remove_tag_from_word(
    word_id: str,
    tag_id: str,
    current_user: UserResponse = Depends(get_current_user_required),
    words: WordRepository = Depends(get_word_repo),
    tags: TagRepository = Depends(get_tag_repo),
):
    try:
        word = vocabulary_service.untag_word(words, tags, current_user.id, word_id, tag_id)
    except DomainError as e:
        raise to_http_error(e)
    return WordResponse.from_domain(word)

"""Tag routes.

Endpoints:
- GET /tags: List the reader's tags by name
- POST /tags: Create a tag
- DELETE /tags/{id}: Delete a tag (its word associations go with it)
"""

import logging

from fastapi import APIRouter, Depends, status

from api.dependencies import get_tag_repo
from api.models import TagRequest, TagResponse, UserResponse
from api.routes.words import to_http_error
from api.security import get_current_user_required
from domain.model.errors import DomainError
from port.tag_repository import TagRepository
from services import vocabulary_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tags", tags=["tags"])


@router.get("", response_model=list[TagResponse])
async def list_tags(
    current_user: UserResponse = Depends(get_current_user_required),
    repo: TagRepository = Depends(get_tag_repo),
):
    return [TagResponse.from_domain(t) for t in repo.find(current_user.id)]


@router.post("", response_model=TagResponse, status_code=status.HTTP_201_CREATED)
async def create_tag(
    request: TagRequest,
    current_user: UserResponse = Depends(get_current_user_required),
    repo: TagRepository = Depends(get_tag_repo),
):
    try:
        tag = vocabulary_service.create_tag(repo, current_user.id, request.name, request.color)
    except DomainError as e:
        raise to_http_error(e)

    logger.info("Tag created", extra={"tag_id": tag.id, "user_id": current_user.id})
    return TagResponse.from_domain(tag)


@router.delete("/{tag_id}")
async def delete_tag(
    tag_id: str,
    current_user: UserResponse = Depends(get_current_user_required),
    repo: TagRepository = Depends(get_tag_repo),
):
    try:
        vocabulary_service.delete_tag(repo, current_user.id, tag_id)
    except DomainError as e:
        raise to_http_error(e)

    logger.info("Tag deleted", extra={"tag_id": tag_id, "user_id": current_user.id})
    return {"message": "Tag deleted"}

"""Google Drive proxy route.

Endpoints:
- POST /google-drive: one of three actions selected by the ``action`` field
    - list: readable documents, most recently modified first
    - upload: base64 content into the application folder
    - download: content (base64 for PDFs) plus mime type and name

The Google access token travels in the request body; the API token in the
Authorization header identifies the reader.
"""

import logging

from fastapi import APIRouter, Depends, status

from api.dependencies import get_file_store
from api.models import (
    DriveDownloadResponse,
    DriveFileResponse,
    DriveListResponse,
    DriveRequest,
    DriveUploadResponse,
    ErrorResponse,
    UserResponse,
)
from api.routes.translate import error_response
from api.security import get_current_user_required
from domain.model.errors import MissingCredentialError, ValidationError
from port.file_store import FileStoreAuthError, FileStoreError, FileStorePort
from services import file_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/google-drive", tags=["google-drive"])

REAUTHENTICATE_MESSAGE = "Google session expired. Please sign in with Google again."


@router.post(
    "",
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
async def google_drive(
    request: DriveRequest,
    current_user: UserResponse = Depends(get_current_user_required),
    store: FileStorePort = Depends(get_file_store),
):
    """Dispatch a file store action."""
    try:
        if request.action == "list":
            files = await file_service.list_files(store, request.accessToken)
            return DriveListResponse(files=[DriveFileResponse.from_domain(f) for f in files])

        if request.action == "upload":
            uploaded = await file_service.upload_file(
                store, request.accessToken, request.fileName, request.mimeType, request.fileContent,
            )
            logger.info("File uploaded", extra={"user_id": current_user.id, "file_id": uploaded.id})
            return DriveUploadResponse(file=DriveFileResponse.from_domain(uploaded))

        if request.action == "download":
            download = await file_service.download_file(store, request.accessToken, request.fileId)
            return DriveDownloadResponse.from_domain(download)

    except MissingCredentialError as e:
        return error_response(status.HTTP_401_UNAUTHORIZED, str(e))
    except FileStoreAuthError:
        return error_response(status.HTTP_401_UNAUTHORIZED, REAUTHENTICATE_MESSAGE)
    except ValidationError as e:
        return error_response(status.HTTP_400_BAD_REQUEST, str(e))
    except FileStoreError as e:
        logger.error("Google Drive action failed", extra={
            "user_id": current_user.id, "action": request.action,
            "status_code": e.status_code, "error": str(e),
        })
        return error_response(status.HTTP_502_BAD_GATEWAY, str(e))

    return error_response(status.HTTP_400_BAD_REQUEST, f"Unknown action: {request.action}")

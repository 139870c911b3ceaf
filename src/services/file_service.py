"""File service: validation around the file store port.

Owns the missing-credential rule and upload decoding so the route stays a
thin dispatcher over ``list`` / ``upload`` / ``download``.
"""

import base64
import binascii
import logging

from domain.model.drive import READABLE_MIME_TYPES, DriveDownload, DriveFile
from domain.model.errors import MissingCredentialError, ValidationError
from port.file_store import FileStorePort

logger = logging.getLogger(__name__)


def require_provider_token(access_token: str | None) -> str:
    if not access_token:
        raise MissingCredentialError("Please sign in with Google to access your Drive")
    return access_token


async def list_files(store: FileStorePort, access_token: str | None) -> list[DriveFile]:
    return await store.list_files(require_provider_token(access_token))


async def upload_file(
    store: FileStorePort,
    access_token: str | None,
    file_name: str | None,
    mime_type: str | None,
    file_content: str | None,
) -> DriveFile:
    """Decode the base64 payload and upload it to the application folder."""
    token = require_provider_token(access_token)
    if not file_name or not file_content:
        raise ValidationError("fileName and fileContent are required for upload")
    if mime_type not in READABLE_MIME_TYPES:
        raise ValidationError(f"Unsupported file type: {mime_type}")
    try:
        content = base64.b64decode(file_content, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValidationError("fileContent must be base64 encoded") from e

    return await store.upload_file(token, file_name, mime_type, content)


async def download_file(
    store: FileStorePort, access_token: str | None, file_id: str | None,
) -> DriveDownload:
    token = require_provider_token(access_token)
    if not file_id:
        raise ValidationError("fileId is required for download")
    return await store.download_file(token, file_id)

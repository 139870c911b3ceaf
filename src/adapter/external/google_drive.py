"""Google Drive adapter.

Implements FileStorePort against the Drive v3 REST API. Every method takes
the caller's OAuth access token; nothing is cached between calls.

API Documentation: https://developers.google.com/drive/api/reference/rest/v3
"""

import base64
import json
import logging

import httpx

from domain.model.drive import PDF_MIME_TYPE, READABLE_MIME_TYPES, DriveDownload, DriveFile
from port.file_store import FileStoreAuthError, FileStoreError

logger = logging.getLogger(__name__)

DRIVE_FILES_URL = "https://www.googleapis.com/drive/v3/files"
DRIVE_UPLOAD_URL = "https://www.googleapis.com/upload/drive/v3/files"
FOLDER_MIME_TYPE = "application/vnd.google-apps.folder"
APP_FOLDER_NAME = "LinguFlow Imports"

LIST_FIELDS = "files(id,name,mimeType,createdTime,modifiedTime,size,thumbnailLink,webViewLink)"
UPLOAD_FIELDS = "id,name,mimeType,createdTime,modifiedTime,size,webViewLink"
MULTIPART_BOUNDARY = "-------314159265358979323846"

API_TIMEOUT_SECONDS = 30.0


def build_list_query() -> str:
    """Drive search query for readable, non-trashed documents."""
    mime_clause = " or ".join(f"mimeType='{m}'" for m in READABLE_MIME_TYPES)
    return f"({mime_clause}) and trashed=false"


def build_multipart_body(metadata: dict, mime_type: str, content: bytes) -> str:
    """multipart/related body: JSON metadata part, then base64 media part."""
    delimiter = f"\r\n--{MULTIPART_BOUNDARY}\r\n"
    close_delimiter = f"\r\n--{MULTIPART_BOUNDARY}--"
    return (
        delimiter
        + "Content-Type: application/json; charset=UTF-8\r\n\r\n"
        + json.dumps(metadata)
        + delimiter
        + f"Content-Type: {mime_type}\r\n"
        + "Content-Transfer-Encoding: base64\r\n\r\n"
        + base64.b64encode(content).decode("ascii")
        + close_delimiter
    )


def _check_response(response: httpx.Response, operation: str) -> None:
    """Raise a FileStoreError for any non-success Drive response."""
    if response.is_success:
        return
    logger.error("Google Drive API error", extra={
        "operation": operation,
        "status_code": response.status_code,
        "body_preview": response.text[:200],
    })
    if response.status_code == 401:
        raise FileStoreAuthError(
            "Google Drive rejected the access token", status_code=401,
        )
    raise FileStoreError(
        f"Drive API error during {operation}: {response.status_code}",
        status_code=response.status_code,
    )


def _transport_error(operation: str, error: httpx.HTTPError) -> FileStoreError:
    """Connection failures and timeouts never got a Drive response."""
    logger.error("Google Drive request failed", extra={
        "operation": operation,
        "error_type": type(error).__name__,
        "error": str(error)[:200],
    })
    return FileStoreError(f"Drive API unreachable during {operation}")


class GoogleDriveAdapter:
    """Adapter that lists, uploads and downloads documents in Google Drive."""

    def __init__(self, timeout: float = API_TIMEOUT_SECONDS):
        self.timeout = timeout

    def _client(self, access_token: str) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.timeout,
            headers={"Authorization": f"Bearer {access_token}"},
        )

    async def list_files(self, access_token: str) -> list[DriveFile]:
        params = {
            "q": build_list_query(),
            "fields": LIST_FIELDS,
            "orderBy": "modifiedTime desc",
        }
        try:
            async with self._client(access_token) as client:
                response = await client.get(DRIVE_FILES_URL, params=params)
        except httpx.HTTPError as e:
            raise _transport_error("list", e) from e
        _check_response(response, "list")
        files = response.json().get("files") or []

        logger.info("Listed Google Drive files", extra={"file_count": len(files)})
        return [DriveFile.from_api(f) for f in files]

    async def upload_file(
        self, access_token: str, file_name: str, mime_type: str, content: bytes,
    ) -> DriveFile:
        try:
            async with self._client(access_token) as client:
                folder_id = await self._get_or_create_folder(client)
                metadata = {"name": file_name, "parents": [folder_id], "mimeType": mime_type}
                response = await client.post(
                    DRIVE_UPLOAD_URL,
                    params={"uploadType": "multipart", "fields": UPLOAD_FIELDS},
                    headers={"Content-Type": f"multipart/related; boundary={MULTIPART_BOUNDARY}"},
                    content=build_multipart_body(metadata, mime_type, content),
                )
        except httpx.HTTPError as e:
            raise _transport_error("upload", e) from e
        _check_response(response, "upload")
        uploaded = DriveFile.from_api(response.json())

        logger.info("Uploaded file to Google Drive", extra={
            "file_id": uploaded.id, "file_name": file_name, "folder_id": folder_id,
        })
        return uploaded

    async def download_file(self, access_token: str, file_id: str) -> DriveDownload:
        try:
            async with self._client(access_token) as client:
                meta_response = await client.get(
                    f"{DRIVE_FILES_URL}/{file_id}", params={"fields": "mimeType,name"},
                )
                _check_response(meta_response, "metadata")
                metadata = meta_response.json()

                response = await client.get(f"{DRIVE_FILES_URL}/{file_id}", params={"alt": "media"})
        except httpx.HTTPError as e:
            raise _transport_error("download", e) from e
        _check_response(response, "download")

        mime_type = metadata.get("mimeType", "")
        if mime_type == PDF_MIME_TYPE:
            content = base64.b64encode(response.content).decode("ascii")
        else:
            content = response.text

        logger.info("Downloaded file from Google Drive", extra={
            "file_id": file_id, "mime_type": mime_type, "bytes": len(response.content),
        })
        return DriveDownload(content=content, mime_type=mime_type, name=metadata.get("name", ""))

    async def _get_or_create_folder(self, client: httpx.AsyncClient) -> str:
        """Return the ID of the application folder, creating it if absent."""
        query = (
            f"name='{APP_FOLDER_NAME}' and mimeType='{FOLDER_MIME_TYPE}' and trashed=false"
        )
        response = await client.get(DRIVE_FILES_URL, params={"q": query, "fields": "files(id)"})
        _check_response(response, "folder lookup")
        existing = response.json().get("files") or []
        if existing:
            return existing[0]["id"]

        response = await client.post(
            DRIVE_FILES_URL, json={"name": APP_FOLDER_NAME, "mimeType": FOLDER_MIME_TYPE},
        )
        _check_response(response, "folder create")
        folder_id = response.json()["id"]
        logger.info("Created application folder in Google Drive", extra={"folder_id": folder_id})
        return folder_id

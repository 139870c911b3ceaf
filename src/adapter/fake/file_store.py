"""In-memory implementation of FileStorePort for testing."""

import base64
import uuid

from domain.model.drive import PDF_MIME_TYPE, READABLE_MIME_TYPES, DriveDownload, DriveFile
from port.file_store import FileStoreAuthError, FileStoreError

VALID_TOKEN = "valid-google-token"


class FakeFileStore:
    def __init__(self):
        self.files: dict[str, DriveFile] = {}
        self.contents: dict[str, bytes] = {}
        self.calls: list[str] = []

    def _authorize(self, access_token: str) -> None:
        if access_token != VALID_TOKEN:
            raise FileStoreAuthError("Google Drive rejected the access token", status_code=401)

    def add(self, name: str, mime_type: str, content: bytes, modified_time: str) -> DriveFile:
        file = DriveFile(
            id=uuid.uuid4().hex, name=name, mime_type=mime_type,
            created_time=modified_time, modified_time=modified_time,
            size=str(len(content)),
        )
        self.files[file.id] = file
        self.contents[file.id] = content
        return file

    async def list_files(self, access_token: str) -> list[DriveFile]:
        self.calls.append("list")
        self._authorize(access_token)
        readable = [f for f in self.files.values() if f.mime_type in READABLE_MIME_TYPES]
        return sorted(readable, key=lambda f: f.modified_time or "", reverse=True)

    async def upload_file(
        self, access_token: str, file_name: str, mime_type: str, content: bytes,
    ) -> DriveFile:
        self.calls.append("upload")
        self._authorize(access_token)
        return self.add(file_name, mime_type, content, "2026-01-01T00:00:00.000Z")

    async def download_file(self, access_token: str, file_id: str) -> DriveDownload:
        self.calls.append("download")
        self._authorize(access_token)
        file = self.files.get(file_id)
        if file is None:
            raise FileStoreError("Download error: 404", status_code=404)
        raw = self.contents[file_id]
        if file.mime_type == PDF_MIME_TYPE:
            content = base64.b64encode(raw).decode("ascii")
        else:
            content = raw.decode("utf-8")
        return DriveDownload(content=content, mime_type=file.mime_type, name=file.name)

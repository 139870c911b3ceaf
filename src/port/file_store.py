"""File store port: outbound interface for the user's cloud documents."""

from typing import Protocol

from domain.model.drive import DriveDownload, DriveFile


class FileStoreError(Exception):
    """The file store answered with a non-success status."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class FileStoreAuthError(FileStoreError):
    """The provider token was rejected; the user must sign in again."""


class FileStorePort(Protocol):
    """Port for listing, uploading and downloading readable documents.

    Every call carries the caller's provider access token; adapters keep
    no session state between calls.
    """

    async def list_files(self, access_token: str) -> list[DriveFile]:
        """PDF and plain-text files, most recently modified first."""
        ...

    async def upload_file(
        self, access_token: str, file_name: str, mime_type: str, content: bytes,
    ) -> DriveFile:
        """Upload into the application-owned folder, creating it on first use."""
        ...

    async def download_file(self, access_token: str, file_id: str) -> DriveDownload:
        """Fetch metadata and content. PDFs come back base64 encoded."""
        ...

"""File store domain models (Google Drive documents)."""

from dataclasses import dataclass

PDF_MIME_TYPE = "application/pdf"
TEXT_MIME_TYPE = "text/plain"
READABLE_MIME_TYPES = (PDF_MIME_TYPE, TEXT_MIME_TYPE)


@dataclass(frozen=True)
class DriveFile:
    """Metadata of a readable document in the user's drive."""
    id: str
    name: str
    mime_type: str
    created_time: str | None = None
    modified_time: str | None = None
    size: str | None = None
    thumbnail_link: str | None = None
    web_view_link: str | None = None

    @classmethod
    def from_api(cls, data: dict) -> "DriveFile":
        """Build from a Drive v3 ``files`` resource."""
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            mime_type=data.get("mimeType", ""),
            created_time=data.get("createdTime"),
            modified_time=data.get("modifiedTime"),
            size=data.get("size"),
            thumbnail_link=data.get("thumbnailLink"),
            web_view_link=data.get("webViewLink"),
        )


@dataclass(frozen=True)
class DriveDownload:
    """Downloaded document. ``content`` is base64 for PDFs, text otherwise."""
    content: str
    mime_type: str
    name: str

    @property
    def is_binary(self) -> bool:
        return self.mime_type == PDF_MIME_TYPE

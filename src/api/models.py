"""Pydantic models for API request/response."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from domain.model.drive import DriveDownload, DriveFile
from domain.model.translation import TranslationResult
from domain.model.vocabulary import Tag, Word


class UserResponse(BaseModel):
    """Authenticated user as exposed by the API."""
    id: str = Field(..., description="User ID")
    email: str = Field(..., description="User email")
    name: str = Field(..., description="Display name")
    created_at: datetime = Field(..., description="Account creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")
    last_login: Optional[datetime] = Field(None, description="Last login timestamp")
    provider: str = Field("email", description="Authentication provider")


# ── translation ──────────────────────────────────────────────


class TranslateRequest(BaseModel):
    """Request body for POST /translate (camelCase on the wire)."""
    word: str = Field("", description="Word to translate")
    contextSentence: Optional[str] = Field(None, description="Sentence containing the word")


class TranslateResponse(BaseModel):
    """Best-effort translation; only wordTranslation is guaranteed."""
    wordTranslation: str
    sentenceTranslation: Optional[str] = None
    pronunciation: Optional[str] = None
    partOfSpeech: Optional[str] = None
    notes: Optional[str] = None

    @classmethod
    def from_domain(cls, result: TranslationResult) -> 'TranslateResponse':
        return cls(**result.to_payload())


class ErrorResponse(BaseModel):
    error: str


# ── file store ───────────────────────────────────────────────


class DriveRequest(BaseModel):
    """Request body for POST /google-drive."""
    action: str = Field(..., description="list, upload or download")
    accessToken: Optional[str] = Field(None, description="Google OAuth access token")
    fileId: Optional[str] = None
    fileName: Optional[str] = None
    mimeType: Optional[str] = None
    fileContent: Optional[str] = Field(None, description="Base64 file content for upload")


class DriveFileResponse(BaseModel):
    """Drive file metadata in Drive's own field names."""
    id: str
    name: str
    mimeType: str
    createdTime: Optional[str] = None
    modifiedTime: Optional[str] = None
    size: Optional[str] = None
    thumbnailLink: Optional[str] = None
    webViewLink: Optional[str] = None

    @classmethod
    def from_domain(cls, f: DriveFile) -> 'DriveFileResponse':
        return cls(
            id=f.id,
            name=f.name,
            mimeType=f.mime_type,
            createdTime=f.created_time,
            modifiedTime=f.modified_time,
            size=f.size,
            thumbnailLink=f.thumbnail_link,
            webViewLink=f.web_view_link,
        )


class DriveListResponse(BaseModel):
    files: list[DriveFileResponse]


class DriveUploadResponse(BaseModel):
    file: DriveFileResponse


class DriveDownloadResponse(BaseModel):
    content: str = Field(..., description="Base64 for PDFs, raw text otherwise")
    mimeType: str
    name: str

    @classmethod
    def from_domain(cls, d: DriveDownload) -> 'DriveDownloadResponse':
        return cls(content=d.content, mimeType=d.mime_type, name=d.name)


# ── vocabulary ───────────────────────────────────────────────


class TagRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)
    color: Optional[str] = Field(None, description="Hex color, defaults to #F59E0B")


class TagResponse(BaseModel):
    id: str
    user_id: str
    name: str
    color: str
    created_at: datetime

    @classmethod
    def from_domain(cls, tag: Tag) -> 'TagResponse':
        return cls(
            id=tag.id,
            user_id=tag.user_id,
            name=tag.name,
            color=tag.color,
            created_at=tag.created_at,
        )


class WordRequest(BaseModel):
    """Request model for saving a word from the reader."""
    word: str = Field(..., min_length=1, max_length=100, description="Selected word")
    translation: Optional[str] = Field(None, description="Word translation")
    context_sentence: Optional[str] = Field(None, description="Sentence the word was selected in")
    sentence_translation: Optional[str] = Field(None, description="Translation of the sentence")
    source_file_id: Optional[str] = Field(None, description="Drive file the word came from")
    source_file_name: Optional[str] = Field(None, description="Name of that file")


class WordUpdateRequest(BaseModel):
    """Partial update; omitted fields are left unchanged."""
    word: Optional[str] = Field(None, min_length=1, max_length=100)
    translation: Optional[str] = None
    context_sentence: Optional[str] = None
    sentence_translation: Optional[str] = None


class WordResponse(BaseModel):
    id: str
    user_id: str
    word: str
    translation: Optional[str] = None
    context_sentence: Optional[str] = None
    sentence_translation: Optional[str] = None
    source_file_id: Optional[str] = None
    source_file_name: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    tags: list[TagResponse] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, w: Word) -> 'WordResponse':
        return cls(
            id=w.id,
            user_id=w.user_id,
            word=w.word,
            translation=w.translation,
            context_sentence=w.context_sentence,
            sentence_translation=w.sentence_translation,
            source_file_id=w.source_file_id,
            source_file_name=w.source_file_name,
            created_at=w.created_at,
            updated_at=w.updated_at,
            tags=[TagResponse.from_domain(t) for t in w.tags],
        )

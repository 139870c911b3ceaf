from fastapi import HTTPException

from adapter.external.google_drive import GoogleDriveAdapter
from adapter.external.litellm import LiteLLMAdapter
from adapter.mongodb.connection import get_mongodb_client, DATABASE_NAME
from adapter.mongodb.tag_repository import MongoTagRepository
from adapter.mongodb.user_repository import MongoUserRepository
from adapter.mongodb.word_repository import MongoWordRepository
from port.file_store import FileStorePort
from port.llm import LLMPort
from port.tag_repository import TagRepository
from port.user_repository import UserRepository
from port.word_repository import WordRepository
from services.translation_service import TranslationService


def _get_db():
    """Get MongoDB database, raising 503 if unavailable."""
    client = get_mongodb_client()
    if client is None:
        raise HTTPException(status_code=503, detail="Database unavailable")
    return client[DATABASE_NAME]


def get_user_repo() -> UserRepository:
    return MongoUserRepository(_get_db())


def get_word_repo() -> WordRepository:
    return MongoWordRepository(_get_db())


def get_tag_repo() -> TagRepository:
    return MongoTagRepository(_get_db())


def get_llm_port() -> LLMPort:
    return LiteLLMAdapter()


def get_translation_service() -> TranslationService:
    return TranslationService(get_llm_port())


def get_file_store() -> FileStorePort:
    return GoogleDriveAdapter()

"""MongoDB implementation of WordRepository."""

from datetime import datetime, timezone
from logging import getLogger

from pymongo.database import Database
from pymongo.errors import PyMongoError

from adapter.mongodb.connection import TAGS_COLLECTION_NAME, WORD_TAGS_COLLECTION_NAME, WORDS_COLLECTION_NAME
from adapter.mongodb.tag_repository import tag_to_domain
from domain.model.vocabulary import Tag, Word

logger = getLogger(__name__)


class MongoWordRepository:
    def __init__(self, db: Database):
        self.collection = db[WORDS_COLLECTION_NAME]
        self.word_tags = db[WORD_TAGS_COLLECTION_NAME]
        self.tags = db[TAGS_COLLECTION_NAME]

    # ── indexes ────────────────────────────────────────────────

    def ensure_indexes(self) -> bool:
        """Create indexes for words and word_tags collections."""
        from adapter.mongodb.indexes import create_index_safe

        try:
            create_index_safe(self.collection, [('user_id', 1), ('created_at', -1)], 'idx_words_user_created_at')
            create_index_safe(self.collection, [('source_file_id', 1)], 'idx_words_source_file', sparse=True)
            create_index_safe(self.word_tags, [('word_id', 1), ('tag_id', 1)], 'idx_word_tags_pair', unique=True)
            create_index_safe(self.word_tags, [('tag_id', 1)], 'idx_word_tags_tag_id')
            return True
        except Exception as e:
            logger.error("Failed to create words indexes", extra={"error": str(e)})
            return False

    # ── mapping ───────────────────────────────────────────────

    def _to_domain(self, doc: dict, tags: list[Tag] | None = None) -> Word:
        return Word(
            id=doc['_id'],
            user_id=doc['user_id'],
            word=doc['word'],
            created_at=doc['created_at'],
            updated_at=doc.get('updated_at', doc['created_at']),
            translation=doc.get('translation'),
            context_sentence=doc.get('context_sentence'),
            sentence_translation=doc.get('sentence_translation'),
            source_file_id=doc.get('source_file_id'),
            source_file_name=doc.get('source_file_name'),
            tags=tags or [],
        )

    def _tags_by_word(self, word_ids: list[str]) -> dict[str, list[Tag]]:
        """Resolve the word_tags association into Tag objects per word."""
        if not word_ids:
            return {}
        links = list(self.word_tags.find({'word_id': {'$in': word_ids}}))
        tag_ids = list({link['tag_id'] for link in links})
        tags = {doc['_id']: tag_to_domain(doc) for doc in self.tags.find({'_id': {'$in': tag_ids}})}

        result: dict[str, list[Tag]] = {}
        for link in links:
            tag = tags.get(link['tag_id'])
            if tag:
                result.setdefault(link['word_id'], []).append(tag)
        return result

    # ── CRUD ──────────────────────────────────────────────────

    def save(self, word: Word) -> str | None:
        try:
            doc = {
                '_id': word.id,
                'user_id': word.user_id,
                'word': word.word,
                'translation': word.translation,
                'context_sentence': word.context_sentence,
                'sentence_translation': word.sentence_translation,
                'source_file_id': word.source_file_id,
                'source_file_name': word.source_file_name,
                'created_at': word.created_at,
                'updated_at': word.updated_at,
            }
            self.collection.insert_one(doc)
            logger.info("Word saved", extra={"wordId": word.id, "word": word.word})
            return word.id
        except PyMongoError as e:
            logger.error("Failed to save word", extra={"word": word.word, "error": str(e)})
            return None

    def get_by_id(self, word_id: str) -> Word | None:
        try:
            doc = self.collection.find_one({'_id': word_id})
            if not doc:
                return None
            return self._to_domain(doc, self._tags_by_word([word_id]).get(word_id))
        except PyMongoError as e:
            logger.error("Failed to get word", extra={"wordId": word_id, "error": str(e)})
            return None

    def find(self, user_id: str) -> list[Word]:
        try:
            docs = list(self.collection.find({'user_id': user_id}).sort('created_at', -1))
            tags = self._tags_by_word([doc['_id'] for doc in docs])
            return [self._to_domain(doc, tags.get(doc['_id'])) for doc in docs]
        except PyMongoError as e:
            logger.error("Failed to find words", extra={"userId": user_id, "error": str(e)})
            return []

    def update(self, word_id: str, updates: dict) -> bool:
        try:
            result = self.collection.update_one(
                {'_id': word_id},
                {'$set': {**updates, 'updated_at': datetime.now(timezone.utc)}},
            )
            return result.matched_count > 0
        except PyMongoError as e:
            logger.error("Failed to update word", extra={"wordId": word_id, "error": str(e)})
            return False

    def delete(self, word_id: str) -> bool:
        try:
            self.word_tags.delete_many({'word_id': word_id})
            result = self.collection.delete_one({'_id': word_id})
            if result.deleted_count == 0:
                logger.warning("Word not found for deletion", extra={"wordId": word_id})
                return False
            logger.info("Word deleted", extra={"wordId": word_id})
            return True
        except PyMongoError as e:
            logger.error("Failed to delete word", extra={"wordId": word_id, "error": str(e)})
            return False

    # ── tag associations ──────────────────────────────────────

    def add_tag(self, word_id: str, tag_id: str) -> bool:
        try:
            self.word_tags.update_one(
                {'word_id': word_id, 'tag_id': tag_id},
                {'$setOnInsert': {'created_at': datetime.now(timezone.utc)}},
                upsert=True,
            )
            return True
        except PyMongoError as e:
            logger.error("Failed to add tag to word", extra={"wordId": word_id, "tagId": tag_id, "error": str(e)})
            return False

    def remove_tag(self, word_id: str, tag_id: str) -> bool:
        try:
            result = self.word_tags.delete_one({'word_id': word_id, 'tag_id': tag_id})
            return result.deleted_count > 0
        except PyMongoError as e:
            logger.error("Failed to remove tag from word", extra={"wordId": word_id, "tagId": tag_id, "error": str(e)})
            return False

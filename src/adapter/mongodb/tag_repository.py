"""MongoDB implementation of TagRepository."""

from logging import getLogger

from pymongo.database import Database
from pymongo.errors import PyMongoError

from adapter.mongodb.connection import TAGS_COLLECTION_NAME, WORD_TAGS_COLLECTION_NAME
from domain.model.vocabulary import DEFAULT_TAG_COLOR, Tag

logger = getLogger(__name__)


def tag_to_domain(doc: dict) -> Tag:
    return Tag(
        id=doc['_id'],
        user_id=doc['user_id'],
        name=doc['name'],
        color=doc.get('color') or DEFAULT_TAG_COLOR,
        created_at=doc['created_at'],
    )


class MongoTagRepository:
    def __init__(self, db: Database):
        self.collection = db[TAGS_COLLECTION_NAME]
        self.word_tags = db[WORD_TAGS_COLLECTION_NAME]

    def ensure_indexes(self) -> bool:
        """Create indexes for tags collection."""
        from adapter.mongodb.indexes import create_index_safe

        try:
            create_index_safe(self.collection, [('user_id', 1), ('name', 1)], 'idx_tags_user_name')
            return True
        except Exception as e:
            logger.error("Failed to create tags indexes", extra={"error": str(e)})
            return False

    def save(self, tag: Tag) -> str | None:
        try:
            self.collection.insert_one({
                '_id': tag.id,
                'user_id': tag.user_id,
                'name': tag.name,
                'color': tag.color,
                'created_at': tag.created_at,
            })
            logger.info("Tag saved", extra={"tagId": tag.id, "name": tag.name})
            return tag.id
        except PyMongoError as e:
            logger.error("Failed to save tag", extra={"name": tag.name, "error": str(e)})
            return None

    def get_by_id(self, tag_id: str) -> Tag | None:
        try:
            doc = self.collection.find_one({'_id': tag_id})
            return tag_to_domain(doc) if doc else None
        except PyMongoError as e:
            logger.error("Failed to get tag", extra={"tagId": tag_id, "error": str(e)})
            return None

    def find(self, user_id: str) -> list[Tag]:
        try:
            return [tag_to_domain(doc) for doc in self.collection.find({'user_id': user_id}).sort('name', 1)]
        except PyMongoError as e:
            logger.error("Failed to find tags", extra={"userId": user_id, "error": str(e)})
            return []

    def delete(self, tag_id: str) -> bool:
        try:
            # Associations go first so no word points at a missing tag
            self.word_tags.delete_many({'tag_id': tag_id})
            result = self.collection.delete_one({'_id': tag_id})
            if result.deleted_count == 0:
                logger.warning("Tag not found for deletion", extra={"tagId": tag_id})
                return False
            logger.info("Tag deleted", extra={"tagId": tag_id})
            return True
        except PyMongoError as e:
            logger.error("Failed to delete tag", extra={"tagId": tag_id, "error": str(e)})
            return False

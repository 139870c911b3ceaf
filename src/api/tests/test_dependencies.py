"""Unit tests for API dependency wiring."""

import unittest
from unittest.mock import patch, MagicMock

from fastapi import HTTPException

from api.dependencies import (
    get_file_store,
    get_tag_repo,
    get_translation_service,
    get_word_repo,
)
from adapter.external.google_drive import GoogleDriveAdapter
from adapter.external.litellm import LiteLLMAdapter
from adapter.mongodb.tag_repository import MongoTagRepository
from adapter.mongodb.word_repository import MongoWordRepository


class TestRepositoryDependencies(unittest.TestCase):

    @patch('api.dependencies.get_mongodb_client')
    def test_returns_mongo_repositories_when_connected(self, mock_get_client):
        mock_client = MagicMock()
        mock_client.__getitem__.return_value = MagicMock()
        mock_get_client.return_value = mock_client

        self.assertIsInstance(get_word_repo(), MongoWordRepository)
        self.assertIsInstance(get_tag_repo(), MongoTagRepository)

    @patch('api.dependencies.get_mongodb_client')
    def test_raises_503_when_mongodb_unavailable(self, mock_get_client):
        mock_get_client.return_value = None

        for dependency in (get_word_repo, get_tag_repo):
            with self.assertRaises(HTTPException) as context:
                dependency()
            self.assertEqual(context.exception.status_code, 503)
            self.assertEqual(context.exception.detail, "Database unavailable")

    @patch('api.dependencies.get_mongodb_client')
    def test_uses_configured_database_name(self, mock_get_client):
        mock_client = MagicMock()
        mock_get_client.return_value = mock_client

        get_word_repo()

        from api.dependencies import DATABASE_NAME
        mock_client.__getitem__.assert_called_with(DATABASE_NAME)


class TestServiceDependencies(unittest.TestCase):

    def test_translation_service_uses_litellm(self):
        service = get_translation_service()

        self.assertIsInstance(service.llm, LiteLLMAdapter)

    def test_file_store_is_google_drive(self):
        self.assertIsInstance(get_file_store(), GoogleDriveAdapter)


if __name__ == '__main__':
    unittest.main()

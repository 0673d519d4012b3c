"""Tests for the cached MongoDB client and its reconnection behaviour."""

import unittest
from unittest.mock import patch, MagicMock

from pymongo.errors import AutoReconnect, ServerSelectionTimeoutError

from adapter.mongodb import connection
from adapter.mongodb.connection import get_mongodb_client, reset_client

URL = 'mongodb://localhost:27017'


class TestGetMongoDBClient(unittest.TestCase):

    def setUp(self):
        reset_client()
        self.url_patch = patch.object(connection, 'MONGO_URL', URL)
        self.url_patch.start()

    def tearDown(self):
        self.url_patch.stop()
        reset_client()

    @patch('adapter.mongodb.connection.MongoClient')
    def test_connects_and_caches_client(self, mock_client_cls):
        client = mock_client_cls.return_value

        self.assertIs(get_mongodb_client(), client)
        self.assertIs(get_mongodb_client(), client)

        mock_client_cls.assert_called_once()
        self.assertEqual(client.admin.command.call_count, 2)

    @patch('adapter.mongodb.connection.MongoClient')
    def test_recovers_when_database_comes_up_after_first_failure(self, mock_client_cls):
        down, up = MagicMock(), MagicMock()
        down.admin.command.side_effect = ServerSelectionTimeoutError('not yet')
        mock_client_cls.side_effect = [down, up]

        with patch.object(connection, 'RETRY_BACKOFF_SECONDS', 0):
            self.assertIsNone(get_mongodb_client())
            self.assertIs(get_mongodb_client(), up)

        self.assertEqual(mock_client_cls.call_count, 2)
        down.close.assert_called_once()

    @patch('adapter.mongodb.connection.time')
    @patch('adapter.mongodb.connection.MongoClient')
    def test_failed_connection_waits_for_backoff_before_retrying(self, mock_client_cls, mock_time):
        down, up = MagicMock(), MagicMock()
        down.admin.command.side_effect = ServerSelectionTimeoutError('not yet')
        mock_client_cls.side_effect = [down, up]

        mock_time.monotonic.return_value = 100.0
        self.assertIsNone(get_mongodb_client())

        mock_time.monotonic.return_value = 101.0
        self.assertIsNone(get_mongodb_client())
        self.assertEqual(mock_client_cls.call_count, 1)

        mock_time.monotonic.return_value = 100.0 + connection.RETRY_BACKOFF_SECONDS
        self.assertIs(get_mongodb_client(), up)
        self.assertEqual(mock_client_cls.call_count, 2)

    @patch('adapter.mongodb.connection.MongoClient')
    def test_cached_client_failing_ping_is_replaced(self, mock_client_cls):
        first, second = MagicMock(), MagicMock()
        mock_client_cls.side_effect = [first, second]

        self.assertIs(get_mongodb_client(), first)
        first.admin.command.side_effect = AutoReconnect('connection reset')

        self.assertIs(get_mongodb_client(), second)
        first.close.assert_called_once()

    @patch('adapter.mongodb.connection.MongoClient')
    def test_missing_url_returns_none_without_connecting(self, mock_client_cls):
        with patch.object(connection, 'MONGO_URL', None):
            self.assertIsNone(get_mongodb_client())
            self.assertIsNone(get_mongodb_client())

        mock_client_cls.assert_not_called()


if __name__ == '__main__':
    unittest.main()

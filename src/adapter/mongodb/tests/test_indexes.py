"""Tests for ensure_index reconciliation against existing indexes."""

import unittest
from unittest.mock import MagicMock

from adapter.mongodb.indexes import ensure_index


class TestEnsureIndex(unittest.TestCase):

    def setUp(self):
        self.collection = MagicMock()
        self.collection.name = 'users'

    def test_creates_missing_index(self):
        self.collection.index_information.return_value = {'_id_': {'key': [('_id', 1)]}}

        ensure_index(self.collection, [('email', 1)], 'idx_users_email', unique=True)

        self.collection.drop_index.assert_not_called()
        self.collection.create_index.assert_called_once_with([('email', 1)], name='idx_users_email', unique=True)

    def test_matching_index_left_alone(self):
        self.collection.index_information.return_value = {
            '_id_': {'key': [('_id', 1)]},
            'idx_users_email': {'key': [('email', 1)], 'unique': True},
        }

        ensure_index(self.collection, [('email', 1)], 'idx_users_email', unique=True)

        self.collection.drop_index.assert_not_called()
        self.collection.create_index.assert_not_called()

    def test_same_name_without_unique_is_replaced(self):
        """An older non-unique email index would not enforce email uniqueness."""
        self.collection.index_information.return_value = {
            'idx_users_email': {'key': [('email', 1)]},
        }

        ensure_index(self.collection, [('email', 1)], 'idx_users_email', unique=True)

        self.collection.drop_index.assert_called_once_with('idx_users_email')
        self.collection.create_index.assert_called_once_with([('email', 1)], name='idx_users_email', unique=True)

    def test_same_keys_under_other_name_is_replaced(self):
        self.collection.index_information.return_value = {
            'email_1': {'key': [('email', 1)], 'unique': True},
        }

        ensure_index(self.collection, [('email', 1)], 'idx_users_email', unique=True)

        self.collection.drop_index.assert_called_once_with('email_1')
        self.collection.create_index.assert_called_once()


if __name__ == '__main__':
    unittest.main()

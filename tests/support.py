"""Shared fixtures for API tests: in-memory MongoDB and a recording image host."""
import itertools
import unittest

import mongomock

from menumaster import create_app
from menumaster.core.exceptions import AssetUploadError
from menumaster.utils.aws_utils import UploadResult

TEST_CONFIG = {
    "TESTING": True,
    "LOG_TO_FILE": False,
    "ASSET_ROOT_FOLDER": "menumaster",
}


class FakeAssetStore:
    """Keeps uploaded bytes in memory and records every call in order."""

    def __init__(self, fail_uploads=False, fail_deletes=False):
        self.assets = {}
        self.calls = []
        self.fail_uploads = fail_uploads
        self.fail_deletes = fail_deletes
        self._ids = itertools.count(1)

    def upload(self, data, folder, filename=None, content_type=None):
        self.calls.append(("upload", folder))
        if self.fail_uploads:
            raise AssetUploadError("Upload rejected by image host")
        public_id = f"{folder}/asset{next(self._ids)}"
        self.assets[public_id] = data
        return UploadResult(url=f"https://assets.example.test/{public_id}", public_id=public_id)

    def delete(self, public_id):
        self.calls.append(("delete", public_id))
        if self.fail_deletes:
            raise RuntimeError("Image host unavailable")
        self.assets.pop(public_id, None)

    def exists(self, public_id):
        return public_id in self.assets


class ApiTestCase(unittest.TestCase):
    def setUp(self):
        self.db = mongomock.MongoClient().menumaster_test
        self.assets = FakeAssetStore()
        self.app = create_app(config=TEST_CONFIG, database=self.db, asset_store=self.assets)
        self.client = self.app.test_client()

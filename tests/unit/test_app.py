"""
Unit Tests: application wiring
===============================

Health endpoint, error mapping and the document store lifecycle.
"""

import unittest
from unittest.mock import MagicMock, patch

from pymongo.errors import PyMongoError, ServerSelectionTimeoutError

from menumaster import create_app
from menumaster.core.exceptions import DocumentStoreUnavailable
from menumaster.extensions import ConnectionStateListener, DocumentStore
from menumaster.models.category import Category
from tests.support import TEST_CONFIG, ApiTestCase


class TestHealth(ApiTestCase):
    def test_reports_connection_state(self):
        response = self.client.get("/")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json(), {"message": "API is running", "mongoDBStatus": "connected"})


class TestErrorMapping(ApiTestCase):
    def test_every_collection_lists_empty(self):
        for path in ("categories", "offers", "products", "restaurant-admins", "restaurants"):
            response = self.client.get(f"/api/{path}")
            self.assertEqual(response.status_code, 200, path)
            self.assertEqual(response.get_json(), [], path)

    def test_malformed_id_is_a_server_error(self):
        response = self.client.get("/api/offers/not-an-object-id")
        self.assertEqual(response.status_code, 500)
        self.assertIn("not-an-object-id", response.get_json()["error"])

    def test_database_errors_echo_message(self):
        with patch.object(Category, "find_all", side_effect=PyMongoError("connection reset")):
            response = self.client.get("/api/categories")
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.get_json(), {"error": "connection reset"})

    def test_unexpected_errors_echo_message(self):
        with patch.object(Category, "find_all", side_effect=RuntimeError("boom")):
            response = self.client.get("/api/categories")
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.get_json(), {"error": "boom"})

    def test_non_object_json_body_is_rejected(self):
        for payload in ("owner", ["owner"], 42):
            response = self.client.post("/api/restaurant-admins", json=payload)

            self.assertEqual(response.status_code, 500)
            self.assertEqual(response.get_json(), {"error": "Request body must be a JSON object"})
        self.assertEqual(self.db.restaurantadmins.count_documents({}), 0)

    def test_field_errors_log_the_field(self):
        with self.assertLogs(self.app.logger, "ERROR") as logs:
            response = self.client.post("/api/products", json={"name": "Tea", "price": "free"})

        self.assertEqual(response.status_code, 500)
        self.assertTrue(any("field=price" in line for line in logs.output))

    def test_unknown_route_is_json(self):
        response = self.client.get("/api/menus")
        self.assertEqual(response.status_code, 404)
        self.assertIn("error", response.get_json())


class TestDocumentStore(unittest.TestCase):
    def test_injected_database_is_connected(self):
        store = DocumentStore()
        store.init_app(MagicMock(extensions={}), database=MagicMock())
        self.assertEqual(store.status, "connected")

    def test_failed_ping_marks_disconnected(self):
        store = DocumentStore()
        store.db = MagicMock()
        store.db.command.side_effect = ServerSelectionTimeoutError("no servers")
        store.state = "connecting"

        with self.assertRaises(ServerSelectionTimeoutError):
            store.connect()
        self.assertEqual(store.status, "disconnected")

    def test_unknown_state(self):
        store = DocumentStore()
        store.state = "reconnecting"
        self.assertEqual(store.status, "unknown")

    def test_shutdown(self):
        store = DocumentStore()
        store.init_app(MagicMock(extensions={}), database=MagicMock())
        store.shutdown()
        self.assertEqual(store.status, "disconnected")

    def test_uninitialized_collection_access(self):
        with self.assertRaises(DocumentStoreUnavailable):
            DocumentStore().collection("categories")

    def test_lost_server_marks_disconnected(self):
        store = DocumentStore()
        listener = ConnectionStateListener(store)
        event = MagicMock()

        listener.opened(event)
        self.assertEqual(store.status, "connecting")

        event.new_description.has_writable_server.return_value = True
        listener.description_changed(event)
        self.assertEqual(store.status, "connected")

        event.new_description.has_writable_server.return_value = False
        listener.description_changed(event)
        self.assertEqual(store.status, "disconnected")

        event.new_description.has_writable_server.return_value = True
        listener.description_changed(event)
        self.assertEqual(store.status, "connected")

        listener.closed(event)
        self.assertEqual(store.status, "disconnected")

    def test_no_writable_server_while_connecting(self):
        store = DocumentStore()
        listener = ConnectionStateListener(store)
        event = MagicMock()
        event.new_description.has_writable_server.return_value = False

        listener.opened(event)
        listener.description_changed(event)
        self.assertEqual(store.status, "connecting")

    def test_uri_client_registers_state_listener(self):
        app = MagicMock(extensions={}, config={"MONGO_URI": "mongodb://db.example.test/menumaster"})
        store = DocumentStore()
        with patch("menumaster.extensions.mongo") as mongo:
            store.init_app(app)

        listeners = mongo.init_app.call_args.kwargs["event_listeners"]
        self.assertIsInstance(listeners[0], ConnectionStateListener)
        self.assertIs(listeners[0].store, store)
        self.assertEqual(store.status, "connecting")

    def test_create_app_requires_uri(self):
        with self.assertRaises(DocumentStoreUnavailable):
            create_app(config={**TEST_CONFIG, "MONGO_URI": None})


if __name__ == "__main__":
    unittest.main()

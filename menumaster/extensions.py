import boto3
from flask import current_app
from flask_pymongo import PyMongo
from pymongo import monitoring
from pymongo.errors import PyMongoError

from menumaster.core.constants import (
    CONNECTION_STATES,
    MONGO_CONNECT_TIMEOUT_MS,
    MONGO_SERVER_SELECTION_TIMEOUT_MS,
    MONGO_SOCKET_TIMEOUT_MS,
)
from menumaster.core.exceptions import DocumentStoreUnavailable
from menumaster.utils.aws_utils import S3AssetStore

mongo = PyMongo()


class ConnectionStateListener(monitoring.TopologyListener):
    """Keeps DocumentStore.state in step with the driver's view of the cluster."""

    def __init__(self, store):
        self.store = store

    def opened(self, event):
        self.store.state = "connecting"

    def description_changed(self, event):
        if event.new_description.has_writable_server():
            self.store.state = "connected"
        elif self.store.state == "connected":
            self.store.state = "disconnected"

    def closed(self, event):
        self.store.state = "disconnected"


class DocumentStore:
    """
    Process-wide MongoDB handle.

    Either wraps the flask_pymongo client created from MONGO_URI or an
    injected database object (tests pass a mongomock database).
    """

    def __init__(self):
        self.db = None
        self.state = "disconnected"
        self._owns_client = False

    def init_app(self, app, database=None):
        if database is not None:
            self.db = database
            self._owns_client = False
            self.state = "connected"
        else:
            uri = app.config.get("MONGO_URI")
            if not uri:
                raise DocumentStoreUnavailable("MONGODB_URI is not set")
            self.state = "connecting"
            mongo.init_app(
                app,
                uri,
                serverSelectionTimeoutMS=MONGO_SERVER_SELECTION_TIMEOUT_MS,
                connectTimeoutMS=MONGO_CONNECT_TIMEOUT_MS,
                socketTimeoutMS=MONGO_SOCKET_TIMEOUT_MS,
                event_listeners=[ConnectionStateListener(self)],
            )
            self.db = mongo.db if mongo.db is not None else mongo.cx[app.config["MONGO_DB_NAME"]]
            self._owns_client = True
        app.extensions["document_store"] = self

    def connect(self):
        """Force a round trip so a bad URI or unreachable cluster fails at startup."""
        try:
            self.db.command("ping")
        except PyMongoError:
            self.state = "disconnected"
            raise
        self.state = "connected"

    def shutdown(self):
        if self._owns_client and mongo.cx is not None:
            self.state = "disconnecting"
            mongo.cx.close()
        self.state = "disconnected"

    @property
    def status(self):
        return self.state if self.state in CONNECTION_STATES else "unknown"

    def collection(self, name):
        if self.db is None:
            raise DocumentStoreUnavailable("Document store is not initialized")
        return self.db[name]


document_store = DocumentStore()


def init_asset_store(app, store=None):
    """Initialize the image host used for uploads, S3 unless one is injected."""
    if store is None:
        try:
            s3_client = boto3.client(
                "s3",
                aws_access_key_id=app.config.get("AWS_ACCESS_KEY_ID"),
                aws_secret_access_key=app.config.get("AWS_SECRET_ACCESS_KEY"),
                region_name=app.config.get("AWS_REGION"),
            )
            app.logger.info("AWS S3 client initialized successfully")
        except Exception as e:
            app.logger.error(f"Failed to initialize S3 client: {e}")
            s3_client = None
        store = S3AssetStore(s3_client, app.config.get("AWS_S3_BUCKET_NAME"), app.config.get("AWS_REGION"))
    app.extensions["asset_store"] = store
    return store


def get_asset_store():
    return current_app.extensions["asset_store"]

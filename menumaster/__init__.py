from flask import Flask
from flask_cors import CORS
from dotenv import load_dotenv
from io import StringIO
import os

# Extensions
from menumaster.extensions import document_store, init_asset_store
from menumaster.core.constants import ASSET_ROOT_FOLDER
from menumaster.core.error_handlers import register_error_handlers
from menumaster.utils.logging_config import setup_logging
from menumaster.utils.routes import register_routes


def _env_flag(name, default):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def load_config():
    # Load .env (support for secrets injected as a whole dotenv file)
    dotenv_content = os.environ.get("DOTENV_FILE")
    if dotenv_content:
        load_dotenv(stream=StringIO(dotenv_content))
    else:
        load_dotenv()

    max_upload = os.getenv("MAX_UPLOAD_BYTES")
    return {
        "MONGO_URI": os.getenv("MONGODB_URI"),
        "MONGO_DB_NAME": os.getenv("MONGODB_DATABASE", "menumaster"),
        "AWS_ACCESS_KEY_ID": os.getenv("AWS_ACCESS_KEY_ID"),
        "AWS_SECRET_ACCESS_KEY": os.getenv("AWS_SECRET_ACCESS_KEY"),
        "AWS_REGION": os.getenv("AWS_REGION", "ap-south-1"),
        "AWS_S3_BUCKET_NAME": os.getenv("AWS_S3_BUCKET_NAME"),
        "ASSET_ROOT_FOLDER": os.getenv("ASSET_ROOT_FOLDER", ASSET_ROOT_FOLDER),
        "MAX_CONTENT_LENGTH": int(max_upload) if max_upload else None,
        "PORT": int(os.getenv("PORT", "3000")),
        "LOG_DIR": os.getenv("LOG_DIR", "logs"),
        "LOG_TO_FILE": _env_flag("LOG_TO_FILE", True),
        "LOG_JSON": _env_flag("LOG_JSON", False),
    }


def create_app(config=None, database=None, asset_store=None):
    """
    Build the API.

    `database` and `asset_store` replace MongoDB and S3 when given; without a
    database the MONGODB_URI connection is opened and pinged, and a failed
    ping raises.
    """
    app = Flask(__name__)

    # Configuration
    app.config.update(load_config())
    if config:
        app.config.update(config)

    setup_logging(app)

    # Initialize extensions
    document_store.init_app(app, database=database)
    if database is None:
        try:
            document_store.connect()
            app.logger.info("Connected to MongoDB")
        except Exception as e:
            app.logger.error(f"MongoDB connection error: {e}")
            raise
    init_asset_store(app, store=asset_store)

    # Enable CORS
    CORS(app)

    register_error_handlers(app)
    register_routes(app)

    from menumaster.routes import register_blueprints
    register_blueprints(app)

    return app

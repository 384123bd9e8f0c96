import traceback

from bson.errors import InvalidId
from flask import jsonify
from pymongo.errors import PyMongoError
from werkzeug.exceptions import HTTPException

from menumaster.core.exceptions import ApiError


def register_error_handlers(app):
    """Map every failure onto {"error": message} with 404 or 500."""

    @app.errorhandler(ApiError)
    def handle_api_error(e):
        if e.status_code >= 500:
            app.logger.error(
                "ApiError | status=%s | field=%s | error=%s",
                e.status_code,
                getattr(e, "field", None),
                e.message
            )
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(InvalidId)
    def handle_invalid_id(e):
        app.logger.warning("InvalidDocumentId | error=%s", str(e))
        return jsonify({"error": str(e)}), 500

    @app.errorhandler(PyMongoError)
    def handle_database_error(e):
        app.logger.error(
            "DatabaseError | error=%s\n%s",
            str(e),
            traceback.format_exc()
        )
        return jsonify({"error": str(e)}), 500

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({"error": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        app.logger.error(
            "UnhandledException | error=%s\n%s",
            str(e),
            traceback.format_exc()
        )
        return jsonify({"error": str(e)}), 500

from flask import jsonify, request

from menumaster.extensions import document_store


def register_routes(app):

    @app.before_request
    def log_request():
        app.logger.info(
            f"{request.method} {request.path} | IP: {request.remote_addr}"
        )

    @app.route("/")
    def home():
        return jsonify({
            "message": "API is running",
            "mongoDBStatus": document_store.status
        }), 200

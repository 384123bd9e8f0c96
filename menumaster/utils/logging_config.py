import logging
import os
from logging.handlers import RotatingFileHandler
import json

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s [%(pathname)s:%(lineno)d]"


# JSON formatter (optional)
class JSONFormatter(logging.Formatter):
    def format(self, record):
        log = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "message": record.getMessage(),
            "module": record.module,
            "line": record.lineno,
            "path": record.pathname,
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log)


def _formatter(app, fmt):
    if app.config.get("LOG_JSON"):
        return JSONFormatter()
    return logging.Formatter(fmt)


def setup_logging(app):
    # Flask shares one logger per import name; configure it once per process
    if getattr(app.logger, "_menumaster_configured", False):
        return

    handlers = []

    if app.config.get("LOG_TO_FILE", True):
        log_dir = app.config.get("LOG_DIR", "logs")
        os.makedirs(log_dir, exist_ok=True)

        # ------------------------------
        # 1. Rotating File Handler (INFO)
        # ------------------------------
        info_handler = RotatingFileHandler(
            os.path.join(log_dir, "app.log"),
            maxBytes=10_000_000,   # 10 MB
            backupCount=5
        )
        info_handler.setLevel(logging.INFO)
        info_handler.setFormatter(_formatter(app, LOG_FORMAT))
        handlers.append(info_handler)

        # ------------------------------
        # 2. Error Handler (ERROR logs only)
        # ------------------------------
        error_handler = RotatingFileHandler(
            os.path.join(log_dir, "error.log"),
            maxBytes=10_000_000,
            backupCount=5
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(_formatter(app, LOG_FORMAT))
        handlers.append(error_handler)

    # ------------------------------
    # 3. Console Handler (for Docker/Gunicorn)
    # ------------------------------
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(_formatter(app, "%(asctime)s - %(levelname)s - %(message)s"))
    handlers.append(console_handler)

    # ------------------------------
    # Attach handlers to Flask logger
    # ------------------------------
    app.logger.setLevel(app.config.get("LOG_LEVEL", logging.INFO))
    for handler in handlers:
        app.logger.addHandler(handler)
    app.logger._menumaster_configured = True

    app.logger.info("Logging system initialized")

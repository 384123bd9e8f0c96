import atexit
import sys

from menumaster import create_app
from menumaster.extensions import document_store

try:
    app = create_app()
except Exception:
    # Already logged by create_app; the process cannot serve without MongoDB
    sys.exit(1)

atexit.register(document_store.shutdown)

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=app.config["PORT"])

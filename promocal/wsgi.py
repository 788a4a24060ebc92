"""WSGI entrypoint for promocal."""

from __future__ import annotations

import os

from promocal import create_app

app = create_app()

if __name__ == "__main__":
    host = os.environ.get("FLASK_RUN_HOST", "127.0.0.1")
    port = int(os.environ.get("FLASK_RUN_PORT", "5000"))
    app.run(host=host, port=port)  # nosec B104

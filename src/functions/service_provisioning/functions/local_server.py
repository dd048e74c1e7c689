"""Local development server for the service provisioning Cloud Function."""

from __future__ import annotations

import os
import sys
from pathlib import Path

from flask import Flask, request

# Ensure project root is on sys.path
project_root = Path(__file__).parent.parent.parent.parent.parent.absolute()
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from src.functions.service_provisioning.functions.main import (
    create_cloud_run_service_handler,
    health_check_handler,
)

app = Flask(__name__)


@app.route("/", methods=["POST", "OPTIONS"])
def local_handler():
    """Proxy HTTP requests to the Cloud Function handler."""
    return create_cloud_run_service_handler(request)


@app.route("/health", methods=["GET"])
def local_health():
    return health_check_handler(request)


if __name__ == "__main__":
    port = int(os.environ.get("PORT", 8080))
    print(f"Starting local service provisioning server on http://localhost:{port}")
    print(
        "Test with: curl -X POST http://localhost:{port} -H 'Content-Type: application/json' "
        "-d '{\"serviceName\": \"demo\", \"HUMANITEC_TOKEN\": \"...\", \"GOOGLE_API_KEY\": \"...\"}'".replace(
            "{port}", str(port)
        )
    )
    print("")
    app.run(host="0.0.0.0", port=port, debug=True)

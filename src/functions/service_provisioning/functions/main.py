"""Cloud Function entry point for the service provisioning service."""

from __future__ import annotations

import functools
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Optional

import flask
import functions_framework

# Ensure project root is on sys.path before importing project modules
project_root = Path(__file__).parent.parent.parent.parent.parent.absolute()
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from src.shared.utils.env import load_env
from src.shared.utils.logging import setup_logging

from src.functions.service_provisioning.core.clients import (
    DefaultProjectResolver,
    create_services_client,
)
from src.functions.service_provisioning.core.config import REGION
from src.functions.service_provisioning.core.errors import (
    InvalidRequestError,
    ProvisioningError,
    classify_provider_error,
)
from src.functions.service_provisioning.core.factory import ProvisioningFactory
from src.functions.service_provisioning.core.service import ServiceProvisioner

load_env()
setup_logging(level=os.getenv("LOG_LEVEL", "INFO"))
logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


@functools.lru_cache(maxsize=1)
def get_provisioner() -> ServiceProvisioner:
    """Process-wide provisioner, built on first use and reused across requests."""
    return ServiceProvisioner(
        run_client=create_services_client(),
        project_resolver=DefaultProjectResolver(),
    )


def create_cloud_run_service_handler(
    request: flask.Request,
    provisioner: Optional[ServiceProvisioner] = None,
) -> flask.Response:
    """HTTP handler that creates a public Cloud Run service."""

    if request.method == "OPTIONS":
        return _text_response("", status=204)

    if request.method != "POST":
        logger.warning("Unsupported HTTP method: %s", request.method)
        return _text_response("Method Not Allowed", status=405)

    try:
        request_model = ProvisioningFactory.create_request(request.get_json(silent=True))
    except InvalidRequestError as exc:
        logger.warning("Invalid request: %s", exc)
        return _text_response(exc.message, status=exc.status)

    service_id = request_model.service_name

    try:
        provisioner = provisioner or get_provisioner()
        result = provisioner.provision(request_model)
    except ProvisioningError as exc:
        return _text_response(exc.message, status=exc.status)
    except Exception as exc:  # noqa: BLE001
        logger.exception("Error creating/configuring service %s", service_id)
        region = provisioner.region if provisioner is not None else REGION
        classification = classify_provider_error(exc, service_id, region)
        return _text_response(classification.message, status=classification.status)

    return _json_response(result.to_response().model_dump(), status=200)


def health_check_handler(request: flask.Request) -> flask.Response:
    """Health check endpoint."""

    return _json_response({"status": "healthy", "service": "service_provisioning"})


def _apply_cors(response: flask.Response) -> flask.Response:
    for name, value in CORS_HEADERS.items():
        response.headers[name] = value
    return response


def _text_response(message: str, status: int) -> flask.Response:
    response = flask.make_response(message, status)
    response.headers["Content-Type"] = "text/plain; charset=utf-8"
    return _apply_cors(response)


def _json_response(body: dict[str, Any], status: int = 200) -> flask.Response:
    response = flask.make_response(json.dumps(body, ensure_ascii=False), status)
    response.headers["Content-Type"] = "application/json"
    return _apply_cors(response)


@functions_framework.http
def createCloudRunService(request: flask.Request):
    return create_cloud_run_service_handler(request)


@functions_framework.http
def health_check(request: flask.Request):
    return health_check_handler(request)

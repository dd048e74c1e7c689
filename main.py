"""Deployment wrapper for the service provisioning Cloud Function."""

from __future__ import annotations

import sys
from pathlib import Path

import flask

project_root = Path(__file__).resolve().parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from src.functions.service_provisioning.functions.main import (
    create_cloud_run_service_handler,
    health_check_handler,
)


def create_cloud_run_service(request: flask.Request) -> flask.Response:
    return create_cloud_run_service_handler(request)


def health_check(request: flask.Request) -> flask.Response:
    return health_check_handler(request)


# Entry point name used by `gcloud functions deploy --entry-point createCloudRunService`
createCloudRunService = create_cloud_run_service

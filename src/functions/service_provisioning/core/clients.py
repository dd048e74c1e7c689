"""Google Cloud collaborators used by the provisioner."""

from __future__ import annotations

import logging

import google.auth
from google.auth import exceptions as auth_exceptions
from google.cloud import run_v2

from .errors import ProjectResolutionError

logger = logging.getLogger(__name__)


class DefaultProjectResolver:
    """Resolves the project id from Application Default Credentials."""

    def __call__(self) -> str:
        try:
            _, project_id = google.auth.default()
        except auth_exceptions.DefaultCredentialsError as exc:
            logger.error("Error getting project ID: %s", exc)
            raise ProjectResolutionError() from exc

        if not project_id:
            logger.error("Application Default Credentials carry no project ID")
            raise ProjectResolutionError()

        return project_id


def create_services_client() -> run_v2.ServicesClient:
    try:
        return run_v2.ServicesClient()
    except auth_exceptions.DefaultCredentialsError as exc:
        logger.error("Cannot build Cloud Run client: %s", exc)
        raise ProjectResolutionError() from exc

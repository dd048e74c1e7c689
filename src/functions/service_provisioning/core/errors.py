"""Error taxonomy for service provisioning and provider error classification."""

from __future__ import annotations

from dataclasses import dataclass

from google.api_core import exceptions as google_exceptions

from .config import REGION


class ProvisioningError(Exception):
    """Base class for failures reported back to the HTTP caller."""

    status: int = 500

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status


class InvalidRequestError(ProvisioningError, ValueError):
    """Raised when a required request field is missing or not a string."""

    status = 400

    def __init__(self, field_name: str) -> None:
        super().__init__(f'Missing or invalid "{field_name}" in request body.')
        self.field_name = field_name


class ProjectResolutionError(ProvisioningError):
    """Raised when the Google Cloud project id cannot be determined."""

    def __init__(self, message: str = "Could not determine Google Cloud Project ID.") -> None:
        super().__init__(message)


class MissingCredentialError(ProvisioningError):
    """Raised when the mounted service account key is not available."""

    def __init__(self, message: str = "Server configuration error: Missing service account key.") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class ErrorClassification:
    status: int
    message: str


PERMISSION_DENIED_MESSAGE = (
    "Permission denied. Ensure the function's service account has necessary roles "
    "(Cloud Run Admin, IAM Policy Admin/Setter)."
)


def classify_provider_error(exc: BaseException, service_id: str, region: str = REGION) -> ErrorClassification:
    """Map a failure from the create/IAM calls to an HTTP status and message.

    Only two provider conditions get dedicated statuses: ALREADY_EXISTS (409)
    and PERMISSION_DENIED (403). Everything else is a 500 that carries the
    underlying error message.
    """
    if isinstance(exc, google_exceptions.AlreadyExists):
        return ErrorClassification(409, f"Service {service_id} already exists in {region}.")

    if isinstance(exc, google_exceptions.PermissionDenied):
        return ErrorClassification(403, PERMISSION_DENIED_MESSAGE)

    detail = getattr(exc, "message", None) or str(exc)
    return ErrorClassification(
        500,
        f"Failed to create or configure service {service_id}. Error: {detail}",
    )

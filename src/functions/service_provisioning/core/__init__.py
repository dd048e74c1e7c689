"""Core services for the service_provisioning module."""

from .config import (
    ProvisioningRequest,
    ProvisioningResponse,
    ProvisioningResult,
    container_image,
)
from .errors import (
    ErrorClassification,
    InvalidRequestError,
    MissingCredentialError,
    ProjectResolutionError,
    ProvisioningError,
    classify_provider_error,
)
from .factory import ProvisioningFactory
from .service import ServiceProvisioner

__all__ = [
    "ErrorClassification",
    "InvalidRequestError",
    "MissingCredentialError",
    "ProjectResolutionError",
    "ProvisioningError",
    "ProvisioningFactory",
    "ProvisioningRequest",
    "ProvisioningResponse",
    "ProvisioningResult",
    "ServiceProvisioner",
    "classify_provider_error",
    "container_image",
]

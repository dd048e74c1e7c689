"""Contracts and deployment constants for the service provisioning function."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, StrictStr

REGION = "us-central1"

IMAGE_REGISTRY = f"{REGION}-docker.pkg.dev"
IMAGE_REPOSITORY = "github-actions-builds"
IMAGE_NAME = "canyonchat"
IMAGE_TAG = "17f96adf511309c19f9d5e640f0b8dc3fbdefc06"

DEFAULT_MODEL = "gemini-2.5-pro-preview-03-25"

# Populated by Secret Manager when the function is deployed
CREDENTIAL_ENV_VAR = "GOOGLE_ENVIRONMENT_VARIABLES"
CREDENTIAL_FORWARD_NAME = "GCP_SERVICE_ACCOUNT_KEY_JSON"

INVOKER_ROLE = "roles/run.invoker"
PUBLIC_MEMBER = "allUsers"

# Order in which request fields are validated
REQUIRED_FIELDS = ("serviceName", "HUMANITEC_TOKEN", "GOOGLE_API_KEY")


def container_image(project_id: str) -> str:
    """Fixed image reference inside the project's Artifact Registry."""
    return f"{IMAGE_REGISTRY}/{project_id}/{IMAGE_REPOSITORY}/{IMAGE_NAME}:{IMAGE_TAG}"


def location_parent(project_id: str, region: str = REGION) -> str:
    return f"projects/{project_id}/locations/{region}"


class ProvisioningRequest(BaseModel):
    """Incoming payload for creating a Cloud Run service."""

    model_config = ConfigDict(extra="ignore")

    service_name: StrictStr = Field(..., alias="serviceName", min_length=1, description="Cloud Run service id")
    humanitec_token: StrictStr = Field(..., alias="HUMANITEC_TOKEN", min_length=1, description="Humanitec API token")
    google_api_key: StrictStr = Field(..., alias="GOOGLE_API_KEY", min_length=1, description="Google API key")


class ProvisioningResponse(BaseModel):
    """Success body returned to the caller."""

    message: str
    serviceUrl: str
    serviceName: str


@dataclass
class ProvisioningResult:
    """Outcome of a completed provisioning run."""

    service_id: str
    service_name: str
    service_url: str
    operation_name: str = ""

    def to_response(self) -> ProvisioningResponse:
        return ProvisioningResponse(
            message=f"Service {self.service_id} created successfully and made public.",
            serviceUrl=self.service_url,
            serviceName=self.service_name,
        )

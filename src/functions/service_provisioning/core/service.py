"""Cloud Run provisioning: create the service, wait for it, make it public."""

from __future__ import annotations

import logging
import os
from typing import Any, Callable, List, Mapping, Optional

from google.cloud import run_v2

from src.shared.utils.config_validator import ConfigurationError, require_env

from .config import (
    CREDENTIAL_ENV_VAR,
    CREDENTIAL_FORWARD_NAME,
    DEFAULT_MODEL,
    INVOKER_ROLE,
    PUBLIC_MEMBER,
    REGION,
    ProvisioningRequest,
    ProvisioningResult,
    container_image,
    location_parent,
)
from .errors import MissingCredentialError, ProjectResolutionError

logger = logging.getLogger(__name__)

ProjectResolver = Callable[[], str]


class ServiceProvisioner:
    """Creates a public Cloud Run service from a validated request.

    The run client and project resolver are injected so a single instance can
    be built per process and replaced by fakes in tests. Service creation and
    the IAM update are not transactional: when the policy update fails the
    service stays deployed but private.
    """

    def __init__(
        self,
        run_client: Any,
        project_resolver: ProjectResolver,
        environ: Optional[Mapping[str, str]] = None,
        region: str = REGION,
    ) -> None:
        self.run_client = run_client
        self.project_resolver = project_resolver
        self.environ = environ if environ is not None else os.environ
        self.region = region

    def resolve_project(self) -> str:
        try:
            project_id = self.project_resolver()
        except ProjectResolutionError:
            raise
        except Exception as exc:
            logger.error("Error getting project ID: %s", exc)
            raise ProjectResolutionError() from exc

        if not project_id:
            raise ProjectResolutionError()
        return project_id

    def read_credential_blob(self) -> str:
        try:
            return require_env(
                CREDENTIAL_ENV_VAR,
                "service account key mounted from Secret Manager",
                environ=self.environ,
            )
        except ConfigurationError as exc:
            logger.error("%s Ensure the secret is mounted correctly.", exc)
            raise MissingCredentialError() from exc

    @staticmethod
    def build_environment(request: ProvisioningRequest, credential_blob: str) -> List[run_v2.EnvVar]:
        """Environment for the new container, in a fixed order."""
        return [
            run_v2.EnvVar(name="ENABLE_MCP", value="true"),
            run_v2.EnvVar(name="DEFAULT_MODEL", value=DEFAULT_MODEL),
            run_v2.EnvVar(name="HUMANITEC_TOKEN", value=request.humanitec_token),
            run_v2.EnvVar(name="GOOGLE_API_KEY", value=request.google_api_key),
            run_v2.EnvVar(name=CREDENTIAL_FORWARD_NAME, value=credential_blob),
        ]

    @staticmethod
    def build_service(project_id: str, env: List[run_v2.EnvVar]) -> run_v2.Service:
        return run_v2.Service(
            template=run_v2.RevisionTemplate(
                containers=[
                    run_v2.Container(
                        image=container_image(project_id),
                        env=env,
                    ),
                ],
            ),
        )

    def create_service(self, parent: str, service: run_v2.Service, service_id: str) -> tuple[Any, str]:
        """Submit the create call and block until the operation finishes.

        Returns the created service and the operation name.
        """
        logger.info("Creating service: %s", service_id)
        operation = self.run_client.create_service(
            parent=parent,
            service=service,
            service_id=service_id,
        )

        operation_name = _operation_name(operation)
        logger.info("Waiting for service creation operation: %s", operation_name)
        created = operation.result()
        logger.info("Service \"%s\" created successfully at %s", created.name, created.uri)
        return created, operation_name

    def allow_public_access(self, resource: str) -> None:
        """Append an allUsers invoker binding to the service's IAM policy."""
        logger.info("Setting IAM policy for public access on %s", resource)
        policy = self.run_client.get_iam_policy(request={"resource": resource})
        policy.bindings.add(role=INVOKER_ROLE, members=[PUBLIC_MEMBER])
        self.run_client.set_iam_policy(request={"resource": resource, "policy": policy})
        logger.info("IAM policy updated for public access.")

    def provision(self, request: ProvisioningRequest) -> ProvisioningResult:
        project_id = self.resolve_project()

        parent = location_parent(project_id, self.region)
        service_id = request.service_name
        logger.info(
            "Attempting to create service \"%s\" in %s with image \"%s\"",
            service_id,
            parent,
            container_image(project_id),
        )

        credential_blob = self.read_credential_blob()
        env = self.build_environment(request, credential_blob)
        service = self.build_service(project_id, env)

        created, operation_name = self.create_service(parent, service, service_id)
        self.allow_public_access(created.name)

        return ProvisioningResult(
            service_id=service_id,
            service_name=created.name,
            service_url=created.uri,
            operation_name=operation_name,
        )


def _operation_name(operation: Any) -> str:
    # google.api_core.operation.Operation exposes the raw proto as .operation
    raw = getattr(operation, "operation", None)
    return getattr(raw, "name", "") or ""

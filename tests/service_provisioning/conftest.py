from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import pytest
from google.iam.v1 import policy_pb2

from src.functions.service_provisioning.core.config import CREDENTIAL_ENV_VAR
from src.functions.service_provisioning.core.service import ServiceProvisioner

PROJECT_ID = "demo-project"
SERVICE_FULL_NAME = f"projects/{PROJECT_ID}/locations/us-central1/services/demo-svc"
SERVICE_URL = "https://demo-svc-abc123-uc.a.run.app"
CREDENTIAL_BLOB = '{"type": "service_account", "project_id": "demo-project"}'


class FakeOperation:
    def __init__(self, created: Any = None, error: Optional[Exception] = None):
        self._created = created
        self._error = error
        self.operation = SimpleNamespace(name=f"projects/{PROJECT_ID}/locations/us-central1/operations/op-1")

    def result(self):
        if self._error is not None:
            raise self._error
        return self._created


class FakeRunClient:
    """Records calls made against the Cloud Run services API."""

    def __init__(
        self,
        create_error: Optional[Exception] = None,
        operation_error: Optional[Exception] = None,
        set_policy_error: Optional[Exception] = None,
    ):
        self.create_error = create_error
        self.operation_error = operation_error
        self.set_policy_error = set_policy_error
        self.created = SimpleNamespace(name=SERVICE_FULL_NAME, uri=SERVICE_URL)
        self.policy = policy_pb2.Policy(
            bindings=[policy_pb2.Binding(role="roles/run.admin", members=["user:owner@example.com"])]
        )
        self.create_calls: List[Dict[str, Any]] = []
        self.get_policy_calls: List[Dict[str, Any]] = []
        self.set_policy_calls: List[Dict[str, Any]] = []

    def create_service(self, parent, service, service_id):
        self.create_calls.append({"parent": parent, "service": service, "service_id": service_id})
        if self.create_error is not None:
            raise self.create_error
        return FakeOperation(self.created, self.operation_error)

    def get_iam_policy(self, request):
        self.get_policy_calls.append(request)
        return self.policy

    def set_iam_policy(self, request):
        self.set_policy_calls.append(request)
        if self.set_policy_error is not None:
            raise self.set_policy_error
        return request["policy"]

    @property
    def call_count(self) -> int:
        return len(self.create_calls) + len(self.get_policy_calls) + len(self.set_policy_calls)


class FakeProjectResolver:
    def __init__(self, project_id: Optional[str] = PROJECT_ID, error: Optional[Exception] = None):
        self.project_id = project_id
        self.error = error
        self.calls = 0

    def __call__(self) -> str:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.project_id


@pytest.fixture
def run_client() -> FakeRunClient:
    return FakeRunClient()


@pytest.fixture
def project_resolver() -> FakeProjectResolver:
    return FakeProjectResolver()


@pytest.fixture
def environ() -> Dict[str, str]:
    return {CREDENTIAL_ENV_VAR: CREDENTIAL_BLOB}


@pytest.fixture
def provisioner(run_client, project_resolver, environ) -> ServiceProvisioner:
    return ServiceProvisioner(
        run_client=run_client,
        project_resolver=project_resolver,
        environ=environ,
    )


@pytest.fixture
def valid_payload() -> Dict[str, str]:
    return {
        "serviceName": "demo-svc",
        "HUMANITEC_TOKEN": "hum-token",
        "GOOGLE_API_KEY": "api-key",
    }

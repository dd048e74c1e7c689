"""Command line interface for provisioning a public Cloud Run service."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Any, Dict

from src.shared.utils.config_validator import get_env_or_default
from src.shared.utils.env import load_env
from src.shared.utils.logging import setup_logging
from src.functions.service_provisioning.core.clients import (
    DefaultProjectResolver,
    create_services_client,
)
from src.functions.service_provisioning.core.config import (
    REGION,
    container_image,
    location_parent,
)
from src.functions.service_provisioning.core.errors import (
    ProvisioningError,
    classify_provider_error,
)
from src.functions.service_provisioning.core.factory import ProvisioningFactory
from src.functions.service_provisioning.core.service import ServiceProvisioner

logger = logging.getLogger(__name__)

MASK = "***"


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--service-name", required=True, help="Cloud Run service id to create")
    parser.add_argument(
        "--humanitec-token",
        default=get_env_or_default("HUMANITEC_TOKEN", ""),
        help="Humanitec token (defaults to $HUMANITEC_TOKEN)",
    )
    parser.add_argument(
        "--google-api-key",
        default=get_env_or_default("GOOGLE_API_KEY", ""),
        help="Google API key (defaults to $GOOGLE_API_KEY)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the service definition instead of creating it",
    )
    return parser.parse_args(argv)


def build_payload(args: argparse.Namespace) -> Dict[str, Any]:
    return {
        "serviceName": args.service_name,
        "HUMANITEC_TOKEN": args.humanitec_token,
        "GOOGLE_API_KEY": args.google_api_key,
    }


def describe_definition(request, project_id: str, region: str = REGION) -> Dict[str, Any]:
    """Service definition that would be submitted, with secret values masked."""
    env = ServiceProvisioner.build_environment(request, MASK)
    public_names = {"ENABLE_MCP", "DEFAULT_MODEL"}
    return {
        "parent": location_parent(project_id, region),
        "serviceId": request.service_name,
        "image": container_image(project_id),
        "env": [
            {"name": var.name, "value": var.value if var.name in public_names else MASK}
            for var in env
        ],
    }


def main(argv=None) -> int:
    load_env()
    setup_logging(level=os.getenv("LOG_LEVEL", "INFO"))

    args = parse_args(argv)

    try:
        request = ProvisioningFactory.create_request(build_payload(args))
    except ProvisioningError as exc:
        print(exc.message, file=sys.stderr)
        return 2

    if args.dry_run:
        try:
            project_id = DefaultProjectResolver()()
        except ProvisioningError as exc:
            print(exc.message, file=sys.stderr)
            return 1
        print(json.dumps(describe_definition(request, project_id), indent=2))
        return 0

    provisioner = ServiceProvisioner(
        run_client=create_services_client(),
        project_resolver=DefaultProjectResolver(),
    )

    try:
        result = provisioner.provision(request)
    except ProvisioningError as exc:
        print(exc.message, file=sys.stderr)
        return 1
    except Exception as exc:  # noqa: BLE001
        logger.error("Provisioning failed", exc_info=True)
        classification = classify_provider_error(exc, request.service_name, REGION)
        print(classification.message, file=sys.stderr)
        return 1

    print(json.dumps(result.to_response().model_dump(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())

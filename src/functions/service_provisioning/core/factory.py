from typing import Any, Dict

from pydantic import ValidationError

from .config import REQUIRED_FIELDS, ProvisioningRequest
from .errors import InvalidRequestError


class ProvisioningFactory:
    """Factory for parsing and validating provisioning requests."""

    @staticmethod
    def create_request(json_data: Any) -> ProvisioningRequest:
        """Parses and validates the incoming JSON request.

        Args:
            json_data: Raw JSON payload from HTTP request.

        Returns:
            Validated ProvisioningRequest object.

        Raises:
            InvalidRequestError: For the first required field that is missing,
                empty, or not a string.
        """
        payload: Dict[str, Any] = json_data if isinstance(json_data, dict) else {}
        try:
            return ProvisioningRequest.model_validate(payload)
        except ValidationError as e:
            raise InvalidRequestError(_first_invalid_field(e)) from e


def _first_invalid_field(error: ValidationError) -> str:
    failing = {str(item["loc"][0]) for item in error.errors() if item.get("loc")}
    for name in REQUIRED_FIELDS:
        if name in failing:
            return name
    return REQUIRED_FIELDS[0]

"""Pydantic models for paramguard services."""

from collections.abc import Mapping
from typing import Any

from pydantic import Field

from paramguard.models import ParamguardBaseModel
from paramguard.rules import RuleSetModel
from paramguard.validator import validate


class UnknownServiceError(LookupError):
    """Raised when no registered service has the requested name."""


class ServiceModel(ParamguardBaseModel):
    """A web service endpoint and the parameters it accepts.

    Attributes:
        name: Unique service name.
        url: The URL the service answers on.
        verb: The HTTP verb, lower-case.
        rule_set: The rules its request params must satisfy.

    Example:
        >>> service = ServiceModel(name="show_user", url="users/show", rule_set=rule_set)
        >>> service.validate_params({"id": "1"})
    """

    name: str
    url: str
    verb: str = "get"
    rule_set: RuleSetModel = Field(default_factory=RuleSetModel, alias="params")

    def validate_params(
        self, params: Mapping[str, Any] | None, ignore_unexpected: bool = False
    ) -> dict[str, Any]:
        """Validate request params against this service's rule set."""
        return validate(params, self.rule_set, ignore_unexpected)

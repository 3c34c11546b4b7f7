"""paramguard services - named endpoints bound to their rule sets.

Example:
    >>> from paramguard.services import ServiceModel, default_registry
    >>>
    >>> default_registry.add(ServiceModel(name="list_users", url="users", rule_set=rule_set))
    >>> service = default_registry.named("list_users")
    >>> params = service.validate_params(request.params)
"""

from .models import ServiceModel, UnknownServiceError
from .registry import ServiceRegistry, default_registry

__all__ = [
    "ServiceModel",
    "UnknownServiceError",
    "ServiceRegistry",
    "default_registry",
]

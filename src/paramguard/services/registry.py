"""Registry of the services known to a process."""

import logging
import threading

from .models import ServiceModel, UnknownServiceError

logger = logging.getLogger(__name__)


class ServiceRegistry:
    """Keeps track of defined services and looks them up by name or url.

    A service is identified by its url and verb: adding a second service for
    the same pair is ignored.
    """

    def __init__(self) -> None:
        self._services: list[ServiceModel] = []
        self._lock = threading.Lock()

    def add(self, service: ServiceModel) -> list[ServiceModel]:
        """Register a service.

        Returns:
            All registered services
        """
        with self._lock:
            if any(s.url == service.url and s.verb == service.verb for s in self._services):
                logger.debug(f"Service already registered for {service.verb} {service.url}, skipping")
            else:
                self._services.append(service)
                logger.debug(f"Registered service '{service.name}' ({service.verb} {service.url})")
            return list(self._services)

    def all(self) -> list[ServiceModel]:
        with self._lock:
            return list(self._services)

    def named(self, name: str) -> ServiceModel:
        """Return the service with the given name.

        Raises:
            UnknownServiceError: If no service has that name
        """
        for service in self.all():
            if service.name == name:
                return service
        raise UnknownServiceError(f"Service named {name} isn't available")

    def find_by_url(self, url: str) -> ServiceModel | None:
        """Return the first service answering on ``url``, or None."""
        for service in self.all():
            if service.url == url:
                return service
        return None

    def clear(self) -> None:
        with self._lock:
            self._services.clear()


default_registry = ServiceRegistry()

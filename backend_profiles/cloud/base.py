"""Protocols for runtime platforms that bind services to the application.

Consumer code depends on these protocols, never on a concrete platform.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from backend_profiles.catalog import ServiceBinding


@runtime_checkable
class PlatformBindingSource(Protocol):
    """Anything that can list the services bound to this process."""

    def service_bindings(self) -> list[ServiceBinding]:
        """Return the service bindings visible to the current process.

        Raises:
            PlatformBindingError: If the platform data cannot be read.
        """
        ...


@runtime_checkable
class CloudConnector(PlatformBindingSource, Protocol):
    """A binding source that can tell whether it runs on its platform."""

    def is_in_matching_cloud(self) -> bool:
        """Return ``True`` if the process runs on this connector's platform."""
        ...


class Cloud:
    """The platform the process is running on, wrapping its connector."""

    def __init__(self, connector: CloudConnector) -> None:
        self._connector = connector

    @property
    def connector(self) -> CloudConnector:
        return self._connector

    def service_bindings(self) -> list[ServiceBinding]:
        return list(self._connector.service_bindings())

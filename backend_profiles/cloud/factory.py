"""Cloud factory.

Provides :func:`get_cloud` -- the single entry point for locating the runtime
platform.  Connectors are consulted in registration order; the first one that
recognises its platform wins.
"""

from __future__ import annotations

import threading

from backend_profiles.errors import PlatformAbsentError

from .base import Cloud, CloudConnector
from .cloudfoundry import CloudFoundryConnector

_lock = threading.Lock()
_connectors: list[CloudConnector] | None = None


def _default_connectors() -> list[CloudConnector]:
    return [CloudFoundryConnector()]


def register_connector(connector: CloudConnector) -> None:
    """Register an additional platform connector.

    Registered connectors are consulted before the defaults.
    """
    global _connectors
    with _lock:
        if _connectors is None:
            _connectors = _default_connectors()
        _connectors.insert(0, connector)


def get_cloud() -> Cloud:
    """Return the :class:`Cloud` the process is running on.

    Raises
    ------
    PlatformAbsentError
        If no registered connector recognises the current process.
    """
    with _lock:
        connectors = list(_connectors) if _connectors is not None else _default_connectors()

    for connector in connectors:
        if connector.is_in_matching_cloud():
            return Cloud(connector)

    raise PlatformAbsentError("No suitable cloud connector found")


def reset_connectors() -> None:
    """Restore the default connectors.  **For testing only.**"""
    global _connectors
    with _lock:
        _connectors = None

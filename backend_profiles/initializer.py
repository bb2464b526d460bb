"""Startup hook that resolves the backend profile for the process.

Resolution runs once, before the application wires any backend:

1. detect the service bindings offered by the platform,
2. validate the explicitly set profiles,
3. activate the profile implied by the bindings,
4. publish the auto-configuration exclusions.

Any error aborts startup before the exclusions are published.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass

from backend_profiles.catalog import EXCLUDE_PROPERTY_KEY, ServiceBinding
from backend_profiles.config import Settings, load_settings
from backend_profiles.detector import BindingDetector
from backend_profiles.environment import Environment
from backend_profiles.exclusions import exclude_auto_configuration
from backend_profiles.logging_config import configure_logging
from backend_profiles.selector import select_cloud_profile
from backend_profiles.validator import validate_local_profiles

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolutionResult:
    """Outcome of a completed resolution."""

    bindings: tuple[ServiceBinding, ...]
    selected_profile: str | None
    active_profiles: tuple[str, ...]
    exclusions: tuple[str, ...]
    environment: Environment

    @property
    def exclude_property(self) -> str:
        """The published exclusion property value."""
        return self.environment.get_property(EXCLUDE_PROPERTY_KEY, "")


class BackendProfileInitializer:
    """Applies backend profile resolution to an :class:`Environment`."""

    def __init__(self, detector: BindingDetector | None = None) -> None:
        self._detector = detector or BindingDetector()

    def initialize(self, environment: Environment) -> ResolutionResult:
        bindings = self._detector.detect()

        validate_local_profiles(environment.active_profiles)

        selected = select_cloud_profile(bindings, environment)

        exclusions = exclude_auto_configuration(environment)

        return ResolutionResult(
            bindings=tuple(bindings),
            selected_profile=selected,
            active_profiles=tuple(environment.active_profiles),
            exclusions=tuple(exclusions),
            environment=environment,
        )


def resolve_backend_profiles(
    settings: Settings | None = None,
    *,
    environment: Environment | None = None,
    detector: BindingDetector | None = None,
) -> ResolutionResult:
    """Resolve the backend profile from *settings* or a prepared *environment*."""
    if environment is None:
        environment = Environment.from_settings(settings or load_settings())
    return BackendProfileInitializer(detector).initialize(environment)


_lock = threading.Lock()
_result: ResolutionResult | None = None


def bootstrap(settings: Settings | None = None) -> ResolutionResult:
    """Configure logging and resolve the backend profile, once per process.

    Later calls return the first result without resolving again.
    """
    global _result
    if _result is not None:
        return _result

    with _lock:
        if _result is not None:
            return _result

        settings = settings or load_settings()
        configure_logging(settings)
        _result = resolve_backend_profiles(settings)
        logger.info(
            "Backend profiles resolved: active=%s",
            ", ".join(_result.active_profiles) or "<none>",
        )
        return _result


def reset_bootstrap() -> None:
    """Forget the cached resolution.  **For testing only.**"""
    global _result
    with _lock:
        _result = None

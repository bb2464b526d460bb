"""Discover the service bindings supplied by the runtime platform."""

from __future__ import annotations

import logging
from collections.abc import Callable

from backend_profiles.catalog import ServiceBinding
from backend_profiles.cloud import PlatformBindingSource, get_cloud
from backend_profiles.errors import PlatformAbsentError

logger = logging.getLogger(__name__)


class BindingDetector:
    """Lists the service bindings for the current process.

    Running outside a platform is normal (local development) and yields no
    bindings.  Only :class:`PlatformAbsentError` is treated that way; every
    other failure from the platform propagates.

    Parameters
    ----------
    cloud_factory:
        Zero-argument callable returning the platform binding source, or
        ``None`` when there is none.  Defaults to :func:`get_cloud`.
    """

    def __init__(
        self,
        cloud_factory: Callable[[], PlatformBindingSource | None] = get_cloud,
    ) -> None:
        self._cloud_factory = cloud_factory

    def detect(self) -> list[ServiceBinding]:
        try:
            source = self._cloud_factory()
        except PlatformAbsentError as exc:
            logger.debug("No cloud platform detected: %s", exc)
            return []

        if source is None:
            logger.debug("No cloud platform detected")
            return []

        return list(source.service_bindings())

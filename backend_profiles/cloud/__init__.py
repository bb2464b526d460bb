"""Runtime platform discovery.

Usage::

    from backend_profiles.cloud import get_cloud

    cloud = get_cloud()
    bindings = cloud.service_bindings()

Cloud Foundry is recognised out of the box.  Other platforms can be added via
``register_connector()`` without touching consumer code.
"""

from .base import Cloud, CloudConnector, PlatformBindingSource
from .cloudfoundry import (
    VCAP_APPLICATION,
    VCAP_SERVICES,
    CloudFoundryConnector,
    VcapServiceInstance,
    classify_service,
    parse_vcap_services,
)
from .factory import get_cloud, register_connector, reset_connectors

__all__ = [
    # Factory
    "get_cloud",
    "register_connector",
    "reset_connectors",
    # Protocols
    "Cloud",
    "CloudConnector",
    "PlatformBindingSource",
    # Cloud Foundry
    "CloudFoundryConnector",
    "VcapServiceInstance",
    "VCAP_APPLICATION",
    "VCAP_SERVICES",
    "classify_service",
    "parse_vcap_services",
]

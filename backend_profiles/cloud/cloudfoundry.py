"""Cloud Foundry connector reading ``VCAP_APPLICATION`` / ``VCAP_SERVICES``.

``VCAP_SERVICES`` is a JSON object keyed by service label, each value a list
of bound service instances:

.. code-block:: json

    {
        "p-redis": [
            {
                "name": "music-cache",
                "label": "p-redis",
                "tags": ["redis", "pivotal"],
                "credentials": {"uri": "redis://..."}
            }
        ]
    }

Each instance is classified by its tags first, then its label, then the
scheme of its connection URI.  Only the scheme is inspected; the rest of the
credentials are left to the data-access layer.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from backend_profiles.catalog import ServiceBinding, ServiceBindingKind
from backend_profiles.errors import PlatformBindingError

logger = logging.getLogger(__name__)

VCAP_APPLICATION = "VCAP_APPLICATION"
VCAP_SERVICES = "VCAP_SERVICES"

# (kind, tags, uri schemes) in match order.
_SIGNATURES: tuple[tuple[ServiceBindingKind, tuple[str, ...], tuple[str, ...]], ...] = (
    (ServiceBindingKind.RELATIONAL_POSTGRES, ("postgres", "postgresql"), ("postgres", "postgresql")),
    (ServiceBindingKind.RELATIONAL_MYSQL, ("mysql",), ("mysql",)),
    (ServiceBindingKind.RELATIONAL_ORACLE, ("oracle",), ("oracle",)),
    (ServiceBindingKind.RELATIONAL_SQLSERVER, ("sqlserver",), ("sqlserver",)),
    (ServiceBindingKind.DOCUMENT_STORE, ("mongodb",), ("mongodb", "mongodb+srv")),
    (ServiceBindingKind.CACHE_STORE, ("redis",), ("redis", "rediss")),
    (ServiceBindingKind.MESSAGE_BROKER, ("rabbitmq", "amqp"), ("amqp", "amqps")),
)

_URI_KEYS = ("uri", "url", "jdbcUrl")


class VcapServiceInstance(BaseModel):
    """One bound service instance from ``VCAP_SERVICES``."""

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    label: str = ""
    tags: list[str] = Field(default_factory=list)
    credentials: dict[str, Any] = Field(default_factory=dict)

    def uri_scheme(self) -> str | None:
        """Return the lower-cased scheme of the first connection URI found."""
        for key in _URI_KEYS:
            value = self.credentials.get(key)
            if not isinstance(value, str) or ":" not in value:
                continue
            if value.startswith("jdbc:"):
                value = value[len("jdbc:") :]
            return value.split(":", 1)[0].lower()
        return None


def classify_service(instance: VcapServiceInstance) -> ServiceBindingKind | None:
    """Return the binding kind for *instance*, or ``None`` if unrecognised."""
    tags = {tag.lower() for tag in instance.tags}
    for kind, kind_tags, _ in _SIGNATURES:
        if tags.intersection(kind_tags):
            return kind

    label = instance.label.lower()
    if label:
        for kind, kind_tags, _ in _SIGNATURES:
            if any(tag in label for tag in kind_tags):
                return kind

    scheme = instance.uri_scheme()
    if scheme:
        for kind, _, schemes in _SIGNATURES:
            if scheme in schemes:
                return kind

    return None


def parse_vcap_services(raw: str) -> list[VcapServiceInstance]:
    """Parse the ``VCAP_SERVICES`` document into service instances.

    Raises
    ------
    PlatformBindingError
        If *raw* is not a JSON object of label -> list of instances.
    """
    try:
        document = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise PlatformBindingError(f"{VCAP_SERVICES} is not valid JSON: {exc}") from exc

    if not isinstance(document, dict):
        raise PlatformBindingError(f"{VCAP_SERVICES} must be a JSON object, got {type(document).__name__}")

    instances: list[VcapServiceInstance] = []
    for label, entries in document.items():
        if not isinstance(entries, list):
            raise PlatformBindingError(f"{VCAP_SERVICES} entry '{label}' must be a list of service instances")
        for entry in entries:
            try:
                instance = VcapServiceInstance.model_validate(entry)
            except ValidationError as exc:
                raise PlatformBindingError(f"Invalid service instance under '{label}': {exc}") from exc
            if not instance.label:
                instance = instance.model_copy(update={"label": label})
            instances.append(instance)
    return instances


class CloudFoundryConnector:
    """Reads service bindings from the Cloud Foundry process environment.

    Parameters
    ----------
    environ:
        Variables to read.  Defaults to :data:`os.environ`.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    @property
    def _variables(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    def is_in_matching_cloud(self) -> bool:
        return VCAP_APPLICATION in self._variables

    def service_bindings(self) -> list[ServiceBinding]:
        raw = self._variables.get(VCAP_SERVICES, "").strip()
        if not raw:
            return []

        bindings: list[ServiceBinding] = []
        for instance in parse_vcap_services(raw):
            kind = classify_service(instance)
            if kind is None:
                logger.debug(
                    "Ignoring unrecognised service '%s' (label=%s)",
                    instance.name,
                    instance.label,
                )
                continue
            bindings.append(ServiceBinding(kind=kind))
        return bindings

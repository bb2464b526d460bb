"""Static lookup tables for backend profile resolution.

Every backend the application knows how to wire is described here:

* **ServiceBindingKind** -- the kind of service a platform can bind.
* **BackendProfile** -- the profile name that activates a backend.
* **ComponentGroup** -- a family of auto-configuration components that can
  be suppressed wholesale when its backend is not selected.

The tables are module-level constants, built once at import and never
mutated.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class ServiceBindingKind(str, Enum):
    """Kind of backend service a platform can bind to the application."""

    RELATIONAL_POSTGRES = "relational-postgres"
    RELATIONAL_MYSQL = "relational-mysql"
    RELATIONAL_ORACLE = "relational-oracle"
    RELATIONAL_SQLSERVER = "relational-sqlserver"
    DOCUMENT_STORE = "document-store"
    CACHE_STORE = "cache-store"
    MESSAGE_BROKER = "message-broker"


class BackendProfile(str, Enum):
    """Profile names that select a backend integration."""

    MYSQL = "mysql"
    POSTGRES = "postgres"
    SQLSERVER = "sqlserver"
    ORACLE = "oracle"
    MONGODB = "mongodb"
    REDIS = "redis"
    RABBITMQ = "rabbitmq"


class ComponentGroup(str, Enum):
    """Families of auto-configuration that are suppressed together."""

    RELATIONAL = "relational"
    DOCUMENT_STORE = "document-store"
    CACHE_STORE = "cache-store"
    MESSAGE_BROKER = "message-broker"


@dataclass(frozen=True, slots=True)
class ServiceBinding:
    """A service bound to the application by the runtime platform.

    Only the kind is carried; credentials and connection details belong to
    the data-access layer.
    """

    kind: ServiceBindingKind


KIND_TO_PROFILE: Mapping[ServiceBindingKind, BackendProfile] = MappingProxyType(
    {
        ServiceBindingKind.DOCUMENT_STORE: BackendProfile.MONGODB,
        ServiceBindingKind.RELATIONAL_POSTGRES: BackendProfile.POSTGRES,
        ServiceBindingKind.RELATIONAL_MYSQL: BackendProfile.MYSQL,
        ServiceBindingKind.CACHE_STORE: BackendProfile.REDIS,
        ServiceBindingKind.RELATIONAL_ORACLE: BackendProfile.ORACLE,
        ServiceBindingKind.RELATIONAL_SQLSERVER: BackendProfile.SQLSERVER,
        ServiceBindingKind.MESSAGE_BROKER: BackendProfile.RABBITMQ,
    }
)

# Profiles that may be switched on by hand.  At most one may be active.
LOCAL_PROFILES: tuple[str, ...] = (
    BackendProfile.MYSQL.value,
    BackendProfile.POSTGRES.value,
    BackendProfile.SQLSERVER.value,
    BackendProfile.ORACLE.value,
    BackendProfile.MONGODB.value,
    BackendProfile.REDIS.value,
    BackendProfile.RABBITMQ.value,
)

# Appended to a profile selected from a live platform binding.
CLOUD_PROFILE_SUFFIX = "-cloud"

GROUP_COMPONENTS: Mapping[ComponentGroup, tuple[str, ...]] = MappingProxyType(
    {
        ComponentGroup.RELATIONAL: ("autoconfigure.jdbc.DataSourceAutoConfiguration",),
        ComponentGroup.DOCUMENT_STORE: (
            "autoconfigure.mongo.MongoAutoConfiguration",
            "autoconfigure.data.mongo.MongoDataAutoConfiguration",
            "autoconfigure.data.mongo.MongoRepositoriesAutoConfiguration",
        ),
        ComponentGroup.CACHE_STORE: (
            "autoconfigure.data.redis.RedisAutoConfiguration",
            "autoconfigure.data.redis.RedisRepositoriesAutoConfiguration",
        ),
        ComponentGroup.MESSAGE_BROKER: ("autoconfigure.amqp.RabbitAutoConfiguration",),
    }
)

EXCLUDE_PROPERTY_KEY = "app.autoconfigure.exclude"
EXCLUSION_PROPERTY_SOURCE = "backendProfilesAutoConfig"


def profile_for_kind(kind: ServiceBindingKind) -> str | None:
    """Return the profile name activated by *kind*, or ``None`` if unmapped."""
    profile = KIND_TO_PROFILE.get(kind)
    return profile.value if profile is not None else None


def cloud_profile_name(profile: str) -> str:
    """Return the cloud variant of *profile* (``redis`` -> ``redis-cloud``)."""
    return f"{profile}{CLOUD_PROFILE_SUFFIX}"


def components_for(*groups: ComponentGroup) -> list[str]:
    """Expand *groups* into their component identifiers, preserving order."""
    components: list[str] = []
    for group in groups:
        components.extend(GROUP_COMPONENTS[group])
    return components

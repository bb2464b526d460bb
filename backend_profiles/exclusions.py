"""Suppress auto-configuration for every backend that was not selected.

The rules are evaluated in order and the first match wins.  With more than
one backend profile active the earlier rule decides; no error is raised here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from backend_profiles.catalog import (
    EXCLUDE_PROPERTY_KEY,
    EXCLUSION_PROPERTY_SOURCE,
    BackendProfile,
    ComponentGroup,
    components_for,
)
from backend_profiles.environment import Environment, MapPropertySource

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ExclusionRule:
    """Groups to exclude when *profile* is accepted by the environment."""

    profile: str
    groups: tuple[ComponentGroup, ...]

    def matches(self, environment: Environment) -> bool:
        return environment.accepts_profiles(self.profile)


EXCLUSION_RULES: tuple[ExclusionRule, ...] = (
    ExclusionRule(
        BackendProfile.REDIS.value,
        (ComponentGroup.RELATIONAL, ComponentGroup.DOCUMENT_STORE, ComponentGroup.MESSAGE_BROKER),
    ),
    ExclusionRule(
        BackendProfile.MONGODB.value,
        (ComponentGroup.RELATIONAL, ComponentGroup.CACHE_STORE, ComponentGroup.MESSAGE_BROKER),
    ),
    ExclusionRule(
        BackendProfile.RABBITMQ.value,
        (ComponentGroup.DOCUMENT_STORE, ComponentGroup.CACHE_STORE, ComponentGroup.RELATIONAL),
    ),
)

# Relational is the fallback backend.
DEFAULT_EXCLUDED_GROUPS: tuple[ComponentGroup, ...] = (
    ComponentGroup.DOCUMENT_STORE,
    ComponentGroup.CACHE_STORE,
    ComponentGroup.MESSAGE_BROKER,
)


def excluded_groups(environment: Environment) -> tuple[ComponentGroup, ...]:
    """Return the component groups to suppress for *environment*."""
    for rule in EXCLUSION_RULES:
        if rule.matches(environment):
            return rule.groups
    return DEFAULT_EXCLUDED_GROUPS


def compute_exclusions(environment: Environment) -> list[str]:
    """Return the component identifiers to suppress, in rule order."""
    return components_for(*excluded_groups(environment))


def exclude_auto_configuration(environment: Environment) -> list[str]:
    """Compute the exclusions and publish them on *environment*.

    The identifiers are joined with commas under :data:`EXCLUDE_PROPERTY_KEY`
    in a property source added with the highest precedence.
    """
    exclusions = compute_exclusions(environment)
    environment.property_sources.add_first(
        MapPropertySource(EXCLUSION_PROPERTY_SOURCE, {EXCLUDE_PROPERTY_KEY: ",".join(exclusions)})
    )
    logger.info("Excluding auto-configuration: %s", ", ".join(exclusions))
    return exclusions

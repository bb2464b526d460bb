"""Mutable view of the process environment used during startup.

An :class:`Environment` carries two things the resolution steps share:

* the ordered set of **active profiles** (additive only), and
* an ordered stack of **property sources**, where the first source that
  defines a key wins.

The hosting runtime reads the final state once resolution completes.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any

from backend_profiles.config import Settings

logger = logging.getLogger(__name__)

SYSTEM_ENVIRONMENT_SOURCE = "systemEnvironment"


class MapPropertySource:
    """A named, read-only layer of configuration properties."""

    def __init__(self, name: str, properties: Mapping[str, Any]) -> None:
        if not name:
            raise ValueError("Property source name must not be empty")
        self._name = name
        self._properties: Mapping[str, Any] = MappingProxyType(dict(properties))

    @property
    def name(self) -> str:
        return self._name

    @property
    def properties(self) -> Mapping[str, Any]:
        return self._properties

    def contains(self, key: str) -> bool:
        return key in self._properties

    def get(self, key: str) -> Any:
        return self._properties.get(key)

    def __repr__(self) -> str:
        return f"MapPropertySource(name={self._name!r}, keys={sorted(self._properties)!r})"


class PropertySources:
    """Ordered stack of property sources, highest precedence first."""

    def __init__(self, sources: Iterable[MapPropertySource] = ()) -> None:
        self._sources: list[MapPropertySource] = []
        for source in sources:
            self.add_last(source)

    def add_first(self, source: MapPropertySource) -> None:
        """Insert *source* with the highest precedence.

        A source already registered under the same name is replaced.
        """
        self.remove(source.name)
        self._sources.insert(0, source)

    def add_last(self, source: MapPropertySource) -> None:
        """Append *source* with the lowest precedence, replacing by name."""
        self.remove(source.name)
        self._sources.append(source)

    def remove(self, name: str) -> MapPropertySource | None:
        for index, source in enumerate(self._sources):
            if source.name == name:
                return self._sources.pop(index)
        return None

    def get(self, name: str) -> MapPropertySource | None:
        for source in self._sources:
            if source.name == name:
                return source
        return None

    def contains(self, name: str) -> bool:
        return self.get(name) is not None

    def __iter__(self) -> Iterator[MapPropertySource]:
        return iter(list(self._sources))

    def __len__(self) -> int:
        return len(self._sources)


def _check_profile(profile: str) -> str:
    name = profile.strip() if isinstance(profile, str) else ""
    if not name:
        raise ValueError("Profile name must contain text")
    if name.startswith("!"):
        raise ValueError(f"Profile name must not begin with '!': {profile!r}")
    return name


class Environment:
    """Active profiles plus layered properties for a single process.

    Parameters
    ----------
    active_profiles:
        Profiles explicitly switched on, in declaration order.
    default_profiles:
        Profiles treated as active while no profile is explicitly active.
    property_sources:
        Initial property layers, highest precedence first.
    """

    def __init__(
        self,
        active_profiles: Iterable[str] = (),
        default_profiles: Iterable[str] = ("default",),
        property_sources: Iterable[MapPropertySource] = (),
    ) -> None:
        # dict keys keep insertion order and drop duplicates.
        self._active: dict[str, None] = {}
        self._default: dict[str, None] = {_check_profile(p): None for p in default_profiles}
        self._property_sources = PropertySources(property_sources)
        for profile in active_profiles:
            self.add_active_profile(profile)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        environ: Mapping[str, str] | None = None,
    ) -> Environment:
        """Build an environment from *settings* and the process variables."""
        variables = os.environ if environ is None else environ
        return cls(
            active_profiles=settings.explicit_profiles,
            default_profiles=settings.default_profiles,
            property_sources=[MapPropertySource(SYSTEM_ENVIRONMENT_SOURCE, dict(variables))],
        )

    @property
    def active_profiles(self) -> list[str]:
        return list(self._active)

    @property
    def default_profiles(self) -> list[str]:
        return list(self._default)

    @property
    def property_sources(self) -> PropertySources:
        return self._property_sources

    def add_active_profile(self, profile: str) -> None:
        """Activate *profile*.  Activating an active profile is a no-op."""
        name = _check_profile(profile)
        if name not in self._active:
            logger.debug("Activating profile '%s'", name)
            self._active[name] = None

    def accepts_profiles(self, *profiles: str) -> bool:
        """Return ``True`` if any of *profiles* is active.

        A profile prefixed with ``!`` matches when that profile is *not*
        active.  The default profiles stand in while nothing is active.
        """
        if not profiles:
            raise ValueError("At least one profile must be given")
        for profile in profiles:
            if not isinstance(profile, str) or not profile.strip():
                raise ValueError("Profile name must contain text")
            if profile.startswith("!"):
                if not self._is_profile_active(_check_profile(profile[1:])):
                    return True
            elif self._is_profile_active(_check_profile(profile)):
                return True
        return False

    def _is_profile_active(self, profile: str) -> bool:
        if self._active:
            return profile in self._active
        return profile in self._default

    def get_property(self, key: str, default: Any = None) -> Any:
        """Return *key* from the highest-precedence source that defines it."""
        for source in self._property_sources:
            if source.contains(key):
                return source.get(key)
        return default

    def __repr__(self) -> str:
        return (
            f"Environment(active_profiles={self.active_profiles!r}, "
            f"default_profiles={self.default_profiles!r}, "
            f"property_sources={[s.name for s in self._property_sources]!r})"
        )

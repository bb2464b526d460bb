"""Reject explicit profile sets that switch on more than one backend."""

from __future__ import annotations

from collections.abc import Iterable

from backend_profiles.catalog import LOCAL_PROFILES
from backend_profiles.errors import ConflictingLocalProfilesError


def validate_local_profiles(explicit_profiles: Iterable[str]) -> None:
    """Check that at most one backend profile is explicitly active.

    Parameters
    ----------
    explicit_profiles:
        Profiles set on the application before any binding-derived profile
        is added.  Profiles outside :data:`LOCAL_PROFILES` are ignored.

    Raises
    ------
    ConflictingLocalProfilesError
        If two or more backend profiles are active.
    """
    service_profiles: list[str] = []
    for profile in explicit_profiles:
        if profile in LOCAL_PROFILES and profile not in service_profiles:
            service_profiles.append(profile)

    if len(service_profiles) > 1:
        raise ConflictingLocalProfilesError(
            "Only one active profile may be set among the following: "
            f"[{', '.join(LOCAL_PROFILES)}]. "
            f"These profiles are active: [{', '.join(service_profiles)}]",
            service_profiles,
        )

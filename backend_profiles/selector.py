"""Activate the backend profile implied by the platform's service bindings."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from backend_profiles.catalog import KIND_TO_PROFILE, ServiceBinding, cloud_profile_name, profile_for_kind
from backend_profiles.environment import Environment
from backend_profiles.errors import ConflictingBindingsError

logger = logging.getLogger(__name__)


def select_cloud_profile(bindings: Sequence[ServiceBinding], environment: Environment) -> str | None:
    """Activate the profile for the single recognised binding, if any.

    When exactly one binding maps to a backend profile, both that profile and
    its ``-cloud`` variant are activated on *environment*.  With no
    recognised binding the environment is left untouched.

    Returns
    -------
    str | None
        The activated backend profile, or ``None`` when nothing was bound.

    Raises
    ------
    ConflictingBindingsError
        If more than one binding maps to a backend profile.  Bindings of the
        same kind count separately.
    """
    logger.info(
        "Found service bindings: [%s]",
        ", ".join(binding.kind.value for binding in bindings),
    )

    profiles: list[str] = []
    for binding in bindings:
        profile = profile_for_kind(binding.kind)
        if profile is not None:
            profiles.append(profile)

    if len(profiles) > 1:
        raise ConflictingBindingsError(
            "Only one service of the following types may be bound to this application: "
            f"[{', '.join(p.value for p in KIND_TO_PROFILE.values())}]. "
            f"These services are bound to the application: [{', '.join(profiles)}]",
            profiles,
        )

    if not profiles:
        return None

    profile = profiles[0]
    environment.add_active_profile(profile)
    environment.add_active_profile(cloud_profile_name(profile))
    logger.info("Activated profile '%s' from platform binding", profile)
    return profile

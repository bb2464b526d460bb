"""Exception hierarchy for backend profile resolution.

Every error raised during resolution is fatal to startup except
:class:`PlatformAbsentError`, which the binding detector treats as
"no cloud bindings".
"""

from __future__ import annotations

from collections.abc import Sequence


class BackendProfilesError(Exception):
    """Base class for all backend profile errors."""


class ProfileResolutionError(BackendProfilesError):
    """Raised when the active profiles would select more than one backend."""

    def __init__(self, message: str, profiles: Sequence[str]) -> None:
        super().__init__(message)
        self.profiles: list[str] = list(profiles)


class ConflictingLocalProfilesError(ProfileResolutionError):
    """More than one locally-settable backend profile is explicitly active."""


class ConflictingBindingsError(ProfileResolutionError):
    """More than one platform service binding maps to a backend profile."""


class PlatformError(BackendProfilesError):
    """Base class for platform binding source failures."""


class PlatformAbsentError(PlatformError):
    """No runtime platform is available to supply service bindings."""


class PlatformBindingError(PlatformError):
    """The platform supplied service binding data that cannot be read."""

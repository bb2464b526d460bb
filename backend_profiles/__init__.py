"""Backend profile resolution for application startup.

Decides which backend integration (relational database, document store,
cache, or message broker) a process activates, from the services bound by
its platform and the profiles set on it, and publishes the auto-configuration
to suppress for every other backend.
"""

from backend_profiles.catalog import (
    CLOUD_PROFILE_SUFFIX,
    EXCLUDE_PROPERTY_KEY,
    KIND_TO_PROFILE,
    LOCAL_PROFILES,
    BackendProfile,
    ComponentGroup,
    ServiceBinding,
    ServiceBindingKind,
)
from backend_profiles.config import Settings, load_settings
from backend_profiles.detector import BindingDetector
from backend_profiles.environment import Environment, MapPropertySource
from backend_profiles.errors import (
    BackendProfilesError,
    ConflictingBindingsError,
    ConflictingLocalProfilesError,
    PlatformAbsentError,
    PlatformBindingError,
    PlatformError,
    ProfileResolutionError,
)
from backend_profiles.exclusions import compute_exclusions, exclude_auto_configuration
from backend_profiles.initializer import (
    BackendProfileInitializer,
    ResolutionResult,
    bootstrap,
    reset_bootstrap,
    resolve_backend_profiles,
)
from backend_profiles.selector import select_cloud_profile
from backend_profiles.validator import validate_local_profiles

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "BackendProfileInitializer",
    "ResolutionResult",
    "bootstrap",
    "reset_bootstrap",
    "resolve_backend_profiles",
    # Steps
    "BindingDetector",
    "validate_local_profiles",
    "select_cloud_profile",
    "compute_exclusions",
    "exclude_auto_configuration",
    # Catalog
    "BackendProfile",
    "ComponentGroup",
    "ServiceBinding",
    "ServiceBindingKind",
    "KIND_TO_PROFILE",
    "LOCAL_PROFILES",
    "CLOUD_PROFILE_SUFFIX",
    "EXCLUDE_PROPERTY_KEY",
    # Environment
    "Environment",
    "MapPropertySource",
    "Settings",
    "load_settings",
    # Exceptions
    "BackendProfilesError",
    "ProfileResolutionError",
    "ConflictingLocalProfilesError",
    "ConflictingBindingsError",
    "PlatformError",
    "PlatformAbsentError",
    "PlatformBindingError",
]

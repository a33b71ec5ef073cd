"""Public package surface for the intune_scope_tags client."""

from .auth import AccessToken
from .client import DEFAULT_API_VERSION, DEFAULT_BASE_URL, Intune
from .resources.mobile_apps_types import MobileAppResponse, ScopeTagUpdateResult
from .resources.scope_tags_types import RoleScopeTagResponse

__all__ = [
    "AccessToken",
    "DEFAULT_API_VERSION",
    "DEFAULT_BASE_URL",
    "Intune",
    "MobileAppResponse",
    "RoleScopeTagResponse",
    "ScopeTagUpdateResult",
]

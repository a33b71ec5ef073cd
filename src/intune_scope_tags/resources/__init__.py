"""Resource module exports."""

from .mobile_apps import MobileApps
from .scope_tags import ScopeTags

__all__ = [
    "MobileApps",
    "ScopeTags",
]

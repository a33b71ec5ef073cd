"""Types for the role scope tags resource."""

from __future__ import annotations

from typing import TypedDict
from typing_extensions import ReadOnly


class RoleScopeTagResponse(TypedDict, total=False):
    """Readonly role scope tag dict returned by deviceManagement/roleScopeTags."""
    id: ReadOnly[str]
    displayName: ReadOnly[str]
    description: ReadOnly[str]
    isBuiltIn: ReadOnly[bool]

__all__ = ["RoleScopeTagResponse"]

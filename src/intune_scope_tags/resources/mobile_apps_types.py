"""Types for the mobile apps resource and the scope tag update result."""

from __future__ import annotations

from typing import Literal, Optional, TypedDict
from typing_extensions import ReadOnly

# Graph keys with a leading "@" need the functional TypedDict form.
_MobileAppODataFields = TypedDict(
    "_MobileAppODataFields",
    {"@odata.type": str, "@odata.context": str},
    total=False,
)


class MobileAppResponse(_MobileAppODataFields, total=False):
    """Readonly mobile app dict returned by the mobileApps endpoint."""
    id: ReadOnly[str]
    displayName: ReadOnly[str]
    publisher: ReadOnly[str]
    roleScopeTagIds: ReadOnly[Optional[list[str]]]


UpdateOutcome = Literal[
    "patched",
    "duplicate",
    "unsafe_empty",
    "not_found",
    "aborted",
    "transport_error",
    "invalid_input",
]


class ScopeTagUpdateResult(TypedDict):
    """Outcome of ``MobileApps.add_scope_tag``.

    ``scope_tag_ids`` holds the list that was (or would have been) submitted,
    or None when the app was never read.
    """
    outcome: UpdateOutcome
    app_id: str
    scope_tag_ids: Optional[list[str]]
    message: Optional[str]


__all__ = ["MobileAppResponse", "ScopeTagUpdateResult", "UpdateOutcome"]

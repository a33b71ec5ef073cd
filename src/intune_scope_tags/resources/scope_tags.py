"""Role scope tag resource wrapper."""

from __future__ import annotations

from typing import Optional, cast

from .base import Resource
from .scope_tags_types import RoleScopeTagResponse
from ._common_types import ValidationMode, _normalize_scope_tag_id

SCOPE_TAGS_PATH = "/deviceManagement/roleScopeTags"


class ScopeTags(Resource):
    """Role scope tag lookups."""

    def list(
        self,
        *,
        timeout: Optional[int] = None,
    ) -> list[RoleScopeTagResponse] | None:
        """Fetch all role scope tags.

        Returns
        -------
        list[RoleScopeTagResponse] or None
            List of scope tag dicts, or ``None`` on error.
        """
        response = self._get(SCOPE_TAGS_PATH, timeout=timeout)
        if not isinstance(response, dict):
            return None

        tags = response.get("value")
        if isinstance(tags, list):
            return [cast(RoleScopeTagResponse, tag) for tag in tags if isinstance(tag, dict)]
        self._logger.warning("Role scope tags response missing expected value list.")
        return None

    def get(
        self,
        scope_tag_id: str | int,
        *,
        validation: ValidationMode = "warn",
        timeout: Optional[int] = None,
    ) -> RoleScopeTagResponse | None:
        """Fetch one role scope tag by ID.

        Parameters
        ----------
        scope_tag_id
            Role scope tag ID (digits).
        validation
            Validation mode: ``"off"`` sends inputs as-is, ``"warn"`` drops invalid
            inputs with warnings, and ``"strict"`` raises on invalid inputs.
        timeout
            Request timeout in seconds.
        """
        if validation == "off":
            tag_id = str(scope_tag_id)
        else:
            normalized = _normalize_scope_tag_id(scope_tag_id)
            if normalized is None:
                if validation == "strict":
                    raise ValueError(f"Invalid scope_tag_id: {scope_tag_id}")
                self._logger.warning("Invalid scope_tag_id for get: %s", scope_tag_id)
                return None
            tag_id = normalized

        response = self._get(f"{SCOPE_TAGS_PATH}/{tag_id}", timeout=timeout)
        if isinstance(response, dict) and "id" in response:
            return cast(RoleScopeTagResponse, response)
        return None

    def find_by_name(
        self,
        name: str,
        *,
        timeout: Optional[int] = None,
    ) -> RoleScopeTagResponse | None:
        """Find a role scope tag by display name (case-insensitive)."""
        if not isinstance(name, str) or not name.strip():
            self._logger.warning("Invalid scope tag name: %s", name)
            return None
        wanted = name.strip().lower()
        for tag in self.list(timeout=timeout) or []:
            if (tag.get("displayName") or "").strip().lower() == wanted:
                return tag
        self._logger.warning("No role scope tag named %s", name)
        return None

"""Mobile app (Win32 application) resource wrapper."""

from __future__ import annotations

from typing import Optional, Sequence, cast

from .base import Resource
from .mobile_apps_types import MobileAppResponse, ScopeTagUpdateResult, UpdateOutcome
from ._common_types import (
    DEFAULT_SCOPE_TAG_ID,
    ValidationMode,
    _coerce_scope_tag_ids,
    _is_object_id,
    _normalize_scope_tag_id,
)

MOBILE_APPS_PATH = "/deviceAppManagement/mobileApps"


def _result(
    outcome: UpdateOutcome,
    app_id: str,
    scope_tag_ids: Optional[list[str]] = None,
    message: Optional[str] = None,
) -> ScopeTagUpdateResult:
    return {
        "outcome": outcome,
        "app_id": app_id,
        "scope_tag_ids": scope_tag_ids,
        "message": message,
    }


class MobileApps(Resource):
    """Mobile app operations."""

    def get(
        self,
        app_id: str,
        *,
        validation: ValidationMode = "warn",
        timeout: Optional[int] = None,
    ) -> MobileAppResponse | None:
        """Fetch a single mobile app by ID.

        Parameters
        ----------
        app_id
            Graph object ID (UUID) of the app.
        validation
            Validation mode: ``"off"`` sends inputs as-is, ``"warn"`` drops invalid
            inputs with warnings, and ``"strict"`` raises on invalid inputs.
        timeout
            Request timeout in seconds.

        Returns
        -------
        MobileAppResponse or None
            App dict, or ``None`` when not found or on error.
        """
        if validation != "off" and not _is_object_id(app_id):
            if validation == "strict":
                raise ValueError(f"Invalid app_id: {app_id}")
            self._logger.warning("Invalid app_id for get: %s", app_id)
            return None

        response = self._get(f"{MOBILE_APPS_PATH}/{str(app_id).strip()}", timeout=timeout)
        if isinstance(response, dict) and response:
            return cast(MobileAppResponse, response)
        return None

    def update(
        self,
        app_id: str,
        odata_type: Optional[str],
        *,
        role_scope_tag_ids: Sequence[str],
        validation: ValidationMode = "warn",
        raise_on_error: Optional[bool] = None,
        timeout: Optional[int] = None,
    ) -> bool:
        """Replace the role scope tags of an app with a partial update.

        Parameters
        ----------
        app_id
            Graph object ID (UUID) of the app.
        odata_type
            The app's ``@odata.type``; Graph needs it to resolve the derived type.
        role_scope_tag_ids
            Complete list of scope tag IDs to store. Must not be empty.
        validation
            Validation mode: ``"off"`` sends inputs as-is, ``"warn"`` drops invalid
            inputs with warnings, and ``"strict"`` raises on invalid inputs.
        raise_on_error
            Override the client-wide ``raise_on_error`` for this request.
        timeout
            Request timeout in seconds.

        Returns
        -------
        bool
            ``True`` when the request completed.
        """
        tag_ids = list(role_scope_tag_ids)
        if validation != "off":
            if not _is_object_id(app_id):
                if validation == "strict":
                    raise ValueError(f"Invalid app_id: {app_id}")
                self._logger.warning("Invalid app_id for update: %s", app_id)
                return False
            if not tag_ids:
                if validation == "strict":
                    raise ValueError("role_scope_tag_ids must not be empty")
                self._logger.warning("Refusing to store an empty scope tag list on app %s", app_id)
                return False

        payload = {"@odata.type": odata_type, "roleScopeTagIds": tag_ids}
        should_raise = self._client.raise_on_error if raise_on_error is None else raise_on_error
        # PATCH answers 204 No Content, so success and failure both come back as
        # None unless the request is allowed to raise.
        try:
            self._patch(
                f"{MOBILE_APPS_PATH}/{str(app_id).strip()}",
                json=payload,
                timeout=timeout,
                raise_on_error=True,
            )
        except Exception as exc:  # noqa: BLE001 - surface request failures
            if should_raise:
                raise
            self._logger.warning("Update of app %s failed: %s", app_id, exc)
            return False
        return True

    def add_scope_tag(
        self,
        app_id: str,
        scope_tag_id: str | int,
        *,
        remove_default: bool = False,
        validation: ValidationMode = "warn",
        timeout: Optional[int] = None,
    ) -> ScopeTagUpdateResult:
        """Ensure a role scope tag is assigned to an app.

        The app is read, the tag is appended when missing, and the default tag
        ``"0"`` is dropped when ``remove_default`` is set and another tag remains.
        The app is only written back when the list changed. Nothing here is
        retried and transport failures are reported, not raised.

        Parameters
        ----------
        app_id
            Graph object ID (UUID) of the app.
        scope_tag_id
            Role scope tag ID (digits).
        remove_default
            Drop the default scope tag when at least one other tag remains.
        validation
            Validation mode: ``"off"`` sends inputs as-is, ``"warn"`` drops invalid
            inputs with warnings, and ``"strict"`` raises on invalid inputs.
        timeout
            Request timeout in seconds.

        Returns
        -------
        ScopeTagUpdateResult
            ``outcome`` is one of ``patched``, ``duplicate``, ``unsafe_empty``,
            ``not_found``, ``aborted``, ``transport_error`` or ``invalid_input``.
        """
        app_id = str(app_id).strip()
        if validation == "off":
            tag_id = str(scope_tag_id).strip()
        else:
            if not _is_object_id(app_id):
                if validation == "strict":
                    raise ValueError(f"Invalid app_id: {app_id}")
                self._logger.warning("Invalid app_id for add_scope_tag: %s", app_id)
                return _result("invalid_input", app_id, message=f"Invalid app_id: {app_id}")
            normalized = _normalize_scope_tag_id(scope_tag_id)
            if normalized is None:
                if validation == "strict":
                    raise ValueError(f"Invalid scope_tag_id: {scope_tag_id}")
                self._logger.warning("Invalid scope_tag_id for add_scope_tag: %s", scope_tag_id)
                return _result(
                    "invalid_input", app_id, message=f"Invalid scope_tag_id: {scope_tag_id}"
                )
            tag_id = normalized

        if not self._client.has_valid_token():
            return _result("aborted", app_id, message="Access token missing or expired")

        app = self.get(app_id, validation="off", timeout=timeout)
        if app is None:
            self._logger.warning("App %s not found.", app_id)
            return _result("not_found", app_id, message=f"App {app_id} not found")

        current = _coerce_scope_tag_ids(app.get("roleScopeTagIds"))
        tag_ids = list(current)
        update_required = False
        duplicate = False

        if tag_id not in tag_ids:
            self._logger.info("Adding scope tag %s to app %s", tag_id, app_id)
            tag_ids.append(tag_id)
            update_required = True
        else:
            self._logger.info("Scope tag %s already assigned to app %s", tag_id, app_id)
            duplicate = True

        if remove_default and len(tag_ids) > 1:
            if DEFAULT_SCOPE_TAG_ID in tag_ids:
                self._logger.info("Removing default scope tag from app %s", app_id)
                tag_ids = [t for t in tag_ids if t != DEFAULT_SCOPE_TAG_ID]
                update_required = True
            else:
                self._logger.info("Default scope tag not assigned to app %s", app_id)

        if tag_ids and update_required:
            self._logger.info(
                "Setting scope tags on app %s: %s -> %s",
                app_id,
                ", ".join(current) or "(none)",
                ", ".join(tag_ids),
            )
            try:
                self.update(
                    app_id,
                    app.get("@odata.type"),
                    role_scope_tag_ids=tag_ids,
                    validation="off",
                    raise_on_error=True,
                    timeout=timeout,
                )
            except Exception as exc:  # noqa: BLE001 - best effort, reported in result
                self._logger.warning("Failed to update scope tags on app %s: %s", app_id, exc)
                return _result("transport_error", app_id, tag_ids, str(exc))
            return _result("patched", app_id, tag_ids)

        if duplicate and not update_required:
            self._logger.info("Nothing to do for app %s.", app_id)
            return _result("duplicate", app_id, tag_ids)

        self._logger.warning(
            "Not updating app %s: removing the default scope tag would leave no tags.", app_id
        )
        return _result(
            "unsafe_empty",
            app_id,
            tag_ids,
            "Removing the default scope tag would leave no tags",
        )

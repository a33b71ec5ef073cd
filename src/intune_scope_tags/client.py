"""Core Intune client with a raw-request escape hatch."""

from __future__ import annotations

import logging
import os
from typing import Any, Optional

import requests

from .auth import AccessToken
from .resources.mobile_apps import MobileApps
from .resources.scope_tags import ScopeTags

DEFAULT_BASE_URL = os.environ.get("INTUNE_GRAPH_BASE_URL", "https://graph.microsoft.com")
DEFAULT_API_VERSION = os.environ.get("INTUNE_GRAPH_API_VERSION", "beta")


class Intune:
    """Resource-grouped client for the Intune endpoints of Microsoft Graph."""

    mobile_apps: MobileApps
    scope_tags: ScopeTags

    def __init__(
        self,
        token: Optional[AccessToken] = None,
        *,
        base_url: Optional[str] = None,
        api_version: Optional[str] = None,
        default_timeout: int = 20,
        session: Optional[requests.Session] = None,
        raise_on_error: bool = False,
    ) -> None:
        """Create an Intune client bound to a Graph endpoint.

        Parameters
        ----------
        token
            Access token context. Operations that require authentication
            refuse to run when it is missing or expired.
        base_url
            Graph root URL, without the API version.
        api_version
            Graph API version segment (``beta`` or ``v1.0``).
        default_timeout
            Default request timeout in seconds.
        session
            Optional requests session to reuse connections.
        raise_on_error
            If True, raise HTTP errors instead of returning None.
        """
        self.token = token
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.api_version = (api_version or DEFAULT_API_VERSION).strip("/")
        self.default_timeout = default_timeout
        self.raise_on_error = raise_on_error
        self._logger = logging.getLogger(__name__)
        self._session = session

        self.mobile_apps: MobileApps = MobileApps(self)
        self.scope_tags: ScopeTags = ScopeTags(self)

    def has_valid_token(self) -> bool:
        """Return True when a token is configured and has lifetime left."""
        if self.token is None or not self.token.token:
            self._logger.warning("No access token configured.")
            return False
        if not self.token.is_valid():
            self._logger.warning(
                "Access token expired %.0f seconds ago.", -self.token.remaining_seconds()
            )
            return False
        return True

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict[str, Any] | list[tuple[str, Any]]] = None,
        json: Optional[dict[str, Any]] = None,
        timeout: Optional[int] = None,
        raise_on_error: Optional[bool] = None,
    ) -> Optional[dict[str, Any] | list[Any]]:
        """Send a raw request to the Graph API.

        Parameters
        ----------
        method
            HTTP method (GET, POST, PATCH, DELETE).
        path
            Endpoint path, with or without a leading API version segment.
        params
            Query parameters for the request.
        json
            JSON payload for the request.
        timeout
            Timeout in seconds for this request.
        raise_on_error
            Override the client-wide ``raise_on_error`` for this call.

        Returns
        -------
        dict | list | None
            Parsed JSON payload, or None if the response is empty or non-JSON.
        """
        if not path.startswith("/"):
            path = "/" + path
        version_prefix = f"/{self.api_version}/"
        if not path.startswith(version_prefix):
            path = f"/{self.api_version}{path}"
        url = f"{self.base_url}{path}"
        should_raise = self.raise_on_error if raise_on_error is None else raise_on_error

        headers: dict[str, str] = {"Accept": "application/json"}
        if self.token is not None:
            headers.update(self.token.authorization_header)
        if json is not None:
            headers["Content-Type"] = "application/json"

        requester = self._session or requests
        try:
            response = requester.request(
                method,
                url,
                params=params,
                json=json,
                headers=headers,
                timeout=timeout or self.default_timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            # Graph wraps failures as {"error": {"code": ..., "message": ...}}
            error_msg = str(exc)
            try:
                error_body = response.json()
                if isinstance(error_body, dict):
                    error = error_body.get("error")
                    if isinstance(error, dict) and "message" in error:
                        error_msg = f"{exc}\nServer message: {error['message']}"
                    elif isinstance(error, str):
                        error_msg = f"{exc}\nServer error: {error}"
                    elif "message" in error_body:
                        error_msg = f"{exc}\nServer message: {error_body['message']}"
                    elif "detail" in error_body:
                        error_msg = f"{exc}\nDetails: {error_body['detail']}"
            except (ValueError, AttributeError, KeyError):
                pass  # Response wasn't JSON or didn't have expected fields
            if should_raise:
                raise requests.HTTPError(error_msg, response=response) from exc
            self._logger.warning("Request failed for %s %s: %s", method, url, error_msg)
            return None
        except Exception as exc:  # noqa: BLE001 - surface request failures
            if should_raise:
                raise
            self._logger.warning("Request failed for %s %s: %s", method, url, exc)
            return None

        if not response.content:
            return None
        try:
            payload = response.json()
        except ValueError:  # noqa: PERF203 - only attempt JSON when present
            self._logger.warning("Response from %s %s was not JSON", method, url)
            return None
        if isinstance(payload, (dict, list)):
            return payload
        return None

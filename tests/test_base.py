import logging
import sys
import unittest
from pathlib import Path

# Ensure src/ is on sys.path so we can import the package without installation
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from intune_scope_tags.resources.base import Resource  # noqa: E402

APP_PATH = "/deviceAppManagement/mobileApps/3f2504e0-4f89-11d3-9a0c-0305e82c3301"


class RecordingClient:
    def __init__(self) -> None:
        self._logger = logging.getLogger("intune_scope_tags.tests")
        self.calls: list[dict[str, object]] = []

    def request(self, method, path, params=None, json=None, timeout=None, raise_on_error=None):
        self.calls.append(
            {
                "method": method,
                "path": path,
                "params": params,
                "json": json,
                "timeout": timeout,
                "raise_on_error": raise_on_error,
            }
        )
        return {"id": "3f2504e0-4f89-11d3-9a0c-0305e82c3301"} if method == "GET" else None


class ResourceTests(unittest.TestCase):
    def setUp(self) -> None:
        self.client = RecordingClient()
        self.resource = Resource(self.client)  # type: ignore[arg-type]

    def test_logs_through_client_logger(self):
        self.assertIs(self.resource._logger, self.client._logger)

    def test_get_app_with_select(self):
        result = self.resource._get(APP_PATH, params={"$select": "roleScopeTagIds"}, timeout=7)
        self.assertEqual(result["id"], "3f2504e0-4f89-11d3-9a0c-0305e82c3301")
        call = self.client.calls[-1]
        self.assertEqual(call["method"], "GET")
        self.assertEqual(call["params"], {"$select": "roleScopeTagIds"})
        self.assertIsNone(call["json"])
        self.assertIsNone(call["raise_on_error"])

    def test_patch_scope_tags_forwards_raise_flag(self):
        body = {"@odata.type": "#microsoft.graph.win32LobApp", "roleScopeTagIds": ["5"]}
        self.assertIsNone(self.resource._patch(APP_PATH, json=body, raise_on_error=True))
        call = self.client.calls[-1]
        self.assertEqual(call["method"], "PATCH")
        self.assertEqual(call["path"], APP_PATH)
        self.assertEqual(call["json"], body)
        self.assertIsNone(call["params"])
        self.assertTrue(call["raise_on_error"])

    def test_patch_defaults_to_client_setting(self):
        self.resource._patch(APP_PATH, json={"roleScopeTagIds": ["1"]})
        self.assertIsNone(self.client.calls[-1]["raise_on_error"])

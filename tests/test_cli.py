import io
import os
import sys
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest.mock import patch

# Ensure src/ is on sys.path so we can import the package without installation
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from intune_scope_tags import cli  # noqa: E402
from intune_scope_tags.auth import EXPIRES_ON_ENV, TOKEN_ENV  # noqa: E402

APP_ID = "3f2504e0-4f89-11d3-9a0c-0305e82c3301"
ENV = {TOKEN_ENV: "abc", EXPIRES_ON_ENV: "2999-01-01T00:00:00Z"}


def _result(outcome, tag_ids=None, message=None):
    return {"outcome": outcome, "app_id": APP_ID, "scope_tag_ids": tag_ids, "message": message}


class CliTests(unittest.TestCase):
    def _run(self, argv):
        out = io.StringIO()
        with redirect_stdout(out):
            code = cli.main(argv)
        return code, out.getvalue()

    def test_rejects_bad_app_id(self):
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                cli.main(["--app-id", "nope", "--scope-tag-id", "5"])

    def test_rejects_bad_scope_tag_id(self):
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                cli.main(["--app-id", APP_ID, "--scope-tag-id", "x5"])

    def test_requires_one_tag_option(self):
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                cli.main(["--app-id", APP_ID])

    def test_patched_exit_zero(self):
        with patch.dict(os.environ, ENV, clear=True), patch(
            "intune_scope_tags.resources.mobile_apps.MobileApps.add_scope_tag",
            return_value=_result("patched", ["5"]),
        ) as mocked:
            code, out = self._run(["--app-id", APP_ID, "--scope-tag-id", "5", "--remove-default"])
        self.assertEqual(code, 0)
        self.assertIn("outcome=patched", out)
        self.assertIn("scope_tag_ids=5", out)
        self.assertEqual(mocked.call_args.args, (APP_ID, "5"))
        self.assertTrue(mocked.call_args.kwargs["remove_default"])

    def test_not_found_exit_one(self):
        with patch.dict(os.environ, ENV, clear=True), patch(
            "intune_scope_tags.resources.mobile_apps.MobileApps.add_scope_tag",
            return_value=_result("not_found", message="App missing"),
        ):
            code, out = self._run(["--app-id", APP_ID, "--scope-tag-id", "5"])
        self.assertEqual(code, 1)
        self.assertIn("message=App missing", out)

    def test_missing_expiry_is_usage_error(self):
        with patch.dict(os.environ, {TOKEN_ENV: "abc"}, clear=True):
            with redirect_stderr(io.StringIO()) as err:
                code = cli.main(["--app-id", APP_ID, "--scope-tag-id", "5"])
        self.assertEqual(code, 2)
        self.assertIn(EXPIRES_ON_ENV, err.getvalue())

    def test_scope_tag_name_lookup(self):
        with patch.dict(os.environ, ENV, clear=True), patch(
            "intune_scope_tags.resources.scope_tags.ScopeTags.find_by_name",
            return_value={"id": "9", "displayName": "Finance"},
        ), patch(
            "intune_scope_tags.resources.mobile_apps.MobileApps.add_scope_tag",
            return_value=_result("duplicate", ["9"]),
        ) as mocked:
            code, _ = self._run(["--app-id", APP_ID, "--scope-tag-name", "Finance"])
        self.assertEqual(code, 0)
        self.assertEqual(mocked.call_args.args, (APP_ID, "9"))

    def test_scope_tag_name_not_found(self):
        with patch.dict(os.environ, ENV, clear=True), patch(
            "intune_scope_tags.resources.scope_tags.ScopeTags.find_by_name",
            return_value=None,
        ):
            code, out = self._run(["--app-id", APP_ID, "--scope-tag-name", "Finance"])
        self.assertEqual(code, 1)
        self.assertIn("outcome=not_found", out)

    def test_scope_tag_name_without_token(self):
        with patch.dict(os.environ, {}, clear=True):
            code, out = self._run(["--app-id", APP_ID, "--scope-tag-name", "Finance"])
        self.assertEqual(code, 1)
        self.assertIn("outcome=aborted", out)

"""Command line entry point: add a role scope tag to an Intune app."""

from __future__ import annotations

import argparse
import logging
import re
import sys
from typing import Optional, Sequence

from .auth import AccessToken, EXPIRES_ON_ENV, TOKEN_ENV
from .client import Intune
from .resources._common_types import SCOPE_TAG_ID_PATTERN, UUID_PATTERN

_SUCCESS_OUTCOMES = {"patched", "duplicate"}


def _pattern_type(pattern: re.Pattern[str], label: str):
    def _check(value: str) -> str:
        value = value.strip()
        if not pattern.match(value):
            raise argparse.ArgumentTypeError(f"{value!r} is not a valid {label}")
        return value

    return _check


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="intune-scope-tags",
        description=(
            "Add a role scope tag to an Intune Win32 app. "
            f"The access token is read from {TOKEN_ENV} and its expiry from {EXPIRES_ON_ENV}."
        ),
    )
    parser.add_argument(
        "--app-id",
        required=True,
        type=_pattern_type(UUID_PATTERN, "app ID (UUID)"),
        help="Object ID of the mobile app",
    )
    tag = parser.add_mutually_exclusive_group(required=True)
    tag.add_argument(
        "--scope-tag-id",
        type=_pattern_type(SCOPE_TAG_ID_PATTERN, "scope tag ID (digits)"),
        help="Role scope tag ID to add",
    )
    tag.add_argument("--scope-tag-name", help="Role scope tag display name to look up and add")
    parser.add_argument(
        "--remove-default",
        action="store_true",
        help="Drop the Default scope tag (0) when another tag remains",
    )
    parser.add_argument("--base-url", default=None, help="Override INTUNE_GRAPH_BASE_URL")
    parser.add_argument("--api-version", default=None, help="Override INTUNE_GRAPH_API_VERSION")
    parser.add_argument("--timeout", type=int, default=20, help="Request timeout in seconds")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log informational messages")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s:%(name)s:%(message)s",
    )

    try:
        token = AccessToken.from_env()
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    client = Intune(
        token,
        base_url=args.base_url,
        api_version=args.api_version,
        default_timeout=args.timeout,
    )

    scope_tag_id = args.scope_tag_id
    if scope_tag_id is None:
        if not client.has_valid_token():
            print("outcome=aborted message=Access token missing or expired")
            return 1
        tag = client.scope_tags.find_by_name(args.scope_tag_name)
        if tag is None:
            print(f"outcome=not_found message=No role scope tag named {args.scope_tag_name!r}")
            return 1
        scope_tag_id = tag.get("id")

    result = client.mobile_apps.add_scope_tag(
        args.app_id,
        scope_tag_id,
        remove_default=args.remove_default,
    )

    line = f"outcome={result['outcome']} app_id={result['app_id']}"
    if result["scope_tag_ids"] is not None:
        line += f" scope_tag_ids={','.join(result['scope_tag_ids'])}"
    if result["message"]:
        line += f" message={result['message']}"
    print(line)
    return 0 if result["outcome"] in _SUCCESS_OUTCOMES else 1


if __name__ == "__main__":
    raise SystemExit(main())

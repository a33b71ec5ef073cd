"""Demo that adds a role scope tag to one Intune app.

Run with the virtual environment activated::

    export INTUNE_GRAPH_TOKEN=...            # bearer token for Microsoft Graph
    export INTUNE_GRAPH_TOKEN_EXPIRES_ON=... # ISO-8601 or epoch seconds
    python examples/demo_add_scope_tag.py <app-id> <scope-tag-id>
"""

import logging
import os
import sys
from pprint import pprint

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC_DIR = os.path.join(PROJECT_ROOT, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from intune_scope_tags import AccessToken, Intune

logging.basicConfig(level=logging.INFO)

def main() -> None:
    if len(sys.argv) != 3:
        print(__doc__)
        return
    app_id, scope_tag_id = sys.argv[1:]

    intune = Intune(AccessToken.from_env())

    tags = intune.scope_tags.list() or []
    print(f"Tenant has {len(tags)} role scope tags:")
    for tag in tags:
        print(f"  {tag.get('id'):>4}  {tag.get('displayName')}")

    app = intune.mobile_apps.get(app_id)
    if app is None:
        print("App not found.")
        return
    print(f"\n{app.get('displayName')} currently has: {app.get('roleScopeTagIds')}")

    result = intune.mobile_apps.add_scope_tag(app_id, scope_tag_id, remove_default=True)
    pprint(result)


if __name__ == "__main__":
    main()

from __future__ import annotations

import sys
from pathlib import Path

# Allow running as: python scripts/registry_smoketest.py
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

from fastapi.testclient import TestClient

from user_registry.main import create_app


def main() -> int:
    c = TestClient(create_app())

    steps = [
        ("GET", "/users/1", None, 200),
        ("POST", "/users", {"id": "2", "name": "Ada"}, 200),
        ("GET", "/users", None, 200),
        ("DELETE", "/users/2", None, 200),
        ("GET", "/users/2", None, 404),
    ]
    for method, path, body, expected in steps:
        r = c.request(method, path, json=body)
        print(method, path, r.status_code, r.json())
        if r.status_code != expected:
            print(f"expected {expected}")
            return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

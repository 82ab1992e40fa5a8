"""Print a bearer token for local testing of authenticated endpoints."""
from __future__ import annotations

import argparse
import sys

from epitome_codex.core.security import create_access_token
from epitome_codex.db.session import SessionLocal
from epitome_codex.models import User


def main() -> None:
    parser = argparse.ArgumentParser(description="Issue an access token for an existing user")
    parser.add_argument("--user-id", required=True, help="Primary key of the user account")
    args = parser.parse_args()

    with SessionLocal() as db:
        if db.get(User, args.user_id) is None:
            print(f"[tokens] ERROR: no user with id {args.user_id}", file=sys.stderr)
            sys.exit(1)

    print(create_access_token(args.user_id))


if __name__ == "__main__":
    main()

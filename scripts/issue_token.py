#!/usr/bin/env python3
"""Mint an access token for a user ID (local development).

Usage:
    python scripts/issue_token.py [USER_ID]

A random user ID is used when none is given.
"""

import sys
from uuid import UUID, uuid4

from scribe.config import Settings
from scribe.util.jwt import create_token


def main(argv: list[str]) -> int:
    settings = Settings()

    if len(argv) > 1:
        try:
            user_id = UUID(argv[1])
        except ValueError:
            print(f"Not a valid UUID: {argv[1]}", file=sys.stderr)
            return 1
    else:
        user_id = uuid4()

    token = create_token(str(user_id), settings.auth)
    print(f"user_id: {user_id}")
    print(f"token:   {token}")
    print(f"header:  Authorization: Bearer {token}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))

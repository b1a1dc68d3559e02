#!/usr/bin/env python3
"""Issue a session token for a user (operators and local testing).

Login itself belongs to the identity service; this mints the same
``auth_token`` cookie value it would.

Usage:
    python scripts/issue_token.py <user_id> <email>
"""

import sys

from paire.config import Settings
from paire.util.jwt import create_token


def main(argv: list[str]) -> int:
    if len(argv) != 3:
        print(__doc__.strip(), file=sys.stderr)
        return 2

    settings = Settings()
    print(create_token(argv[1], argv[2].lower(), settings.auth))
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))

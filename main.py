"""
Source-checkout entry point; equivalent to the installed ``blogdb`` command.

Usage:
    python main.py create-users
    python main.py create-user --name "Jane Doe" --email jane@email.com
    python main.py list-users
"""

from __future__ import annotations

import sys

from blogdb.cli import main

if __name__ == "__main__":
    sys.exit(main())

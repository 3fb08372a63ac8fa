"""Administrative reset: delete every shift record and restore the default workers.

Requires --yes, there is no undo.
"""

from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.careclock.careclock.database.bootstrap import reset_records


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--yes", action="store_true", help="confirm the reset")
    args = parser.parse_args()
    if not args.yes:
        raise SystemExit("Refusing to reset without --yes")

    settings = importlib.import_module(get_settings_module())
    deleted = reset_records(dict(settings.DB_CONFIG))
    print(f"OK: Deleted {deleted} shift records; default workers recreated")


if __name__ == "__main__":
    main()

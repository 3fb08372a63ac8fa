"""Create the default manager and care worker accounts (idempotent)."""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.careclock.careclock.database.bootstrap import DEFAULT_WORKERS, ensure_default_workers


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    ensure_default_workers(db_config)
    names = ", ".join(f"{name} ({role.value})" for _, _, name, role in DEFAULT_WORKERS)
    print(f"OK: Seeded {db_config.get('database')} -> {names}")


if __name__ == "__main__":
    main()

"""Create the careclock database and tables from database/schema.sql.

Run with --seed to also create the default manager and care worker.
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

from src.careclock.careclock.database.bootstrap import apply_schema, ensure_default_workers, list_tables


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", action="store_true", help="also create the default workers")
    args = parser.parse_args()

    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)
    target = f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"

    apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
    if args.seed:
        ensure_default_workers(db_config)

    tables = ", ".join(sorted(list_tables(db_config)))
    print(f"OK: {target} ready ({tables}){' with default workers' if args.seed else ''}")


if __name__ == "__main__":
    main()

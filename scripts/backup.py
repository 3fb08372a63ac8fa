"""Dump the careclock tables with mysqldump.

Note: requires `mysqldump` on PATH.
"""

from __future__ import annotations

import argparse
import importlib
import subprocess
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

TABLES = ("perimeters", "workers", "shift_records")


def dump_command(db: dict) -> list[str]:
    return [
        "mysqldump",
        f"--host={db['host']}",
        f"--port={db.get('port', 3306)}",
        f"--user={db['user']}",
        f"--password={db['password']}",
        "--single-transaction",
        db["database"],
        *TABLES,
    ]


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--out-dir", type=Path, default=REPO_ROOT / "backups")
    args = parser.parse_args()

    db = importlib.import_module(get_settings_module()).DB_CONFIG
    args.out_dir.mkdir(parents=True, exist_ok=True)
    out_file = args.out_dir / f"{db['database']}_{datetime.now():%Y%m%d_%H%M%S}.sql"

    try:
        with out_file.open("wb") as f:
            subprocess.run(dump_command(db), stdout=f, stderr=subprocess.PIPE, check=True)
    except FileNotFoundError:
        out_file.unlink(missing_ok=True)
        raise SystemExit("`mysqldump` not found. Install the MySQL client tools.")
    except subprocess.CalledProcessError as e:
        out_file.unlink(missing_ok=True)
        raise SystemExit(f"mysqldump failed: {e.stderr.decode(errors='replace').strip()}")

    print(f"OK: Backup of {', '.join(TABLES)} -> {out_file}")


if __name__ == "__main__":
    main()

"""Dump the timeclock database to a timestamped .sql file with `mysqldump`.

Usage: python scripts/backup.py [--out-dir backups] [--entries-only]
"""
from __future__ import annotations

import argparse
import importlib
import os
import subprocess
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

ENTRY_TABLES = ("day_entries", "task_entries", "leave_entries")


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--out-dir", type=Path, default=REPO_ROOT / "backups")
    parser.add_argument("--entries-only", action="store_true", help="dump only the time entry tables")
    args = parser.parse_args()

    db = importlib.import_module(get_settings_module()).DB_CONFIG
    args.out_dir.mkdir(parents=True, exist_ok=True)
    suffix = "_entries" if args.entries_only else ""
    out_file = args.out_dir / f"{db['database']}{suffix}_{datetime.now():%Y%m%d_%H%M%S}.sql"

    cmd = [
        "mysqldump",
        "--single-transaction",
        f"--host={db['host']}",
        f"--port={db.get('port', 3306)}",
        f"--user={db['user']}",
        db["database"],
    ]
    if args.entries_only:
        cmd.extend(ENTRY_TABLES)

    # mysqldump reads the password from MYSQL_PWD
    env = dict(os.environ, MYSQL_PWD=str(db.get("password") or ""))
    try:
        with out_file.open("wb") as f:
            subprocess.run(cmd, stdout=f, stderr=subprocess.PIPE, check=True, env=env)
    except FileNotFoundError:
        raise SystemExit("`mysqldump` not found. Install the MySQL client tools or export with Workbench.")
    except subprocess.CalledProcessError as e:
        out_file.unlink(missing_ok=True)
        raise SystemExit(f"Backup failed: {e.stderr.decode(errors='replace').strip()}")

    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()

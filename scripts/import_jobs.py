"""Load a jobs CSV (JobNumber, JobName) into the imported-jobs table and sync the catalog.

Usage: python scripts/import_jobs.py path/to/jobs.csv
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

from src.timeclock.timeclock.container import build_container
from src.timeclock.timeclock.core.exceptions import ValidationError


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("csv_path", type=Path)
    args = parser.parse_args()

    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=dict(settings.DB_CONFIG))

    try:
        result = container.job_service.import_csv(str(args.csv_path))
    except ValidationError as e:
        raise SystemExit(f"Import failed: {e}")

    print(f"OK: {result.rows_read} rows read, {result.staged} staged, {result.synced} added to the job catalog")


if __name__ == "__main__":
    main()

"""Read job lists exported from the accounting system.

The CSV needs ``JobNumber`` and ``JobName`` columns; any other columns are
ignored. Header matching ignores case and surrounding spaces.
"""
from __future__ import annotations

from typing import IO, List, Tuple, Union

import pandas as pd

from ..core.exceptions import ValidationError

REQUIRED_COLUMNS = ("jobnumber", "jobname")


def read_jobs_csv(source: Union[str, IO]) -> List[Tuple[str, str]]:
    try:
        frame = pd.read_csv(source, dtype=str, keep_default_na=False)
    except (pd.errors.EmptyDataError, pd.errors.ParserError, UnicodeDecodeError) as exc:
        raise ValidationError(f"Could not read jobs file: {exc}") from exc

    frame.columns = [str(c).strip().lower().replace(" ", "") for c in frame.columns]
    missing = [c for c in REQUIRED_COLUMNS if c not in frame.columns]
    if missing:
        raise ValidationError("Jobs file must have JobNumber and JobName columns.")

    rows: List[Tuple[str, str]] = []
    for number, name in frame[list(REQUIRED_COLUMNS)].itertuples(index=False, name=None):
        rows.append((str(number).strip(), str(name).strip()))
    return rows

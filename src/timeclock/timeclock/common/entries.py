"""Shared normalisation for the dated entry types (day, task, leave).

Every entry carries ``user_id``, ``work_date``, ``day_name`` and ``week_of``;
the week bucket is what the weekly queries filter on, so it must always be a
week start.
"""
from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional, TypeVar

from ..core.enums import Weekday
from .datetime_utils import day_name, start_of_week, today_local

E = TypeVar("E")


def stamp_entry(
    entry: E,
    *,
    user_id: int,
    week_start: Weekday = Weekday.SUNDAY,
    today: Optional[date] = None,
) -> E:
    """Fill in owner, date, weekday name and week bucket where the payload left them out.

    A supplied ``week_of`` is snapped to its own week start; otherwise it is
    derived from the entry date. A missing date means today.
    """
    work_date = getattr(entry, "work_date") or today or today_local()
    week_of = start_of_week(getattr(entry, "week_of") or work_date, week_start)
    return replace(
        entry,
        user_id=getattr(entry, "user_id") or user_id,
        work_date=work_date,
        day_name=getattr(entry, "day_name") or day_name(work_date),
        week_of=week_of,
    )

"""
Timestamped file names.

    timestamped_name("report", "md")           -> report_20261019_142301.md
    timestamped_name("proj_20261019", "md")    -> proj_20261019_142301.md

Resolution is one second: two calls inside the same second for the same
base name return the same string.
"""
from __future__ import annotations

import re
from datetime import datetime

_DATE_TOKEN = re.compile(r"(?<!\d)\d{8}(?!\d)")


def formatted_datetime(now: datetime | None = None) -> str:
    """YYYYMMDD_HHMMSS"""
    return (now or datetime.now()).strftime("%Y%m%d_%H%M%S")


def formatted_date(now: datetime | None = None) -> str:
    """YYYYMMDD"""
    return (now or datetime.now()).strftime("%Y%m%d")


def timestamped_name(base_name: str, extension: str, *, now: datetime | None = None) -> str:
    now = now or datetime.now()
    ext = extension.lstrip(".")
    if _DATE_TOKEN.search(base_name):
        # base already carries a calendar date – add time of day only
        return f"{base_name}_{now:%H%M%S}.{ext}"
    return f"{base_name}_{formatted_datetime(now)}.{ext}"

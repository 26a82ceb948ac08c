from __future__ import annotations
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from .types import CalendarDate, EpochAnchor
from nepcal.engines.table import CalendarTable, default_table

# 1 Baisakh 2062 BS fell on 14 April 2005 AD.
DEFAULT_ANCHOR = EpochAnchor(
    bs=CalendarDate(2062, 1, 1, "bs"),
    ad=CalendarDate(2005, 4, 14, "ad"),
)

@lru_cache(maxsize=None)
def shared_table() -> CalendarTable:
    """The bundled table, built once per process."""
    return default_table()

@dataclass(frozen=True)
class CalendarContext:
    """Everything a converter needs; passed in, never looked up globally."""
    table: CalendarTable
    anchor: EpochAnchor
    start_year: int

    @classmethod
    def create(
        cls,
        *,
        start_year: Optional[int] = None,
        table: Optional[CalendarTable] = None,
        anchor: EpochAnchor = DEFAULT_ANCHOR,
    ) -> "CalendarContext":
        """
        Build a context, clamping start_year so it never precedes the table's
        first year. The anchor year must stay countable from the start year.
        """
        tbl = table if table is not None else shared_table()
        year = tbl.base_year if start_year is None else max(int(start_year), tbl.base_year)

        if anchor.bs.year not in tbl:
            raise ValueError(f"Anchor year {anchor.bs.year} is not in the calendar table")
        if year > anchor.bs.year:
            raise ValueError(f"start_year {year} is after the anchor year {anchor.bs.year}")
        return cls(table=tbl, anchor=anchor, start_year=year)

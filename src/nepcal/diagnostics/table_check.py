#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional

from nepcal.core.config import shared_table
from nepcal.engines.table import CalendarTable


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "nepcal[diagnostics]"') from e


def month_matrix(np, table: CalendarTable):
    """(years, months) array of month lengths plus the stored year totals."""
    years = np.arange(table.base_year, table.last_year + 1, dtype=int)
    lengths = np.array([table.month_lengths(int(y)) for y in years], dtype=int)
    totals = np.array([table.days_in_year(int(y)) for y in years], dtype=int)
    return years, lengths, totals


def check_table(np, table: CalendarTable) -> List[str]:
    """Return human-readable problems; empty when the table looks sane."""
    years, lengths, totals = month_matrix(np, table)
    problems: List[str] = []

    bad_sum = years[lengths.sum(axis=1) != totals]
    for y in bad_sum:
        problems.append(f"{y}: month lengths do not add up to the year total")

    bad_len = years[((lengths < 29) | (lengths > 32)).any(axis=1)]
    for y in bad_len:
        problems.append(f"{y}: month length outside 29..32")

    bad_year = years[(totals < 365) | (totals > 366)]
    for y in bad_year:
        problems.append(f"{y}: year length {int(totals[years == y][0])} outside 365..366")

    return problems


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Consistency report for the BS month-length table.")
    p.add_argument("--stats", action="store_true", help="Also print per-month min/mean/max.")
    args = p.parse_args(argv)

    np = _need_numpy()
    table = shared_table()
    years, lengths, totals = month_matrix(np, table)

    print(f"BS years {table.base_year}..{table.last_year} ({len(years)} rows, {int(totals.sum())} days)")
    print(f"  366-day years: {int((totals == 366).sum())}")

    if args.stats:
        print()
        print("month  min   mean    max")
        for i in range(12):
            col = lengths[:, i]
            print(f"  {i + 1:2d}   {int(col.min()):3d}  {float(col.mean()):6.2f}  {int(col.max()):3d}")

    problems = check_table(np, table)
    print()
    if not problems:
        print("Table OK.")
        return 0
    for msg in problems:
        print("PROBLEM", msg)
    return 1


if __name__ == "__main__":
    raise SystemExit(main())

"""Diagnostics package.

- round_trip: always available, random AD -> BS -> AD and BS -> AD -> BS checks
- table_check, year_lengths: need the diagnostics extras (numpy, matplotlib)
"""

__all__ = ["round_trip", "table_check", "year_lengths"]

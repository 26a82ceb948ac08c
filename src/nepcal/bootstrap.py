from __future__ import annotations
from typing import Optional

from nepcal.core.config import CalendarContext
from nepcal.engines.converter import Converter

def build_converter(start_year: Optional[int] = None) -> Converter:
    return Converter(CalendarContext.create(start_year=start_year))

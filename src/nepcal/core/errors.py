class NepcalError(Exception):
    """Base error."""

class InvalidFormatError(NepcalError):
    """Raised when a date string cannot be parsed into year, month and day."""

class YearOutOfRangeError(NepcalError):
    """Raised when a year is missing from the calendar table."""

class InvalidDateError(NepcalError):
    """Raised when a date does not exist in its calendar or fails the round trip."""

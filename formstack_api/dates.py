"""Date string parsing and validation for timestamp-like parameters."""

from typing import Optional, Pattern
from dateutil import parser as date_parser
import pytz

# ----
from formstack_api.consts import DATE_FORMAT_RE
from formstack_api.error import InvalidDateFormatException


def strtotime(date_string: str) -> Optional[int]:
    """Converts a date string into seconds since January 1, 1970, 00:00:00 UTC.

    Dates without timezone information are interpreted as UTC.

    Args:
        date_string (str): Any date string `dateutil` understands

    Returns:
        Optional[int]: Seconds since the epoch, None if the string can't be parsed
        or the date is not after the epoch.
    """
    try:
        date = date_parser.parse(date_string)
    except (ValueError, OverflowError, TypeError):
        return None
    if date.tzinfo is None:
        date = pytz.utc.localize(date)
    seconds = int(date.timestamp())
    if seconds <= 0:
        return None
    return seconds


def matches_date_format(time_string: str, format_exp: Pattern = DATE_FORMAT_RE) -> bool:
    """Test if a date string is well formatted. By default checks YYYY-MM-DD HH:MM:SS."""
    if not isinstance(time_string, str):
        return False
    return format_exp.fullmatch(time_string) is not None




def validate_date(date_string: str, name: str) -> str:
    """Raises InvalidDateFormatException if `date_string` can't be parsed"""
    if strtotime(date_string) is None:
        raise InvalidDateFormatException(f"Invalid value for {name}")
    return date_string


def validate_timestamp(date_string: str, name: str = "timestamp") -> str:
    """Raises InvalidDateFormatException unless `date_string` parses and is YYYY-MM-DD HH:MM:SS"""
    if strtotime(date_string) is None or not matches_date_format(date_string):
        raise InvalidDateFormatException(
            f"Invalid value for {name}. You must use a valid Date/Time string formatted in YYYY-MM-DD HH:MM:SS"
        )
    return date_string

"""
Field normalization for bank notifications.
Handles Persian digits, amounts with separators and currency units,
split and compact date-time forms, and the trailing location/tag line.
"""
import re
from typing import Optional, Tuple

from core.config import get_settings
from core.exceptions import (
    InvalidAmountError,
    InvalidDateError,
    InvalidDateTimeError,
    InvalidTimeError,
)
from core.keywords import CURRENCY_UNITS, TAG_MARKER, THOUSANDS_SEPARATORS
from core.schema import LocationTag

FA_TO_EN_DIGITS = str.maketrans("۰۱۲۳۴۵۶۷۸۹", "0123456789")
AR_TO_EN_DIGITS = str.maketrans("٠١٢٣٤٥٦٧٨٩", "0123456789")

AMOUNT_RE = re.compile(r"[0-9]+")
DATE_RE = re.compile(r"[0-9]{4}[/-][0-9]{2}[/-][0-9]{2}")
TIME_RE = re.compile(r"[0-9]{2}:[0-9]{2}(:[0-9]{2})?")
COMPACT_DATETIME_RE = re.compile(r"([0-9]{2})/([0-9]{2})/([0-9]{2})-([0-9]{2}:[0-9]{2})")


def normalize_digits(text: str) -> str:
    """Translate Persian and Arabic-Indic digits to ASCII."""
    return text.translate(FA_TO_EN_DIGITS).translate(AR_TO_EN_DIGITS)


def parse_amount(value: Optional[str], expect_currency: bool = False) -> int:
    """
    Parse an amount or balance into a non-negative integer.

    Args:
        value: Raw amount text, e.g. "640,000 ریال" or "2,007,200"
        expect_currency: Strip a trailing currency unit before parsing

    Returns:
        Integer amount

    Raises:
        InvalidAmountError: If the value is empty or not a non-negative integer
    """
    if not value or not value.strip():
        raise InvalidAmountError("Invalid amount format")

    cleaned = normalize_digits(value)
    for separator in THOUSANDS_SEPARATORS:
        cleaned = cleaned.replace(separator, "")
    cleaned = cleaned.strip()

    if expect_currency:
        lowered = cleaned.lower()
        for unit in CURRENCY_UNITS:
            if lowered.endswith(unit):
                cleaned = cleaned[:-len(unit)].strip()
                break

    if not AMOUNT_RE.fullmatch(cleaned):
        raise InvalidAmountError(
            "Invalid amount: must be a positive number",
            details={"value": value}
        )

    try:
        return int(cleaned)
    except ValueError:
        # Digit runs beyond the interpreter's int conversion limit
        raise InvalidAmountError(
            "Invalid amount: must be a positive number",
            details={"value": value}
        )


def expand_era_year(short_year: str, era_prefix: Optional[str] = None) -> str:
    """
    Expand a two-digit year into a four-digit one.

    Args:
        short_year: Two-digit year, e.g. "04"
        era_prefix: Century digits; defaults to the configured calendar era

    Returns:
        Four-digit year, e.g. "1404"
    """
    era_prefix = era_prefix or get_settings().calendar_era_prefix
    return f"{era_prefix}{short_year}"


def parse_date_time(date_str: str, time_str: str) -> Tuple[str, str]:
    """
    Normalize a date line and a time line.

    Args:
        date_str: "YYYY/MM/DD" or "YYYY-MM-DD"
        time_str: "HH:MM" or "HH:MM:SS"

    Returns:
        Tuple of (YYYY/MM/DD, HH:MM:SS)

    Raises:
        InvalidDateError: If the date line is malformed
        InvalidTimeError: If the time line is malformed
    """
    date = normalize_digits(date_str.strip())
    time = normalize_digits(time_str.strip())

    if not DATE_RE.fullmatch(date):
        raise InvalidDateError(
            "Invalid date format: expected YYYY-MM-DD or YYYY/MM/DD",
            details={"value": date_str}
        )

    if not TIME_RE.fullmatch(time):
        raise InvalidTimeError(
            "Invalid time format: expected HH:MM or HH:MM:SS",
            details={"value": time_str}
        )

    normalized_time = f"{time}:00" if len(time) == 5 else time
    return date.replace("-", "/"), normalized_time


def parse_compact_date_time(date_time_str: str) -> Tuple[str, str]:
    """
    Normalize a compact "YY/MM/DD-HH:MM" token.

    Returns:
        Tuple of (YYYY/MM/DD, HH:MM:SS)

    Raises:
        InvalidDateTimeError: If the token does not match exactly
    """
    match = COMPACT_DATETIME_RE.fullmatch(normalize_digits(date_time_str.strip()))
    if not match:
        raise InvalidDateTimeError(
            "Invalid date-time format: expected YY/MM/DD-HH:MM",
            details={"value": date_time_str}
        )

    year, month, day, clock = match.groups()
    return f"{expand_era_year(year)}/{month}/{day}", f"{clock}:00"


def parse_location_and_tag(line: Optional[str]) -> LocationTag:
    """
    Split the trailing free-text line into a location and a tag.

    "Shop #food" -> location "Shop", tag "food"
    "#food"      -> location unknown, tag "food"
    "Shop food"  -> location "Shop food", tag "Shop"

    Args:
        line: Trailing line of the message, may be None

    Returns:
        LocationTag with absent fields left as None
    """
    if not line:
        return LocationTag()

    parts = line.split()
    if not parts:
        return LocationTag()

    if parts[-1].startswith(TAG_MARKER):
        tag = parts[-1][len(TAG_MARKER):]
        location = " ".join(parts[:-1])
        return LocationTag(location=location or None, tag=tag or None)

    if parts[0].startswith(TAG_MARKER):
        return LocationTag(tag=parts[0][len(TAG_MARKER):] or None)

    # Neither end carries a marker: first word doubles as the tag
    return LocationTag(location=" ".join(parts), tag=parts[0])

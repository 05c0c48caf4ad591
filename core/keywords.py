"""
Keyword vocabulary used to recognise bank notification layouts.

Persian tokens come from the bank messages themselves; the English
equivalents allow the same layouts to be typed in Latin script.
All tokens are compared against lower-cased text.
"""
from typing import Tuple

ACCOUNT_LABELS: Tuple[str, ...] = ("حساب", "account")
BANK_MARKERS: Tuple[str, ...] = ("بانک", "bank")
DEPOSIT_KEYWORDS: Tuple[str, ...] = ("واریز", "deposit")
WITHDRAWAL_KEYWORDS: Tuple[str, ...] = ("برداشت", "withdrawal")
BALANCE_KEYWORDS: Tuple[str, ...] = ("مانده", "balance")

CURRENCY_UNITS: Tuple[str, ...] = ("ریال", "تومان", "rial", "toman", "irr")
THOUSANDS_SEPARATORS: Tuple[str, ...] = (",", "٬", "،")

LABEL_SEPARATOR = ":"
TAG_MARKER = "#"

# Literal sentinels surfaced to callers when a field cannot be derived
UNKNOWN = "Unknown"
NO_TAG = ""


def contains_any(text: str, tokens: Tuple[str, ...]) -> bool:
    """Check whether any token occurs in text (case-insensitive)."""
    lowered = text.lower()
    return any(token in lowered for token in tokens)


def starts_with_any(text: str, tokens: Tuple[str, ...]) -> bool:
    """Check whether text begins with any token (case-insensitive)."""
    lowered = text.lower()
    return any(lowered.startswith(token) for token in tokens)


def strip_prefix(text: str, tokens: Tuple[str, ...]) -> str:
    """
    Remove a leading keyword (and an optional label separator) from text.

    Text without any of the keywords is returned trimmed but otherwise intact.
    """
    text = text.strip()
    lowered = text.lower()
    for token in tokens:
        if lowered.startswith(token):
            text = text[len(token):].lstrip()
            if text.startswith(LABEL_SEPARATOR):
                text = text[len(LABEL_SEPARATOR):]
            return text.strip()
    return text

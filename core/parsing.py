"""
Bank notification parsing.
Splits a raw chat message into lines, picks its layout and extracts a record.
"""
from typing import Any, List, Tuple

from core.exceptions import EmptyInputError, InsufficientLinesError
from core.keywords import ACCOUNT_LABELS, BANK_MARKERS, DEPOSIT_KEYWORDS, contains_any, starts_with_any
from core.layouts import LAYOUT_EXTRACTORS, build_record
from core.logger import setup_logger
from core.schema import LayoutFamily, TransactionRecord, TransactionType

logger = setup_logger(__name__)

# No layout has a valid body shorter than this
MIN_LINES = 4


def split_lines(raw_data: Any) -> List[str]:
    """
    Split a raw message into trimmed, non-empty lines.

    Args:
        raw_data: Raw message text

    Returns:
        Lines in their original order

    Raises:
        EmptyInputError: If the message is missing, empty or not a string
        InsufficientLinesError: If fewer than four non-empty lines remain
    """
    if not raw_data or not isinstance(raw_data, str):
        raise EmptyInputError("Invalid input: rawData must be a non-empty string")

    lines = [line.strip() for line in raw_data.splitlines()]
    lines = [line for line in lines if line]

    if len(lines) < MIN_LINES:
        raise InsufficientLinesError(
            "Invalid data format: insufficient number of lines",
            details={"line_count": len(lines), "required": MIN_LINES}
        )

    return lines


def classify_layout(lines: List[str]) -> Tuple[LayoutFamily, TransactionType]:
    """
    Decide which layout a message uses.

    A message is verbose when its first line names a bank or does not start
    with the account label, and a deposit when any line mentions a deposit.

    Returns:
        Tuple of (layout family, transaction type)
    """
    first = lines[0]
    if contains_any(first, BANK_MARKERS) or not starts_with_any(first, ACCOUNT_LABELS):
        family: LayoutFamily = "verbose"
    else:
        family = "compact"

    direction: TransactionType = (
        "deposit" if any(contains_any(line, DEPOSIT_KEYWORDS) for line in lines) else "withdrawal"
    )
    return family, direction


def parse_transaction(raw_data: Any) -> TransactionRecord:
    """
    Parse a bank notification into a TransactionRecord.

    Args:
        raw_data: Multi-line message as typed or forwarded by the user

    Returns:
        Fully populated, immutable TransactionRecord

    Raises:
        ParseError: If the message does not fit its layout
    """
    lines = split_lines(raw_data)
    family, direction = classify_layout(lines)
    logger.debug(f"Classified message as {family} {direction} ({len(lines)} lines)")

    fields = LAYOUT_EXTRACTORS[(family, direction)](lines)
    return build_record(fields, direction)

"""
Field extraction for the four supported notification layouts.

Verbose layouts label every field ("حساب: 0177018376691") and report
date and time on separate lines. Compact layouts glue the keyword to the
value ("حساب2328262050") and end with a single YY/MM/DD-HH:MM token.

Each extractor reads fixed line positions, validating fields in line order,
and returns a dictionary of record fields; ``build_record`` turns it into a
TransactionRecord.
"""
from typing import Any, Callable, Dict, List, Optional, Tuple

from core.exceptions import InsufficientLinesError
from core.keywords import (
    ACCOUNT_LABELS,
    BALANCE_KEYWORDS,
    DEPOSIT_KEYWORDS,
    LABEL_SEPARATOR,
    WITHDRAWAL_KEYWORDS,
    strip_prefix,
)
from core.normalize import (
    normalize_digits,
    parse_amount,
    parse_compact_date_time,
    parse_date_time,
    parse_location_and_tag,
)
from core.schema import LayoutFamily, TransactionRecord, TransactionType
from core.validators import (
    validate_account_number,
    validate_bank_name,
    validate_branch_code,
    validate_transaction_method,
)

Extractor = Callable[[List[str]], Dict[str, Any]]


def label_value(line: str) -> Optional[str]:
    """Return the text after the first label separator, or None if there is none."""
    if LABEL_SEPARATOR not in line:
        return None
    return line.split(LABEL_SEPARATOR, 1)[1].strip()


def optional_line(lines: List[str], index: int) -> Optional[str]:
    return lines[index] if index < len(lines) else None


def require_lines(lines: List[str], minimum: int, layout: str) -> None:
    if len(lines) < minimum:
        raise InsufficientLinesError(
            f"Invalid {layout} layout: requires at least {minimum} lines",
            details={"layout": layout, "line_count": len(lines), "required": minimum}
        )


def extract_verbose_withdrawal(lines: List[str]) -> Dict[str, Any]:
    """
    Extract a labelled withdrawal notification.

    Lines: bank, account, amount, method, balance, date, time, [location/tag]
    """
    require_lines(lines, 7, "verbose withdrawal")

    bank_name = validate_bank_name(lines[0])
    account_number = validate_account_number(label_value(lines[1]))
    amount = parse_amount(label_value(lines[2]), expect_currency=True)
    method = validate_transaction_method(label_value(lines[3]))
    balance = parse_amount(label_value(lines[4]), expect_currency=True)
    date, time = parse_date_time(lines[5], lines[6])
    place = parse_location_and_tag(optional_line(lines, 7))

    return {
        "bank_name": bank_name,
        "account_number": normalize_digits(account_number),
        "withdrawal_amount": amount,
        "transaction_method": method,
        "balance": balance,
        "date": date,
        "time": time,
        "location": place.location,
        "tag": place.tag,
    }


def extract_verbose_deposit(lines: List[str]) -> Dict[str, Any]:
    """
    Extract a labelled deposit notification.

    Deposits always report the receiving branch, one line before the balance.
    Lines: bank, account, amount, method, branch, balance, date, time, [location/tag]
    """
    require_lines(lines, 8, "verbose deposit")

    bank_name = validate_bank_name(lines[0])
    account_number = validate_account_number(label_value(lines[1]))
    amount = parse_amount(label_value(lines[2]), expect_currency=True)
    method = validate_transaction_method(label_value(lines[3]))
    branch_code = validate_branch_code(label_value(lines[4]))
    balance = parse_amount(label_value(lines[5]), expect_currency=True)
    date, time = parse_date_time(lines[6], lines[7])
    place = parse_location_and_tag(optional_line(lines, 8))

    return {
        "bank_name": bank_name,
        "account_number": normalize_digits(account_number),
        "deposit_amount": amount,
        "transaction_method": method,
        "branch_code": branch_code,
        "balance": balance,
        "date": date,
        "time": time,
        "location": place.location,
        "tag": place.tag,
    }


def _extract_compact(lines: List[str], amount_keywords: Tuple[str, ...]) -> Dict[str, Any]:
    account_number = validate_account_number(strip_prefix(lines[0], ACCOUNT_LABELS))
    amount = parse_amount(strip_prefix(lines[1], amount_keywords))
    balance = parse_amount(strip_prefix(lines[2], BALANCE_KEYWORDS))
    date, time = parse_compact_date_time(lines[3])
    place = parse_location_and_tag(optional_line(lines, 4))

    return {
        "account_number": normalize_digits(account_number),
        "amount": amount,
        "balance": balance,
        "date": date,
        "time": time,
        "location": place.location,
        "tag": place.tag,
    }


def extract_compact_withdrawal(lines: List[str]) -> Dict[str, Any]:
    """
    Extract a compact withdrawal notification.

    Lines: account, amount, balance, YY/MM/DD-HH:MM, location/tag
    """
    require_lines(lines, 5, "compact withdrawal")
    fields = _extract_compact(lines, WITHDRAWAL_KEYWORDS)
    fields["withdrawal_amount"] = fields.pop("amount")
    return fields


def extract_compact_deposit(lines: List[str]) -> Dict[str, Any]:
    """
    Extract a compact deposit notification.

    Lines: account, amount, balance, YY/MM/DD-HH:MM, [location/tag]
    """
    require_lines(lines, 4, "compact deposit")
    fields = _extract_compact(lines, DEPOSIT_KEYWORDS)
    fields["deposit_amount"] = fields.pop("amount")
    return fields


LAYOUT_EXTRACTORS: Dict[Tuple[LayoutFamily, TransactionType], Extractor] = {
    ("verbose", "withdrawal"): extract_verbose_withdrawal,
    ("verbose", "deposit"): extract_verbose_deposit,
    ("compact", "withdrawal"): extract_compact_withdrawal,
    ("compact", "deposit"): extract_compact_deposit,
}


def build_record(fields: Dict[str, Any], transaction_type: TransactionType) -> TransactionRecord:
    """
    Assemble extracted fields into an immutable TransactionRecord.

    Fields a layout does not carry stay None and surface as sentinels.
    The capture timestamp is taken here.
    """
    return TransactionRecord(transaction_type=transaction_type, **fields)

"""
Unit tests for per-layout field extraction.
"""
import pytest

from core.exceptions import InsufficientLinesError, InvalidAmountError, MissingRequiredFieldError
from core.layouts import (
    LAYOUT_EXTRACTORS,
    build_record,
    extract_compact_deposit,
    extract_compact_withdrawal,
    extract_verbose_deposit,
    extract_verbose_withdrawal,
    label_value,
)
from core.parsing import split_lines


def test_label_value():
    """Test text after the first colon is the value."""
    assert label_value("حساب: 0177018376691") == "0177018376691"
    assert label_value("واریز حقوق: 148,792,250 ریال") == "148,792,250 ریال"
    assert label_value("note: a: b") == "a: b"
    assert label_value("حساب:") == ""
    assert label_value("از طریق پایانه") is None


def test_dispatch_table_covers_every_layout():
    """Test all four family/direction pairs have an extractor."""
    assert set(LAYOUT_EXTRACTORS) == {
        ("verbose", "withdrawal"),
        ("verbose", "deposit"),
        ("compact", "withdrawal"),
        ("compact", "deposit"),
    }


@pytest.mark.parametrize("extractor, line_count, layout, minimum", [
    (extract_verbose_withdrawal, 6, "verbose withdrawal", 7),
    (extract_verbose_deposit, 7, "verbose deposit", 8),
    (extract_compact_withdrawal, 4, "compact withdrawal", 5),
    (extract_compact_deposit, 3, "compact deposit", 4),
])
def test_extractors_require_minimum_lines(extractor, line_count, layout, minimum):
    """Test each layout checks its own line count before reading fields."""
    lines = ["x"] * line_count
    with pytest.raises(InsufficientLinesError, match=f"Invalid {layout} layout: requires at least {minimum} lines"):
        extractor(lines)


def test_verbose_withdrawal_missing_account(verbose_withdrawal_text):
    """Test an account label without a value."""
    lines = split_lines(verbose_withdrawal_text)
    lines[1] = "حساب:"
    with pytest.raises(MissingRequiredFieldError, match="Account number is required") as exc_info:
        extract_verbose_withdrawal(lines)
    assert exc_info.value.field == "account_number"


def test_verbose_withdrawal_missing_method(verbose_withdrawal_text):
    """Test a method line without a label separator."""
    lines = split_lines(verbose_withdrawal_text)
    lines[3] = "از طریق پایانه فروش"
    with pytest.raises(MissingRequiredFieldError, match="Transaction method is required"):
        extract_verbose_withdrawal(lines)


def test_verbose_deposit_missing_branch(verbose_deposit_text):
    """Test a branch code label without a value."""
    lines = split_lines(verbose_deposit_text)
    lines[4] = "کدشعبه:   "
    with pytest.raises(MissingRequiredFieldError, match="Branch code is required") as exc_info:
        extract_verbose_deposit(lines)
    assert exc_info.value.details["field"] == "branch_code"


def test_verbose_deposit_invalid_balance(verbose_deposit_text):
    """Test a balance line without a value."""
    lines = split_lines(verbose_deposit_text)
    lines[5] = "مانده"
    with pytest.raises(InvalidAmountError, match="Invalid amount format"):
        extract_verbose_deposit(lines)


def test_compact_withdrawal_missing_account(compact_withdrawal_text):
    """Test a bare account label."""
    lines = split_lines(compact_withdrawal_text)
    lines[0] = "حساب"
    with pytest.raises(MissingRequiredFieldError, match="Account number is required"):
        extract_compact_withdrawal(lines)


def test_compact_deposit_without_trailing_line(compact_deposit_text):
    """Test the location/tag line is optional for compact deposits."""
    lines = split_lines(compact_deposit_text)[:4]
    fields = extract_compact_deposit(lines)
    assert fields["deposit_amount"] == 20000000
    assert fields["location"] is None
    assert fields["tag"] is None
    assert "withdrawal_amount" not in fields


def test_verbose_withdrawal_ignores_extra_lines(verbose_withdrawal_text):
    """Test lines after the location/tag line are ignored."""
    lines = split_lines(verbose_withdrawal_text) + ["trailing note"]
    fields = extract_verbose_withdrawal(lines)
    assert fields["tag"] == "ciggaret"


def test_build_record_sets_timestamp(compact_withdrawal_text):
    """Test the builder stamps capture time and fills sentinels."""
    fields = extract_compact_withdrawal(split_lines(compact_withdrawal_text))
    record = build_record(fields, "withdrawal")
    assert record.timestamp > 0
    assert record.branch_code is None
    assert record.model_dump()["bank_name"] == "Unknown"

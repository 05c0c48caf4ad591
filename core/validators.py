"""
Validators for labelled text fields.
"""
from typing import Optional

from core.exceptions import MissingRequiredFieldError


def require_field(value: Optional[str], field: str, label: str) -> str:
    """
    Return the trimmed value or fail if it is empty.

    Args:
        value: Raw field text, None when the label had no value
        field: Record field name, reported in the error details
        label: Human readable field name used in the message

    Raises:
        MissingRequiredFieldError: If the value is absent or blank
    """
    if value is None or not value.strip():
        raise MissingRequiredFieldError(f"{label} is required", field=field)
    return value.strip()


def validate_bank_name(bank_name: Optional[str]) -> str:
    return require_field(bank_name, "bank_name", "Bank name")


def validate_account_number(account_number: Optional[str]) -> str:
    return require_field(account_number, "account_number", "Account number")


def validate_transaction_method(method: Optional[str]) -> str:
    return require_field(method, "transaction_method", "Transaction method")


def validate_branch_code(branch_code: Optional[str]) -> str:
    return require_field(branch_code, "branch_code", "Branch code")

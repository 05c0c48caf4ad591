"""
Custom exceptions for transaction message parsing.

Every failure caused by a malformed message is a ``ParseError`` so callers can
answer with a format correction instead of a generic error.
"""
from typing import Any, Dict, Optional


class TransactionParserException(Exception):
    """Base exception for all transaction parser errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize exception.

        Args:
            message: Error message
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(TransactionParserException):
    """Raised when configuration is invalid."""
    pass


class TransactionProcessingError(TransactionParserException):
    """Raised when processing a message fails for a reason other than its format."""
    pass


class ParseError(TransactionParserException):
    """Raised when a message does not match any supported layout."""
    code = "PARSE_ERROR"


class EmptyInputError(ParseError):
    """Raised when the raw message is missing, blank or not a string."""
    code = "EMPTY_INPUT"


class InsufficientLinesError(ParseError):
    """Raised when a message has fewer lines than its layout needs."""
    code = "INSUFFICIENT_LINES"


class InvalidAmountError(ParseError):
    """Raised when an amount or balance is not a non-negative integer."""
    code = "INVALID_AMOUNT"


class InvalidDateError(ParseError):
    """Raised when a YYYY/MM/DD date line is malformed."""
    code = "INVALID_DATE"


class InvalidTimeError(ParseError):
    """Raised when an HH:MM or HH:MM:SS time line is malformed."""
    code = "INVALID_TIME"


class InvalidDateTimeError(ParseError):
    """Raised when a compact YY/MM/DD-HH:MM token is malformed."""
    code = "INVALID_DATETIME"


class MissingRequiredFieldError(ParseError):
    """Raised when a labelled field is empty or absent."""
    code = "MISSING_REQUIRED_FIELD"

    def __init__(self, message: str, field: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details={"field": field, **(details or {})})
        self.field = field

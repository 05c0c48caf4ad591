"""
Structured logging configuration for the transaction parser.
Ensures account number redaction and proper log levels.
"""
import logging
import os
import sys
from typing import Optional


def setup_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name (usually __name__)
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to env LOG_LEVEL or INFO.

    Returns:
        Configured logger instance
    """
    log_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    if log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        log_level = "INFO"

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, log_level))

    # Avoid duplicate handlers
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(getattr(logging, log_level))

        formatter = logging.Formatter(
            fmt="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def mask_account(account_number: Optional[str], visible: int = 4) -> str:
    """
    Mask an account number for logging, keeping only the last digits.

    Args:
        account_number: Raw account number
        visible: Number of trailing characters left visible

    Returns:
        Masked account number, e.g. "***6691"
    """
    if not account_number:
        return "***"
    if len(account_number) <= visible:
        return "*" * len(account_number)
    return "***" + account_number[-visible:]

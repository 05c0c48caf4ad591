"""
Transaction message service.
Decides how parse outcomes are reported back to the sender.
"""
from typing import Any, Dict, List

from core.exceptions import ParseError, TransactionProcessingError
from core.logger import mask_account, setup_logger
from core.parsing import classify_layout, parse_transaction, split_lines

logger = setup_logger(__name__)

# Shown to the sender whenever a message cannot be parsed
FORMAT_EXAMPLES: List[Dict[str, str]] = [
    {
        "name": "واریز (قالب ۱)",
        "text": (
            "*بانک تجارت*\nحساب: 1234\nواریز: 1,000,000 ریال\nاز طریق: شعبه\n"
            "کدشعبه: 2080\nمانده: 5,000,000 ریال\n1404/02/08\n23:51\nLoup #Cafe"
        ),
    },
    {
        "name": "واریز (قالب ۲)",
        "text": "حساب1234\nواریز1,000,000\nمانده5,000,000\n04/02/08-23:51\n#Cafe",
    },
    {
        "name": "برداشت (قالب ۱)",
        "text": (
            "*بانک تجارت*\nحساب: 1234\nبرداشت: 1,000,000 ریال\nاز طریق: پایانه فروش\n"
            "مانده: 5,000,000 ریال\n1404/02/08\n23:51\nLoup #Cafe"
        ),
    },
    {
        "name": "برداشت (قالب ۲)",
        "text": "حساب1234\nبرداشت1,000,000\nمانده5,000,000\n04/02/08-23:51\n#Cafe",
    },
]


class TransactionService:
    """Service for turning chat messages into transaction payloads."""

    def describe_layout(self, text: str) -> str:
        """
        Name the layout a message was parsed with, e.g. "compact deposit".

        Args:
            text: Raw message that already parsed successfully
        """
        family, direction = classify_layout(split_lines(text))
        return f"{family} {direction}"

    def build_rejection(self, error: ParseError) -> Dict[str, Any]:
        """
        Build the correction payload for a message with a bad format.

        Args:
            error: Parse failure raised by the parser

        Returns:
            Dictionary with the reason and the supported format examples
        """
        return {
            "status": "rejected",
            "error": error.message,
            "code": error.code,
            "details": error.details,
            "examples": FORMAT_EXAMPLES,
        }

    def process_message(self, text: str) -> Dict[str, Any]:
        """
        Parse a single chat message.

        Args:
            text: Raw message text

        Returns:
            "parsed" payload with the transaction, or "rejected" payload
            with the reason and format examples

        Raises:
            TransactionProcessingError: If parsing fails for an unexpected reason
        """
        try:
            record = parse_transaction(text)
        except ParseError as e:
            logger.info(f"Rejected message ({e.code}): {e.message}")
            return self.build_rejection(e)
        except Exception as e:
            logger.error(f"Unexpected failure while parsing message: {e}", exc_info=True)
            raise TransactionProcessingError(
                "Failed to parse transaction",
                details={"error": str(e)}
            )

        layout = self.describe_layout(text)
        logger.info(
            f"Parsed {layout} for account {mask_account(record.account_number)}: "
            f"amount={record.amount:,} balance={record.balance:,} date={record.date}"
        )

        return {
            "status": "parsed",
            "layout": layout,
            "transaction": record.model_dump(),
        }

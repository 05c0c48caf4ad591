"""
Pydantic schemas for parsed transactions and API payloads.

Fields that cannot be derived from a message are stored as ``None`` and
surfaced as the literal sentinels ("Unknown", "") when serialized.
"""
from datetime import datetime, timezone
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, model_validator

from core.keywords import NO_TAG, UNKNOWN

TransactionType = Literal["withdrawal", "deposit"]
LayoutFamily = Literal["verbose", "compact"]


def current_timestamp_ms() -> int:
    """Return the current instant as epoch milliseconds."""
    return int(datetime.now(timezone.utc).timestamp() * 1000)


class LocationTag(BaseModel):
    """Location and category tag taken from the trailing free-text line."""
    model_config = ConfigDict(frozen=True)

    location: Optional[str] = None
    tag: Optional[str] = None

    @field_serializer("location")
    def serialize_location(self, v: Optional[str]) -> str:
        return v or UNKNOWN

    @field_serializer("tag")
    def serialize_tag(self, v: Optional[str]) -> str:
        return v or NO_TAG


class TransactionRecord(BaseModel):
    """
    Structured transaction parsed from a bank notification.

    Exactly one of ``withdrawal_amount`` / ``deposit_amount`` is set,
    matching ``transaction_type``.
    """
    model_config = ConfigDict(frozen=True)

    bank_name: Optional[str] = None
    account_number: str = Field(..., min_length=1)
    transaction_type: TransactionType
    withdrawal_amount: Optional[int] = Field(None, ge=0)
    deposit_amount: Optional[int] = Field(None, ge=0)
    transaction_method: Optional[str] = None
    branch_code: Optional[str] = None
    balance: int = Field(..., ge=0)
    date: str = Field(..., pattern=r"^[0-9]{4}/[0-9]{2}/[0-9]{2}$", description="YYYY/MM/DD")
    time: str = Field(..., pattern=r"^[0-9]{2}:[0-9]{2}:[0-9]{2}$", description="HH:MM:SS")
    location: Optional[str] = None
    tag: Optional[str] = None
    timestamp: int = Field(default_factory=current_timestamp_ms, description="Capture time in epoch ms")

    @model_validator(mode="after")
    def check_amount_matches_type(self):
        """Ensure the amount field agrees with the transaction type."""
        if self.transaction_type == "withdrawal":
            present, absent = self.withdrawal_amount, self.deposit_amount
        else:
            present, absent = self.deposit_amount, self.withdrawal_amount
        if present is None or absent is not None:
            raise ValueError(
                f"A {self.transaction_type} must carry only a {self.transaction_type} amount"
            )
        return self

    @field_serializer("bank_name", "transaction_method", "location")
    def serialize_unknown(self, v: Optional[str]) -> str:
        return v or UNKNOWN

    @field_serializer("tag")
    def serialize_tag(self, v: Optional[str]) -> str:
        return v or NO_TAG

    @property
    def amount(self) -> int:
        """Amount moved by this transaction, whichever direction it went."""
        if self.transaction_type == "deposit":
            return self.deposit_amount
        return self.withdrawal_amount


class ParseRequest(BaseModel):
    """Raw message submitted for parsing."""
    text: str = Field(..., description="Multi-line bank notification text")

"""Schemas for transaction records and their analysis summary."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TransactionRecord(BaseModel):
    """A UPI transaction log entry as received; nothing is validated or coerced."""

    model_config = ConfigDict(extra="allow")

    id: Any = None
    type: Any = None
    amount: Any = None
    to: Any = None
    category: Any = None
    date: Any = None


class AnalysisSummary(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    total_credit: int | float = Field(..., alias="totalCredit")
    total_debit: int | float = Field(..., alias="totalDebit")
    net_balance: int | float = Field(..., alias="netBalance")
    transaction_count: int = Field(..., alias="transactionCount")
    avg_transaction: int = Field(..., alias="avgTransaction")
    highest_transaction: Any = Field(
        ..., alias="highestTransaction", description="The original record with the largest amount."
    )
    category_breakdown: dict[Any, int | float] = Field(..., alias="categoryBreakdown")
    frequent_contact: Any = Field(..., alias="frequentContact")
    all_above_100: bool = Field(..., alias="allAbove100")
    has_large_transaction: bool = Field(..., alias="hasLargeTransaction")

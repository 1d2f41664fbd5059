from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Sequence
from fractions import Fraction
from typing import Any

from upilens.core.logging import get_logger
from upilens.core.utils import add_amounts, group_key, record_field
from upilens.schemas.models import AnalysisSummary

logger = get_logger("upilens.services.analysis")


class TransactionAnalyzer:
    """Summarises a month of UPI transactions.

    Malformed records are skipped, never reported: a record whose type is not
    "credit"/"debit" or whose amount is not a positive number simply does not
    contribute to any figure. ``None`` is returned when there is nothing to
    analyse, and no exception is raised for bad input.
    """

    TRANSACTION_TYPES = ("credit", "debit")
    SMALL_TRANSACTION_LIMIT = 100
    LARGE_TRANSACTION_THRESHOLD = 5000

    def analyze(self, transactions: Any) -> AnalysisSummary | None:
        """Aggregate transactions into an AnalysisSummary.

        Args:
            transactions: Ordered sequence (list, tuple) of transaction records.
                Records may be dicts, TransactionRecord models or any object
                exposing type/amount/to/category attributes.

        Returns:
            AnalysisSummary over the valid records, or None if the input is not
            a non-empty sequence or contains no valid record
        """
        if not self._is_record_sequence(transactions) or len(transactions) == 0:
            logger.debug(f"Nothing to analyze: expected a non-empty sequence, got {type(transactions).__name__}")
            return None

        valid = [txn for txn in transactions if self.is_valid_transaction(txn)]

        skipped = len(transactions) - len(valid)
        if skipped > 0:
            logger.debug(f"Skipped {skipped} invalid transactions")

        if not valid:
            logger.debug("No valid transactions left after filtering")
            return None

        summary = self._build_summary(valid)

        logger.info(
            f"Analyzed {summary.transaction_count} transactions "
            f"in {len(summary.category_breakdown)} categories"
        )
        return summary

    @classmethod
    def is_valid_transaction(cls, txn: Any) -> bool:
        """Return True if txn has a known type and a positive, finite numeric amount.

        Booleans and numeric strings such as "500" are not amounts.
        """
        if txn is None:
            return False
        if record_field(txn, "type") not in cls.TRANSACTION_TYPES:
            return False
        amount = record_field(txn, "amount")
        if isinstance(amount, bool) or not isinstance(amount, (int, float)):
            return False
        if isinstance(amount, float) and not math.isfinite(amount):
            return False
        return amount > 0

    @staticmethod
    def _is_record_sequence(value: Any) -> bool:
        return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))

    @classmethod
    def _build_summary(cls, valid: list[Any]) -> AnalysisSummary:
        amounts = [record_field(txn, "amount") for txn in valid]

        types = [record_field(txn, "type") for txn in valid]
        total_credit = cls._total(amount for type_, amount in zip(types, amounts) if type_ == "credit")
        total_debit = cls._total(amount for type_, amount in zip(types, amounts) if type_ == "debit")
        transaction_count = len(valid)

        return AnalysisSummary(
            total_credit=total_credit,
            total_debit=total_debit,
            net_balance=add_amounts(total_credit, -total_debit),
            transaction_count=transaction_count,
            avg_transaction=cls._average(amounts),
            highest_transaction=cls._highest_transaction(valid),
            category_breakdown=cls._category_breakdown(valid),
            frequent_contact=cls._frequent_contact(valid),
            all_above_100=all(amount > cls.SMALL_TRANSACTION_LIMIT for amount in amounts),
            has_large_transaction=any(amount >= cls.LARGE_TRANSACTION_THRESHOLD for amount in amounts),
        )

    @staticmethod
    def _total(amounts: Iterable[int | float]) -> int | float:
        total: int | float = 0
        for amount in amounts:
            total = add_amounts(total, amount)
        return total

    @staticmethod
    def _average(amounts: list[int | float]) -> int:
        # Exact mean: amounts beyond float range must not overflow
        mean = sum(Fraction(amount) for amount in amounts) / len(amounts)
        return math.floor(mean + Fraction(1, 2))

    @staticmethod
    def _highest_transaction(valid: list[Any]) -> Any:
        highest = valid[0]
        for txn in valid[1:]:
            # Strictly greater: the first record wins ties
            if record_field(txn, "amount") > record_field(highest, "amount"):
                highest = txn
        return highest

    @staticmethod
    def _category_breakdown(valid: list[Any]) -> dict[Any, int | float]:
        breakdown: dict[Any, int | float] = {}
        for txn in valid:
            category = group_key(record_field(txn, "category"))
            breakdown[category] = add_amounts(breakdown.get(category, 0), record_field(txn, "amount"))
        return breakdown

    @staticmethod
    def _frequent_contact(valid: list[Any]) -> Any:
        contact_counts = Counter(group_key(record_field(txn, "to")) for txn in valid)
        # most_common keeps first-encountered order among equal counts
        return contact_counts.most_common(1)[0][0]


def analyze_transactions(transactions: Any) -> AnalysisSummary | None:
    """Analyze transactions with a default TransactionAnalyzer."""
    return TransactionAnalyzer().analyze(transactions)

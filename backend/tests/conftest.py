"""Pytest fixtures and configuration."""

from __future__ import annotations

import os
from typing import Any

import pytest

# Set environment variables before importing app modules
os.environ["LOG_LEVEL"] = "DEBUG"


@pytest.fixture
def sample_transactions() -> list[dict[str, Any]]:
    """One month of UPI transactions, all valid."""
    return [
        {"id": "T1", "type": "credit", "amount": 5000, "to": "Salary", "category": "income", "date": "2025-01-01"},
        {"id": "T2", "type": "debit", "amount": 200, "to": "Swiggy", "category": "food", "date": "2025-01-02"},
        {"id": "T3", "type": "debit", "amount": 100, "to": "Swiggy", "category": "food", "date": "2025-01-03"},
    ]


@pytest.fixture
def mixed_transactions() -> list[Any]:
    """Valid transactions interleaved with malformed entries."""
    return [
        {"id": "T1", "type": "debit", "amount": 450, "to": "Rahul", "category": "food", "date": "2025-01-04"},
        None,
        {"id": "T2", "type": "refund", "amount": 300, "to": "Amazon", "category": "shopping", "date": "2025-01-05"},
        {"id": "T3", "type": "credit", "amount": "500", "to": "Priya", "category": "transfer", "date": "2025-01-06"},
        {"id": "T4", "type": "debit", "amount": -20, "to": "Rahul", "category": "food", "date": "2025-01-07"},
        {"id": "T5", "type": "credit", "amount": 1200, "to": "Priya", "category": "transfer", "date": "2025-01-08"},
        {"id": "T6", "type": "debit", "to": "Ola", "category": "travel", "date": "2025-01-09"},
        {"id": "T7", "type": "debit", "amount": 350, "to": "Ola", "category": "travel", "date": "2025-01-10"},
    ]

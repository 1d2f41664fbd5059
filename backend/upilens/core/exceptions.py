"""Custom exceptions for the UPILens application."""

from __future__ import annotations


class UpiLensError(Exception):
    """Base exception for all UPILens errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigError(UpiLensError):
    """Raised when configuration values are missing or invalid."""

    pass

"""Core exception class carrying a structured ErrorDetail."""

from __future__ import annotations

from typing import Any

from smart_speller.error_handling.error_models import ErrorDetail


class SpellerError(Exception):
    """Exception raised for every structured smart_speller failure.

    The wrapped ErrorDetail is the single source of truth; the accessors below
    exist so callers can log or branch without reaching into the model.
    """

    def __init__(self, error_detail: ErrorDetail) -> None:
        super().__init__(error_detail.message)
        self.error_detail = error_detail

    def __str__(self) -> str:
        return f"[{self.error_detail.error_code.value}] {self.error_detail.message}"

    @property
    def correlation_id(self) -> str:
        return str(self.error_detail.correlation_id)

    @property
    def error_code(self) -> str:
        return self.error_detail.error_code.value

    @property
    def service(self) -> str:
        return self.error_detail.service

    @property
    def operation(self) -> str:
        return self.error_detail.operation

    @property
    def details(self) -> dict[str, Any]:
        return dict(self.error_detail.details)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the error for structured logging or JSON output."""
        return self.error_detail.model_dump(mode="json")

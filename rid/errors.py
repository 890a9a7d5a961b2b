"""
Error hierarchy for the rid package.

RidError is the base for all typed errors. Only two situations raise:
the OS random source failing (unrecoverable) and a caller asking for an
impossible shape (bad length, numeric id too short to format).

Validators never raise; a malformed or tampered identifier is ``False``.
"""

from __future__ import annotations

from typing import Any, Optional


class RidError(Exception):
    """Base rid error. All typed errors inherit from this."""

    error_code: str = "rid_error"

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        details: Optional[Any] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.field = field
        self.details = details

    def to_dict(self) -> dict:
        payload: dict = {"error": self.message, "code": self.error_code}
        if self.field is not None:
            payload["field"] = self.field
        if self.details is not None:
            payload["details"] = self.details
        return payload


class EntropySourceFailure(RidError):
    """The operating system's secure random source failed.

    Callers must treat this as unrecoverable: no identifier is returned and
    retrying is not expected to help.
    """

    error_code = "entropy_source_failure"


class InvalidLengthError(RidError, ValueError):
    error_code = "invalid_length"


class InvalidNumericIdError(RidError, ValueError):
    error_code = "invalid_numeric_id"

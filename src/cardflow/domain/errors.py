"""Workflow error kinds.

Precondition failures carry one of the :class:`ErrorCode` values and are
reported to callers as a failed ``ServiceResult``; callers branch on the
code.  :class:`ConfigurationError` is reserved for malformed boards and
is never user-triggerable.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    """Error codes surfaced in ``ServiceError.code``."""

    NOT_FOUND = "NOT_FOUND"
    CARD_BLOCKED = "CARD_BLOCKED"
    CARD_FINISHED = "CARD_FINISHED"
    INVALID_STATE = "INVALID_STATE"
    VALIDATION_FAILED = "VALIDATION_FAILED"


class WorkflowViolation(Exception):
    """A workflow precondition failed; no write has happened."""

    def __init__(self, code: ErrorCode, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(message)


class ConfigurationError(Exception):
    """Board metadata is missing a required INITIAL or CANCEL column."""

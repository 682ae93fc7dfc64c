"""
ConflictError - Raised when a write violates a uniqueness rule.
Maps to: HTTP 409 Conflict
"""

from typing import Optional

from konektz.domain.exceptions.base import DomainError


class ConflictError(DomainError):
    default_message = "Email or username already in use"

    def __init__(self, message: str | None = None, constraint: Optional[str] = None):
        super().__init__(message)
        self.constraint = constraint

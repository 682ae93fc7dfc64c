"""
StorageUnavailableError - Raised when the database cannot be reached.
Maps to: HTTP 503 Service Unavailable
"""

from konektz.domain.exceptions.base import DomainError


class StorageUnavailableError(DomainError):
    default_message = "Database unavailable"

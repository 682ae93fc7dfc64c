"""
DomainError - Common base for every error in the taxonomy.

Anything raised as a DomainError is an expected, operational failure.
Anything else reaching the presentation layer is a programmer fault.
"""


class DomainError(Exception):
    """Base class for operational errors."""

    default_message = "Domain error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

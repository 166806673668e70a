"""Base exception for the unistore package.

Every error raised by unistore itself derives from UnistoreException.
Errors coming from the filesystem or the object-store client are not
subclasses of it: adapters let them through unchanged.
"""

from typing import Any


class UnistoreException(Exception):
    """Base exception for all unistore errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. backend, reason).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

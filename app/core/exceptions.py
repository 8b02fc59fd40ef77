"""
Exception hierarchy for the midia catalog.

Service operations raise these; the web layer translates them into error
responses through the handlers registered in ``app.main``.
"""

from typing import Any, Dict, List, Optional, Union

from app.dependencies.error_code import ErrorCode


class CatalogError(Exception):
    """Base exception for catalog errors."""

    error_code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return f"[{self.error_code.value}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code.value,
            "details": self.details,
        }


class ValidationError(CatalogError):
    """Input failed one or more preconditions. Carries every violated rule."""

    error_code = ErrorCode.VALIDATION_ERROR

    def __init__(self, messages: Union[str, List[str]]) -> None:
        if isinstance(messages, str):
            messages = [messages]
        self.messages = list(messages)
        super().__init__(" ".join(self.messages), details={"messages": self.messages})


class NotFoundError(CatalogError):
    """A requested record, association or page does not exist."""

    error_code = ErrorCode.RESOURCE_NOT_FOUND

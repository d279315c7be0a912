"""
Unified exception hierarchy for iconseek.

The search engine itself never raises: absence of a match is reported
as ``None`` or by omission. These exceptions belong to the layers around
it (settings, catalog loading, CLI).
"""

import uuid
from datetime import datetime, timezone
from typing import Dict, Any, Optional, List


class IconseekError(Exception):
    """
    Base error for iconseek.

    Features:
    1. Structured serialization
    2. Rich context
    3. Resolution suggestions
    4. Unique ID for tracking
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ) -> None:
        self.id: str = uuid.uuid4().hex
        self.timestamp: datetime = datetime.now(timezone.utc)
        self.message: str = message
        self.code: str = code or self.__class__.__name__
        self.context: Dict[str, Any] = context or {}
        self.cause: Optional[Exception] = cause
        self.suggestions: List[str] = []
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to a dictionary.

        Returns:
            {
                "error_id": "hex32chars",
                "code": "NotFoundError",
                "message": "Catalog file not found",
                "timestamp": "2024-01-20T10:30:00Z",
                "context": {...}
            }
        """
        result: Dict[str, Any] = {
            "error_id": self.id,
            "code": self.code,
            "message": self.message,
            "timestamp": self.timestamp.isoformat().replace("+00:00", "Z"),
            "context": self.context,
        }

        if self.cause:
            result["cause"] = {"type": type(self.cause).__name__, "message": str(self.cause)}

        if self.suggestions:
            result["suggestions"] = self.suggestions

        return result

    def add_suggestion(self, suggestion: str) -> None:
        """
        Add a resolution suggestion to the error.

        Empty values and duplicates are ignored.

        Example:
            error = NotFoundError("Catalog file not found")
            error.add_suggestion("Save the /collections response to a JSON file first")
        """
        if not suggestion or not isinstance(suggestion, str):
            return

        if suggestion not in self.suggestions:
            self.suggestions.append(suggestion)

    def is_retryable(self) -> bool:
        """Whether retrying the same operation could succeed."""
        return False


class ConfigurationError(IconseekError):
    """Invalid settings file or setting value."""

    pass


class ValidationError(IconseekError):
    """
    Input data does not have the expected shape.

    Raised by catalog loading when a JSON payload cannot be parsed into
    the catalog models. The underlying parser error is kept in ``cause``.
    """

    pass


class NotFoundError(IconseekError):
    """A requested resource does not exist."""

    pass


class CatalogReadError(IconseekError):
    """A catalog file exists but could not be read (permissions, I/O)."""

    pass

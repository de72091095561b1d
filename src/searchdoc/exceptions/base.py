"""Root of the searchdoc exception hierarchy."""

from typing import Any, Mapping, Optional


class SearchdocError(Exception):
    """Base exception for all searchdoc errors.

    ``details`` holds the structured context (entity names, paths, keys)
    that the CLI appends to the message. ``exit_code`` is the process
    status the CLI exits with when the error aborts a command.
    """

    exit_code = 1

    def __init__(self, message: str, details: Optional[Mapping[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = {k: str(v) for k, v in (details or {}).items()}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({context})"

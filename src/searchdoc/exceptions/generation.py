"""Generation exceptions: main page lookup and artifact output."""

from pathlib import Path

from .base import SearchdocError


class GenerationError(SearchdocError):
    """Base class for errors raised while producing artifacts."""

    pass


class MainPageNotFoundError(GenerationError):
    """Raised when the configured main page is not among the rendered files."""

    def __init__(self, main_page: str):
        super().__init__(
            f"Could not find main page {main_page!r} among rendered files",
            details={"main_page": main_page},
        )
        self.main_page = main_page


class OutputError(GenerationError):
    """Raised when an artifact cannot be written."""

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Cannot write artifact: {path}",
            details={"path": str(path), "reason": reason},
        )
        self.path = path
        self.reason = reason

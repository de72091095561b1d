"""Exception hierarchy for searchdoc."""

from .base import SearchdocError
from .config import ConfigurationError, InvalidConfigError
from .entities import (
    DuplicateEntityError,
    EntityError,
    MissingFieldError,
    ParentCycleError,
    UnresolvedParentError,
)
from .generation import GenerationError, MainPageNotFoundError, OutputError

__all__ = [
    "SearchdocError",
    "ConfigurationError",
    "InvalidConfigError",
    "EntityError",
    "MissingFieldError",
    "DuplicateEntityError",
    "UnresolvedParentError",
    "ParentCycleError",
    "GenerationError",
    "MainPageNotFoundError",
    "OutputError",
]

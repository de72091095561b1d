"""Configuration loading and management for searchdoc.

Configuration sources are merged in priority order:
    1. Defaults (defined in GeneratorConfig)
    2. Global config (~/.searchdoc.toml)
    3. Project config (./searchdoc.toml)
    4. Explicit config file
    5. Environment variables (SEARCHDOC_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(output_dir="site", dry_run=True)
    >>> config.output_path.name
    'site'
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

_JS_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def default_title() -> str:
    """Build the site title from the hosting environment, if it provides one."""
    parts = [
        os.environ.get("HORO_PROJECT_NAME"),
        os.environ.get("HORO_BADGE_VERSION") or os.environ.get("HORO_PROJECT_VERSION"),
        "API documentation",
    ]
    return " ".join(p for p in parts if p)


@dataclass(frozen=True)
class GeneratorConfig:
    """Configuration for a generation run.

    Attributes:
        Output layout:
            output_dir: Directory the artifacts are written under
            tree_file: Navigation tree script, relative to output_dir
            search_index_file: Search index module, relative to output_dir
            tree_variable: Global variable the tree script assigns
            files_label: Label of the synthetic group holding the file tree

        Site:
            title: Site title
            main_page: Relative name of the file used as the index page

        Run control:
            dry_run: Build everything but write nothing
            verbosity: Logging verbosity level
            log_file: Optional file that also receives log records
    """

    # Output layout
    output_dir: str = "doc"
    tree_file: str = "panel/tree.js"
    search_index_file: str = "js/search-index.js"
    tree_variable: str = "tree"
    files_label: str = "files"

    # Site
    title: str = field(default_factory=default_title)
    main_page: Optional[str] = None

    # Run control
    dry_run: bool = False
    verbosity: Verbosity = "normal"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.output_dir:
            raise InvalidConfigError("output_dir", self.output_dir, "must not be empty")

        for key in ("tree_file", "search_index_file"):
            value = getattr(self, key)
            if not value:
                raise InvalidConfigError(key, value, "must not be empty")
            pure = PurePosixPath(value)
            if pure.is_absolute() or ".." in pure.parts:
                raise InvalidConfigError(key, value, "must be relative to output_dir")

        if self.tree_file == self.search_index_file:
            raise InvalidConfigError(
                "search_index_file", self.search_index_file, "must differ from tree_file"
            )

        if not _JS_IDENTIFIER.match(self.tree_variable):
            raise InvalidConfigError(
                "tree_variable", self.tree_variable, "must be a JavaScript identifier"
            )

        if not self.files_label:
            raise InvalidConfigError("files_label", self.files_label, "must not be empty")

        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "expected quiet, normal or verbose"
            )

    @property
    def output_path(self) -> Path:
        """Output directory as a Path."""
        return Path(self.output_dir)

    @property
    def tree_path(self) -> Path:
        """Location of the navigation tree script."""
        return self.output_path / self.tree_file

    @property
    def search_index_path(self) -> Path:
        """Location of the search index module."""
        return self.output_path / self.search_index_file


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> GeneratorConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options do not mask file values.

    Returns:
        Validated GeneratorConfig instance

    Raises:
        ConfigurationError: If a config file is invalid, missing, or names
            an unknown setting
        InvalidConfigError: If a value fails validation
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / ".searchdoc.toml"
    if global_config.exists():
        merged.update(_load_section(global_config, "global config"))

    project_config = Path.cwd() / "searchdoc.toml"
    if project_config.exists():
        merged.update(_load_section(project_config, "project config"))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_section(config_file, "config file"))

    merged.update(_load_env_vars())

    # Verbosity flags arrive from the CLI as booleans
    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"

    merged.update({k: v for k, v in overrides.items() if v is not None})

    unknown = sorted(set(merged) - set(GeneratorConfig.__dataclass_fields__))
    if unknown:
        raise ConfigurationError(
            f"Unknown configuration keys: {', '.join(unknown)}",
            details={"keys": ", ".join(unknown)},
        )

    return GeneratorConfig(**merged)


def _load_section(path: Path, label: str) -> dict[str, Any]:
    """Read a TOML file, accepting either top-level keys or a [searchdoc] table."""
    try:
        data = _load_toml_file(path)
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Invalid {label} '{path}': {e}")

    section = data.get("searchdoc", data)
    if not isinstance(section, dict):
        raise ConfigurationError(f"Invalid {label} '{path}': [searchdoc] must be a table")
    return dict(section)


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from SEARCHDOC_* environment variables.

    Supported environment variables:
        SEARCHDOC_OUTPUT_DIR: str
        SEARCHDOC_TREE_FILE: str
        SEARCHDOC_SEARCH_INDEX_FILE: str
        SEARCHDOC_TREE_VARIABLE: str
        SEARCHDOC_FILES_LABEL: str
        SEARCHDOC_TITLE: str
        SEARCHDOC_MAIN_PAGE: str
        SEARCHDOC_DRY_RUN: bool (true/false/1/0)
        SEARCHDOC_VERBOSITY: quiet/normal/verbose
        SEARCHDOC_LOG_FILE: str

    Returns:
        Dict of field_name -> parsed_value for any SEARCHDOC_* vars found.
    """
    type_hints = get_type_hints(GeneratorConfig)

    result: dict[str, Any] = {}

    for field_name in GeneratorConfig.__dataclass_fields__:
        env_key = f"SEARCHDOC_{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(field_name, env_value, f"{env_key}: {e}")
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Returns:
        Parsed value or None if the type is not supported

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    # String (including Literal types like Verbosity)
    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If neither tomllib nor tomli is available
        Exception: If TOML parsing fails
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)

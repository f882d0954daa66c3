"""docs-config configuration.

Build settings loaded from environment variables with DOCSCONFIG_ prefix.
The defaults describe the website checkout layout, so a plain
``docsconfig`` run needs no configuration at all.

Example:
    >>> from docsconfig.core.config import get_settings
    >>> settings = get_settings(log_level="DEBUG")
    >>> settings.log_level
    'DEBUG'
    >>> settings.concurrency
    1
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Build settings.

    Loads from environment variables with DOCSCONFIG_ prefix. Relative
    paths are resolved against ``root``.

    Example:
        >>> from pathlib import Path
        >>> from docsconfig.core.config import Settings
        >>> s = Settings(root=Path("/site"))
        >>> s.resolve(s.output_path).as_posix()
        '/site/src/assets/config.json'
        >>> s.extractor_command
        'documentation'
    """

    model_config = SettingsConfigDict(
        env_prefix="DOCSCONFIG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Layout
    root: Path = Field(default_factory=Path.cwd, description="Website checkout directory")
    manifest_path: Path = Field(
        default=Path("turf/documentation.yml"),
        description="Table-of-contents manifest",
    )
    packages_glob: str = Field(
        default="turf/packages/turf-*/package.json",
        description="Glob locating every package descriptor",
    )
    output_path: Path = Field(
        default=Path("src/assets/config.json"),
        description="Where the configuration file is written",
    )

    # Extraction
    extractor_command: str = Field(default="documentation", description="documentation.js executable")
    concurrency: int = Field(default=1, ge=1, le=64, description="Extractor calls in flight")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: Literal["console", "plain"] = Field(default="console", description="Log format: console or plain")

    def resolve(self, path: Path | str) -> Path:
        """Resolve a configured path against the checkout root."""
        path = Path(path)
        return path if path.is_absolute() else self.root / path

    @property
    def packages_pattern(self) -> str:
        """Absolute glob pattern for package descriptors."""
        return str(self.resolve(self.packages_glob))


def get_settings(**overrides: Any) -> Settings:
    """Get settings with optional overrides.

    Example:
        >>> from docsconfig.core.config import get_settings
        >>> s = get_settings(concurrency=2)
        >>> s.concurrency
        2
    """
    return Settings(**overrides)

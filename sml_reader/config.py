"""Configuration schema for sml-reader.

Defines the sml-reader.yml configuration file format using Pydantic models.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

from sml_reader.ingestion.reader import MAX_RECURSION_DEPTH


class LoggingConfig(BaseModel):
    """Logging output configuration."""

    verbose: bool = False  # DEBUG for sml_reader loggers
    json_output: bool = Field(default=False, alias="json")  # JSON lines on stderr

    model_config = {"frozen": True, "populate_by_name": True}


class SMLReaderConfig(BaseModel):
    """
    Root configuration for sml-reader.

    This is the schema for sml-reader.yml files.

    Example:
        input: ./sml
        max_depth: 100

        logging:
          verbose: false
          json: false
    """

    input: str
    max_depth: int = MAX_RECURSION_DEPTH
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}

    @field_validator("max_depth")
    @classmethod
    def validate_max_depth(cls, v: int) -> int:
        """Validate max_depth allows at least the root folder."""
        if v < 1:
            raise ValueError(f"max_depth must be at least 1, got {v}")
        return v

    @property
    def input_path(self) -> Path:
        """Get input as Path."""
        return Path(self.input)

    @classmethod
    def from_yaml(cls, content: str) -> SMLReaderConfig:
        """Parse config from YAML string."""
        data = yaml.safe_load(content)
        return cls.model_validate(data)

    @classmethod
    def from_file(cls, path: Path | str) -> SMLReaderConfig:
        """Load config from a YAML file.

        A relative `input` is taken relative to the folder holding the file,
        so the same config reads the same SML folder from any working directory.
        """
        path = Path(path).resolve()
        config = cls.from_yaml(path.read_text(encoding="utf-8"))
        if config.input_path.is_absolute():
            return config
        return config.model_copy(update={"input": str(path.parent / config.input)})


# Config file discovery
CONFIG_FILENAMES = [
    "sml-reader.yml",
    "sml-reader.yaml",
    ".sml-reader.yml",
    ".sml-reader.yaml",
]


def find_config(start_dir: Path | str | None = None) -> Path | None:
    """
    Find the nearest sml-reader config file.

    Looks in start_dir (default: current working directory), then in each
    parent up to the filesystem root. Within one folder CONFIG_FILENAMES
    order decides.

    Returns:
        Path to config file, or None if not found
    """
    start = Path(start_dir if start_dir is not None else Path.cwd()).resolve()
    for folder in (start, *start.parents):
        for filename in CONFIG_FILENAMES:
            candidate = folder / filename
            if candidate.is_file():
                return candidate
    return None


def load_config(path: Path | str | None = None) -> SMLReaderConfig:
    """
    Load configuration from file.

    If path is not provided, the nearest config found by find_config is
    used. The returned config has `input` resolved against the config
    file location.

    Raises:
        FileNotFoundError: If no config file found
        ValueError: If config is invalid
    """
    if path is None:
        path = find_config()
        if path is None:
            raise FileNotFoundError(
                "No sml-reader.yml found. Create one or specify path with --config"
            )
    else:
        path = Path(path)

    return SMLReaderConfig.from_file(path)

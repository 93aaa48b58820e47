"""Generator configuration."""

import getpass
import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from mvp_creator.components.types import SearchStrategy
from mvp_creator.constants import (
    BASE_PACKAGES,
    DEFAULT_CONFIG_FILE,
    DEFAULT_DATE_FORMAT,
    DEFAULT_PREFERENCES_FILE,
    DEFAULT_SEARCH_DEPTH,
    DEFAULT_SOURCE_ROOT_MARKER,
    DEFAULT_VIEW_SUPERCLASS,
)
from mvp_creator.errors import ConfigError

logger = logging.getLogger(__name__)


def default_author() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return "unknown"


class GeneratorConfig(BaseModel):
    """Settings for generation runs."""

    model_config = ConfigDict(extra="forbid")

    author: str = Field(default_factory=default_author, description="Author shown in file headers")
    date_format: str = Field(default=DEFAULT_DATE_FORMAT, description="strftime pattern for the header date")
    source_root_marker: str = Field(default=DEFAULT_SOURCE_ROOT_MARKER, description="Path segment marking the source root")
    search_strategy: SearchStrategy = Field(default=SearchStrategy.ANCESTORS, description="How existing base interfaces are located")
    search_depth: int = Field(default=DEFAULT_SEARCH_DEPTH, gt=0, description="Parent levels searched for base interfaces")
    base_packages: list[str] = Field(default_factory=lambda: list(BASE_PACKAGES), description="Candidate base packages")
    view_superclass: str = Field(default=DEFAULT_VIEW_SUPERCLASS, description="Superclass of the generated view")
    preferences_file: str = Field(default=DEFAULT_PREFERENCES_FILE, description="Preferences file name in the project root")


def load_config(config_path: Optional[Path] = None) -> GeneratorConfig:
    """Load configuration from YAML.

    Without an explicit path, ``.mvp-creator.yaml`` in the working directory is
    used when present, otherwise defaults apply.

    Raises:
        ConfigError: If the file is missing, unparsable or holds invalid values
    """
    if config_path is None:
        candidate = Path.cwd() / DEFAULT_CONFIG_FILE
        if not candidate.exists():
            return GeneratorConfig()
        config_path = candidate

    config_path = Path(config_path)
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration in {config_path} must be a mapping")

    try:
        config = GeneratorConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}: {e}") from e

    logger.debug("Loaded configuration from %s", config_path)
    return config

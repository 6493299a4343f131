"""Configuration loader for the literate documentation generator.

Loads settings from configs/config.yaml and provides typed access
to each configuration section via dataclasses.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "configs" / "config.yaml"

_DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class SourceConfig:
    """Where to find the source files to document."""

    directory: str = "src"
    extension: str = ".clj"


@dataclass
class OutputConfig:
    """Where to write the generated pages."""

    directory: str = "lit-doc"


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"
    format: str = _DEFAULT_LOG_FORMAT
    file: Optional[str] = None


@dataclass
class AppConfig:
    """Top-level application configuration."""

    source: SourceConfig = field(default_factory=SourceConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """Load application configuration from a YAML file.

    Falls back to defaults for a missing file and for any missing
    value.

    Args:
        config_path: Path to the YAML config file. If None, uses the
            default path at configs/config.yaml.

    Returns:
        A fully populated AppConfig instance.

    Raises:
        yaml.YAMLError: If the config file contains invalid YAML.
    """
    path = Path(config_path) if config_path else _DEFAULT_CONFIG_PATH

    if not path.exists():
        logger.warning("Config file not found at %s, using defaults", path)
        return AppConfig()

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    logger.info("Loaded configuration from %s", path)

    source_data = raw.get("source") or {}
    source_config = SourceConfig(
        directory=source_data.get("directory", "src"),
        extension=source_data.get("extension", ".clj"),
    )

    output_data = raw.get("output") or {}
    output_config = OutputConfig(
        directory=output_data.get("directory", "lit-doc"),
    )

    logging_data = raw.get("logging") or {}
    logging_config = LoggingConfig(
        level=logging_data.get("level", "INFO"),
        format=logging_data.get("format", _DEFAULT_LOG_FORMAT),
        file=logging_data.get("file"),
    )

    return AppConfig(
        source=source_config,
        output=output_config,
        logging=logging_config,
    )

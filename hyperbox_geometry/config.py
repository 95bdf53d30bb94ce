"""
Configuration schema for hyperbox.

Rendering precision and logging level, loaded from YAML and validated at
construction (frozen dataclasses).
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Union
import yaml

from hyperbox_geometry.logging import LogEvent, create_logger

logger = create_logger("config")

VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class RenderConfig:
    """Text rendering configuration."""

    decimals: int = 2

    def __post_init__(self):
        """Validate render configuration."""
        if isinstance(self.decimals, bool) or not isinstance(self.decimals, int):
            raise ValueError(
                f"decimals must be an integer, got {self.decimals!r}"
            )
        if not 0 <= self.decimals <= 12:
            raise ValueError(
                f"decimals must be in [0, 12], got {self.decimals}"
            )


@dataclass(frozen=True)
class LoggingConfig:
    """Structured logging configuration."""

    level: str = "WARNING"

    def __post_init__(self):
        """Normalize and validate level name."""
        level = str(self.level).upper()
        if level not in VALID_LEVELS:
            raise ValueError(
                f"Invalid logging level: {self.level}. "
                f"Must be one of {VALID_LEVELS}"
            )
        object.__setattr__(self, 'level', level)


@dataclass(frozen=True)
class HyperboxConfig:
    """
    Main configuration.

    Immutable after construction (frozen dataclass).
    """

    render: RenderConfig = field(default_factory=RenderConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> "HyperboxConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            render:
              decimals: 2

            logging:
              level: "INFO"

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the YAML is invalid or a value fails validation
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {yaml_path}: {e}")

        if not isinstance(data, dict):
            raise ValueError(
                f"Config root must be a mapping, got {type(data).__name__}"
            )

        try:
            render = RenderConfig(**(data.get("render") or {}))
            logging_config = LoggingConfig(**(data.get("logging") or {}))
        except TypeError as e:
            raise ValueError(f"Invalid section in {yaml_path}: {e}")

        config = cls(render=render, logging=logging_config)
        logger.info(
            event=LogEvent.CONFIG_LOADED,
            message=f"Loaded configuration from {path}",
            metadata={'decimals': render.decimals, 'level': logging_config.level}
        )
        return config

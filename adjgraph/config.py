"""Configuration Management with Pydantic.

This module implements configuration models using Pydantic for parsing and
validation of YAML configuration files with environment variable overrides.
When no configuration file is present, built-in defaults are used.
"""

import os
import threading
from enum import Enum
from pathlib import Path

import structlog
import yaml
from pydantic import BaseModel, Field

# Initialize logger
logger = structlog.get_logger(__name__)

# Constants
DEFAULT_CONFIG_FILES = ("adjgraph.yaml", "adjgraph.yml")


class CycleStrategy(Enum):
    """Depth-first search flavour used by cycle detection.

    Attributes:
        RECURSIVE: Recursive DFS, bounded by the interpreter recursion limit
        ITERATIVE: DFS driven by an explicit stack
    """

    RECURSIVE = "recursive"
    ITERATIVE = "iterative"


class PathMode(Enum):
    """Termination check used by path existence.

    Attributes:
        CANONICAL: Standard breadth-first reachability
        LEGACY: Compares the target against the previously dequeued vertex
            while scanning its neighbors, reproducing the historical results
    """

    CANONICAL = "canonical"
    LEGACY = "legacy"


class LoggingConfig(BaseModel):
    """Logging configuration settings.

    Attributes:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Render JSON lines instead of colored console output
    """

    level: str = Field(
        default="INFO",
        description="Logging level",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    json_logs: bool = Field(
        default=True,
        description="Use JSON renderer",
    )

    model_config = {"str_strip_whitespace": True}


class TraversalConfig(BaseModel):
    """Traversal settings for callers to pass to the graph algorithms.

    Attributes:
        cycle_strategy: DFS flavour used by has_cycle
        path_mode: Termination check used by has_path
    """

    cycle_strategy: CycleStrategy = Field(
        default=CycleStrategy.ITERATIVE,
        description="DFS flavour for cycle detection",
    )
    path_mode: PathMode = Field(
        default=PathMode.CANONICAL,
        description="Termination check for path existence",
    )


class AdjGraphConfig(BaseModel):
    """Main configuration combining all settings.

    Attributes:
        logging: Logging configuration
        traversal: Traversal settings
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    traversal: TraversalConfig = Field(default_factory=TraversalConfig)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "AdjGraphConfig":
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file

        Returns:
            Parsed and validated AdjGraphConfig instance

        Raises:
            FileNotFoundError: If configuration file doesn't exist
            ValueError: If configuration is invalid
        """
        config_path = Path(path)

        if not config_path.exists():
            msg = f"Configuration file not found: {config_path}"
            raise FileNotFoundError(msg)

        logger.info("loading_configuration", path=str(config_path))

        try:
            with config_path.open() as f:
                config_data = yaml.safe_load(f)

            if not config_data:
                msg = "Configuration file is empty"
                raise ValueError(msg)

            config = cls.from_dict(config_data)
        except yaml.YAMLError as e:
            logger.exception("yaml_parse_error", error=str(e), path=str(config_path))
            msg = f"Invalid YAML in configuration file: {e}"
            raise ValueError(msg) from e
        else:
            logger.info(
                "configuration_loaded",
                cycle_strategy=config.traversal.cycle_strategy.value,
                path_mode=config.traversal.path_mode.value,
                logging_level=config.logging.level,
            )

            return config

    @classmethod
    def from_dict(cls, config_data: dict) -> "AdjGraphConfig":
        """Build configuration from a dictionary, applying environment overrides.

        Args:
            config_data: Base configuration dictionary

        Returns:
            Parsed and validated AdjGraphConfig instance
        """
        return cls(**cls._apply_env_overrides(config_data))

    @classmethod
    def _apply_env_overrides(cls, config_data: dict) -> dict:
        """Apply environment variable overrides to configuration.

        Environment variables follow the pattern: ADJGRAPH_<KEY>
        Example: ADJGRAPH_LOGGING_LEVEL, ADJGRAPH_PATH_MODE

        Args:
            config_data: Base configuration dictionary

        Returns:
            Configuration dictionary with environment overrides applied
        """
        env_overrides = {
            ("logging", "level"): "ADJGRAPH_LOGGING_LEVEL",
            ("logging", "json_logs"): "ADJGRAPH_LOGGING_JSON",
            ("traversal", "cycle_strategy"): "ADJGRAPH_CYCLE_STRATEGY",
            ("traversal", "path_mode"): "ADJGRAPH_PATH_MODE",
        }

        for path, env_var in env_overrides.items():
            value = os.environ.get(env_var)
            if value is not None:
                # Navigate to nested config section
                current = config_data
                for key in path[:-1]:
                    if key not in current:
                        current[key] = {}
                    current = current[key]

                final_key = path[-1]
                if env_var.endswith("_JSON"):
                    value = value.lower() in ("true", "1", "yes")
                elif env_var.endswith("_LEVEL"):
                    value = value.upper()
                else:
                    value = value.lower()

                current[final_key] = value
                logger.debug(
                    "env_override_applied",
                    env_var=env_var,
                    config_path=".".join(path),
                )

        return config_data

    def validate_config(self) -> list[str]:
        """Validate configuration and return list of warnings.

        Returns:
            List of validation warning messages (empty if no warnings)
        """
        warnings = []

        if self.traversal.cycle_strategy == CycleStrategy.RECURSIVE:
            warnings.append(
                "Recursive cycle detection is limited by the recursion limit - "
                "long paths may raise RecursionError",
            )

        if self.traversal.path_mode == PathMode.LEGACY:
            warnings.append(
                "Legacy path mode can report wrong results for some graphs - "
                "use only for compatibility",
            )

        if self.logging.level == "DEBUG":
            warnings.append("DEBUG logging emits one event per edge mutation")

        return warnings


class ConfigManager:
    """Configuration manager using singleton pattern."""

    _instance: AdjGraphConfig | None = None
    _init_lock: threading.Lock = threading.Lock()

    @classmethod
    def load_config(cls, config_path: str | Path | None = None) -> AdjGraphConfig:
        """Load configuration from file, or defaults when no file exists.

        Args:
            config_path: Path to configuration file. If None, looks for
                        adjgraph.yaml or adjgraph.yml in current directory and
                        falls back to built-in defaults.

        Returns:
            Loaded AdjGraphConfig instance

        Raises:
            FileNotFoundError: If an explicit config file is not found
            ValueError: If config file is invalid
        """
        if config_path is None:
            for default_name in DEFAULT_CONFIG_FILES:
                default_path = Path(default_name)
                if default_path.exists():
                    config_path = default_path
                    break
            else:
                logger.debug("no_configuration_file_using_defaults")
                return AdjGraphConfig.from_dict({})

        return AdjGraphConfig.from_yaml(config_path)

    @classmethod
    def get_config(
        cls,
        config_path: str | Path | None = None,
        reload: bool = False,
    ) -> AdjGraphConfig:
        """Get configuration instance (singleton pattern).

        Uses double-checked locking so concurrent first calls load only once.

        Args:
            config_path: Path to configuration file. Only used on first call or when reload=True.
            reload: If True, force reload configuration from file.

        Returns:
            AdjGraphConfig instance
        """
        if cls._instance is not None and not reload:
            return cls._instance

        with cls._init_lock:
            if cls._instance is None or reload:
                cls._instance = cls.load_config(config_path)

            return cls._instance

    @classmethod
    def reset_config(cls) -> None:
        """Reset the configuration instance."""
        cls._instance = None


def load_config(config_path: str | Path | None = None) -> AdjGraphConfig:
    """Load configuration from file."""
    return ConfigManager.load_config(config_path)


def get_config(config_path: str | Path | None = None, reload: bool = False) -> AdjGraphConfig:
    """Get configuration instance (singleton pattern)."""
    return ConfigManager.get_config(config_path, reload)


def reset_config() -> None:
    """Reset the configuration instance."""
    ConfigManager.reset_config()


__all__ = [
    "AdjGraphConfig",
    "CycleStrategy",
    "LoggingConfig",
    "PathMode",
    "TraversalConfig",
    "get_config",
    "load_config",
    "reset_config",
]

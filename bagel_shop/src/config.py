"""
Configuration management for the bagel shop.

Handles loading, saving, and validating configuration settings.
"""

import os
import shutil
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from dotenv import load_dotenv

from .constants import (
    DEFAULT_BASKET_CAPACITY,
    DEFAULT_SHOP_NAME,
    ENV_BASKET_CAPACITY,
    ENV_LOG_LEVEL,
    LOG_LEVELS,
)
from .errors import InvalidArgumentError
from ..utils.logger_setup import LoggerManager, get_logger

logger = get_logger(__name__)


@dataclass
class BasketConfig:
    """Basket configuration."""
    default_capacity: int = DEFAULT_BASKET_CAPACITY

    def __post_init__(self):
        """Apply the capacity override from the environment, if any."""
        capacity_str = os.getenv(ENV_BASKET_CAPACITY)
        if capacity_str:
            try:
                self.default_capacity = int(capacity_str)
            except ValueError:
                raise InvalidArgumentError(
                    f"{ENV_BASKET_CAPACITY} must be an integer, got {capacity_str!r}"
                ) from None


@dataclass
class ReceiptConfig:
    """Receipt rendering configuration."""
    shop_name: str = DEFAULT_SHOP_NAME
    width: int = 40
    show_timestamp: bool = True


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    log_file: Optional[str] = None

    def __post_init__(self):
        self.level = os.getenv(ENV_LOG_LEVEL, self.level)


@dataclass
class Config:
    """Main configuration class."""
    basket: BasketConfig = field(default_factory=BasketConfig)
    receipt: ReceiptConfig = field(default_factory=ReceiptConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Config':
        """Create Config from dictionary."""
        return cls(
            basket=BasketConfig(**(data.get('basket') or {})),
            receipt=ReceiptConfig(**(data.get('receipt') or {})),
            logging=LoggingConfig(**(data.get('logging') or {})),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert Config to dictionary."""
        return {
            'basket': asdict(self.basket),
            'receipt': asdict(self.receipt),
            'logging': asdict(self.logging),
        }


class ConfigManager:
    """Manages configuration loading, saving, and resolution."""

    DEFAULT_CONFIG_DIR = ".bagel-shop"
    DEFAULT_CONFIG_FILE = "config.yaml"

    def __init__(self, project_root: Optional[str] = None):
        """
        Initialize ConfigManager.

        Args:
            project_root: Directory holding the config directory. If None, uses current directory.
        """
        self.project_root = Path(project_root or os.getcwd())
        self.config_dir = self.project_root / self.DEFAULT_CONFIG_DIR
        self.config_file = self.config_dir / self.DEFAULT_CONFIG_FILE
        self.env_file = self.project_root / ".env"

    def load(self) -> Config:
        """
        Load configuration from file or create default.

        A .env file in the project root is loaded first; variables already
        set in the environment win.

        Returns:
            Loaded or default configuration
        """
        if self.env_file.exists():
            load_dotenv(self.env_file)

        if self.config_file.exists():
            return self._load_from_file()
        return Config()

    def _load_from_file(self) -> Config:
        """Load configuration from YAML file."""
        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}

            data = self._resolve_env_vars(data)

            return Config.from_dict(data)
        except (yaml.YAMLError, TypeError, AttributeError) as e:
            logger.warning(f"Error loading config file: {e}")
            logger.info("Using default configuration.")
            return Config()

    def save(self, config: Config):
        """
        Save configuration to file.

        Args:
            config: Configuration to save
        """
        self.config_dir.mkdir(parents=True, exist_ok=True)

        with open(self.config_file, 'w', encoding='utf-8') as f:
            yaml.dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)

    def init_config(self, overwrite: bool = False) -> bool:
        """
        Initialize configuration file with defaults.

        Args:
            overwrite: Whether to overwrite existing config

        Returns:
            True if config was created/updated, False otherwise
        """
        if self.config_file.exists() and not overwrite:
            logger.info(f"Configuration already exists at: {self.config_file}")
            return False

        if overwrite and self.config_file.exists():
            self.config_file.unlink()
            logger.info("Removed existing configuration file")

        self.save(Config())

        logger.info(f"Configuration initialized at: {self.config_file}")
        return True

    def _resolve_env_vars(self, data: Any) -> Any:
        """
        Recursively resolve environment variables in configuration.

        Supports ${VAR_NAME} syntax.
        """
        if isinstance(data, dict):
            return {k: self._resolve_env_vars(v) for k, v in data.items()}
        elif isinstance(data, list):
            return [self._resolve_env_vars(item) for item in data]
        elif isinstance(data, str):
            if data.startswith('${') and data.endswith('}'):
                var_name = data[2:-1]
                return os.environ.get(var_name, data)
        return data

    def validate(self, config: Config) -> List[str]:
        """
        Validate configuration.

        Args:
            config: Configuration to validate

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        capacity = config.basket.default_capacity
        if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity < 0:
            errors.append(f"Invalid basket capacity: {capacity}")

        if not isinstance(config.receipt.shop_name, str) or not config.receipt.shop_name.strip():
            errors.append("Shop name cannot be empty")

        if not isinstance(config.receipt.width, int) or config.receipt.width < 32:
            errors.append(f"Receipt width must be at least 32: {config.receipt.width}")

        level = config.logging.level
        if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
            errors.append(f"Invalid log level: {config.logging.level}")

        return errors

    def cleanup(self) -> bool:
        """
        Remove configuration directory and all its contents.

        Returns:
            True if cleanup was successful, False otherwise
        """
        if not self.config_dir.exists():
            logger.info(f"No configuration found at: {self.config_dir}")
            return False

        # Release file handlers that may point into the config directory
        LoggerManager.reset()

        try:
            shutil.rmtree(self.config_dir)
        except OSError as e:
            logger.error(f"Error removing configuration: {e}")
            return False
        return True

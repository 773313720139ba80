"""
Environment-aware logging management for the Discord Game Muter bot.

Log levels follow the deployment environment (``ENVIRONMENT`` variable):

- Development: DEBUG and above
- Staging: INFO and above
- Production: WARNING and above

When the packaged ``logging.yaml`` is present it is applied through
``logging.config.dictConfig``; otherwise a console handler (plus an optional
file handler) is attached to the requested component logger.
"""

import logging
import logging.config
import os
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

DEFAULT_LOG_DIR = "logs"

NOISY_LOGGERS: List[str] = [
    "discord.voice_state",
    "discord.gateway",
    "discord.client",
    "discord.http",
]


class LogLevel(Enum):
    """Log level enumeration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Environment(Enum):
    """Deployment environment."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class LoggingManager:
    """Configures component loggers once per process with production controls."""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize logging manager.

        Args:
            config_path: Path to a YAML dictConfig file. Defaults to the
                ``logging.yaml`` shipped inside the package.
        """
        if config_path is None:
            config_path = Path(__file__).parent.parent / "logging.yaml"

        self.config_path = config_path
        self._config_cache: Optional[Dict[str, Any]] = None
        self._applied = False
        self._environment = self._detect_environment()
        self._production_mode = self._environment == Environment.PRODUCTION

    def _detect_environment(self) -> Environment:
        """Detect current environment from the ENVIRONMENT variable."""
        env = os.getenv("ENVIRONMENT", "development").lower()

        if env in ["prod", "production"]:
            return Environment.PRODUCTION
        elif env in ["staging", "stage"]:
            return Environment.STAGING
        else:
            return Environment.DEVELOPMENT

    def _load_yaml_config(self) -> Optional[Dict[str, Any]]:
        """Load and cache the YAML logging configuration."""
        if self._config_cache is not None:
            return self._config_cache

        if not self.config_path.exists():
            return None

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except (yaml.YAMLError, OSError) as e:
            logging.getLogger(__name__).warning(
                f"Failed to load YAML logging config {self.config_path}: {e}"
            )
            return None

        self._config_cache = config
        return config

    def _get_environment_log_level(self) -> str:
        """Get the default log level for the current environment."""
        if self._production_mode:
            return LogLevel.WARNING.value
        elif self._environment == Environment.STAGING:
            return LogLevel.INFO.value
        else:
            return LogLevel.DEBUG.value

    def _apply_production_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Raise application logger and file handler levels in production."""
        if not self._production_mode:
            return config

        env_log_level = self._get_environment_log_level()

        if "root" in config:
            config["root"]["level"] = env_log_level

        for logger_name, logger_config in config.get("loggers", {}).items():
            if logger_name in NOISY_LOGGERS:
                continue
            logger_config["level"] = env_log_level

        for handler_name, handler_config in config.get("handlers", {}).items():
            if "file" in handler_name and handler_config.get("level") == "DEBUG":
                handler_config["level"] = env_log_level

        return config

    def _apply_yaml_config(self, config: Dict[str, Any]) -> None:
        """Apply dictConfig once; later component lookups reuse it."""
        if self._applied:
            return

        config = self._apply_production_overrides(config)
        os.makedirs(DEFAULT_LOG_DIR, exist_ok=True)
        logging.config.dictConfig(config)
        self._applied = True

    def setup_logging(
        self,
        component_name: str,
        log_level: Optional[str] = None,
        log_file: Optional[str] = None,
        force_development: bool = False,
    ) -> logging.Logger:
        """
        Set up logging for a component with environment-aware configuration.

        Args:
            component_name: Logger name, e.g. ``session_registry``
            log_level: Override log level (default: environment level)
            log_file: File path used by the fallback configuration
            force_development: Ignore YAML config and production mode

        Returns:
            Configured logger instance
        """
        effective_production = self._production_mode and not force_development

        if log_level is None:
            log_level = self._get_environment_log_level()

        config = self._load_yaml_config()

        if config and not force_development:
            self._apply_yaml_config(config)
            logger = logging.getLogger(component_name)
            logger.setLevel(getattr(logging, log_level.upper()))
            self._suppress_noisy_loggers()
            return logger

        return self._setup_basic_logging(
            component_name, log_level, log_file, effective_production
        )

    def _setup_basic_logging(
        self,
        component_name: str,
        log_level: str,
        log_file: Optional[str],
        production_mode: bool,
    ) -> logging.Logger:
        """Attach console (and optional file) handlers to one logger."""
        logger = logging.getLogger(component_name)
        logger.setLevel(getattr(logging, log_level.upper()))
        logger.handlers.clear()

        if production_mode:
            formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        else:
            formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logger.level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if log_file:
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setLevel(
                logging.WARNING if production_mode else logging.DEBUG
            )
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        self._suppress_noisy_loggers()
        return logger

    def _suppress_noisy_loggers(self) -> None:
        """Keep discord.py gateway chatter at WARNING."""
        for logger_name in NOISY_LOGGERS:
            logging.getLogger(logger_name).setLevel(logging.WARNING)

    def get_environment(self) -> Environment:
        """Get current environment."""
        return self._environment

    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self._production_mode

    def set_production_mode(self, enabled: bool) -> None:
        """Manually set production mode."""
        self._production_mode = enabled
        self._environment = (
            Environment.PRODUCTION if enabled else Environment.DEVELOPMENT
        )

    def reload_config(self) -> None:
        """Drop the cached YAML so the next setup re-reads and re-applies it."""
        self._config_cache = None
        self._applied = False


_logging_manager = LoggingManager()


def setup_logging(
    component_name: str,
    log_level: Optional[str] = None,
    log_file: Optional[str] = None,
    force_development: bool = False,
) -> logging.Logger:
    """Set up logging for a component (module-level convenience)."""
    return _logging_manager.setup_logging(
        component_name, log_level, log_file, force_development
    )


def get_logger(component_name: str) -> logging.Logger:
    """Get a logger for a component."""
    return logging.getLogger(component_name)


def is_production() -> bool:
    """Check if running in production mode."""
    return _logging_manager.is_production()


def get_environment() -> Environment:
    """Get current environment."""
    return _logging_manager.get_environment()

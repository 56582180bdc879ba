"""
Bootstrap Module

Initializes the runtime before the main application starts: checks the
interpreter version, loads the configuration and sets up logging.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

from songlist.core.constants import LOG_FILENAME

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Configure basic logging before anything else
logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
logger = logging.getLogger(__name__)


class BootstrapError(Exception):
    """Exception raised during bootstrap process."""
    pass


class RuntimeBootstrap:
    """
    Handles the bootstrap process.

    This class is responsible for:
    - Python version validation
    - Configuration loading
    - Logging initialization
    """

    def __init__(self):
        self._initialized = False
        self._errors: list[str] = []
        self._warnings: list[str] = []
        self._file_handler: Optional[RotatingFileHandler] = None

    @property
    def is_initialized(self) -> bool:
        """Check if bootstrap has completed."""
        return self._initialized

    @property
    def errors(self) -> list[str]:
        return self._errors.copy()

    @property
    def warnings(self) -> list[str]:
        return self._warnings.copy()

    def bootstrap(self) -> bool:
        """
        Perform the bootstrap process.

        Returns:
            bool: True if bootstrap was successful.

        Raises:
            BootstrapError: If a critical error occurs during bootstrap.
        """
        if self._initialized:
            logger.debug("Bootstrap already completed")
            return True

        logger.debug("Starting runtime bootstrap...")

        try:
            self._configure_runtime()
            self._initialize_logging()

            self._initialized = True
            logger.info("Runtime bootstrap completed successfully")

            for warning in self._warnings:
                logger.warning(warning)

            return True

        except BootstrapError:
            raise
        except Exception as e:
            error_msg = f"Bootstrap failed: {e}"
            self._errors.append(error_msg)
            logger.error(error_msg)
            raise BootstrapError(error_msg) from e

    def _configure_runtime(self) -> None:
        """Validate the interpreter and resolve runtime paths."""
        from .runtime_config import get_runtime_config

        config = get_runtime_config()

        version_ok, version_msg = config.validate_python_version()
        if not version_ok:
            self._errors.append(version_msg)
            raise BootstrapError(version_msg)

        logger.debug(f"Data dir: {config.paths.data_dir}")

    def _initialize_logging(self) -> None:
        """Apply the configured log level and attach the rotating log file."""
        from songlist.core.config import get_config_manager
        from .runtime_config import get_logs_dir

        manager = get_config_manager()

        level_name = str(manager.get("logging.level", "INFO")).upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            self._warnings.append(f"Unknown log level '{level_name}', using INFO")
            level = logging.INFO
        logging.getLogger().setLevel(level)

        logs_dir = get_logs_dir()
        log_file = logs_dir / LOG_FILENAME

        try:
            logs_dir.mkdir(parents=True, exist_ok=True)

            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=int(manager.get("logging.max_bytes", 1024 * 1024)),
                backupCount=int(manager.get("logging.backup_count", 3)),
                encoding="utf-8",
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT))

            logging.getLogger().addHandler(file_handler)
            self._file_handler = file_handler

            logger.debug(f"Log file: {log_file}")

        except (OSError, ValueError) as e:
            self._warnings.append(f"Could not set up file logging: {e}")

    def shutdown(self) -> None:
        """Detach and close the log file handler."""
        if self._file_handler is not None:
            logging.getLogger().removeHandler(self._file_handler)
            self._file_handler.close()
            self._file_handler = None
        self._initialized = False


# Global bootstrap instance
_bootstrap: Optional[RuntimeBootstrap] = None


def get_bootstrap() -> RuntimeBootstrap:
    """Get the global bootstrap instance."""
    global _bootstrap
    if _bootstrap is None:
        _bootstrap = RuntimeBootstrap()
    return _bootstrap


def bootstrap() -> bool:
    """
    Perform the runtime bootstrap.

    This function should be called at the very start of the application
    before any other initialization.

    Raises:
        BootstrapError: If bootstrap fails.
    """
    return get_bootstrap().bootstrap()


def is_bootstrapped() -> bool:
    return get_bootstrap().is_initialized


def get_bootstrap_warnings() -> list[str]:
    return get_bootstrap().warnings

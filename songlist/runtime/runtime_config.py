"""
Runtime Configuration Module

Resolves the per-application directories SongList reads and writes:
the data directory (location file), the configuration directory and the
logs directory. The data directory follows the platform convention for
application data and can be overridden with ``SONGLIST_DATA_DIR``.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from songlist.core.constants import APP_NAME

DATA_DIR_ENV = "SONGLIST_DATA_DIR"


@dataclass
class RuntimePaths:
    """Container for all runtime-related paths."""

    # Base application directory
    app_root: Path

    # Application data paths
    data_dir: Path
    config_dir: Path
    logs_dir: Path


@dataclass
class RuntimeConfig:
    """
    Configuration for the running application.

    Detects whether the application is frozen and where its
    per-user data lives.
    """

    is_frozen: bool = False  # True if running from PyInstaller/cx_Freeze

    # Version requirements
    min_python_version: tuple[int, int] = (3, 10)

    paths: Optional[RuntimePaths] = None

    @classmethod
    def detect(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        platform: Optional[str] = None,
    ) -> RuntimeConfig:
        """
        Detect the current runtime configuration.

        Args:
            environ: Environment mapping (defaults to ``os.environ``).
            platform: Platform name (defaults to ``sys.platform``).

        Returns:
            RuntimeConfig: Detected configuration for the current environment.
        """
        config = cls()
        config.is_frozen = getattr(sys, 'frozen', False)

        if config.is_frozen:
            app_root = Path(os.path.abspath(sys.executable)).parent
        else:
            app_root = Path(__file__).parent.parent

        data_dir = cls._resolve_data_dir(
            os.environ if environ is None else environ,
            sys.platform if platform is None else platform,
        )
        config.paths = RuntimePaths(
            app_root=app_root,
            data_dir=data_dir,
            config_dir=data_dir / "config",
            logs_dir=data_dir / "logs",
        )
        return config

    @staticmethod
    def _resolve_data_dir(environ: Mapping[str, str], platform: str) -> Path:
        """Per-user application data directory for the given platform."""
        override = environ.get(DATA_DIR_ENV)
        if override:
            return Path(override).expanduser()

        home = Path(environ.get("HOME") or Path.home())
        if platform == "win32":
            base = Path(environ.get("APPDATA") or home / "AppData" / "Roaming")
        elif platform == "darwin":
            base = home / "Library" / "Application Support"
        else:
            base = Path(environ.get("XDG_DATA_HOME") or home / ".local" / "share")
        return base / APP_NAME

    def validate_python_version(self) -> tuple[bool, str]:
        """
        Validate that the Python version meets requirements.

        Returns:
            tuple: (is_valid, message)
        """
        current = (sys.version_info.major, sys.version_info.minor)
        required = self.min_python_version

        if current >= required:
            return True, f"Python {current[0]}.{current[1]} meets requirement >= {required[0]}.{required[1]}"
        return False, f"Python {current[0]}.{current[1]} does not meet requirement >= {required[0]}.{required[1]}"

    def get_runtime_info(self) -> dict[str, str]:
        """
        Get information about the current runtime for diagnostics.

        Returns:
            dict: Runtime information.
        """
        return {
            "python_version": f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}",
            "python_executable": sys.executable,
            "is_frozen": str(self.is_frozen),
            "platform": sys.platform,
            "app_root": str(self.paths.app_root) if self.paths else "unknown",
            "data_dir": str(self.paths.data_dir) if self.paths else "unknown",
            "config_dir": str(self.paths.config_dir) if self.paths else "unknown",
            "logs_dir": str(self.paths.logs_dir) if self.paths else "unknown",
        }


# Global runtime configuration instance
_runtime_config: Optional[RuntimeConfig] = None


def get_runtime_config() -> RuntimeConfig:
    """Get the global runtime configuration, detecting it if necessary."""
    global _runtime_config
    if _runtime_config is None:
        _runtime_config = RuntimeConfig.detect()
    return _runtime_config


def get_data_dir() -> Path:
    """Get the data directory (holds the location file)."""
    return get_runtime_config().paths.data_dir


def get_config_dir() -> Path:
    """Get the configuration directory."""
    return get_runtime_config().paths.config_dir


def get_logs_dir() -> Path:
    """Get the logs directory."""
    return get_runtime_config().paths.logs_dir

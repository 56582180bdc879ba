"""
Runtime Module

Handles runtime configuration:
- Per-user data, config and logs directories
- Bootstrap (version check, configuration, logging)

Usage:
    # Bootstrap the runtime (call this first)
    from songlist.runtime import bootstrap
    bootstrap()

    # Where the location file lives
    from songlist.runtime import get_data_dir
    data_dir = get_data_dir()
"""

from .runtime_config import (
    RuntimeConfig,
    RuntimePaths,
    get_runtime_config,
    get_data_dir,
    get_config_dir,
    get_logs_dir,
)

from .bootstrap import (
    BootstrapError,
    RuntimeBootstrap,
    get_bootstrap,
    bootstrap,
    is_bootstrapped,
    get_bootstrap_warnings,
)


__all__ = [
    # Runtime configuration
    "RuntimeConfig",
    "RuntimePaths",
    "get_runtime_config",
    "get_data_dir",
    "get_config_dir",
    "get_logs_dir",

    # Bootstrap
    "BootstrapError",
    "RuntimeBootstrap",
    "get_bootstrap",
    "bootstrap",
    "is_bootstrapped",
    "get_bootstrap_warnings",
]

"""
SongList - Application Entry Point

Bootstraps the runtime and launches the Qt application, or runs one of
the headless commands.

Usage:
    python -m songlist
    python -m songlist --view combo
    python -m songlist --list --root ~/Music/Projects
    python -m songlist --open "Enter Sandman"

Or via the installed command:
    songlist
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence


def main(view_mode: Optional[str] = None, initial_root: Optional[Path] = None) -> int:
    """
    Main entry point for the GUI.

    Returns:
        int: Exit code (0 for success, non-zero for errors).
    """
    # Step 1: Bootstrap the runtime environment
    try:
        from songlist.runtime.bootstrap import bootstrap, BootstrapError
        bootstrap()
    except BootstrapError as e:
        print(f"Failed to initialize runtime: {e}", file=sys.stderr)
        return 1

    # Step 2: Launch the Qt application
    try:
        from songlist.ui.main_window import run_app
    except ImportError as e:
        print(f"Failed to import UI components: {e}", file=sys.stderr)
        print("\nThis application requires PySide6 and PySide6-Fluent-Widgets.")
        print("Please install them: pip install PySide6 PySide6-Fluent-Widgets")
        return 1

    return run_app(view_mode, initial_root=initial_root)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="songlist",
        description="Browse song project folders and open them in REAPER"
    )

    parser.add_argument(
        "--version", "-v",
        action="store_true",
        help="Show version information"
    )

    parser.add_argument(
        "--diagnose",
        action="store_true",
        help="Show runtime paths and settings"
    )

    parser.add_argument(
        "--view",
        choices=["table", "combo"],
        help="GUI variant to show (overrides ui.view_mode)"
    )

    parser.add_argument(
        "--root",
        metavar="PATH",
        help="Set (and remember) the project location before listing or opening"
    )

    parser.add_argument(
        "--list",
        action="store_true",
        help="List the projects in the current location"
    )

    parser.add_argument(
        "--filter",
        metavar="TEXT",
        default="",
        help="Only list projects whose folder name contains TEXT"
    )

    parser.add_argument(
        "--open",
        metavar="NAME",
        help="Open the first project whose folder name contains NAME"
    )

    return parser


def _diagnose() -> int:
    from songlist.core.config import get_config_manager
    from songlist.runtime.runtime_config import get_runtime_config

    info = get_runtime_config().get_runtime_info()
    print("Runtime Information:")
    for key, value in info.items():
        print(f"  {key}: {value}")

    manager = get_config_manager()
    print("\nSettings:")
    print(f"  config_file: {manager.config_path}")
    for section, values in manager.get_all().items():
        for key, value in values.items():
            print(f"  {section}.{key}: {value}")
    return 0


def _run_catalog_command(args: argparse.Namespace) -> int:
    from songlist.application.project_catalog import (
        CatalogRules,
        LaunchService,
        ProjectCatalog,
        filter_entries,
    )
    from songlist.core.config import get_config_manager
    from songlist.domain.exceptions import LaunchError

    manager = get_config_manager()
    catalog = ProjectCatalog(rules=CatalogRules.from_config(manager))

    root = Path(args.root).expanduser() if args.root else None
    state = catalog.initialize(root)
    if state.warning:
        print(f"Warning: {state.warning}", file=sys.stderr)

    if state.message:
        print(state.message)
        return 0 if state.is_set and not args.open else 1

    if args.open:
        matches = filter_entries(state.entries, args.open)
        if not matches:
            print(f"No project matches: {args.open}", file=sys.stderr)
            return 1

        entry = matches[0]
        launcher = LaunchService.from_config(manager)
        try:
            count = launcher.open_project(entry, state.root)
        except LaunchError as e:
            print(f"Open failed: {e}", file=sys.stderr)
            return 1

        if count == 0:
            print(f"Nothing to open: {entry.display_name}")
        else:
            print(f"Opened {count} file(s) for {entry.display_name}")
        return 0

    for entry in filter_entries(state.entries, args.filter):
        print(entry.display_name)
    return 0


def run_cli(argv: Optional[Sequence[str]] = None) -> int:
    """
    Parse the command line and dispatch.

    Returns:
        int: Exit code.
    """
    args = build_parser().parse_args(argv)

    if args.version:
        from songlist import __version__
        print(f"SongList v{__version__}")
        return 0

    if args.diagnose:
        return _diagnose()

    if args.list or args.open:
        from songlist.runtime.bootstrap import bootstrap, BootstrapError
        try:
            bootstrap()
        except BootstrapError as e:
            print(f"Failed to initialize runtime: {e}", file=sys.stderr)
            return 1
        return _run_catalog_command(args)

    initial_root = None
    if args.root:
        initial_root = Path(args.root).expanduser()
        if not initial_root.is_dir():
            print(f"Location does not exist: {args.root}", file=sys.stderr)
            return 1

    # Default: launch GUI
    return main(args.view, initial_root=initial_root)


if __name__ == "__main__":
    sys.exit(run_cli())

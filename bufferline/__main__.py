#!/usr/bin/env python3
"""Command line entry point."""

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version as pkg_version
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from bufferline.application.tabline_service import render_tabline
from bufferline.config import load_options
from bufferline.core.options import OPTION_CHOICES
from bufferline.infrastructure.workspace import Workspace
from bufferline.interface.tui_themes import DEFAULT_THEME, THEMES


def build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(prog="bufferline", description="Document strip for the terminal")
    parser.add_argument("paths", nargs="*", help="Files to open")
    parser.add_argument("--config", type=Path, default=None, help="YAML config file (default: ~/.bufferline_config.yaml)")
    parser.add_argument("--theme", choices=sorted(THEMES), default=None, help=f"Color theme (default: {DEFAULT_THEME})")
    parser.add_argument("--numbers", choices=sorted(OPTION_CHOICES["numbers"]), default=None)
    parser.add_argument("--number-style", choices=sorted(OPTION_CHOICES["number_style"]), default=None)
    parser.add_argument("--separator-style", choices=sorted(OPTION_CHOICES["separator_style"]), default=None)
    parser.add_argument("--view", choices=sorted(OPTION_CHOICES["view"]), default=None)
    parser.add_argument("--max-name-length", type=int, default=None)
    parser.add_argument("--mappings", action="store_true", default=None, help="Bind Alt+1..Alt+0 to items")
    parser.add_argument("--no-close-icons", action="store_true", help="Hide per-item close controls")
    parser.add_argument("--render-once", action="store_true", help="Print the tabline text and exit")
    parser.add_argument("--columns", type=int, default=None, help="Width used with --render-once")
    parser.add_argument("--log-file", type=Path, default=None)
    parser.add_argument("--version", action="store_true", help="Show version and exit")
    return parser


def _overrides(args: argparse.Namespace) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for key in ("theme", "numbers", "number_style", "separator_style", "view", "max_name_length", "mappings"):
        value = getattr(args, key, None)
        if value is not None:
            overrides[key] = value
    if getattr(args, "no_close_icons", False):
        overrides["show_close_icons"] = False
    return overrides


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.version:
        try:
            print(pkg_version("bufferline"))
        except PackageNotFoundError:
            print("0.0.0")
        return 0
    if args.log_file:
        logging.basicConfig(filename=str(args.log_file), level=logging.DEBUG)

    options = load_options(_overrides(args), path=args.config)
    if args.render_once:
        workspace = Workspace()
        for path in args.paths:
            workspace.open_document(path)
        columns = args.columns if args.columns is not None else 80
        print(render_tabline(options, workspace, workspace, columns=columns).text)
        return 0

    from bufferline.interface.tui_app import cmd_tui

    return cmd_tui(args, options)


if __name__ == "__main__":
    sys.exit(main())

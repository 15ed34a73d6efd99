#!/usr/bin/env python3
"""
tmuxl CLI - fixed tmux pane layouts.

Usage:
    tmuxl                                   re-apply the layout for the current panes
    tmuxl N                                 same as "tmuxl adjust N"
    tmuxl adjust [N] [--dry-run] [--json]
    tmuxl layout N --width=<w> --height=<h> [--json]
    tmuxl config [show|init|path|set]
    tmuxl --version
    tmuxl --help

Nothing is printed on success unless --json or --verbose is given.
"""

import argparse
import json
import logging
import re
import sys
from typing import Optional

from tmuxl import (
    LayoutAdjuster,
    TmuxlError,
    __version__,
    build_tree,
    compute_and_serialize,
    leaves,
    load_config,
    save_config,
    get_config_path,
    TmuxlConfig,
)
from tmuxl.config import init_config
from tmuxl.providers import TmuxProvider


def setup_logging(level: str, verbose: bool = False) -> None:
    """Configure root logging for the command line."""
    if verbose:
        level = "DEBUG"
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="tmuxl: %(levelname)s [%(name)s] %(message)s",
    )


def expand_shorthand(argv: list[str]) -> list[str]:
    """Treat `tmuxl N` as `tmuxl adjust N`."""
    for i, arg in enumerate(argv):
        if arg in ("-v", "--verbose"):
            continue
        if re.fullmatch(r"-?\d+", arg):
            return argv[:i] + ["adjust"] + argv[i:]
        break
    return argv


def cmd_adjust(args, config: TmuxlConfig):
    """Grow the current window to N panes and apply the layout."""
    provider = TmuxProvider(
        binary=config.tmux.binary,
        cool_off=config.tmux.cool_off,
        timeout=config.tmux.timeout,
    )
    try:
        if config.tmux.attach and not args.dry_run:
            provider.attach()
        if not provider.is_available():
            print("Error: Not in a tmux session", file=sys.stderr)
            return 1

        adjuster = LayoutAdjuster(provider, config.layout)
        result = adjuster.adjust(args.n, dry_run=args.dry_run)

        # Stay quiet on success: an attached client may own the terminal now
        if args.json:
            print(json.dumps(result.to_dict(), indent=2))
        elif args.verbose:
            print(f"Status: {result.to_dict()['status']} "
                  f"({result.current} -> {result.desired} panes, "
                  f"{result.width}x{result.height})")
            print(f"  layout: {result.layout}")
        return 0

    except TmuxlError as e:
        if args.json:
            print(json.dumps({"status": "error", "message": str(e)}))
        else:
            print(f"Error: {e}", file=sys.stderr)
        return 1

    finally:
        provider.wait()


def cmd_layout(args, config: TmuxlConfig):
    """Print the layout string for N panes without touching tmux."""
    try:
        layout = compute_and_serialize(args.width, args.height, args.n)
    except TmuxlError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        tree = build_tree(args.width, args.height, args.n)
        output = {
            "layout": layout,
            "panes": [
                {
                    "id": leaf.id,
                    "x": leaf.rect.x,
                    "y": leaf.rect.y,
                    "width": leaf.rect.width,
                    "height": leaf.rect.height,
                }
                for leaf in leaves(tree)
            ],
        }
        print(json.dumps(output, indent=2))
    else:
        print(layout)
    return 0


def cmd_config(args, config: TmuxlConfig):
    """Configuration management."""
    config_path = get_config_path()

    if args.config_action == "path":
        print(config_path)

    elif args.config_action == "show":
        print(json.dumps(config.to_dict(), indent=2))

    elif args.config_action == "init":
        if config_path.exists() and not args.force:
            print(f"Config already exists: {config_path}")
            print("Use --force to overwrite")
        else:
            init_config(config_path)
            print(f"Created: {config_path}")

    elif args.config_action == "set":
        if not args.key or args.value is None:
            print("Usage: tmuxl config set --key <key> --value <value>")
            print("Examples:")
            print("  tmuxl config set --key tmux.cool_off --value 0.1")
            print("  tmuxl config set --key layout.focus_bottom_left --value false")
            return 1

        # Edit what the file holds, not the env-merged settings
        file_config = load_config(config_path, apply_env=False)
        try:
            value = file_config.set_value(args.key, args.value)
        except KeyError:
            print(f"Unknown key: {args.key}")
            return 1
        except ValueError as e:
            print(f"Invalid value for {args.key}: {e}")
            return 1

        save_config(file_config, config_path)
        print(f"Set {args.key} = {value}")

    else:
        print("Usage: tmuxl config [show|init|path|set]")

    return 0


def main(argv: Optional[list[str]] = None):
    """CLI entry point."""
    config = load_config()

    parser = argparse.ArgumentParser(
        prog="tmuxl",
        description="Fixed tmux pane layouts for 1 to 5 panes"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command")

    # adjust
    p_adjust = subparsers.add_parser("adjust", help="Grow the window to N panes")
    p_adjust.add_argument("n", type=int, nargs="?", default=None,
                          help="Pane count, 1-5 (default: keep the current count)")
    p_adjust.add_argument("-n", "--dry-run", action="store_true", help="Don't apply changes")
    p_adjust.add_argument("-j", "--json", action="store_true", help="JSON output")

    # layout
    p_layout = subparsers.add_parser("layout", help="Print the layout string for N panes")
    p_layout.add_argument("n", type=int, help="Pane count, 1-5")
    p_layout.add_argument("-W", "--width", type=int, required=True, help="Window width")
    p_layout.add_argument("-H", "--height", type=int, required=True, help="Window height")
    p_layout.add_argument("-j", "--json", action="store_true", help="JSON output")

    # config
    p_config = subparsers.add_parser("config", help="Configuration management")
    p_config.add_argument("config_action", nargs="?", default="show",
                          choices=["show", "init", "path", "set"])
    p_config.add_argument("--key", help="Config key (e.g., tmux.cool_off)")
    p_config.add_argument("--value", help="Config value")
    p_config.add_argument("--force", action="store_true", help="Force overwrite")

    args = parser.parse_args(expand_shorthand(sys.argv[1:] if argv is None else argv))
    setup_logging(config.log_level, args.verbose)

    if args.command == "adjust":
        return cmd_adjust(args, config)
    elif args.command == "layout":
        return cmd_layout(args, config)
    elif args.command == "config":
        return cmd_config(args, config)
    else:
        args.n, args.dry_run, args.json = None, False, False
        return cmd_adjust(args, config)


if __name__ == "__main__":
    sys.exit(main())

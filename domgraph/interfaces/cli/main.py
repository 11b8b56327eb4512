#!/usr/bin/env python3
"""
Main CLI entry point with argument parser and command dispatch.
"""

from __future__ import annotations

import argparse

from domgraph.__version__ import __version__
from domgraph.interfaces.cli.commands.inspect_graph import cmd_inspect
from domgraph.interfaces.cli.commands.transform import cmd_transform


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    p = argparse.ArgumentParser(
        prog="domgraph",
        description="domgraph - collapse layered monorepo project graphs into domain graphs",
        epilog="Examples:\n"
        "  domgraph transform graph.json -o domains.json   # Write the domain graph\n"
        "  domgraph transform graph.json > domains.json    # Same, via stdout\n"
        "  domgraph inspect graph.json                     # List layer libraries and domains",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    sub = p.add_subparsers(
        dest="cmd",
        title="commands",
        description="Available commands (use 'domgraph <command> --help' for command-specific help)",
    )

    # transform: Layer graph -> domain graph
    s = sub.add_parser("transform", help="Collapse layer libraries into domain nodes")
    s.add_argument("input", help="project graph JSON file")
    s.add_argument("-o", "--output", help="write the result here instead of stdout")
    s.add_argument("--config", help="YAML config file (layer_names, e2e_prefix, log_level)")
    s.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    s.set_defaults(func=cmd_transform)

    # inspect: Show classification only
    s = sub.add_parser("inspect", help="Show layer libraries and the domain each belongs to")
    s.add_argument("input", help="project graph JSON file")
    s.add_argument("--config", help="YAML config file (layer_names, e2e_prefix, log_level)")
    s.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    s.set_defaults(func=cmd_inspect)

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # If no command provided, show help
    if args.cmd is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())

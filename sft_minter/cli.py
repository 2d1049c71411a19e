"""
sft-minter command line.

Usage:
    sft-minter issue-collection-token
    sft-minter set-roles
    sft-minter create
"""

import argparse
import logging
import sys
from typing import Callable, Optional

import click

from sft_minter import __version__, flows

USAGE_EXIT_CODE = 9

COMMANDS: dict[str, Callable[[], "flows.FlowResult"]] = {
    "issue-collection-token": flows.issue_collection_token,
    "set-roles":              flows.set_local_roles,
    "create":                 flows.create,
}


def _commands_listing(title: str) -> str:
    rule = "=" * len(title)
    return "\n".join([rule, title, rule, *COMMANDS])


def dispatch(subcommand: Optional[str]) -> int:
    """
    Run the flow for `subcommand` and return the exit code.

    9 on help or an unknown/missing subcommand, 1 when the flow failed,
    0 otherwise (an operator abort is not a failure).
    """
    if subcommand in ("-h", "--help"):
        click.echo(_commands_listing("Available commands:"))
        return USAGE_EXIT_CODE

    flow = COMMANDS.get(subcommand) if subcommand else None
    if flow is None:
        click.echo(_commands_listing("Please provide a proper command. Available commands:"))
        return USAGE_EXIT_CODE

    result = flow()
    return 1 if result is flows.FlowResult.FAILED else 0


def build_parser() -> argparse.ArgumentParser:
    # -h/--help belong to the subcommand, see dispatch()
    parser = argparse.ArgumentParser(
        prog="sft-minter",
        description="Issue, configure and mint SFT collections on Algorand",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    args, rest = build_parser().parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    sys.exit(dispatch(rest[0] if rest else None))


if __name__ == "__main__":
    main()

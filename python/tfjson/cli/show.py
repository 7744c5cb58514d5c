#!/usr/bin/env python3
"""
tfjson/cli/show.py

CLI offering three subcommands for JSON documents written by 'terraform show -json':

  1) "check": Decode a document and run the format-version gate.
  2) "canonical": Print the canonical re-encoding of a document.
  3) "summary": Print resource change counts by action for a plan, or the
     resource count for a state.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Dict, Optional, Sequence, Union

from tfjson.errors import TfJsonError
from tfjson.models.config import Config
from tfjson.models.plan import Plan
from tfjson.models.settings import DecoderSettings
from tfjson.models.state import State
from tfjson.utils.documents import dump_document, load_config, load_plan, load_state

logger = logging.getLogger(__name__)

Document = Union[Plan, State, Config]

_LOADERS: Dict[str, Callable[..., Document]] = {
    "plan": load_plan,
    "state": load_state,
    "config": load_config,
}


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def _read_document(args: argparse.Namespace) -> Document:
    """Read and decode the file named on the command line, exiting on failure."""
    try:
        with open(args.file, "rb") as f:
            raw = f.read()
    except OSError as exc:
        print(f"Error: cannot read {args.file}: {exc}", file=sys.stderr)
        sys.exit(1)

    settings = DecoderSettings()
    if args.max_nesting_depth is not None:
        settings = DecoderSettings(max_nesting_depth=args.max_nesting_depth)

    try:
        return _LOADERS[args.kind](raw, settings=settings, validate=args.command != "canonical")
    except TfJsonError as exc:
        print(f"Error: {args.file}: {exc}", file=sys.stderr)
        sys.exit(1)


def _run_check(args: argparse.Namespace) -> None:
    """Handle the 'check' subcommand."""
    _read_document(args)
    print(f"{args.file}: ok ({args.kind})")


def _run_canonical(args: argparse.Namespace) -> None:
    """Handle the 'canonical' subcommand."""
    print(dump_document(_read_document(args)))


def _run_summary(args: argparse.Namespace) -> None:
    """Handle the 'summary' subcommand."""
    document = _read_document(args)

    if isinstance(document, Plan):
        grouped = document.changes_by_action()
        if not grouped:
            print("No resource changes.")
            return
        for action, changes in sorted(grouped.items()):
            print(f"{action}: {len(changes)}")
            for rc in changes:
                print(f"  {rc.address}")
    elif isinstance(document, State):
        print(f"Resources: {document.resource_count()}")
    else:
        resources = list(document.root_module.iter_resources()) if document.root_module else []
        print(f"Providers: {len(document.provider_config or {})}")
        print(f"Resources: {len(resources)}")


def main(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entry point for checking and inspecting tfjson documents."""
    parser = argparse.ArgumentParser(
        prog="tfjson-show",
        description="Decode, validate and inspect Terraform JSON plan/state/config documents.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    handlers = {
        "check": (_run_check, "Decode a document and verify its format version."),
        "canonical": (_run_canonical, "Print the canonical JSON re-encoding of a document."),
        "summary": (_run_summary, "Summarize resource changes or resources."),
    }
    for name, (handler, help_text) in handlers.items():
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("file", help="Path to the JSON document.")
        sub.add_argument(
            "--kind",
            choices=sorted(_LOADERS),
            default="plan",
            help="Document kind (default: plan).",
        )
        sub.add_argument(
            "--max-nesting-depth",
            type=_positive_int,
            default=None,
            help="Override TFJSON_MAX_NESTING_DEPTH for nested blocks.",
        )
        sub.set_defaults(handler=handler)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logger.debug("Running %s on %s", args.command, args.file)
    args.handler(args)


if __name__ == "__main__":
    main()

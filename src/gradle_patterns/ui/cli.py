# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import find_dotenv, load_dotenv

from gradle_patterns.adapters.policy_file import load_policy
from gradle_patterns.config import ConfigurationError, configure_logging, get_policy_source
from gradle_patterns.domain.resolve import resolve, summarize
from gradle_patterns.reporting import (
    decisions_to_dict,
    render_decision,
    render_summary,
    summary_to_dict,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from gradle_patterns.domain.policy import ConventionPolicy

log = logging.getLogger(__name__)


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--policy",
        type=str,
        help="Policy file (.toml or .json); defaults to $GRADLE_PATTERNS_POLICY",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print machine-readable JSON instead of text",
    )


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Resolve build conventions per unit")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log at DEBUG level (overrides $GRADLE_PATTERNS_LOG_LEVEL)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve_parser = subparsers.add_parser(
        "resolve",
        help="Show which conventions each unit receives",
    )
    _add_common_arguments(resolve_parser)
    resolve_parser.add_argument(
        "units",
        nargs="+",
        metavar="UNIT",
        help="Build unit paths, e.g. :core :legacy-module",
    )

    summary_parser = subparsers.add_parser("summary", help="Show the policy summary")
    _add_common_arguments(summary_parser)

    return parser.parse_args(list(argv))


def _load(args: argparse.Namespace) -> ConventionPolicy:
    source = get_policy_source(args.policy)
    return load_policy(source.resolve_path())


def _print_resolve(policy: ConventionPolicy, units: Sequence[str], *, as_json: bool) -> None:
    decisions = resolve(policy, units)
    summary = summarize(policy)
    if as_json:
        document = {
            "decisions": decisions_to_dict(decisions),
            "summary": summary_to_dict(summary),
        }
        print(json.dumps(document, indent=2))
        return
    for unit, decision in decisions.items():
        print(render_decision(unit, decision))
    print()
    print("\n".join(render_summary(summary)))


def _print_summary(policy: ConventionPolicy, *, as_json: bool) -> None:
    summary = summarize(policy)
    if as_json:
        print(json.dumps(summary_to_dict(summary), indent=2))
        return
    print("\n".join(render_summary(summary)))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    try:
        configure_logging(level=logging.DEBUG if parsed_args.verbose else None)
        policy = _load(parsed_args)
    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(2)

    try:
        if parsed_args.command == "resolve":
            _print_resolve(policy, parsed_args.units, as_json=parsed_args.json)
        elif parsed_args.command == "summary":
            _print_summary(policy, as_json=parsed_args.json)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except Exception:
        log.exception("Fatal error while resolving conventions")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point."""
    load_dotenv(find_dotenv(usecwd=True))
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()

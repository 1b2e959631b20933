import argparse
import logging
from pathlib import Path

from pydantic import ValidationError

from datastats.cli.commands.analyze import handle as handle_analyze
from datastats.config.resolution import resolve_analyze_settings, resolve_log_level
from datastats.config.workspace import load_workspace_context


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="datastats",
        description="Compute the mean and population standard deviation of a "
        "query,group,timestamp,value CSV file.",
    )
    # Optional here so a missing path is reported as a MissingArgument error
    parser.add_argument("path", nargs="?", help="CSV file to analyze")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="set logging level (default: WARNING)",
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=None,
        help="digits printed after the decimal point (default: 6)",
    )
    parser.add_argument(
        "--encoding",
        default=None,
        help="text encoding of the input file (default: utf-8)",
    )
    parser.add_argument(
        "--visuals",
        choices=["auto", "rich", "off"],
        default=None,
        help="header renderer on stderr: auto (rich on a terminal), rich, or off",
    )
    return parser


def main(argv=None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.precision is not None and args.precision < 0:
        parser.error("--precision must be >= 0")

    workspace_error = None
    try:
        workspace_context = load_workspace_context(Path.cwd())
    except (ValidationError, ValueError, TypeError) as exc:
        workspace_context = None
        workspace_error = exc

    workspace_level = (
        workspace_context.config.log_level if workspace_context else None
    )
    decision = resolve_log_level(args.log_level, workspace_level, fallback="WARNING")
    logging.basicConfig(level=decision.value, format="%(message)s")

    if workspace_error is not None:
        logging.getLogger(__name__).error(
            "Invalid workspace configuration: %s", workspace_error)
        raise SystemExit(2) from workspace_error

    try:
        settings = resolve_analyze_settings(
            cli_encoding=args.encoding,
            cli_precision=args.precision,
            cli_visuals=args.visuals,
            workspace=workspace_context,
        )
    except ValueError as exc:
        logging.getLogger(__name__).error("Invalid settings: %s", exc)
        raise SystemExit(2) from exc

    handle_analyze(args.path, settings)


if __name__ == "__main__":
    main()

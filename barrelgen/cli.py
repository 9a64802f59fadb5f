"""CLI entrypoints for barrelgen commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError
from .logging import configure_logging
from .orchestrator import Orchestrator
from .utils import relativize


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_root_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the project root (defaults to current directory).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="barrelgen",
        description="Validate and regenerate TypeScript barrel (index) files.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate_parser = subparsers.add_parser(
        "validate",
        help="Check that every declaring directory has a barrel and write a report.",
    )
    _add_verbose_option(validate_parser, suppress_default=True)
    _add_root_argument(validate_parser)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Regenerate barrel files as sorted type and value re-export blocks.",
    )
    _add_verbose_option(generate_parser, suppress_default=True)
    target = generate_parser.add_mutually_exclusive_group(required=True)
    target.add_argument(
        "barrel",
        nargs="?",
        help="Barrel file to preview; the regenerated content is printed, not written.",
    )
    target.add_argument(
        "--all",
        action="store_true",
        help="Regenerate every configured barrel and overwrite it in place.",
    )
    generate_parser.add_argument(
        "--root",
        default=".",
        help="Project root holding .barrelgen.yml (defaults to current directory).",
    )

    list_parser = subparsers.add_parser(
        "list",
        help="Print a single export block naming everything a module exports.",
    )
    _add_verbose_option(list_parser, suppress_default=True)
    list_parser.add_argument("module", help="Module file to list.")

    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Write a report of interfaces, type aliases, enums and functions.",
    )
    _add_verbose_option(analyze_parser, suppress_default=True)
    _add_root_argument(analyze_parser)

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP service exposing validation and barrel previews.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for barrelgen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    orchestrator = Orchestrator()

    try:
        if args.command == "validate":
            outcome = orchestrator.run_validate(args.path)
            print(f"Export validation complete. Found {len(outcome.result.issues)} issues.")
            print(f"Report saved to: {relativize(outcome.report_path)}")
        elif args.command == "generate":
            if args.all:
                results = orchestrator.run_generate_all(args.root)
                for result in results:
                    rel_path = relativize(result.barrel)
                    for warning in result.warnings:
                        print(f"Warning: {warning.message}")
                    if result.written:
                        print(f"Updated {rel_path}")
                    else:
                        print(f"No exports to process in {rel_path}")
            else:
                result = orchestrator.preview_barrel(args.barrel, root=args.root)
                for warning in result.warnings:
                    print(f"Warning: {warning.message}", file=sys.stderr)
                if result.content is not None:
                    sys.stdout.write(result.content)
        elif args.command == "list":
            sys.stdout.write(orchestrator.list_exports(args.module))
        elif args.command == "analyze":
            outcome = orchestrator.run_analyze(args.path)
            print(f"Analysis complete. Report saved to: {relativize(outcome.report_path)}")
        elif args.command == "serve":
            from .service import run_service

            run_service(host=args.host, port=args.port)
        else:  # pragma: no cover - argparse enforces choices
            parser.exit(1, "Unknown command\n")
    except (FileNotFoundError, NotADirectoryError) as exc:
        parser.exit(1, f"{exc}\n")
    except ConfigError as exc:
        parser.exit(1, f"barrelgen {args.command} failed: {exc}\n")


if __name__ == "__main__":
    main(sys.argv[1:])

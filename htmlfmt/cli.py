"""CLI entrypoints for htmlfmt commands."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from .config import ConfigError, HtmlFmtConfig, load_config
from .formatters import minify, prettify
from .logging import configure_logging
from .orchestrator import FormatOutcome, Orchestrator
from .validators import ValidationReport, validate

_STDIN = "-"


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


def _add_log_file_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    parser.add_argument(
        "--log-file",
        type=Path,
        default=argparse.SUPPRESS if suppress_default else None,
        help="Also write log records to this file.",
    )


def _add_path_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "path",
        nargs="?",
        default=_STDIN,
        help="HTML file to process (defaults to '-' for standard input).",
    )


def _add_config_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a .htmlfmt.yml file or the directory holding one.",
    )


def _add_output_mode_options(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--write",
        action="store_true",
        help="Rewrite the file in place instead of printing the result.",
    )
    group.add_argument(
        "--check",
        action="store_true",
        help="Exit with status 1 if the file would change; print nothing.",
    )
    group.add_argument(
        "--diff",
        action="store_true",
        help="Print a unified diff of the changes instead of the result.",
    )


def _non_negative_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError(f"must be zero or positive, got {parsed}")
    return parsed


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="htmlfmt",
        description="Pretty-print, minify and structurally validate HTML markup.",
    )
    _add_verbose_option(parser)
    _add_log_file_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    prettify_parser = subparsers.add_parser(
        "prettify",
        help="Reformat markup with one segment per line and consistent indentation.",
    )
    _add_verbose_option(prettify_parser, suppress_default=True)
    _add_log_file_option(prettify_parser, suppress_default=True)
    _add_path_argument(prettify_parser)
    _add_config_option(prettify_parser)
    _add_output_mode_options(prettify_parser)
    prettify_parser.add_argument(
        "--indent-size",
        type=_non_negative_int,
        default=None,
        help="Number of spaces per indentation level (default from config, else 2).",
    )
    prettify_parser.add_argument(
        "--tabs",
        dest="use_tabs",
        action="store_const",
        const=True,
        default=None,
        help="Indent with one tab per level instead of spaces.",
    )

    minify_parser = subparsers.add_parser(
        "minify",
        help="Strip comments and collapse insignificant whitespace.",
    )
    _add_verbose_option(minify_parser, suppress_default=True)
    _add_log_file_option(minify_parser, suppress_default=True)
    _add_path_argument(minify_parser)
    _add_config_option(minify_parser)
    _add_output_mode_options(minify_parser)
    minify_parser.add_argument(
        "--keep-comments",
        dest="remove_comments",
        action="store_const",
        const=False,
        default=None,
        help="Leave <!-- comments --> in the output.",
    )

    validate_parser = subparsers.add_parser(
        "validate",
        help="Report unbalanced, mismatched or unclosed tags.",
    )
    _add_verbose_option(validate_parser, suppress_default=True)
    _add_log_file_option(validate_parser, suppress_default=True)
    _add_path_argument(validate_parser)
    validate_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the validation report as JSON.",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP service exposing the three operations.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    _add_log_file_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for htmlfmt commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    if args.command in ("prettify", "minify"):
        _run_format(parser, args)
    elif args.command == "validate":
        _run_validate(parser, args)
    elif args.command == "serve":  # pragma: no cover - integration path
        from .service import run_service

        try:
            run_service(host=args.host, port=args.port)
        except RuntimeError as exc:
            parser.exit(1, f"htmlfmt serve failed: {exc}\n")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _run_format(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    write = bool(getattr(args, "write", False))
    check = bool(getattr(args, "check", False))
    show_diff = bool(getattr(args, "diff", False))

    if args.path == _STDIN:
        if write or check or show_diff:
            parser.exit(2, f"htmlfmt {args.command}: --write, --check and --diff need a file path\n")
        try:
            config = _load_overridden_config(args, Path.cwd())
        except ConfigError as exc:
            parser.exit(1, f"{exc}\n")
        text = sys.stdin.read()
        if args.command == "prettify":
            output = prettify(text, config.prettify.indent_size, config.prettify.use_tabs)
        else:
            output = minify(text, config.minify.remove_comments)
        print(output)
        return

    try:
        orchestrator = _build_orchestrator(args)
        outcome = _run_file_format(orchestrator, args, write=write)
    except (FileNotFoundError, ConfigError) as exc:
        parser.exit(1, f"{exc}\n")
    except OSError as exc:  # pragma: no cover - defensive guard
        parser.exit(1, f"htmlfmt {args.command} failed: {exc}\nRun with --verbose for more details.\n")

    if check:
        if outcome.changed:
            parser.exit(1, f"{_relativize(outcome.path)} would be reformatted\n")
        return
    if show_diff:
        if outcome.diff:
            sys.stdout.write(outcome.diff)
        return
    if write:
        rel_path = _relativize(outcome.path)
        print(f"Reformatted {rel_path}" if outcome.written else f"{rel_path} already formatted")
        return
    print(outcome.output)


def _run_file_format(
    orchestrator: Orchestrator, args: argparse.Namespace, *, write: bool
) -> FormatOutcome:
    if args.command == "prettify":
        return orchestrator.run_prettify(
            args.path,
            write=write,
            indent_size=args.indent_size,
            use_tabs=args.use_tabs,
        )
    return orchestrator.run_minify(
        args.path,
        write=write,
        remove_comments=args.remove_comments,
    )


def _run_validate(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    if args.path == _STDIN:
        label = "<stdin>"
        report = validate(sys.stdin.read())
    else:
        try:
            outcome = Orchestrator().run_validate(args.path)
        except FileNotFoundError as exc:
            parser.exit(1, f"{exc}\n")
        label = _relativize(outcome.path)
        report = outcome.report

    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        _print_report(label, report)

    if not report.valid:
        parser.exit(1)


def _print_report(label: str, report: ValidationReport) -> None:
    if report.valid:
        print(f"{label}: no structural errors found")
        return
    for issue in report.issues:
        print(f"{label}:{issue.line}: {issue.message}")
    print(f"{label}: {len(report.issues)} error(s)")


def _build_orchestrator(args: argparse.Namespace) -> Orchestrator:
    config_path: Optional[Path] = getattr(args, "config", None)
    if config_path is None:
        return Orchestrator()
    return Orchestrator(config=load_config(config_path))


def _load_overridden_config(args: argparse.Namespace, default_root: Path) -> HtmlFmtConfig:
    config_path: Optional[Path] = getattr(args, "config", None)
    config = load_config(config_path or default_root)
    if args.command == "prettify":
        return config.with_overrides(indent_size=args.indent_size, use_tabs=args.use_tabs)
    return config.with_overrides(remove_comments=args.remove_comments)


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])

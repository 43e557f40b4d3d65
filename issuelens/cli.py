"""CLI entrypoints for issuelens commands."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, Sequence

from .analyzers import CodeSmellScanner
from .config import ConfigError, load_config
from .extractors import ReferenceExtractor
from .logging import configure_logging, get_logger
from .models import KnownFile
from .prompting import PromptBuilder
from .structuring import ResponseStructurer


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


def _add_input_argument(parser: argparse.ArgumentParser, help_text: str) -> None:
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help=f"{help_text} Reads stdin when omitted or '-'.",
    )


def _add_known_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--known",
        action="append",
        default=[],
        metavar="PATH",
        help="File supplied to the AI as context; repeat for several files.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="issuelens",
        description="Extract file references from issues and structure AI-generated solutions.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--config",
        default=".",
        help="Path to .issuelens.yml or the directory holding it (defaults to current directory).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    references_parser = subparsers.add_parser(
        "references",
        help="List the files and lines mentioned in an issue body.",
    )
    _add_verbose_option(references_parser, suppress_default=True)
    _add_input_argument(references_parser, "Issue body file.")

    structure_parser = subparsers.add_parser(
        "structure",
        help="Split an AI answer into analysis, solution, best practices and code snippets.",
    )
    _add_verbose_option(structure_parser, suppress_default=True)
    _add_input_argument(structure_parser, "AI answer file.")
    _add_known_option(structure_parser)

    scan_parser = subparsers.add_parser(
        "scan",
        help="Report debug statements, TODO markers and security smells in a source file.",
    )
    _add_verbose_option(scan_parser, suppress_default=True)
    scan_parser.add_argument("path", help="Source file to scan.")

    prompt_parser = subparsers.add_parser(
        "prompt",
        help="Render the analysis prompt for an issue.",
    )
    _add_verbose_option(prompt_parser, suppress_default=True)
    prompt_parser.add_argument("--title", required=True, help="Issue title.")
    _add_input_argument(prompt_parser, "Issue body file.")
    _add_known_option(prompt_parser)

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP service.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for issuelens commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(Path(args.config))
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    configure_logging(
        verbose=bool(args.verbose) or config.logging.verbose,
        log_file=config.logging.log_file,
    )
    logger = get_logger("cli")

    try:
        if args.command == "references":
            references = ReferenceExtractor().extract(_read_input(args.input))
            _emit([reference.to_dict() for reference in references])
        elif args.command == "structure":
            structurer = ResponseStructurer(labels=config.labels.to_section_labels())
            solution = structurer.structure(_read_input(args.input), _load_known_files(args.known))
            _emit(solution.to_dict())
        elif args.command == "scan":
            code = Path(args.path).read_text(encoding="utf-8")
            _emit([issue.to_dict() for issue in CodeSmellScanner().scan(code)])
        elif args.command == "prompt":
            prompt = PromptBuilder().build(
                args.title, _read_input(args.input), _load_known_files(args.known)
            )
            sys.stdout.write(prompt)
        elif args.command == "serve":  # pragma: no cover - integration path
            from .service import run_service

            logger.info("Serving on %s:%d", args.host, args.port)
            run_service(args.host, args.port, config=config)
        else:  # pragma: no cover - argparse enforces choices
            parser.exit(1, "Unknown command\n")
    except OSError as exc:
        parser.exit(1, f"issuelens {args.command} failed: {exc}\n")


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _load_known_files(paths: Sequence[str]) -> List[KnownFile]:
    return [
        KnownFile(path=Path(path).as_posix(), content=Path(path).read_text(encoding="utf-8"))
        for path in paths
    ]


def _emit(payload: Any) -> None:
    print(json.dumps(payload, indent=2))


if __name__ == "__main__":
    main(sys.argv[1:])

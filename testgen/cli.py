"""CLI entrypoints for testgen commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, TestGenConfig, load_config
from .errors import GenerationError
from .logging import configure_logging
from .orchestrator import GenerationEngine


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


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="testgen",
        description="Generate JUnit/Mockito test skeletons from Java class sources.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--config",
        default=".",
        help="Path to .testgen.yml or the directory containing it (defaults to current directory).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate a test skeleton for a single Java source file.",
    )
    _add_verbose_option(generate_parser, suppress_default=True)
    generate_parser.add_argument(
        "source",
        help="Path to the Java source file, or '-' to read from stdin.",
    )
    generate_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write the generated suite to this path instead of stdout.",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP generation service.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default=None, help="Interface to bind (overrides config).")
    serve_parser.add_argument("--port", type=int, default=None, help="Port to bind (overrides config).")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for testgen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(Path(args.config))
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    configure_logging(config.logging, verbose=bool(args.verbose))

    if args.command == "generate":
        _run_generate(parser, args)
    elif args.command == "serve":
        _run_serve(args, config)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _run_generate(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    if args.source == "-":
        source = sys.stdin.read()
    else:
        source_path = Path(args.source)
        try:
            source = source_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            parser.exit(1, f"Source file not found: {source_path}\n")
        except (OSError, UnicodeDecodeError) as exc:
            parser.exit(1, f"Unable to read {source_path}: {exc}\n")

    try:
        generated = GenerationEngine().generate(source)
    except GenerationError as exc:
        parser.exit(1, f"testgen generate failed: {exc}\nRun with --verbose for more details.\n")

    if args.output is None:
        sys.stdout.write(generated)
        return
    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(generated, encoding="utf-8")
    print(f"Test skeleton written to {_relativize(output_path)}")


def _run_serve(args: argparse.Namespace, config: TestGenConfig) -> None:  # pragma: no cover - integration path
    from .service import run_service

    run_service(
        host=args.host or config.service.host,
        port=args.port or config.service.port,
        cors_origins=config.service.cors_origins,
    )


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])

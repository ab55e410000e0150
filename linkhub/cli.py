"""CLI entrypoints for linkhub commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import load_settings
from .errors import LinkhubError
from .logging import configure_logging
from .orchestrator import Orchestrator


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
        "default": argparse.SUPPRESS if suppress_default else False,
    }
    parser.add_argument("-v", "--verbose", **kwargs)


def _add_path_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the project root holding config/, themes/ and assets/ (defaults to current directory).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linkhub",
        description="Render a link hub page from a YAML profile and a theme.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write logs to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True, metavar="<command>")

    build_parser = subparsers.add_parser("build", help="Build the static site.")
    _add_verbose_option(build_parser, suppress_default=True)
    _add_path_argument(build_parser)

    watch_parser = subparsers.add_parser("watch", help="Build and serve with live reload.")
    _add_verbose_option(watch_parser, suppress_default=True)
    _add_path_argument(watch_parser)
    watch_parser.add_argument("--host", default=None, help="Interface to bind (default 0.0.0.0).")
    watch_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to listen on (default $PORT or 3000).",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for linkhub commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    try:
        settings = load_settings(Path(args.path))
        if args.command == "watch":
            if args.host:
                settings.host = args.host
            if args.port is not None:
                settings.port = args.port
        orchestrator = Orchestrator(settings)
    except LinkhubError as exc:
        parser.exit(1, f"{args.command.capitalize()} failed ({exc.stage}): {exc}\n")

    if args.command == "build":
        try:
            tree = orchestrator.run_build()
        except LinkhubError as exc:
            parser.exit(1, f"Build failed ({exc.stage}): {exc}\n")
        except OSError as exc:
            parser.exit(1, f"Build failed (write output): {exc}\n")
        print(f"Build complete! Output in {_relativize(tree.root)}")
    elif args.command == "watch":
        try:
            orchestrator.run_watch()
        except LinkhubError as exc:
            parser.exit(1, f"Watch failed ({exc.stage}): {exc}\n")
        except OSError as exc:
            parser.exit(1, f"Watch failed: {exc}\nRun with --verbose for more details.\n")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])

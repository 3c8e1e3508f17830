"""CLI entry-point for icon_viewer.

Usage:
    python -m icon_viewer <folder>
    python -m icon_viewer <folder> --output icons.html [--theme light|dark] [--columns N]
    python -m icon_viewer <folder> --open [--locale ru]
    python -m icon_viewer <folder> --json [--ci]
    python -m icon_viewer scan <folder> [--out FILE] [--ci]
    python -m icon_viewer validate <instance.json> [--schema NAME]
    python -m icon_viewer serve [--host HOST] [--port PORT]
"""

from __future__ import annotations

import argparse
import logging
import sys
import tempfile
import webbrowser
from pathlib import Path

from icon_viewer import __version__
from icon_viewer.api import scan_folder as _api_scan_folder
from icon_viewer.api import show_icons as _api_show_icons
from icon_viewer.model import OutcomeKind, Theme
from icon_viewer.reports.viewer import DEFAULT_COLUMNS
from icon_viewer.ui.copy import SUPPORTED_LOCALES
from icon_viewer.utils.exit_codes import ExitCode
from icon_viewer.utils.json_norm import stable_json_dump, stable_json_dumps

_KNOWN_COMMANDS = {"scan", "validate", "serve"}

_DEFAULT_SCHEMA = "icon_scan.schema.json"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _print_human(result_dict: dict) -> None:
    """Pretty-print a short scan summary to stderr."""
    counts = result_dict.get("counts", {})
    total = counts.get("total", 0)
    root = result_dict.get("run", {}).get("root", "?")

    print(f"\n   Folder : {root}", file=sys.stderr)
    print(f"   Icons  : {total}", file=sys.stderr)
    by_ext = counts.get("by_extension", {})
    if by_ext:
        parts = [f"{k}={v}" for k, v in sorted(by_ext.items())]
        print(f"   Types  : {', '.join(parts)}", file=sys.stderr)
    print("", file=sys.stderr)


def _add_common_flags(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--ci",
        "--deterministic",
        dest="ci_mode",
        action="store_true",
        default=False,
        help="Enable deterministic output (sorted icons, fixed timestamp).",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Log discovery progress to stderr.",
    )


def _build_default_parser() -> argparse.ArgumentParser:
    """Parser for default positional mode: render the viewer for a folder."""
    p = argparse.ArgumentParser(
        prog="icon-viewer",
        description="Show every icon under a folder as a themeable grid.",
    )
    p.add_argument(
        "folder",
        nargs="?",
        type=str,
        default=None,
        help="Folder to scan recursively.",
    )
    p.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write the HTML page here instead of stdout.",
    )
    p.add_argument(
        "--theme",
        choices=[t.value for t in Theme],
        default=Theme.DARK.value,
        help="Initial theme (default: dark).",
    )
    p.add_argument(
        "--columns",
        type=int,
        default=DEFAULT_COLUMNS,
        help=f"Grid columns (default: {DEFAULT_COLUMNS}).",
    )
    p.add_argument(
        "--locale",
        choices=list(SUPPORTED_LOCALES),
        default=None,
        help="Language for labels and messages (default: en).",
    )
    p.add_argument(
        "--open",
        dest="open_browser",
        action="store_true",
        default=False,
        help="Open the page in the default web browser.",
    )
    p.add_argument(
        "--json",
        dest="json_out",
        action="store_true",
        default=False,
        help="Print the scan JSON to stdout instead of HTML.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    _add_common_flags(p)
    p.set_defaults(command=None)
    return p


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="icon-viewer",
        description="Show every icon under a folder as a themeable grid.",
    )
    sub = p.add_subparsers(dest="command")

    # ── scan subcommand ─────────────────────────────────────────────
    scan_p = sub.add_parser(
        "scan",
        help="Write the icon_scan_v1 JSON document for a folder.",
    )
    scan_p.add_argument("folder", type=Path, help="Folder to scan recursively.")
    scan_p.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Path to write the JSON file (default: stdout).",
    )
    _add_common_flags(scan_p)

    # ── validate subcommand ─────────────────────────────────────────
    val_p = sub.add_parser(
        "validate",
        help="Validate a JSON instance against a bundled schema.",
    )
    val_p.add_argument("instance", type=Path, help="Path to the JSON file to validate.")
    val_p.add_argument(
        "--schema",
        dest="schema_name",
        default=_DEFAULT_SCHEMA,
        help=f"Schema filename (default: {_DEFAULT_SCHEMA}).",
    )
    _add_common_flags(val_p)

    # ── serve subcommand ────────────────────────────────────────────
    serve_p = sub.add_parser(
        "serve",
        help="Run the HTTP viewer (requires the 'api' extra).",
    )
    serve_p.add_argument("--host", default=None, help="Bind address.")
    serve_p.add_argument("--port", type=int, default=None, help="Bind port.")
    _add_common_flags(serve_p)

    return p


def _handle_scan(args: argparse.Namespace) -> int:
    """Dispatch ``icon-viewer scan <folder>``."""
    target: Path = args.folder.resolve()
    if not target.exists():
        print(f"error: path does not exist: {target}", file=sys.stderr)
        return ExitCode.ERROR

    _, result_dict = _api_scan_folder(target, ci_mode=args.ci_mode)

    if args.out is not None:
        out: Path = args.out
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(stable_json_dumps(result_dict), encoding="utf-8")
        print(f"Scan written to {out}", file=sys.stderr)
    else:
        stable_json_dump(result_dict, sys.stdout)

    _print_human(result_dict)
    return ExitCode.SUCCESS


def _handle_validate(args: argparse.Namespace) -> int:
    """Dispatch ``icon-viewer validate <instance.json>``.

    Exit code contract:
      1 = schema violation
      2 = runtime / schema not found / unreadable instance
    """
    import json

    import jsonschema

    from icon_viewer.contracts.load import validate_file

    try:
        validate_file(args.instance, args.schema_name)
    except jsonschema.ValidationError as e:
        print(f"FAIL: {e.message}", file=sys.stderr)
        return ExitCode.VIOLATION
    except (OSError, json.JSONDecodeError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return ExitCode.ERROR
    print("OK")
    return ExitCode.SUCCESS


def _handle_serve(args: argparse.Namespace) -> int:
    """Dispatch ``icon-viewer serve``."""
    try:
        import uvicorn

        from icon_viewer.web_api.config import settings
        from icon_viewer.web_api.main import app
    except ImportError as e:
        print(
            f"error: the web viewer needs the 'api' extra "
            f"(pip install icon-viewer[api]): {e}",
            file=sys.stderr,
        )
        return ExitCode.ERROR

    uvicorn.run(
        app,
        host=args.host or settings.HOST,
        port=args.port or settings.PORT,
    )
    return ExitCode.SUCCESS


def _open_in_browser(page: str, output: Path | None) -> Path:
    if output is None:
        with tempfile.NamedTemporaryFile(
            "w", suffix=".html", prefix="icon-viewer-", delete=False, encoding="utf-8"
        ) as fh:
            fh.write(page)
            output = Path(fh.name)
    webbrowser.open(output.resolve().as_uri())
    return output


def _handle_default(args: argparse.Namespace) -> int:
    """Render the viewer for ``icon-viewer <folder>``."""
    if args.columns < 1:
        print("error: --columns must be at least 1", file=sys.stderr)
        return ExitCode.ERROR

    # An empty argument is "no folder", not the current directory.
    target: Path | None = None
    if args.folder:
        target = Path(args.folder).resolve()
        if not target.exists():
            print(f"error: path does not exist: {target}", file=sys.stderr)
            return ExitCode.ERROR

    outcome = _api_show_icons(
        target,
        theme=args.theme,
        locale=args.locale,
        columns=args.columns,
        ci_mode=args.ci_mode,
    )

    if outcome.kind is OutcomeKind.NO_FOLDER:
        print(f"error: {outcome.message}", file=sys.stderr)
        return ExitCode.ERROR
    if outcome.kind is OutcomeKind.NO_ICONS:
        print(outcome.message, file=sys.stderr)
        return ExitCode.VIOLATION

    page, result = outcome.html, outcome.result
    if page is None or result is None:
        raise RuntimeError(f"viewer outcome {outcome.kind.value!r} carries no page")

    if args.json_out:
        stable_json_dump(result.to_dict(), sys.stdout)
        return ExitCode.SUCCESS

    if args.output is not None:
        out: Path = args.output
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(page, encoding="utf-8")
        print(f"Viewer written to {out}", file=sys.stderr)

    if args.open_browser:
        opened = _open_in_browser(page, args.output)
        print(f"Opened {opened}", file=sys.stderr)
    elif args.output is None:
        sys.stdout.write(page)

    return ExitCode.SUCCESS


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an exit code (0 = shown, 1 = no icons, 2 = error)."""
    effective_argv = list(argv) if argv is not None else sys.argv[1:]

    # Subcommands must come first; anything else is the default
    # ``icon-viewer <folder>`` mode.
    if effective_argv and effective_argv[0] in _KNOWN_COMMANDS:
        args = _build_parser().parse_args(effective_argv)
    else:
        args = _build_default_parser().parse_args(effective_argv)

    _configure_logging(args.verbose)

    if args.command == "scan":
        return _handle_scan(args)
    if args.command == "validate":
        return _handle_validate(args)
    if args.command == "serve":
        return _handle_serve(args)
    return _handle_default(args)


if __name__ == "__main__":
    raise SystemExit(main())

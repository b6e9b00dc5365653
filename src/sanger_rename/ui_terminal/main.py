from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.live import Live
from rich.table import Table

from sanger_rename import settings
from sanger_rename.container import build_services
from sanger_rename.domain.models import CommitReport
from sanger_rename.domain.vendors import Vendor, parse_vendor
from sanger_rename.logging_setup import configure_logging, flush_deferred_logs
from sanger_rename.wizard.machine import Wizard
from sanger_rename.wizard.stages import ConfirmRenameState

from .keyboard import KeyReader, open_key_reader
from .render import render_wizard

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sanger-rename",
        description="Rename Sanger sequencing result files to YYMMDD.template.primer.ext",
    )
    parser.add_argument("files", nargs="*", metavar="FILE", help="Files to rename")
    parser.add_argument(
        "--dir",
        "-d",
        action="append",
        default=[],
        dest="directories",
        help="Also rename matching files found in this directory (repeatable)",
    )
    parser.add_argument(
        "--vendor",
        help="Vendor of the files (Sangon, Ruibio or Genewiz); skips the vendor page",
    )
    parser.add_argument(
        "--ext",
        help="Comma-separated extensions to pick up from directories (default: %(default)s)",
        default=",".join(settings.SCAN_EXTENSIONS),
    )
    parser.add_argument("--log-file", help="Write log records to this file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    log_file = args.log_file or settings.LOG_FILE
    configure_logging(
        settings.LOG_LEVEL,
        verbose=args.verbose,
        log_file=Path(log_file) if log_file else None,
    )
    try:
        return _run(args)
    finally:
        flush_deferred_logs()


def _run(args: argparse.Namespace) -> int:
    services = build_services()
    directories = list(args.directories)
    if not args.files and not directories:
        directories = ["."]
    try:
        paths = services["discovery_service"].collect(
            args.files, directories, settings.parse_extensions(args.ext)
        )
    except NotADirectoryError as exc:
        print(exc, file=sys.stderr)
        return 2
    if not paths:
        print("No files specified. Use --help for usage information.", file=sys.stderr)
        return 1

    vendor: Vendor | None = None
    vendor_name = args.vendor or settings.DEFAULT_VENDOR
    if vendor_name:
        try:
            vendor = parse_vendor(vendor_name)
        except ValueError as exc:
            print(exc, file=sys.stderr)
            return 2

    if not sys.stdin.isatty():
        print("sanger-rename needs an interactive terminal.", file=sys.stderr)
        return 2

    logger.info("Starting wizard with %d file(s)", len(paths))
    wizard = Wizard(paths, services["rename_service"])
    if vendor is not None:
        wizard.select_vendor(vendor)

    console = Console()
    try:
        run_session(wizard, console, open_key_reader())
    except KeyboardInterrupt:
        logger.info("Interrupted")

    state = wizard.state
    if isinstance(state, ConfirmRenameState) and state.report is not None:
        print_report(console, state.report)
        return 1 if state.report.failed else 0
    return 0


def run_session(wizard: Wizard, console: Console, reader: KeyReader) -> None:
    with reader, Live(
        render_wizard(wizard), console=console, screen=True, auto_refresh=False
    ) as live:
        while not wizard.should_quit:
            key = reader.read_key()
            if key is None:
                continue
            wizard.handle_key(key)
            live.update(render_wizard(wizard), refresh=True)


def print_report(console: Console, report: CommitReport) -> None:
    table = Table(title="Rename results")
    table.add_column("Original")
    table.add_column("Result")
    for outcome in report.outcomes:
        if outcome.ok:
            table.add_row(outcome.full_path, Path(outcome.target_path).name, style="green")
        else:
            table.add_row(outcome.full_path, f"FAILED: {outcome.error}", style="red")
    console.print(table)
    console.print(f"{report.succeeded} renamed, {report.failed} failed")

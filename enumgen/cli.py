"""Command-line interface for enumgen."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from enumgen import EnumGenerator, GenerationOptions, config
from enumgen.core.error_context import format_error_with_context
from enumgen.core.error_handling import EnumGenError
from enumgen.models.report import GenerationReport


def _summary_table(report: GenerationReport) -> Table:
    table = Table(title=report.path)
    table.add_column("Type")
    table.add_column("Values")
    table.add_column("Values()")
    table.add_column("String()")
    for item in report.enum_types:
        table.add_row(
            item.type_name,
            ", ".join(item.values) or "-",
            item.values_action.value,
            item.string_action.value,
        )
    return table


def _generate(args: argparse.Namespace, console: Console) -> int:
    """Run generation for ``args.file`` and print the outcome."""
    options = GenerationOptions.from_config(
        marker=args.marker,
        include_vars=True if args.include_vars else None,
        ensure_fmt_import=False if args.no_fmt_import else None,
        atomic_write=False if args.no_atomic else None,
    )
    generator = EnumGenerator(options)
    try:
        report = generator.generate(args.file, dry_run=args.dry_run)
    except EnumGenError as e:
        console.print(f"[bold red]Generation failed:[/bold red] {escape(format_error_with_context(e))}")
        return 1

    if args.raw_json:
        print(json.dumps(report.model_dump(mode="json", exclude={"output"}), indent=2))
    elif args.dry_run:
        console.print(Syntax(report.output, "go", line_numbers=False))
    elif not report.enum_types:
        console.print(f"No {options.marker} types found in {args.file}")
    else:
        console.print(_summary_table(report))
        console.print(Panel("Code generation completed successfully!", style="green"))
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``enumgen`` command."""

    console = Console()
    parser = argparse.ArgumentParser(description="Generate Values/String methods for annotated Go enum types")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--quiet", action="store_true", help="Reduce logs to errors only")
    sub = parser.add_subparsers(dest="command")

    gen_p = sub.add_parser("generate", help="Generate accessors in a Go file")
    gen_p.add_argument("file", help="Go source file to rewrite")
    gen_p.add_argument("--dry-run", action="store_true", help="Print the result instead of writing it")
    gen_p.add_argument("--raw-json", action="store_true", help="Print the report as JSON")
    gen_p.add_argument("--marker", help="Directive token marking enum types (default: @enumGenerated)")
    gen_p.add_argument("--include-vars", action="store_true", help="Also collect var declarations")
    gen_p.add_argument("--no-fmt-import", action="store_true", help="Do not add a missing fmt import")
    gen_p.add_argument("--no-atomic", action="store_true", help="Rewrite the file in place instead of replacing it")

    args = parser.parse_args(argv)
    # Determine logging level
    if getattr(args, "debug", False):
        log_level = logging.DEBUG
    elif getattr(args, "quiet", False):
        log_level = logging.ERROR
    elif getattr(args, "verbose", False):
        log_level = logging.INFO
    else:
        log_level = logging.getLevelName(str(config.get("logging", "level", "WARNING")).upper())
    logging.basicConfig(level=log_level)

    if args.command == "generate":
        sys.exit(_generate(args, console))
    else:
        parser.print_help()


if __name__ == "__main__":
    main()

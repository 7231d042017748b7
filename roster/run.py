"""Main roster runner: validates options and executes the personnel pipeline."""

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from roster.config import ConfigurationError, RosterConfig, load_roster_config
from roster.domains import personnel
from roster.utils.types import OutputMode, SortField, SortOrder

console = Console()
err_console = Console(stderr=True)


def _option_value(raw: str) -> str:
    """Accept the ``-s=name`` spelling, which argparse hands over as ``=name``."""
    return raw.removeprefix("=").strip()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="roster",
        description="Group manager and employee records into department files",
    )
    parser.add_argument("--sort", "-s", type=_option_value, help=f"Sort employees by {SortField.NAME} or {SortField.SALARY}")
    parser.add_argument("--order", type=_option_value, help=f"Sort order, {SortOrder.ASC} or {SortOrder.DESC}")
    parser.add_argument("--stat", action="store_true", default=None, help="Compute salary statistics per department")
    parser.add_argument("--output", "-o", type=_option_value, help=f"Statistics target, {OutputMode.CONSOLE} or {OutputMode.FILE}")
    parser.add_argument("--path", type=_option_value, help="Statistics file path, required with --output=file")
    parser.add_argument("--input-dir", help="Directory holding the .sb sources")
    parser.add_argument("--output-dir", help="Directory for department files and error.log")
    parser.add_argument("--config", help="YAML file with option overrides")
    parser.add_argument("--validate", action="store_true", help="Only read the sources and report, don't write")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log rejected records and debug detail")
    return parser


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def load_config(args: argparse.Namespace) -> RosterConfig:
    overrides = {
        "sort": args.sort,
        "order": args.order,
        "stat": args.stat,
        "output": args.output,
        "path": args.path,
        "input_dir": args.input_dir,
        "output_dir": args.output_dir,
    }
    return load_roster_config(overrides, config_file=args.config)


def validate_sources(config: RosterConfig) -> bool:
    match personnel.validate(config):
        case {"status": "ok", "sources": sources, "records": records, "rejected": rejected}:
            table = Table(title=f"Sources in {config.input_dir}")
            table.add_column("File")
            table.add_column("Lines", justify="right")
            table.add_column("Managers", justify="right")
            table.add_column("Employees", justify="right")
            table.add_column("Rejected", justify="right")

            for s in sources:
                rejected_cell = f"[red]{s.rejected}[/red]" if s.rejected else "0"
                table.add_row(escape(s.name), str(s.line_count), str(s.managers), str(s.employees), rejected_cell)

            console.print(table)
            console.print(f"{records} record(s), {rejected} rejected line(s)")
            return True
        case {"status": "error", "message": msg}:
            err_console.print(f"[red]Error: {escape(msg)}[/red]")
            return False
        case _:
            err_console.print("[red]Error: unknown validation result[/red]")
            return False


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = load_config(args)
    except ConfigurationError as exc:
        err_console.print(f"[red]Error: {escape(str(exc))}[/red]")
        return 1

    if args.validate:
        return 0 if validate_sources(config) else 1

    try:
        personnel.run(config)
    except FileNotFoundError as exc:
        err_console.print(f"[red]Error: {escape(str(exc))}[/red]")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

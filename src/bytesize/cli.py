"""Command-line interface for bytesize."""

import json
from pathlib import Path
from typing import Optional

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .config import Config, default_config_path, load_config, write_default_config
from .errors import ByteSizeError
from .log import setup_logger
from .numfmt import NumericFormatSpec
from .parser import ParseOptions, parse
from .quantity import ByteQuantity
from .units import Unit


app = typer.Typer(
    name="bytesize",
    help="Parse and format human-readable byte sizes (kB, MiB, GB...)",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold cyan]bytesize[/bold cyan] version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None, "--config", "-c",
        help="Config file path (toml)",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v",
        help="Show debug logging",
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file",
        help="Also write debug logging to this file",
    ),
    version: bool = typer.Option(
        False, "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """bytesize - human-readable byte sizes."""
    setup_logger(verbose=verbose, log_file=log_file)
    try:
        ctx.obj = load_config(config)
    except (OSError, ValueError) as e:
        err_console.print(f"[bold red]Config error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1)
    logger.debug("Loaded config: {}", ctx.obj)


def _config(ctx: typer.Context) -> Config:
    return ctx.obj if isinstance(ctx.obj, Config) else Config()


def _parse_options(cfg: Config, case_sensitive: Optional[bool], decimal: Optional[bool]) -> ParseOptions:
    options = cfg.parse_options()
    return ParseOptions(
        case_sensitive=options.case_sensitive if case_sensitive is None else case_sensitive,
        prefer_binary_ambiguous=options.prefer_binary_ambiguous if decimal is None else not decimal,
    )


def _unit_or_exit(name: Optional[str], fallback: Unit) -> Unit:
    if name is None:
        return fallback
    try:
        return Unit.from_name(name)
    except ValueError as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1)


def _spec_or_exit(pattern: Optional[str], fallback: NumericFormatSpec) -> NumericFormatSpec:
    if pattern is None:
        return fallback
    try:
        return NumericFormatSpec(pattern)
    except ValueError as e:
        err_console.print(f"[bold red]Pattern error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1)


def _parse_or_exit(value: str, options: ParseOptions) -> ByteQuantity:
    try:
        return parse(value, options)
    except ByteSizeError as e:
        logger.debug("Rejected {!r}: {}", value, e.reason)
        err_console.print(f"[bold red]Parse error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1)


@app.command("parse")
def parse_command(
    ctx: typer.Context,
    value: str = typer.Argument(..., help="Size to parse, e.g. 512MB or 2GiB"),
    case_sensitive: Optional[bool] = typer.Option(
        None, "--case-sensitive/--ignore-case",
        help="Require canonical unit letter case",
    ),
    decimal: Optional[bool] = typer.Option(
        None, "--decimal/--binary",
        help="Read kB/MB/GB as powers of 1000 (default: powers of 1024)",
    ),
    unit: Optional[str] = typer.Option(
        None, "--unit", "-u",
        help="Print the whole number of this unit instead of bytes (e.g. kibi, MiB)",
    ),
    json_output: bool = typer.Option(
        False, "--json",
        help="Output as JSON",
    ),
) -> None:
    """Parse VALUE and print the byte count."""
    cfg = _config(ctx)
    target = _unit_or_exit(unit, Unit.one)
    quantity = _parse_or_exit(value, _parse_options(cfg, case_sensitive, decimal))
    amount = quantity.in_unit(target)

    if json_output:
        console.print_json(json.dumps({
            "input": value,
            "bytes": quantity.bytes,
            "unit": target.name,
            "value": amount,
        }))
    else:
        console.print(str(amount), highlight=False)


@app.command("format")
def format_command(
    ctx: typer.Context,
    count: int = typer.Argument(..., help="Byte count"),
    unit: Optional[str] = typer.Option(None, "--unit", "-u", help="Unit to express the count in"),
    pattern: Optional[str] = typer.Option(None, "--pattern", "-p", help="Decimal pattern, e.g. '#.##'"),
    suffix: Optional[bool] = typer.Option(None, "--suffix/--no-suffix", help="Append the unit suffix"),
) -> None:
    """Format a raw byte COUNT."""
    cfg = _config(ctx)
    target = _unit_or_exit(unit, cfg.format_unit())
    spec = _spec_or_exit(pattern, cfg.format_spec())
    try:
        quantity = ByteQuantity(count)
    except ValueError as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1)
    append = cfg.suffix if suffix is None else suffix
    console.print(quantity.format(spec, target, append), highlight=False)


@app.command("convert")
def convert_command(
    ctx: typer.Context,
    value: str = typer.Argument(..., help="Size to convert, e.g. 1234mb"),
    to: str = typer.Option(..., "--to", "-t", help="Target unit (e.g. giga, GiB)"),
    pattern: Optional[str] = typer.Option(None, "--pattern", "-p", help="Decimal pattern, e.g. '#.##'"),
    decimal: Optional[bool] = typer.Option(
        None, "--decimal/--binary",
        help="Read kB/MB/GB as powers of 1000 (default: powers of 1024)",
    ),
) -> None:
    """Parse VALUE and print it in another unit."""
    cfg = _config(ctx)
    target = _unit_or_exit(to, Unit.one)
    spec = _spec_or_exit(pattern, cfg.format_spec())
    quantity = _parse_or_exit(value, _parse_options(cfg, None, decimal))
    console.print(quantity.format(spec, target, True), highlight=False)


@app.command("table")
def table_command(
    ctx: typer.Context,
    value: str = typer.Argument(..., help="Size to show, e.g. 1234567890"),
    pattern: str = typer.Option("#,##0.###", "--pattern", "-p", help="Decimal pattern for the value column"),
) -> None:
    """Show VALUE in every unit."""
    cfg = _config(ctx)
    spec = _spec_or_exit(pattern, NumericFormatSpec.integer())
    quantity = _parse_or_exit(value, cfg.parse_options())

    table = Table(title=f"{value} = {quantity}")
    table.add_column("Unit", style="cyan")
    table.add_column("Suffix", style="magenta")
    table.add_column("Whole", justify="right")
    table.add_column("Value", justify="right", style="green")
    for unit in Unit:
        table.add_row(unit.name, unit.suffix, str(quantity.in_unit(unit)), quantity.format(spec, unit, False))
    console.print(table)


@app.command("init-config")
def init_config_command(
    path: Optional[Path] = typer.Argument(None, help="Target file (default: ~/.config/bytesize/config.toml)"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
) -> None:
    """Write the default configuration file."""
    try:
        written = write_default_config(path or default_config_path(), overwrite=force)
    except FileExistsError as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))} (use --force to overwrite)")
        raise typer.Exit(code=1)
    console.print(f"[green]Default config written to[/green] {written}")


def run() -> None:
    app()


if __name__ == "__main__":
    run()

import logging
from pathlib import Path
from typing import NoReturn

import orjson
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from orderkey.catalog.families import ASK, DSX, EW
from orderkey.compare import compare
from orderkey.config import DEFAULT_CONFIG, DecoderConfig, load_config
from orderkey.decoder import DecodeResult, decode_code
from orderkey.errors import ConfigError, OrderKeyError
from orderkey.service import compare_payload, decode_payload

app = typer.Typer(help="Decode and compare SCHAKO order codes (Bestellschlüssel).")
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log decoder decisions."),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load(config: Path | None) -> DecoderConfig:
    if config is None:
        return DEFAULT_CONFIG
    try:
        return load_config(config)
    except ConfigError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _emit(payload: dict, output: Path | None) -> None:
    if output:
        output.write_bytes(orjson.dumps(payload, option=orjson.OPT_INDENT_2))
        console.print(f"[bold green]Wrote result[/] to {output}")
    else:
        text = orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode()
        console.print(text, markup=False, highlight=False, soft_wrap=True)


def _fail(exc: OrderKeyError) -> NoReturn:
    console.print(f"[bold red]Error:[/] {exc}")
    raise typer.Exit(code=1)


def _render_fields(result: DecodeResult) -> Table:
    table = Table(title=f"{result.label}: {result.formatted_code}")
    table.add_column("#", justify="right")
    table.add_column("Feld")
    table.add_column("Wert", style="bold")
    table.add_column("Bedeutung")
    for item in result.fields:
        table.add_row(
            f"{item.index:02d}",
            item.name,
            item.value,
            item.description,
            style="yellow" if item.is_defaulted else None,
        )
    return table


@app.command()
def decode(
    code: str = typer.Argument(..., help="Order code, with or without hyphens."),
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Decoder policy file (yaml or json)."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the JSON payload instead of a table."),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Optional path to write the JSON payload."
    ),
) -> None:
    """Split an order code into its fields and describe each value."""
    cfg = _load(config)
    try:
        result = decode_code(code, cfg)
    except OrderKeyError as exc:
        _fail(exc)

    if as_json or output:
        _emit(decode_payload(result), output)
        return
    console.print(_render_fields(result))
    if result.any_defaulted:
        console.print(
            "[yellow]Einige Komponenten wurden mit Standard-Werten ergänzt:[/] "
            + ", ".join(result.defaulted_names)
        )


@app.command("compare")
def compare_cmd(
    code1: str = typer.Argument(..., help="First order code."),
    code2: str = typer.Argument(..., help="Second order code."),
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Decoder policy file (yaml or json)."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the JSON payload."),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Optional path to write the JSON payload."
    ),
) -> None:
    """Check whether two order codes describe the same product."""
    cfg = _load(config)
    try:
        result = compare(code1, code2, cfg)
    except OrderKeyError as exc:
        _fail(exc)

    if as_json or output:
        _emit(compare_payload(result), output)
        return
    if result.identical:
        console.print(f"[bold green]Identisch:[/] {result.formatted_code}")
        return
    console.print("[bold red]Unterschiedlich[/]")
    console.print(f"  1: {result.formatted_code1 or '(ungültig)'}")
    console.print(f"  2: {result.formatted_code2 or '(ungültig)'}")
    for diff in result.differences:
        console.print(f"  - {diff.message}")


@app.command()
def families() -> None:
    """List supported product families with their field layout and defaults."""
    for catalog in (DSX, ASK, EW):
        table = Table(title=f"{catalog.label} ({catalog.nominal_width} Zeichen)")
        table.add_column("#", justify="right")
        table.add_column("Feld")
        table.add_column("Breite", justify="right")
        table.add_column("Standard")
        for index, spec in enumerate(catalog.fields, start=1):
            width = str(spec.width)
            if spec.literals and spec.literals != (catalog.prefix,):
                width += " / " + "/".join(spec.literals)
            table.add_row(f"{index:02d}", spec.name, width, spec.default)
        console.print(table)


if __name__ == "__main__":
    app()

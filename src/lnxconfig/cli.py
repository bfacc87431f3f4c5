from __future__ import annotations

from pathlib import Path

import typer

from lnxconfig.core.errors import ConfigReadError, LnxParseError, SettingsError
from lnxconfig.core.logging import configure_logging
from lnxconfig.core.model import Topology
from lnxconfig.core.results import RunSummary
from lnxconfig.core.settings import ParserSettings, load_settings
from lnxconfig.parser.loader import parse_file
from lnxconfig.render.lnx_text import format_topology
from lnxconfig.render.report_json import topology_payload, write_json_report
from lnxconfig.render.report_md import write_markdown_report
from lnxconfig.validators.references import run_reference_checks

app = typer.Typer(add_completion=False)


def _settings(path: Path | None) -> ParserSettings:
    try:
        return load_settings(path)
    except SettingsError as exc:
        typer.echo(f"Settings error: {exc}", err=True)
        raise typer.Exit(code=2)


def _load(file: Path, settings: ParserSettings) -> Topology:
    try:
        return parse_file(file, settings)
    except ConfigReadError as exc:
        typer.echo(f"Failed to open file: {exc}", err=True)
        raise typer.Exit(code=1)
    except LnxParseError as exc:
        typer.echo(f"Parse error, line {exc.lineno}: {exc.reason}", err=True)
        raise typer.Exit(code=1)


def _print_console(summary: RunSummary) -> None:
    for result in summary.results:
        typer.echo(f"[{result.phase}] {result.status.value:4} {result.name} - {result.message}")
    typer.echo(f"Exit code: {summary.exit_code}")


@app.command()
def check(
    file: Path = typer.Argument(...),
    settings_path: Path | None = typer.Option(None, "--settings"),
    json_out: Path | None = typer.Option(None, "--json-out"),
    verbose: bool = typer.Option(False, "--verbose"),
) -> None:
    configure_logging(verbose)
    topology = _load(file, _settings(settings_path))
    payload = topology_payload(topology, file)
    typer.echo(
        f"{file}: {len(topology.interfaces)} interface(s), {len(topology.neighbors)} neighbor(s), "
        f"{len(topology.rip_neighbors)} rip peer(s), {len(topology.static_routes)} route(s), "
        f"routing {topology.routing_mode.value}"
    )
    typer.echo(f"Fingerprint: {payload['fingerprint']}")
    if json_out:
        write_json_report(payload, json_out)


@app.command("format")
def format_(
    file: Path = typer.Argument(...),
    settings_path: Path | None = typer.Option(None, "--settings"),
    verbose: bool = typer.Option(False, "--verbose"),
) -> None:
    configure_logging(verbose)
    settings = _settings(settings_path)
    topology = _load(file, settings)
    typer.echo(format_topology(topology, settings.defaults), nl=False)


@app.command()
def lint(
    file: Path = typer.Argument(...),
    settings_path: Path | None = typer.Option(None, "--settings"),
    json_out: Path | None = typer.Option(None, "--json-out"),
    md_out: Path | None = typer.Option(None, "--md-out"),
    verbose: bool = typer.Option(False, "--verbose"),
) -> None:
    configure_logging(verbose)
    topology = _load(file, _settings(settings_path))
    summary = run_reference_checks(topology, file)
    _print_console(summary)
    payload = summary.to_dict()
    if json_out:
        write_json_report(payload, json_out)
    if md_out:
        write_markdown_report(payload, md_out)
    raise typer.Exit(code=summary.exit_code)


if __name__ == "__main__":
    app()

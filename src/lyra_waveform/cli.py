"""Command-line front end: ``lyra-waveform waveform|info|pack|unpack``."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from .commands import generate_waveform, get_audio_info, shutdown_worker_pool
from .config import WaveformSettings
from .errors import LfFormatError
from .logging_setup import configure_logging
from .storage import paths
from .storage.project_file import decode_lf_format, encode_lf_format, is_valid_lf_file

app = typer.Typer(help="Extract timeline waveforms and audio metadata.")
console = Console()
err_console = Console(stderr=True)

settings = WaveformSettings()


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", "-l", help="Log level (DEBUG, INFO, ...)"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Also write logs to this file"),
    log_to_file: bool = typer.Option(False, "--log-to-file", help="Also write logs to the per-user log directory"),
):
    global settings
    settings = WaveformSettings.load_from_env()
    target = log_file or settings.log_file
    if target is None and log_to_file:
        target = paths.default_log_file()
    configure_logging(log_level or settings.log_level, target)


def _emit(result, pretty: bool) -> None:
    if isinstance(result, str):
        err_console.print(f"[bold red]{result}[/bold red]")
        raise typer.Exit(code=1)
    payload = result.model_dump(by_alias=True)
    if pretty:
        console.print_json(data=payload)
    else:
        typer.echo(json.dumps(payload))


def _run(coro):
    try:
        return asyncio.run(coro)
    finally:
        shutdown_worker_pool()


@app.command()
def waveform(
    audio_path: Path,
    samples: Optional[int] = typer.Option(None, "--samples", "-n", min=0, help="Number of peak/valley buckets"),
    pretty: bool = typer.Option(False, "--pretty", "-p", help="Pretty-print the JSON result"),
):
    """Print the waveform of AUDIO_PATH as JSON."""
    count = settings.default_samples if samples is None else samples
    _emit(_run(generate_waveform(str(audio_path), count)), pretty)


@app.command()
def info(
    audio_path: Path,
    pretty: bool = typer.Option(False, "--pretty", "-p", help="Pretty-print the JSON result"),
):
    """Print duration, sample rate, channels and codec of AUDIO_PATH."""
    _emit(_run(get_audio_info(str(audio_path))), pretty)


@app.command()
def pack(source: Path, target: Path):
    """Wrap the JSON file SOURCE into the .lf project file TARGET."""
    try:
        text = source.read_text(encoding="utf-8")
    except OSError as exc:
        err_console.print(f"[bold red]Failed to read {source}: {exc}[/bold red]")
        raise typer.Exit(code=1)
    try:
        json.loads(text)
    except json.JSONDecodeError as exc:
        err_console.print(f"[bold red]{source} is not valid JSON: {exc}[/bold red]")
        raise typer.Exit(code=1)
    target.write_bytes(encode_lf_format(text))
    console.print(f"[green]Wrote {target}[/green]")


@app.command()
def unpack(source: Path, target: Optional[Path] = typer.Argument(None)):
    """Extract the JSON text from the .lf project file SOURCE."""
    try:
        buffer = source.read_bytes()
    except OSError as exc:
        err_console.print(f"[bold red]Failed to read {source}: {exc}[/bold red]")
        raise typer.Exit(code=1)
    if not is_valid_lf_file(buffer):
        err_console.print(f"[bold red]{source} is not a .lf project file[/bold red]")
        raise typer.Exit(code=1)
    try:
        text = decode_lf_format(buffer)
    except LfFormatError as exc:
        err_console.print(f"[bold red]{exc}[/bold red]")
        raise typer.Exit(code=1)
    if target is None:
        typer.echo(text)
    else:
        target.write_text(text, encoding="utf-8")
        console.print(f"[green]Wrote {target}[/green]")


if __name__ == "__main__":
    app()

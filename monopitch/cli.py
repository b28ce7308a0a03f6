"""Command-line interface for monopitch.

Provides commands for:
- analyze: Estimate frequency and note for every chunk of an audio file
- generate: Write a stepped-sine test tone
- notes: Show the reference note table
"""

import json
import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .core import (
    AnalysisConfig,
    DEFAULT_NOTE_TABLE,
    DEFAULT_SR,
    DEFAULT_MIN_DETECTABLE_FREQ,
    DEFAULT_FUDGE_FACTOR,
    DEFAULT_NOTE_EPSILON,
)

app = typer.Typer(
    name="monopitch",
    help="Monophonic pitch detection with autocorrelation",
    rich_markup_mode="markdown",
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command()
def analyze(
    input_file: Path = typer.Argument(..., help="Input audio file (16-bit mono WAV preferred)"),
    min_freq: float = typer.Option(
        DEFAULT_MIN_DETECTABLE_FREQ, "--min-freq", help="Lowest detectable frequency (Hz)"
    ),
    fudge_factor: int = typer.Option(
        DEFAULT_FUDGE_FACTOR, "--fudge-factor", help="Periods of --min-freq per chunk"
    ),
    epsilon: float = typer.Option(
        DEFAULT_NOTE_EPSILON, "-e", "--epsilon", help="Note matching tolerance (Hz)"
    ),
    method: str = typer.Option(
        "direct", "-m", "--method", help="Autocorrelation method: direct/fft"
    ),
    workers: int = typer.Option(1, "-w", "--workers", help="Chunks analysed in parallel"),
    json_output: bool = typer.Option(
        False, "--json", help="Output results as JSON (for scripting)"
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose output"),
):
    """Estimate the frequency and note of every chunk in an audio file.

    **Examples:**

        monopitch analyze sine.wav

        monopitch analyze sine.wav --method fft -w 4 --json
    """
    from .input import AudioLoader
    from .transcription import ChunkedPitchTracker

    _setup_logging(verbose)

    if not input_file.exists():
        console.print(f"[red]Error: File not found: {input_file}[/red]")
        raise typer.Exit(1)

    try:
        buffer = AudioLoader().load(str(input_file))
        config = AnalysisConfig(
            sample_rate=buffer.sample_rate,
            min_detectable_freq=min_freq,
            fudge_factor=fudge_factor,
            note_epsilon=epsilon,
        )
        tracker = ChunkedPitchTracker(config, method=method, workers=workers)
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if not json_output:
        console.print(f"[blue]Loaded audio:[/blue] {input_file}")
        console.print(
            f"  Duration: {buffer.duration:.2f}s, Sample rate: {buffer.sample_rate}Hz, "
            f"Chunk size: {config.chunk_size} samples"
        )

    results = tracker.track(buffer)

    if json_output:
        payload = {
            "file": str(input_file),
            "sample_rate": buffer.sample_rate,
            "chunk_size": config.chunk_size,
            "chunks": [r.to_dict() for r in results],
        }
        typer.echo(json.dumps(payload, indent=2))
        return

    if not results:
        console.print("[yellow]Audio is shorter than one chunk; nothing to analyse[/yellow]")
        return

    _show_results_table(results)
    estimated = sum(1 for r in results if r.has_estimate)
    console.print(f"[green]{estimated}/{len(results)} chunks estimated[/green]")


@app.command()
def generate(
    output: Path = typer.Argument(..., help="Output WAV file path"),
    frequency: Optional[List[float]] = typer.Option(
        None, "-f", "--frequency", help="Frequency to include (repeat for a sweep)"
    ),
    duration: float = typer.Option(20.0, "-d", "--duration", help="Duration in seconds"),
    sample_rate: int = typer.Option(DEFAULT_SR, "--sample-rate", help="Sample rate (Hz)"),
):
    """Write a 16-bit mono test tone, stepping through the given frequencies."""
    from .output import DEMO_FREQUENCIES, generate_stepped_sweep, write_wav

    freqs = frequency or list(DEMO_FREQUENCIES)
    if duration <= 0 or sample_rate <= 0:
        console.print("[red]Error: duration and sample rate must be positive[/red]")
        raise typer.Exit(1)

    samples = generate_stepped_sweep(freqs, duration=duration, sample_rate=sample_rate)
    path = write_wav(str(output), samples, sample_rate)
    console.print(
        f"[green]Wrote {path}[/green] ({len(freqs)} step(s), {duration:.1f}s, {sample_rate}Hz)"
    )


@app.command()
def notes(
    octave: Optional[int] = typer.Option(None, "--octave", help="Only show this octave"),
):
    """Show the reference note table."""
    refs = DEFAULT_NOTE_TABLE.octave(octave) if octave is not None else list(DEFAULT_NOTE_TABLE)

    table = Table(title="Reference Notes")
    table.add_column("Note", style="cyan")
    table.add_column("Pitch class", style="green")
    table.add_column("MIDI", style="magenta")
    table.add_column("Frequency (Hz)", style="yellow", justify="right")

    for ref in refs:
        table.add_row(ref.name, ref.pitch_class.value, str(ref.midi), f"{ref.frequency:.2f}")

    console.print(table)


def _show_results_table(results):
    """Display per-chunk estimates in a table."""
    table = Table(title="Estimated Pitch")
    table.add_column("Chunk", style="cyan")
    table.add_column("Time (s)", style="green")
    table.add_column("Frequency (Hz)", style="yellow", justify="right")
    table.add_column("Note", style="magenta")

    for result in results:
        if result.has_estimate:
            freq = f"{result.frequency:.0f}"
            note = result.reference.name if result.reference else result.note.value
        else:
            freq = "-"
            note = "[dim]no estimate[/dim]"
        table.add_row(str(result.index), f"{result.time:.3f}", freq, note)

    console.print(table)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()

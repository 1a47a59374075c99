"""Command-line interface for Clockwall."""

import json
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from rich import print as rprint
from rich.console import Console
from rich.table import Table

from clockwall.clock import DIGIT_TABLE, ClockwallError, encode
from clockwall.config import get_settings
from clockwall.logging import configure_logging

app = typer.Typer(
    name="clockwall",
    help="Clockwall - a wall of analog clocks whose hands spell out the time",
    add_completion=False,
)

console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Enable debug mode"),
) -> None:
    """Clockwall CLI."""
    settings = get_settings()
    if debug or settings.debug:
        configure_logging(log_level="DEBUG", log_file=settings.log_file)
    else:
        configure_logging(log_level=settings.log_level, log_file=settings.log_file)


def _build_app(scheme: Optional[int]):
    from clockwall.app import ClockwallApp

    settings = get_settings()
    clock_app = ClockwallApp.from_settings(settings)
    if scheme is not None:
        if not 0 <= scheme < len(clock_app.palette.schemes):
            rprint(f"[red]Scheme must be 0-{len(clock_app.palette.schemes) - 1}[/red]")
            raise typer.Exit(1)
        clock_app.palette.index = scheme
    return clock_app


@app.command("run")
def run(
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Frame output path"),
    frames: Optional[int] = typer.Option(None, "--frames", min=1, help="Stop after this many frames"),
    scheme: Optional[int] = typer.Option(None, "--scheme", help="Colour scheme index"),
) -> None:
    """Run the clock wall, rewriting the output SVG every frame."""
    from clockwall.app import FrameLoop

    settings = get_settings()
    if output:
        settings = settings.model_copy(update={"output_path": output})
    settings.ensure_directories()

    loop = FrameLoop(_build_app(scheme), output_path=settings.output_path, frame_rate=settings.frame_rate)
    rprint(f"[cyan]Rendering to[/cyan] {settings.output_path} [dim](SIGUSR1 cycles colours, Ctrl+C stops)[/dim]")
    rendered = loop.run(max_frames=frames)
    rprint(f"[green]Stopped after {rendered} frames[/green]")


@app.command("render")
def render(
    time_str: str = typer.Argument(..., metavar="TIME", help="Display time as HHMM"),
    from_time: Optional[str] = typer.Option(None, "--from", help="Animate from this HHMM time"),
    elapsed: float = typer.Option(0.0, "--elapsed", min=0, help="Milliseconds into the animation"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write SVG here instead of stdout"),
    scheme: Optional[int] = typer.Option(None, "--scheme", help="Colour scheme index"),
) -> None:
    """Render a single frame showing TIME."""
    from clockwall.render import SvgSurface

    clock_app = _build_app(scheme)
    try:
        if from_time is not None:
            clock_app.watcher.observe(from_time)
        clock_app.watcher.observe(time_str)
    except ClockwallError as e:
        rprint(f"[red]{e}[/red]")
        raise typer.Exit(1)
    clock_app.grid.advance(elapsed)

    surface = SvgSurface(clock_app.width, clock_app.height)
    clock_app.draw(surface, datetime.now().replace(second=0, microsecond=0))
    svg = surface.to_svg()

    if output:
        output.write_text(svg, encoding="utf-8")
        rprint(f"[green]Wrote {output}[/green]")
    else:
        typer.echo(svg)


@app.command("digits")
def digits(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show the hand angles used for each digit."""
    if json_output:
        typer.echo(
            json.dumps(
                {
                    digit: [{"hour": a.x, "minute": a.y} for a in encode(digit)]
                    for digit in DIGIT_TABLE
                },
                indent=2,
            )
        )
        return

    table = Table(title="Digit Encodings (degrees)", show_header=True)
    table.add_column("Digit", style="cyan")
    for row in range(3):
        table.add_column(f"Row {row} left", style="green")
        table.add_column(f"Row {row} right", style="green")

    for digit in DIGIT_TABLE:
        table.add_row(digit, *(f"{a.x:g} / {a.y:g}" for a in encode(digit)))

    console.print(table)


# Config commands
config_app = typer.Typer(help="Configuration management")
app.add_typer(config_app, name="config")


@config_app.command("show")
def config_show(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show current configuration."""
    settings = get_settings()
    config_dict = settings.model_dump(mode="json")

    if json_output:
        typer.echo(json.dumps(config_dict, indent=2))
        return

    table = Table(title="Clockwall Configuration", show_header=True)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    for field_name, value in config_dict.items():
        if field_name == "color_schemes":
            value = ", ".join(f"{s['background']}/{s['accent']}" for s in value)
        table.add_row(field_name, str(value))

    console.print(table)


if __name__ == "__main__":
    app()

"""CLI interface."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer

from flipbook.animation.css_emitter import base_name_from_selector, build_frame_css
from flipbook.animation.css_injector import inject_frame_css
from flipbook.animation.frame_timing_generator import generate as generate_spec
from flipbook.animation.frame_timing_generator import parse_iterations
from flipbook.animation.frame_timing_schema import AnimationSpec, InvalidArgument
from flipbook.utils.config import settings
from flipbook.utils.file_utils import read_text_file, write_text_file

app = typer.Typer(add_completion=False)

FORMATS = ("css", "json")

PARAM_HINTS = {
    "frame_count": "FRAME_COUNT",
    "frame_rate": "--frame-rate",
    "iterations": "--iterations",
    "name": "--name",
    "selector": "--selector",
    "frame_selectors": "--frame",
    "precision": "FLIPBOOK_PERCENT_PRECISION",
}


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging.")):
    """Generate CSS frame-by-frame animations."""
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _build_spec(frame_count: int, frame_rate: Optional[float], alternate: bool, iterations: Optional[str]) -> AnimationSpec:
    try:
        return generate_spec(
            frame_count,
            frame_rate=settings.default_frame_rate if frame_rate is None else frame_rate,
            alternate=alternate,
            iterations=parse_iterations(iterations if iterations is not None else settings.default_iterations),
        )
    except InvalidArgument as exc:
        raise typer.BadParameter(str(exc), param_hint=PARAM_HINTS.get(exc.parameter, exc.parameter)) from exc


def _emit(content: str, output: Optional[Path], save_as: Optional[str]) -> None:
    if output is None and save_as:
        output = Path(settings.output_dir) / save_as
    if output is None:
        typer.echo(content)
        return
    path = write_text_file(str(output), content + "\n")
    typer.echo(f"Wrote {path}", err=True)


@app.command()
def generate(
    frame_count: int = typer.Argument(..., help="Number of frame elements in the container."),
    frame_rate: Optional[float] = typer.Option(None, "--frame-rate", "-r", help="Seconds per frame.", show_default=False),
    alternate: bool = typer.Option(settings.default_alternate, "--alternate/--no-alternate", help="Reverse direction each pass."),
    iterations: Optional[str] = typer.Option(None, "--iterations", "-i", help="Positive integer or 'infinite'.", show_default=False),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Base name for keyframes."),
    selector: Optional[str] = typer.Option(None, "--selector", "-s", help="Container class selector, e.g. '.walk'."),
    container: Optional[str] = typer.Option(None, "--container", help="Container selector for positional binding."),
    frame: List[str] = typer.Option(None, "--frame", "-f", help="Frame selector/id in frame order (repeatable).", show_default=False),
    output_format: str = typer.Option("css", "--format", help="Output format: css or json."),
    svg: Optional[Path] = typer.Option(None, "--svg", help="Inject the CSS into this SVG file."),
    strict: bool = typer.Option(False, "--strict", help="Fail when --frame ids are missing from the SVG."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write to file instead of stdout."),
    save: bool = typer.Option(False, "--save", help="Write to the configured output directory."),
):
    """Emit timed visibility rules for FRAME_COUNT sequential frames."""
    if output_format not in FORMATS:
        raise typer.BadParameter(f"Expected one of {', '.join(FORMATS)}", param_hint="--format")

    if frame and container:
        raise typer.BadParameter("cannot be combined with --frame; frames are bound explicitly", param_hint="--container")

    spec = _build_spec(frame_count, frame_rate, alternate, iterations)

    if output_format == "json":
        _emit(spec.to_json(), output, "frames.json" if save else None)
        return

    try:
        if name is None:
            name = base_name_from_selector(selector) if selector else "frames"
        container_selector = container or selector
        frames = list(frame) if frame else None

        if svg is not None:
            content = inject_frame_css(
                read_text_file(str(svg)),
                spec,
                name,
                frame_ids=frames,
                container_selector=container_selector,
                strict=strict,
                precision=settings.percent_precision,
            )
            suffix = ".svg"
        else:
            content = build_frame_css(
                spec,
                name,
                container_selector=container_selector,
                frame_selectors=frames,
                precision=settings.percent_precision,
            )
            suffix = ".css"
    except InvalidArgument as exc:
        raise typer.BadParameter(str(exc), param_hint=PARAM_HINTS.get(exc.parameter, exc.parameter)) from exc
    except (FileNotFoundError, ValueError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    _emit(content, output, f"{name}{suffix}" if save else None)


@app.command()
def windows(
    frame_count: int = typer.Argument(..., help="Number of frames."),
    frame_rate: Optional[float] = typer.Option(None, "--frame-rate", "-r", help="Seconds per frame.", show_default=False),
):
    """Print each frame's visibility window."""
    spec = _build_spec(frame_count, frame_rate, settings.default_alternate, None)
    for window in spec.frame_windows:
        start_s = window.start_percent / 100 * spec.total_duration
        typer.echo(
            f"frame {window.frame_index}: {window.start_percent:.2f}% - {window.end_percent:.2f}% "
            f"(from {start_s:.3f}s)"
        )
    typer.echo(f"total: {spec.total_duration:g}s")


if __name__ == "__main__":
    app()

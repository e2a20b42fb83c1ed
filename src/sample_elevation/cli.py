"""Typer CLI for the sample elevation generator."""
from __future__ import annotations
import typer
from pathlib import Path
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from sample_elevation.config import DEFAULT_CONFIG_PATH, ConfigSchema, load_config
from sample_elevation.engine.runner import run
from sample_elevation.engine.sample_io import SampleDocument, load_sample_data

app = typer.Typer(help="Sample elevation data generator")
console = Console()


def _load_config(config: Path) -> ConfigSchema:
    try:
        return load_config(config)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc), param_hint="--config")


def _load_document(path: Path) -> SampleDocument:
    try:
        return load_sample_data(path)
    except (ValidationError, ValueError) as exc:
        raise typer.BadParameter(f"{path} is not a valid sample document: {exc}", param_hint="PATH")


def _generate(cfg: ConfigSchema) -> None:
    if not run(cfg):
        raise typer.Exit(code=1)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context):
    """Generate sample data with the packaged defaults when no command is given."""
    if ctx.invoked_subcommand is None:
        _generate(_load_config(DEFAULT_CONFIG_PATH))


@app.command()
def generate(
    config: Path = typer.Option(DEFAULT_CONFIG_PATH, exists=True, dir_okay=False, help="YAML config path"),
    output: Path = typer.Option(None, help="Override output JSON path"),
    width: int = typer.Option(None, min=1, help="Override grid width"),
    height: int = typer.Option(None, min=1, help="Override grid height"),
    seed: int = typer.Option(None, min=0, help="Seed the variation for reproducible output"),
    create_dirs: bool = typer.Option(None, "--create-dirs/--no-create-dirs", help="Create missing output directories"),
):
    cfg = _load_config(config)
    if output is not None:
        cfg.outputs.path = output
    if width is not None:
        cfg.grid.width = width
    if height is not None:
        cfg.grid.height = height
    if seed is not None:
        cfg.seed = seed
    if create_dirs is not None:
        cfg.outputs.create_dirs = create_dirs
    _generate(cfg)


@app.command()
def inspect(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Sample document"),
    report: Path = typer.Option(None, help="Write a markdown report here"),
):
    from sample_elevation.analysis import corner_means, describe_grid, write_report

    document = _load_document(path)
    table = Table(title=f"{path.name} ({document.width}x{document.height})")
    table.add_column("statistic")
    table.add_column("value", justify="right")
    for name, value in describe_grid(document).items():
        table.add_row(str(name), f"{value:.4f}")
    near, far = corner_means(document, size=min(5, document.width, document.height))
    table.add_row("origin corner mean", f"{near:.4f}")
    table.add_row("far corner mean", f"{far:.4f}")
    table.add_row("origin cell", f"{document.cell(0, 0):.4f}")
    table.add_row("far corner cell", f"{document.cell(document.width - 1, document.height - 1):.4f}")
    console.print(table)
    if report is not None:
        write_report(document, report)
        console.print(f"Report written to {report}")


@app.command()
def preview(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Sample document"),
    out: Path = typer.Option(Path("sampleElevation.png"), help="PNG output path"),
):
    from sample_elevation.analysis import plot_heightmap

    plot_heightmap(_load_document(path), out)
    console.print(f"Preview written to {out}")


if __name__ == "__main__":
    app()

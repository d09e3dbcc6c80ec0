"""CLI interface for graphic using Typer framework."""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from graphic import __description__, __version__
from graphic.config import GraphicConfig, LogLevel, load_config
from graphic.errors import FormatError
from graphic.graph import (
    FAMILY_INFO,
    colour_from_name,
    create_generator,
    family_from_name,
    load_grphc,
)
from graphic.markup import to_html
from graphic.models import Colour

app = typer.Typer(
    name="graphic",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()

_LOG_LEVELS = {
    LogLevel.ERROR.value: logging.ERROR,
    LogLevel.WARN.value: logging.WARNING,
    LogLevel.INFO.value: logging.INFO,
    LogLevel.DEBUG.value: logging.DEBUG,
}

_verbose = False


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"graphic version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-V", callback=version_callback, help="Show version and exit")
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output")
    ] = False,
) -> None:
    """graphic - parametric graph layout and TikZ export."""
    global _verbose
    _verbose = verbose
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")


def _load(config_path: Path | None) -> GraphicConfig:
    """Load configuration and apply its logging level."""
    try:
        config = load_config(config_path)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    level = logging.DEBUG if _verbose else _LOG_LEVELS.get(config.logging.level, logging.WARNING)
    logging.getLogger("graphic").setLevel(level)
    return config


def _parse_colour(value: str) -> Colour:
    try:
        return colour_from_name(value)
    except ValueError:
        return Colour.parse(value)


def _emit(rendered: str, out: Path | None, generator, graph, format: str) -> None:
    if out is None:
        typer.echo(rendered, nl=False)
        return
    output_file = generator.write_graph(graph, out.resolve(), format)
    console.print(f"[green]Graph written:[/green] {output_file}")


@app.command()
def families() -> None:
    """List the graph families and their parameters."""
    table = Table(title="Graph families")
    table.add_column("Family", style="cyan")
    table.add_column("Name")
    table.add_column("Parameters", style="dim")

    for family, info in FAMILY_INFO.items():
        params = info.first_label
        if info.takes_second:
            params += f", {info.second_label}"
        table.add_row(family.value, info.display_name, params)

    console.print(table)


@app.command()
def generate(
    family: Annotated[
        str,
        typer.Argument(help="Graph family (see 'graphic families')")
    ],
    count: Annotated[
        int,
        typer.Argument(help="First parameter: nodes, rows, top nodes or blades")
    ],
    second: Annotated[
        int,
        typer.Argument(help="Second parameter for bipartite, grid, petersen and windmill")
    ] = None,
    width: Annotated[
        float,
        typer.Option("--width", "-W", help="Drawing width in inches")
    ] = None,
    height: Annotated[
        float,
        typer.Option("--height", "-H", help="Drawing height in inches")
    ] = None,
    diameter: Annotated[
        float,
        typer.Option("--diameter", "-d", help="Node diameter in inches")
    ] = None,
    no_edges: Annotated[
        bool,
        typer.Option("--no-edges", help="Emit nodes only")
    ] = False,
    numbered: Annotated[
        bool,
        typer.Option("--numbered", "-n", help="Label nodes with consecutive numbers")
    ] = False,
    label_start: Annotated[
        int,
        typer.Option("--label-start", help="First label number")
    ] = None,
    top_label: Annotated[
        str,
        typer.Option("--top-label", help="Node label prefix (top row for bipartite)")
    ] = None,
    bottom_label: Annotated[
        str,
        typer.Option("--bottom-label", help="Bottom row label prefix for bipartite graphs")
    ] = None,
    rotation: Annotated[
        float,
        typer.Option("--rotation", "-r", help="Rotation in degrees, counter-clockwise")
    ] = None,
    fill: Annotated[
        str,
        typer.Option("--fill", help="Node fill colour: TikZ name, #rrggbb or r,g,b")
    ] = None,
    outline: Annotated[
        str,
        typer.Option("--outline", help="Node outline colour")
    ] = None,
    edge_colour: Annotated[
        str,
        typer.Option("--edge-colour", help="Edge colour")
    ] = None,
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: tikz, grphc, edges (default: tikz)")
    ] = "tikz",
    out: Annotated[
        Path,
        typer.Option("--out", "-o", help="Output file path (default: stdout)")
    ] = None,
    config: Annotated[
        Path,
        typer.Option("--config", "-c", help="Configuration file path (default: search for .graphic.json)")
    ] = None,
) -> None:
    """Generate, style and render a graph family."""
    graphic_config = _load(config)

    try:
        graph_family = family_from_name(family)

        overrides = {
            "width": width,
            "height": height,
            "node_diameter": diameter,
            "label_start": label_start,
            "top_label": top_label,
            "bottom_label": bottom_label,
            "rotation": rotation,
            "node_fill": _parse_colour(fill) if fill else None,
            "node_outline": _parse_colour(outline) if outline else None,
            "edge_colour": _parse_colour(edge_colour) if edge_colour else None,
        }
        if numbered:
            overrides["numbered_labels"] = True
        update = {k: v for k, v in overrides.items() if v is not None}
        params = graphic_config.style.model_validate(
            {**graphic_config.style.model_dump(), **update}
        )

        generator = create_generator(graphic_config)
        graph = generator.generate(graph_family, count, second, draw_edges=not no_edges, params=params)
        rendered = generator.render_graph(graph, format)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if out is not None:
        console.print(f"[green]OK[/green] {graph_family.value}: {len(graph.nodes)} nodes, {len(graph.edges)} edges")
    _emit(rendered, out, generator, graph, format)


@app.command()
def convert(
    input: Annotated[
        Path,
        typer.Argument(help="Path to a .grphc file")
    ],
    format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: tikz, grphc, edges (default: tikz)")
    ] = "tikz",
    out: Annotated[
        Path,
        typer.Option("--out", "-o", help="Output file path (default: stdout)")
    ] = None,
    config: Annotated[
        Path,
        typer.Option("--config", "-c", help="Configuration file path (default: search for .graphic.json)")
    ] = None,
) -> None:
    """Load a .grphc file and render it in another format."""
    graphic_config = _load(config)

    try:
        graph = load_grphc(input)
        generator = create_generator(graphic_config)
        rendered = generator.render_graph(graph, format)
    except FormatError as e:
        console.print(f"[red]Error:[/red] {input} line {e.line}: {e.reason}")
        raise typer.Exit(1)
    except OSError as e:
        console.print(f"[red]Error:[/red] Cannot read {input}: {e}")
        raise typer.Exit(1)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    _emit(rendered, out, generator, graph, format)


@app.command()
def label(
    text: Annotated[
        str,
        typer.Argument(help="Label source, e.g. 'v_{i+1}^2'")
    ],
) -> None:
    """Show the display HTML for a node or edge label."""
    typer.echo(to_html(text))


@app.command("config")
def show_config(
    config: Annotated[
        Path,
        typer.Option("--config", "-c", help="Configuration file path (default: search for .graphic.json)")
    ] = None,
) -> None:
    """Show the effective configuration."""
    graphic_config = _load(config)
    console.print_json(graphic_config.model_dump_json(by_alias=True))


if __name__ == "__main__":
    app()

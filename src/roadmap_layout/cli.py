"""CLI for roadmap-layout."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from roadmap_layout import __version__
from roadmap_layout.layout import LayoutConfig, layout_roadmap, route_edges
from roadmap_layout.layout.config import VARIANTS
from roadmap_layout.layout.constants import NODE_HEIGHT, NODE_WIDTH, SECTION_SPACING
from roadmap_layout.parser import load_roadmap_file
from roadmap_layout.parser.checks import Severity, check_roadmap, has_errors
from roadmap_layout.render import render_svg
from roadmap_layout.themes import THEMES


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """roadmap-layout: Generate roadmap diagrams as SVG from JSON definitions."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output SVG file path. Defaults to <input>.svg")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="light",
              help="Visual theme (default: light)")
@click.option("--variant", type=click.Choice(VARIANTS), default="spine",
              help="Placement model (default: spine)")
@click.option("--dynamic-width", is_flag=True,
              help="Size topic boxes from their title length")
@click.option("--node-width", type=float, default=NODE_WIDTH,
              help=f"Fixed topic box width (default: {NODE_WIDTH:g})")
@click.option("--node-height", type=float, default=NODE_HEIGHT,
              help=f"Topic box height (default: {NODE_HEIGHT:g})")
@click.option("--section-spacing", type=float, default=SECTION_SPACING,
              help=f"Vertical gap between sections (default: {SECTION_SPACING:g})")
@click.option("--highlight", default=None,
              help="Highlight topics whose title contains this text")
def render(
    input_file: Path,
    output: Path | None,
    theme: str,
    variant: str,
    dynamic_width: bool,
    node_width: float,
    node_height: float,
    section_spacing: float,
    highlight: str | None,
) -> None:
    """Render a roadmap definition to SVG."""
    roadmap = _load_or_exit(input_file)
    config = LayoutConfig(
        variant=variant,
        dynamic_width=dynamic_width,
        node_width=node_width,
        node_height=node_height,
        section_spacing=section_spacing,
    )
    try:
        layout = layout_roadmap(roadmap, config)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e

    routes = route_edges(layout, roadmap.topics, roadmap.dependencies, config)
    svg = render_svg(roadmap, layout, routes, THEMES[theme], config, highlight=highlight)

    if output is None:
        output = input_file.with_suffix(".svg")

    output.write_text(svg)
    click.echo(f"Rendered {len(layout.topics)} topics, "
               f"{len(routes)} edges, "
               f"{len(layout.sections)} sections -> {output}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def validate(input_file: Path) -> None:
    """Check a roadmap definition for consistency problems."""
    roadmap = _load_or_exit(input_file)
    issues = check_roadmap(roadmap)

    warnings = [i for i in issues if i.severity == Severity.WARNING]
    for issue in warnings:
        click.echo(f"Warning: {issue.message}", err=True)

    if has_errors(issues):
        click.echo("Validation errors:", err=True)
        for issue in issues:
            if issue.severity == Severity.ERROR:
                click.echo(f"  - {issue.message}", err=True)
        raise SystemExit(1)

    click.echo(f"Valid: {len(roadmap.sections)} sections, "
               f"{len(roadmap.topics)} topics, "
               f"{len(roadmap.dependencies)} dependencies")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def info(input_file: Path) -> None:
    """Show information about a roadmap definition."""
    roadmap = _load_or_exit(input_file)

    click.echo(f"Title: {roadmap.title or '(none)'}")
    click.echo(f"Topics: {len(roadmap.topics)}")
    click.echo(f"Dependencies: {len(roadmap.dependencies)}")
    click.echo(f"Sections: {len(roadmap.sections)}")
    for section in sorted(roadmap.sections, key=lambda s: s.order):
        name = section.title or section.id
        click.echo(f"  [{section.order}] {name}: "
                   f"{len(roadmap.section_topics(section.id))} topics")


def _load_or_exit(input_file: Path):
    try:
        return load_roadmap_file(input_file)
    except ValueError as e:
        click.echo(f"Parse error: {e}", err=True)
        raise SystemExit(1)

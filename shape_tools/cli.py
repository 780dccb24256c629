"""Command-line interface for shape-tools."""

import logging
import sys
import time
import click
import numpy as np
import pyperclip

from . import __version__
from .errors import ShapeToolsError
from .geojson_io import (
    read_geojson,
    write_geojson,
    extract_polygons_from_geojson,
    polygons_to_geojson,
)
from .generator import generate_polygons
from .union import union_all, union_polygons

UNION_METHODS = {
    'graph': union_polygons,
    'merge': union_all,
}


@click.group()
@click.version_option(version=__version__)
def main():
    """shape-tools: Random polygons and polygon unions as GeoJSON.

    Examples:

        shape-tools generate 2 -o polygons.geojson

        shape-tools union polygons.geojson --method graph > union.geojson
    """
    pass


def _copy_to_clipboard(content):
    try:
        pyperclip.copy(content)
    except pyperclip.PyperclipException as e:
        click.echo(f"Error copying to clipboard: {e}", err=True)
        sys.exit(1)
    click.echo("Copied to clipboard", err=True)


@main.command()
@click.argument('count', type=click.IntRange(min=1))
@click.option('-o', '--output', default='-', help='Output file (default: stdout)')
@click.option('--seed', type=int, default=None, help='Random seed for reproducible output')
@click.option('--copy', 'copy_', is_flag=True, help='Also copy the GeoJSON to the clipboard')
def generate(count, output, seed, copy_):
    """Generate COUNT random polygons as a GeoJSON FeatureCollection."""
    polygons = generate_polygons(count, seed=seed)
    content = polygons_to_geojson(polygons, rng=np.random.default_rng(seed))

    try:
        write_geojson(content, output if output != '-' else None)
    except OSError as e:
        click.echo(f"Error writing output: {e}", err=True)
        sys.exit(1)

    if copy_:
        _copy_to_clipboard(content)


@main.command()
@click.argument('input', default='-', required=False)
@click.option('-o', '--output', default='-', help='Output file (default: stdout)')
@click.option('--method', '-m', default='graph',
              type=click.Choice(sorted(UNION_METHODS)),
              help='Union algorithm (default: graph)')
@click.option('--verbose', '-v', is_flag=True, help='Print timing and statistics')
@click.option('--copy', 'copy_', is_flag=True, help='Also copy the GeoJSON to the clipboard')
def union(input, output, method, verbose, copy_):
    """Union the polygons of a GeoJSON file.

    INPUT: GeoJSON file path, or - for stdin (default)

    Reads every Polygon feature (outer ring only) and writes their union as
    a single-feature FeatureCollection.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr,
                            format='%(name)s: %(message)s')
    start_time = time.time()

    try:
        content = read_geojson(input if input != '-' else None)
    except OSError as e:
        click.echo(f"Error reading input: {e}", err=True)
        sys.exit(1)

    try:
        polygons = extract_polygons_from_geojson(content)
    except ShapeToolsError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if verbose:
        click.echo(f"Found {len(polygons)} polygons", err=True)

    if len(polygons) < 2:
        click.echo("Need at least two polygons to union", err=True)
        sys.exit(1)

    try:
        result = UNION_METHODS[method](polygons)
    except ShapeToolsError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if verbose:
        click.echo(f"Union has {len(result)} points", err=True)

    content = polygons_to_geojson([result])
    try:
        write_geojson(content, output if output != '-' else None)
    except OSError as e:
        click.echo(f"Error writing output: {e}", err=True)
        sys.exit(1)

    if copy_:
        _copy_to_clipboard(content)

    elapsed = time.time() - start_time
    if verbose:
        click.echo(f"Completed in {elapsed:.3f}s", err=True)


@main.command()
def methods():
    """List available union methods."""
    click.echo("Available methods:")
    click.echo()
    click.echo("  graph  - Vertex graph walk along the outer silhouette (any number of polygons)")
    click.echo("  merge  - Angle-sorted merge around the first vertex (star-shaped unions only)")
    click.echo()
    click.echo("Use: shape-tools union --method <name> input.geojson")


if __name__ == '__main__':
    main()

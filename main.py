"""
main.py

Command line front end. Normalizes or converts SVG path data given on the
command line, or found in the <path> elements of an SVG file (via SVGParser
from the module 'command').

    svgpath format "M10 10L20 20"
    svgpath convert "m10,10l5,5"
    svgpath extract drawing.svg --convert
"""

import logging

import click

from command import SVGParser
from patherrors import PathDataError
from svgpathconverter import SVGPathConverter


def _run(action, d):
    try:
        return action(d)
    except PathDataError as e:
        raise click.ClickException(str(e)) from e


def _echo_primitives(elements):
    for element in elements:
        click.echo(element)


@click.group()
@click.option("--strict", is_flag=True, help="Fail on unknown command letters instead of skipping them")
@click.option("-v", "--verbose", is_flag=True, help="Log every segment and primitive")
@click.pass_context
def cli(ctx, strict, verbose):
    """Normalize SVG path data or resolve it into drawing primitives."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = SVGPathConverter(strict=strict)


@cli.command("format")
@click.argument("path_data", nargs=-1, required=True)
@click.pass_obj
def format_command(converter, path_data):
    """Print each PATH_DATA with canonical punctuation."""
    for d in path_data:
        click.echo(_run(converter.format, d))


@cli.command("convert")
@click.argument("path_data", nargs=-1, required=True)
@click.pass_obj
def convert_command(converter, path_data):
    """Print the absolute drawing primitives of each PATH_DATA."""
    for d in path_data:
        _echo_primitives(_run(converter.convert, d))


@cli.command("extract")
@click.argument("svg_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--convert", "as_primitives", is_flag=True, help="Print primitives instead of normalized path data")
@click.pass_obj
def extract_command(converter, svg_file, as_primitives):
    """Process every <path> found in SVG_FILE."""
    svg_paths = SVGParser(svg_file).path_data()
    if not svg_paths:
        click.echo("No SVG paths found in {}".format(svg_file))
        return
    for d in svg_paths:
        if as_primitives:
            _echo_primitives(_run(converter.convert, d))
        else:
            click.echo(_run(converter.format, d))


def main():
    cli()


if __name__ == "__main__":
    main()

"""
vcdheader CLI - show the header metadata of a VCD file.

Usage:
    vcdheader <vcd_file>            # Header panel
    vcdheader <vcd_file> --json     # Header as JSON
"""

import json
import logging
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from vcdheader.errors import LoadError
from vcdheader.loader import VCDLoader
from vcdheader.vcd import ParseOptions


console = Console()


@click.command()
@click.argument("vcd_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Print the header as JSON")
@click.option("--exact-lines", is_flag=True, help="Count every newline in error line numbers")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(vcd_file, as_json, exact_lines, verbose):
    """
    Show the date, version, timescale and comments of a VCD file.

    Examples:

    \b
        vcdheader simulation.vcd
        vcdheader simulation.vcd --json
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    options = ParseOptions(exact_line_numbers=exact_lines)
    try:
        vcd = VCDLoader.load_from_file(vcd_file, options)
    except LoadError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}", highlight=False)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(vcd.to_dict(), indent=2))
        return

    comments = "\n".join(f"  - {escape(c)}" for c in vcd.comments) or "  N/A"
    console.print(Panel(
        f"[bold]File:[/] {escape(vcd_file)}\n"
        f"[bold]Date:[/] {escape(vcd.date) or 'N/A'}\n"
        f"[bold]Version:[/] {escape(vcd.version) or 'N/A'}\n"
        f"[bold]Timescale:[/] {vcd.timescale}\n"
        f"[bold]Comments:[/]\n{comments}",
        title="VCD Header"
    ))


if __name__ == "__main__":
    main()

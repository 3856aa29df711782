import click
from rich.console import Console

from ..themes import load_themes
from ..utils.render import themes_table


@click.command(name="themes")
@click.option('--names-only', is_flag=True, help='Print theme names, one per line')
def themes(names_only):
    """List the built-in colour themes and their CSS variables."""
    available = load_themes()
    if names_only:
        for name in sorted(available):
            click.echo(name)
        return
    Console().print(themes_table(available))

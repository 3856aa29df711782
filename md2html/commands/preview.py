from pathlib import Path

import click

from ..converters.markdown import decode_source
from ..errors import Md2HtmlError
from ..pipeline import read_source
from ..utils.log import error
from ..utils.render import render_markdown_paged


@click.command(name="preview")
@click.option('-i', '--input', 'input_md_file', required=True,
              type=click.Path(dir_okay=False, path_type=Path), help='Markdown file to preview')
@click.option('--pager/--no-pager', default=True, help='Scroll long documents in a pager')
@click.pass_context
def preview(ctx, input_md_file, pager):
    """Render a Markdown file in the terminal (no HTML written)."""
    try:
        text = decode_source(read_source(input_md_file))
    except Md2HtmlError as e:
        error(ctx, str(e))
        raise SystemExit(1)
    render_markdown_paged(text, title=input_md_file.name, pager=pager)

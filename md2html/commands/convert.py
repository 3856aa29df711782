from pathlib import Path

import click

from ..errors import Md2HtmlError
from ..pipeline import convert_file, output_path_for
from ..selector import launch_file
from ..utils.config import resolve_option
from ..utils.log import debug, error, info, success
from .options import build_page_options, page_options


@click.command(name="convert")
@click.option('-i', '--input', 'input_md_file', required=True,
              type=click.Path(dir_okay=False, path_type=Path), help='Input Markdown file')
@click.option('-o', '--output', 'html_file', default=None,
              type=click.Path(dir_okay=False, path_type=Path),
              help='Output HTML file (overrides --naming)')
@click.option('--title', default=None, help='Page title (default: input file name)')
@page_options
@click.option('--open', 'open_after', is_flag=True, help='Open the result with the default application')
@click.pass_context
def convert(ctx, input_md_file, html_file, title, theme, highlight, dark_toggle, copy_buttons,
            naming, open_after):
    """Convert one Markdown file to a standalone HTML page."""
    cfg = ctx.obj.get("config", {})
    naming = resolve_option("naming", naming, cfg)
    try:
        options = build_page_options(
            cfg,
            title=title or input_md_file.name,
            theme=theme,
            highlight=highlight,
            dark_toggle=dark_toggle,
            copy_buttons=copy_buttons,
        )
        out = output_path_for(input_md_file, naming=naming, output=html_file)
        info(ctx, f"Converting: {input_md_file} → {out}")
        debug(ctx, f"Options: {options}")
        convert_file(input_md_file, out, options)
    except Md2HtmlError as e:
        error(ctx, str(e))
        raise SystemExit(1)

    success(ctx, f"Conversion complete. Output written to {out}")
    if open_after:
        launch_file(out, ctx=ctx)

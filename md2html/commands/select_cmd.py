from pathlib import Path

import click

from ..errors import Md2HtmlError
from ..selector import run_interactive
from ..utils.config import resolve_flag, resolve_option
from ..utils.log import error, success
from ..utils.prompts import make_prompter
from .options import build_page_options, page_options


@click.command(name="select")
@click.option('--dir', 'directory', default=".", show_default=True,
              type=click.Path(file_okay=False, exists=True, path_type=Path),
              help='Directory to scan for .md files (not recursive)')
@click.option('--dialog/--no-dialog', envvar='MD2HTML_DIALOG', default=None,
              help='Use full-screen dialogs instead of line prompts')
@page_options
@click.pass_context
def select(ctx, directory, dialog, theme, highlight, dark_toggle, copy_buttons, naming):
    """Pick a Markdown file interactively, convert it and optionally open it."""
    cfg = ctx.obj.get("config", {})
    prompter = make_prompter(resolve_flag("dialog", dialog, cfg))
    try:
        options = build_page_options(
            cfg,
            title="",
            theme=theme,
            highlight=highlight,
            dark_toggle=dark_toggle,
            copy_buttons=copy_buttons,
        )
        out = run_interactive(
            directory,
            prompter,
            options,
            naming=resolve_option("naming", naming, cfg),
            ctx=ctx,
        )
    except Md2HtmlError as e:
        error(ctx, str(e))
        raise SystemExit(1)

    success(ctx, f"Conversion complete. Output written to {out}")

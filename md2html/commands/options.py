from __future__ import annotations

import click

from ..converters.page import PageOptions
from ..pipeline import NAMING_POLICIES
from ..utils.config import resolve_flag, resolve_option


def page_options(func):
    """Shared page-styling flags for commands that write HTML."""
    decorators = [
        click.option('--theme', envvar='MD2HTML_THEME', default=None,
                     help='Colour theme (see `md2html themes`; default: default)'),
        click.option('--highlight/--no-highlight', envvar='MD2HTML_HIGHLIGHT', default=None,
                     help='Load highlight.js from the CDN for code blocks (default on)'),
        click.option('--dark-toggle/--no-dark-toggle', envvar='MD2HTML_DARK_TOGGLE', default=None,
                     help='Add the dark mode toggle button (default on)'),
        click.option('--copy-buttons/--no-copy-buttons', envvar='MD2HTML_COPY_BUTTONS', default=None,
                     help='Add a Copy button to each code block (default on)'),
        click.option('--naming', envvar='MD2HTML_NAMING', default=None,
                     type=click.Choice(NAMING_POLICIES, case_sensitive=False),
                     help='replace: notes.md → notes.html; fixed: output.html (default: replace)'),
    ]

    for dec in reversed(decorators):
        func = dec(func)
    return func


def build_page_options(cfg: dict, *, title: str, theme, highlight, dark_toggle, copy_buttons) -> PageOptions:
    return PageOptions(
        title=title,
        theme=resolve_option("theme", theme, cfg),
        highlight=resolve_flag("highlight", highlight, cfg),
        dark_toggle=resolve_flag("dark_toggle", dark_toggle, cfg),
        copy_buttons=resolve_flag("copy_buttons", copy_buttons, cfg),
        lang=str(resolve_option("lang", None, cfg)),
    )

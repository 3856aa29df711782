# md2html/utils/render.py
from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table

from ..themes import Theme


def render_markdown_paged(markdown_text: str, title: Optional[str] = None, *, console: Console | None = None,
                          pager: bool = True) -> None:
    """
    Page the Markdown content in the terminal with a header panel.
    Uses Rich's pager so long docs are scrollable.
    """
    console = console or Console()

    def _print():
        if title:
            console.print(Panel.fit(f"[bold]{title}[/bold]"))
        console.print(Markdown(markdown_text, code_theme="monokai"))

    if pager:
        with console.pager(styles=True):
            _print()
    else:
        _print()


def themes_table(themes: dict[str, Theme]) -> Table:
    table = Table(title="Themes", show_lines=False)
    table.add_column("Theme", style="bold")
    table.add_column("Variable")
    table.add_column("Light")
    table.add_column("Dark")
    for name in sorted(themes):
        first = True
        for prop, value in themes[name].variables.items():
            table.add_row(name if first else "", f"--{prop}", value.light, value.dark)
            first = False
    return table

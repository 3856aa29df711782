from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape
from markupsafe import Markup

from ..themes import get_theme


TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
HIGHLIGHT_CDN = "https://cdnjs.cloudflare.com/ajax/libs/highlight.js/11.9.0"
DEFAULT_TITLE = "Markdown Converted to HTML"


@dataclass
class PageOptions:
    title: str = DEFAULT_TITLE
    theme: str = "default"
    dark_toggle: bool = True
    copy_buttons: bool = True
    highlight: bool = True
    lang: str = "en"


def _environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html"]),
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )


_env = _environment()


def compose_page(fragment: str, options: PageOptions | None = None) -> str:
    """
    Wrap a rendered fragment in a complete HTML document.

    The fragment is trusted and embedded as-is; the title is escaped.
    Raises ThemeNotFound for an unknown theme name.
    """
    options = options or PageOptions()
    theme = get_theme(options.theme)
    template = _env.get_template("page.html")
    return template.render(
        title=options.title,
        lang=options.lang,
        theme=theme,
        body=Markup(fragment),
        dark_toggle=options.dark_toggle,
        copy_buttons=options.copy_buttons,
        highlight=options.highlight,
        highlight_cdn=HIGHLIGHT_CDN,
    )

from __future__ import annotations

import re
from functools import lru_cache

from markdown_it import MarkdownIt
from mdit_py_plugins.anchors import anchors_plugin
from mdit_py_plugins.anchors.index import slugify
from mdit_py_plugins.footnote import footnote_plugin
from mdit_py_plugins.tasklists import tasklists_plugin


_ABSOLUTE_HREF = re.compile(r"^(?:[a-z][a-z0-9+.\-]*:|//)", re.IGNORECASE)
FALLBACK_SLUG = "section"


def is_external_link(href: str) -> bool:
    return bool(_ABSOLUTE_HREF.match(href.strip()))


def heading_slug(title: str) -> str:
    # Headings without word characters still need a linkable, non-empty id.
    return slugify(title) or FALLBACK_SLUG


def _render_link_open(self, tokens, idx, options, env):
    # External links open in a new tab; in-page and relative links stay put.
    token = tokens[idx]
    href = token.attrGet("href") or ""
    if is_external_link(str(href)):
        token.attrSet("target", "_blank")
        token.attrSet("rel", "noopener noreferrer")
    return self.renderToken(tokens, idx, options, env)


def build_parser() -> MarkdownIt:
    """
    CommonMark plus the usual GitHub-flavoured extras: tables,
    strikethrough, bare URL autolinks, footnotes, task lists and
    typographic replacements. Every heading gets an auto-generated id.
    """
    md = (
        MarkdownIt("commonmark", {"html": True, "linkify": True, "typographer": True})
        .enable(["table", "strikethrough", "linkify", "replacements", "smartquotes"])
        .use(anchors_plugin, min_level=1, max_level=6, slug_func=heading_slug)
        .use(footnote_plugin)
        .use(tasklists_plugin)
    )
    md.add_render_rule("link_open", _render_link_open)
    return md


@lru_cache(maxsize=1)
def _parser() -> MarkdownIt:
    return build_parser()


def decode_source(source: str | bytes) -> str:
    if isinstance(source, bytes):
        return source.decode("utf-8-sig", errors="replace")
    return source


def render_markdown(source: str | bytes) -> str:
    """Render Markdown source to an HTML fragment. Never raises on bad markup."""
    return _parser().render(decode_source(source))

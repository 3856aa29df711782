from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Callable, List

import click

from .converters.page import PageOptions
from .errors import NoMarkdownFiles
from .pipeline import convert_file, output_path_for, validate_naming
from .utils.log import debug, info, warn
from .utils.prompts import Prompter


def find_markdown_files(directory: str | Path = ".") -> List[Path]:
    """Non-recursive list of *.md files (suffix match is case-insensitive), sorted by name."""
    root = Path(directory)
    files = [p for p in root.iterdir() if p.is_file() and p.suffix.lower() == ".md"]
    return sorted(files, key=lambda p: p.name.lower())


def launch_file(path: str | Path, ctx=None) -> bool:
    """
    Open `path` with the platform's default application.

    Best-effort: a failure is reported as a warning and False is returned.
    """
    target = str(Path(path).resolve())
    try:
        rc = click.launch(target)
    except OSError as e:
        warn(ctx, f"Could not open {target}: {e}")
        return False
    if rc != 0:
        warn(ctx, f"Could not open {target} (opener exited with {rc})")
        return False
    debug(ctx, f"Opened {target}")
    return True


def run_interactive(
    directory: str | Path,
    prompter: Prompter,
    options: PageOptions | None = None,
    *,
    naming: str = "replace",
    opener: Callable[..., bool] = launch_file,
    ctx=None,
) -> Path:
    """
    Pick a Markdown file in `directory`, convert it, then offer to open it.

    Raises NoMarkdownFiles before prompting when there is nothing to pick,
    and PromptAborted when the user cancels either prompt.
    """
    naming = validate_naming(naming)
    files = find_markdown_files(directory)
    if not files:
        raise NoMarkdownFiles(f"No Markdown (.md) files found in {Path(directory).resolve()}")

    by_name = {p.name: p for p in files}
    choice = prompter.choose("Select a Markdown file to convert", list(by_name))
    source = by_name[choice]

    out = output_path_for(source, naming=naming)
    if naming == "fixed":
        out = Path(directory) / out
    page_options = replace(options or PageOptions(), title=source.name)

    info(ctx, f"Converting: {source} → {out}")
    convert_file(source, out, page_options)

    if prompter.confirm("Open the result in your browser?", default=True):
        opener(out, ctx=ctx)
    return out

from __future__ import annotations

from pathlib import Path

from .converters.markdown import render_markdown
from .converters.page import PageOptions, compose_page
from .errors import (
    ConfigError,
    InputNotFound,
    InputReadError,
    OutputWriteError,
    describe_os_error,
)


FIXED_OUTPUT_NAME = "output.html"
NAMING_POLICIES = ("replace", "fixed")


def validate_naming(naming: str) -> str:
    """Normalise a naming policy name, raising ConfigError for unknown ones."""
    policy = str(naming).strip().lower()
    if policy not in NAMING_POLICIES:
        raise ConfigError(f"Unknown naming policy {naming!r} (expected one of: {', '.join(NAMING_POLICIES)})")
    return policy


def output_path_for(source: str | Path, naming: str = "replace", output: str | Path | None = None) -> Path:
    """
    Work out where the HTML goes.

    An explicit output path always wins. Otherwise "replace" swaps the input
    suffix for .html (appending it when there is none) and "fixed" writes
    output.html in the current directory.
    """
    if output:
        return Path(output)
    if validate_naming(naming) == "fixed":
        return Path(FIXED_OUTPUT_NAME)
    source = Path(source)
    if source.suffix:
        return source.with_suffix(".html")
    return source.with_name(source.name + ".html")


def read_source(source: str | Path) -> bytes:
    path = Path(source)
    if not path.is_file():
        raise InputNotFound(f"Input file not found: {path}")
    try:
        return path.read_bytes()
    except OSError as e:
        raise InputReadError(describe_os_error("Error reading input file", path, e)) from e


def write_output(path: Path, document: str) -> None:
    try:
        if path.parent != Path(""):
            path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="\n") as fh:
            fh.write(document)
    except OSError as e:
        raise OutputWriteError(describe_os_error("Error writing output file", path, e)) from e


def _same_file(a: Path, b: Path) -> bool:
    try:
        return b.exists() and a.resolve() == b.resolve()
    except OSError:
        return False


def convert_file(source: str | Path, output: str | Path, options: PageOptions | None = None) -> Path:
    """Read one Markdown file, render it and write exactly one HTML file."""
    source = Path(source)
    output = Path(output)
    if _same_file(source, output):
        raise OutputWriteError(f"Refusing to overwrite the input file: {output}")

    raw = read_source(source)
    fragment = render_markdown(raw)
    document = compose_page(fragment, options or PageOptions(title=source.name))
    write_output(output, document)
    return output

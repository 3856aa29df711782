# md2html/cli.py
from __future__ import annotations

import click

from .utils.config import load_config
from .commands.convert import convert
from .commands.select_cmd import select
from .commands.preview import preview
from .commands.themes_cmd import themes
from .commands.config_cmd import config_group


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--config",
    "config_path",
    envvar="MD2HTML_CONFIG",
    type=click.Path(dir_okay=False, path_type=str),
    help="Path to config TOML (default: ~/.config/md2html/config.toml)",
)
@click.option(
    "--profile",
    default="default",
    show_default=True,
    help="Config profile name in the TOML file",
)
@click.option(
    "--verbose/--no-verbose",
    default=False,
    show_default=True,
    help="Verbose logging",
)
@click.option(
    "--quiet/--no-quiet",
    default=False,
    show_default=True,
    help="Suppress non-error output",
)
@click.version_option(package_name="md2html-cli", prog_name="md2html")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, profile: str,
        verbose: bool, quiet: bool):
    """
    md2html — turn a Markdown file into a standalone, styled HTML page.
    """
    cfg = load_config(config_path, profile)

    # shared context for subcommands
    ctx.ensure_object(dict)
    ctx.obj.update(
        {
            "config": cfg,
            "verbose": verbose,
            "quiet": quiet,
            "profile": profile,
            "config_path": config_path,
        }
    )


# ---- Subcommands ----
cli.add_command(convert)        # md2html convert ...
cli.add_command(select)         # md2html select ...
cli.add_command(preview)        # md2html preview ...
cli.add_command(themes)         # md2html themes
cli.add_command(config_group)   # md2html config ...


if __name__ == "__main__":
    cli()

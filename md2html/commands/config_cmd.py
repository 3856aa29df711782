from __future__ import annotations

import json

import click

from ..utils.config import DEFAULTS, coerce_value, get_default_config_path, save_config
from ..utils.log import success, warn


@click.group(name="config")
def config_group():
    """Inspect and edit configuration."""
    pass


@config_group.command(name="show")
@click.pass_context
def show_config(ctx):
    """Print the active profile merged over the built-in defaults."""
    obj = ctx.obj or {}
    cfg = dict(obj.get("config") or {})
    meta = cfg.pop("_meta", {})
    merged = {**DEFAULTS, **cfg}
    click.secho("=== md2html config ===", fg="cyan")
    click.echo(f"Path   : {meta.get('config_path') or '(none, using defaults)'}")
    click.echo(f"Profile: {obj.get('profile', 'default')}")
    click.echo(json.dumps(merged, indent=2, ensure_ascii=False))


@config_group.command(name="set")
@click.argument("key")
@click.argument("value")
@click.pass_context
def set_config(ctx, key, value):
    """Store KEY = VALUE in the active profile."""
    obj = ctx.obj or {}
    if key not in DEFAULTS:
        warn(ctx, f"Unknown key {key!r}; known keys: {', '.join(DEFAULTS)}")
    target = obj.get("config_path") or str(get_default_config_path())
    profile = obj.get("profile", "default")
    save_config(target, profile, {key: coerce_value(value)})
    success(ctx, f"Saved {key} to profile [{profile}] in {target}")

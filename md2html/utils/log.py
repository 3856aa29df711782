import click


def _obj(ctx) -> dict:
    return ctx.obj if ctx is not None and isinstance(ctx.obj, dict) else {}


def _should_print(ctx, level: str) -> bool:
    obj = _obj(ctx)
    if obj.get("quiet"):
        return False
    if level == "debug":
        return bool(obj.get("verbose"))
    return True


def debug(ctx, msg: str):
    if _should_print(ctx, "debug"):
        click.secho(msg, dim=True, err=True)


def info(ctx, msg: str):
    if _should_print(ctx, "info"):
        click.secho(msg, fg="cyan")


def warn(ctx, msg: str):
    if _should_print(ctx, "warn"):
        click.secho(msg, fg="yellow", err=True)


def error(ctx, msg: str):
    click.secho(msg, fg="red", err=True)


def success(ctx, msg: str):
    if _should_print(ctx, "success"):
        click.secho(msg, fg="green")

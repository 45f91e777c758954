import click

from webstart.cli.ensure import Ensure
from webstart.cli.output import machine_output
from webstart.core.config_keys import IMPORTED_KEYS, LAST_BOOTSTRAP_TIMESTAMP
from webstart.core.context import WebstartContext


@click.group("config")
def config_group() -> None:
    """Read and change the deployment configuration."""


@config_group.command("get")
@click.argument("key")
@click.pass_obj
def config_get(ctx: WebstartContext, key: str) -> None:
    """Print the value of KEY."""
    value = Ensure.not_none(ctx.config_store.get_property(key), f"'{key}' is not set")
    machine_output(value)


@config_group.command("set")
@click.argument("key")
@click.argument("value")
@click.pass_obj
def config_set(ctx: WebstartContext, key: str, value: str) -> None:
    """Set KEY to VALUE."""
    Ensure.invariant(
        not ctx.config_store.is_locked(key),
        f"'{key}' is locked by the installation and cannot be changed",
    )
    Ensure.invariant(
        key != LAST_BOOTSTRAP_TIMESTAMP,
        f"'{key}' is managed by webstart",
    )
    ctx.config_store.set_property(key, value)
    try:
        ctx.config_store.save()
    except (OSError, ValueError) as e:
        Ensure.fail(f"Could not save {ctx.config_store.path()}: {e}")
    ctx.feedback.success(f"✓ Set {key}")


@config_group.command("list")
@click.pass_obj
def config_list(ctx: WebstartContext) -> None:
    """Show the installer-seeded settings and whether they are locked."""
    for key in IMPORTED_KEYS:
        value = ctx.config_store.get_property(key)
        lock_marker = " (locked)" if ctx.config_store.is_locked(key) else ""
        machine_output(f"{key} = {value if value is not None else '<unset>'}{lock_marker}")

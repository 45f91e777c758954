from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from webstart.cli.ensure import Ensure
from webstart.cli.output import user_output
from webstart.core.context import WebstartContext


@click.group("runtimes")
def runtimes_group() -> None:
    """Inspect and manage known Java runtimes."""


@runtimes_group.command("list")
@click.pass_obj
def list_runtimes(ctx: WebstartContext) -> None:
    """List known runtimes, most recently used first."""
    ctx.registry.load()
    runtimes = ctx.registry.runtimes()
    if not runtimes:
        user_output("No Java runtimes found")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Version")
    table.add_column("Vendor")
    table.add_column("OS")
    table.add_column("Path", overflow="fold")
    table.add_column("Active")
    table.add_column("Managed")
    table.add_column("Last used")
    for runtime in runtimes:
        table.add_row(
            runtime.version,
            runtime.vendor,
            runtime.operating_system.value,
            str(runtime.install_path),
            "yes" if runtime.active else "no",
            "yes" if runtime.managed else "no",
            runtime.last_used_at.strftime("%Y-%m-%d %H:%M"),
        )
    Console().print(table)


@runtimes_group.command("deactivate")
@click.argument("install_path", type=click.Path(path_type=Path))
@click.pass_obj
def deactivate_runtime(ctx: WebstartContext, install_path: Path) -> None:
    """Stop using the runtime at INSTALL_PATH for new launches."""
    ctx.registry.load()
    matching = Ensure.not_empty(
        [r for r in ctx.registry.runtimes() if r.install_path == install_path],
        f"No runtime known at {install_path}",
    )
    for runtime in matching:
        ctx.registry.deactivate(runtime)
    try:
        saved = ctx.registry.persist()
    except OSError as e:
        Ensure.fail(f"Could not save the runtime catalog: {e}")
    Ensure.invariant(
        saved,
        "The runtime catalog could not be read, so the change was not saved",
    )
    ctx.feedback.success(f"✓ Deactivated {len(matching)} runtime(s) at {install_path}")

import logging
import os

import click

from webstart.cli.commands.config import config_group
from webstart.cli.commands.launch import launch_cmd
from webstart.cli.commands.notify import notify_cmd
from webstart.cli.commands.runtimes import runtimes_group
from webstart.cli.startup import run_config_bootstrap
from webstart.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

DEBUG_ENV = "WEBSTART_DEBUG"


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="webstart")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Launch JNLP applications on a compatible Java runtime."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()
    run_config_bootstrap(ctx.obj)


cli.add_command(config_group)
cli.add_command(launch_cmd)
cli.add_command(notify_cmd)
cli.add_command(runtimes_group)


def main() -> None:
    """CLI entry point used by the `webstart` console script."""
    if os.environ.get(DEBUG_ENV):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")
    cli()

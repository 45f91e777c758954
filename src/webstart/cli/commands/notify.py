import click

from webstart.cli.ensure import Ensure
from webstart.core.context import WebstartContext


@click.command("notify")
@click.argument("payload")
@click.pass_obj
def notify_cmd(ctx: WebstartContext, payload: str) -> None:
    """Deliver a startup notification to the running webstart instance.

    Intended for OS integrations such as file-open handlers. PAYLOAD is
    split on whitespace and appended to the running instance's arguments.
    """
    Ensure.invariant(
        ctx.notifications.forward(payload.split()),
        "No running webstart instance to notify",
    )

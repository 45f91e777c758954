import logging
from dataclasses import replace

import click

from webstart.cli.ensure import Ensure
from webstart.core.context import WebstartContext
from webstart.core.launch.args import filter_args
from webstart.core.launch.orchestrator import LaunchOrchestrator
from webstart.core.launcher.abc import LaunchConfigurationError
from webstart.core.runtimes.selector import SelectionError
from webstart.core.user_feedback import SuppressedFeedback

logger = logging.getLogger(__name__)

DEFAULT_NOTIFICATION_TIMEOUT_SECONDS = 30.0


@click.command(
    "launch",
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
)
@click.option("--quiet", is_flag=True, help="Only report errors.")
@click.option(
    "--notification-timeout",
    type=float,
    default=DEFAULT_NOTIFICATION_TIMEOUT_SECONDS,
    show_default=True,
    help="Seconds to wait for the open request on platforms that deliver it as a notification.",
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_obj
def launch_cmd(
    ctx: WebstartContext, quiet: bool, notification_timeout: float, args: tuple[str, ...]
) -> None:
    """Launch a JNLP application.

    ARGS are passed through to the application runner, e.g.:

      webstart launch https://example.com/apps/App.jnlp

    Where the OS delivers re-invocations as notifications (macOS) and
    webstart is already running, the arguments are handed to the running
    instance instead and this command returns immediately. Elsewhere every
    invocation launches its own application.
    """
    if quiet:
        ctx = replace(ctx, feedback=SuppressedFeedback())

    single_instance = ctx.platform.delivers_reinvocation_as_notification()
    if single_instance and ctx.notifications.forward(filter_args(args)):
        ctx.feedback.info("Handed launch request to the running webstart instance")
        return

    ctx.registry.load()
    orchestrator = LaunchOrchestrator(ctx.launcher, ctx.platform)
    try:
        bridge = orchestrator.start(args)
    except (SelectionError, LaunchConfigurationError) as e:
        Ensure.fail(str(e))

    if not single_instance:
        ctx.launcher.wait_for_applications()
        return

    ctx.notifications.listen(bridge.on_arguments)
    try:
        if not bridge.wait_for_dispatch(notification_timeout):
            ctx.feedback.error(
                f"No launch request received within {notification_timeout:g} seconds"
            )
        ctx.launcher.wait_for_applications()
    finally:
        ctx.notifications.close()
        bridge.stop()

    # Applications started by a notification that arrived while closing
    ctx.launcher.wait_for_applications()
    logger.debug("All applications exited")

"""Work done on every process start, before any command runs."""

import logging

from webstart.core.bootstrap import ConfigImportError
from webstart.core.context import WebstartContext

logger = logging.getLogger(__name__)


def run_config_bootstrap(ctx: WebstartContext) -> None:
    """Import installer defaults on the first start after installation.

    A failed import is reported but does not stop the command: webstart can
    still launch applications with a partial configuration, and the import
    is retried on the next start.
    """
    try:
        imported = ctx.bootstrap.check()
    except ConfigImportError as e:
        logger.warning("Initial configuration import failed: %s", e)
        ctx.feedback.error(f"Warning: {e}")
        return

    if imported:
        ctx.feedback.info(f"Imported initial configuration into {ctx.config_store.path()}")

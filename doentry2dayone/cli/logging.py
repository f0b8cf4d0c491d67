"""
Logging setup for CLI commands.
"""
import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from doentry2dayone.core.config import get_settings
from doentry2dayone.core.logging_config import LOGGER_NAME


def setup_cli_logging(
    name: str,
    verbose: bool = False,
    level: Optional[str] = None,
    console: Optional[Console] = None,
) -> logging.Logger:
    """
    Route package logs through rich and return a logger for the command.

    Pass the command's console so log lines and progress bars share one
    live display. ``level`` defaults to the environment's log level;
    ``verbose`` forces DEBUG. Calling it again replaces the previous handler.
    """
    package_logger = logging.getLogger(LOGGER_NAME)
    for handler in list(package_logger.handlers):
        if isinstance(handler, RichHandler):
            package_logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(),
        show_path=False,
        markup=False,
        rich_tracebacks=verbose,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(handler)
    if verbose:
        package_logger.setLevel(logging.DEBUG)
    else:
        package_logger.setLevel(level or get_settings().log_level)

    return package_logger.getChild(f"cli.{name}")

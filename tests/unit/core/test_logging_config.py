import logging

from rich.console import Console
from rich.logging import RichHandler

from doentry2dayone.cli.logging import setup_cli_logging
from doentry2dayone.core.logging_config import LOGGER_NAME, log_error, log_warning


def test_log_warning_appends_context(caplog):
    caplog.set_level(logging.WARNING, logger=LOGGER_NAME)

    log_warning("Skipped entry", file="a.doentry", reason=None)

    assert caplog.records[-1].getMessage() == "Skipped entry [file=a.doentry]"


def test_log_error_keeps_exception(caplog):
    caplog.set_level(logging.ERROR, logger=LOGGER_NAME)

    log_error(ValueError("bad"), file="a.doentry")

    record = caplog.records[-1]
    assert record.getMessage() == "ValueError: bad [file=a.doentry]"
    assert record.exc_info is not None


def test_setup_cli_logging_does_not_stack_handlers():
    setup_cli_logging("convert")
    logger = setup_cli_logging("convert", verbose=True)

    package_logger = logging.getLogger(LOGGER_NAME)
    rich_handlers = [h for h in package_logger.handlers if type(h).__name__ == "RichHandler"]
    assert len(rich_handlers) == 1
    assert package_logger.level == logging.DEBUG
    assert logger.name == f"{LOGGER_NAME}.cli.convert"


def test_setup_cli_logging_uses_given_level_and_console():
    console = Console()

    setup_cli_logging("convert", level="WARNING", console=console)

    package_logger = logging.getLogger(LOGGER_NAME)
    handler = next(h for h in package_logger.handlers if isinstance(h, RichHandler))
    assert package_logger.level == logging.WARNING
    assert handler.console is console

"""
Logging helpers shared by services and the CLI.

Context keyword arguments are rendered as ``key=value`` pairs after the
message so per-file failures stay greppable in plain log output.
"""
import logging
from typing import Any, Union

LOGGER_NAME = "doentry2dayone"

logger = logging.getLogger(LOGGER_NAME)


def _with_context(message: str, context: dict[str, Any]) -> str:
    if not context:
        return message
    rendered = " ".join(f"{key}={value}" for key, value in context.items() if value is not None)
    return f"{message} [{rendered}]" if rendered else message


def log_debug(message: str, **context: Any) -> None:
    logger.debug(_with_context(message, context))


def log_info(message: str, **context: Any) -> None:
    logger.info(_with_context(message, context))


def log_warning(message: str, **context: Any) -> None:
    logger.warning(_with_context(message, context))


def log_error(error: Union[BaseException, str], **context: Any) -> None:
    """Log an error; exceptions keep their traceback."""
    if isinstance(error, BaseException):
        message = f"{type(error).__name__}: {error}"
        logger.error(_with_context(message, context), exc_info=error)
    else:
        logger.error(_with_context(error, context))

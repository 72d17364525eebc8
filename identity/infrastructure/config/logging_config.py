"""Logging configuration for the identity package.

Modules log through logging.getLogger(__name__), so everything lives under
the "identity" logger. Host applications that already configure logging
can skip this and attach their own handlers.
"""

import logging

from identity.infrastructure.config.settings import Settings, get_settings

ROOT_LOGGER_NAME = "identity"

# Handler installed by the last configure_logging() call
_handler: logging.Handler | None = None


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """
    Apply level and format from settings to the identity logger.

    Safe to call more than once: the handler installed here is replaced,
    not duplicated. Handlers added by the host application are left alone.

    Args:
        settings: Settings to use (defaults to get_settings())

    Returns:
        The configured "identity" logger
    """
    global _handler

    settings = settings or get_settings()

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(settings.effective_log_level)

    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(settings.log_format))
    logger.addHandler(_handler)

    return logger

"""Logging helpers for hivemark.

hivemark logs at DEBUG only and never installs handlers; applications
decide where records go. Scanner auto-close events carry ``construct`` and
``offset`` record attributes so a handler can filter them without parsing
the message text.

Example:
    >>> from hivemark.utils.logger import get_logger, log_unterminated
    >>> logger = get_logger(__name__)
    >>> log_unterminated(logger, "spoiler", 4)
"""

from __future__ import annotations

import logging

PACKAGE_LOGGER = "hivemark"


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``hivemark`` namespace.

    Example:
        >>> get_logger("mymodule").name
        'hivemark.mymodule'
    """
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def log_unterminated(logger: logging.Logger, construct: str, offset: int) -> None:
    """Record that a construct opened at offset was closed at end of input.

    Args:
        logger: Logger of the scanner that auto-closed the construct
        construct: Human-readable name, e.g. ``"spoiler"`` or ``"AA fence"``
        offset: Position of the opening delimiter in the normalized text
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return
    logger.debug(
        "Unterminated %s at offset %d closed at end of input",
        construct,
        offset,
        extra={"construct": construct, "offset": offset},
    )

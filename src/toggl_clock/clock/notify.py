"""User-facing notifications for clock events."""

import logging
from typing import Callable

logger = logging.getLogger(__name__)

Notifier = Callable[[str, int], None]


def report(notifier: Notifier | None, message: str, level: int = logging.INFO) -> None:
    """Log a message and pass it on to the notifier, if there is one.

    A notifier that raises is logged and otherwise ignored; notifications are
    best effort.

    Args:
        notifier: Callable taking the message and a logging level.
        message: Text to show the user.
        level: Logging level of the message.
    """
    logger.log(level, message)
    if notifier is None:
        return
    try:
        notifier(message, level)
    except Exception as e:
        logger.error(f"Notifier failed: {e}", exc_info=True)

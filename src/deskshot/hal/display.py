"""Ambient display target handling.

X11 clients find their display through the DISPLAY environment variable,
which is process-wide state. Captures that need a different target, or run
detached from any session (cron), change it only inside display_target()
and always put the previous value back.
"""

import os
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from ..logging import get_logger

logger = get_logger(__name__)

DISPLAY_ENV = "DISPLAY"

# Held for the whole scope: the variable is read, replaced and restored as
# one unit.
_display_lock = threading.RLock()


def current_display() -> str | None:
    """Get the ambient display target.

    Returns:
        Value of $DISPLAY, or None if it is unset or empty
    """
    return os.environ.get(DISPLAY_ENV) or None


def _restore(previous: str | None) -> None:
    if previous is None:
        os.environ.pop(DISPLAY_ENV, None)
    else:
        os.environ[DISPLAY_ENV] = previous


@contextmanager
def display_target(override: str = "", fallback: str = "") -> Iterator[str | None]:
    """Point the ambient display target somewhere for the duration of a block.

    An explicit override always wins. Without one, the fallback is applied
    only when no ambient target exists at all. Whatever was set before is
    restored on exit, including the "unset" state.

    Args:
        override: Display to use for this block, empty for none
        fallback: Display to use when nothing else is configured

    Yields:
        The effective display target, or None if none is set
    """
    with _display_lock:
        previous = os.environ.get(DISPLAY_ENV)

        if override:
            target: str | None = override
        elif current_display() is None and fallback:
            target = fallback
        else:
            target = None

        if target is None:
            yield current_display()
            return

        os.environ[DISPLAY_ENV] = target
        logger.debug("display_target_set", display=target, previous=previous)
        try:
            yield target
        finally:
            _restore(previous)
            logger.debug("display_target_restored", display=previous)

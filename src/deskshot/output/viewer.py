"""Open screenshots in the desktop's default image viewer."""

from pathlib import Path

import click

from ..capture_exceptions import ViewerLaunchError
from ..logging import get_logger

logger = get_logger(__name__)


def open_in_viewer(path: str | Path) -> None:
    """Launch the default viewer for a file without waiting for it.

    Args:
        path: File to open

    Raises:
        ViewerLaunchError: If the viewer cannot be started
    """
    try:
        status = click.launch(str(path))
    except OSError as e:
        raise ViewerLaunchError(str(path), str(e)) from e

    if status != 0:
        raise ViewerLaunchError(str(path), f"launcher exited with status {status}")

    logger.debug("viewer_launched", path=str(path))

"""Screen capture interface definition."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from PIL import Image

from ...model.region import Region


@dataclass(frozen=True)
class Monitor:
    """Monitor information.

    The index is only stable for the duration of one process run.
    """

    index: int
    display_name: str
    bounds: Region

    def contains_point(self, x: int, y: int) -> bool:
        """Check if point is within monitor bounds."""
        b = self.bounds
        return b.x <= x < b.right and b.y <= y < b.bottom


class ICaptureStrategy(ABC):
    """Interface for a platform capture mechanism.

    A strategy is constructed once, probed with is_available(), and then
    reused for every capture in the process. Strategies never resolve
    monitor indices themselves; they only enumerate displays and grab
    rectangles of the virtual screen.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier of the mechanism (e.g. "mss")."""
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Check whether the mechanism can run in the current environment.

        Returns:
            True if captures are expected to work
        """
        pass

    @abstractmethod
    def list_displays(self) -> list[Region]:
        """Enumerate active displays.

        Returns:
            Display bounds in virtual-screen coordinates, in enumeration order
        """
        pass

    @abstractmethod
    def capture_rect(self, region: Region) -> Image.Image:
        """Capture pixels of a virtual-screen rectangle.

        Args:
            region: Rectangle to capture

        Returns:
            RGB image of exactly region.width x region.height pixels
        """
        pass

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r}>"

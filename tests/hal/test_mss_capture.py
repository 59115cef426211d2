"""Tests for the MSS capture strategy."""

from unittest.mock import MagicMock, patch

import pytest
from mss.exception import ScreenShotError

from deskshot.capture_exceptions import CaptureBackendError
from deskshot.hal.implementations.mss_capture import MSSCaptureStrategy
from deskshot.model import Region


def mock_mss(monitors: list[dict[str, int]]) -> MagicMock:
    """Build a mock mss.mss() factory whose sessions report the given monitors."""
    sct = MagicMock()
    sct.monitors = monitors
    sct.__enter__.return_value = sct
    sct.__exit__.return_value = False

    def grab(monitor: dict[str, int]) -> MagicMock:
        shot = MagicMock()
        shot.size = (monitor["width"], monitor["height"])
        shot.bgra = bytes([10, 20, 30, 255]) * (monitor["width"] * monitor["height"])
        return shot

    sct.grab.side_effect = grab
    return MagicMock(return_value=sct)


@pytest.fixture
def mock_dual_monitor_mss() -> list[dict[str, int]]:
    """MSS monitor data for dual monitors (secondary on LEFT - negative X)."""
    return [
        {"left": -1920, "top": 0, "width": 3840, "height": 1080},  # Virtual desktop
        {"left": 0, "top": 0, "width": 1920, "height": 1080},  # Primary (right)
        {"left": -1920, "top": 0, "width": 1920, "height": 1080},  # Secondary (left)
    ]


class TestMSSCaptureStrategy:
    """Test MSSCaptureStrategy against a mocked mss."""

    def test_name(self) -> None:
        assert MSSCaptureStrategy().name == "mss"

    def test_available_with_monitors(self, mock_dual_monitor_mss) -> None:
        with patch("mss.mss", mock_mss(mock_dual_monitor_mss)):
            assert MSSCaptureStrategy().is_available() is True

    def test_unavailable_without_monitors(self) -> None:
        virtual_only = [{"left": 0, "top": 0, "width": 0, "height": 0}]
        with patch("mss.mss", mock_mss(virtual_only)):
            assert MSSCaptureStrategy().is_available() is False

    def test_unavailable_when_display_cannot_open(self) -> None:
        with patch("mss.mss", side_effect=ScreenShotError("Unable to open display")):
            assert MSSCaptureStrategy().is_available() is False

    def test_list_displays_skips_virtual_screen(self, mock_dual_monitor_mss) -> None:
        with patch("mss.mss", mock_mss(mock_dual_monitor_mss)):
            displays = MSSCaptureStrategy().list_displays()

        assert displays == [Region(0, 0, 1920, 1080), Region(-1920, 0, 1920, 1080)]

    def test_list_displays_skips_zero_sized_monitors(self) -> None:
        monitors = [
            {"left": 0, "top": 0, "width": 1920, "height": 1080},  # Virtual desktop
            {"left": 0, "top": 0, "width": 1920, "height": 1080},
            {"left": 1920, "top": 0, "width": 0, "height": 0},  # Disconnected output
            {"left": 1920, "top": 0, "width": 1280, "height": 0},
        ]

        with patch("mss.mss", mock_mss(monitors)):
            strategy = MSSCaptureStrategy()
            displays = strategy.list_displays()
            available = strategy.is_available()

        assert displays == [Region(0, 0, 1920, 1080)]
        assert available is True

    def test_unavailable_when_all_monitors_zero_sized(self) -> None:
        monitors = [
            {"left": 0, "top": 0, "width": 0, "height": 0},
            {"left": 0, "top": 0, "width": 0, "height": 0},
        ]

        with patch("mss.mss", mock_mss(monitors)):
            strategy = MSSCaptureStrategy()
            assert strategy.is_available() is False
            assert strategy.list_displays() == []

    def test_capture_rect(self, mock_dual_monitor_mss) -> None:
        factory = mock_mss(mock_dual_monitor_mss)
        with patch("mss.mss", factory):
            image = MSSCaptureStrategy().capture_rect(Region(-10, 5, 4, 3))

        sct = factory.return_value
        sct.grab.assert_called_once_with({"left": -10, "top": 5, "width": 4, "height": 3})
        assert image.mode == "RGB"
        assert image.size == (4, 3)
        # BGRA (10, 20, 30) becomes RGB (30, 20, 10)
        assert image.getpixel((0, 0)) == (30, 20, 10)

    def test_session_closed_after_capture(self, mock_dual_monitor_mss) -> None:
        factory = mock_mss(mock_dual_monitor_mss)
        with patch("mss.mss", factory):
            MSSCaptureStrategy().capture_rect(Region(0, 0, 2, 2))

        factory.return_value.__exit__.assert_called_once()

    def test_grab_failure_is_wrapped(self, mock_dual_monitor_mss) -> None:
        factory = mock_mss(mock_dual_monitor_mss)
        factory.return_value.grab.side_effect = ScreenShotError("XGetImage() failed")

        with patch("mss.mss", factory):
            with pytest.raises(CaptureBackendError) as exc_info:
                MSSCaptureStrategy().capture_rect(Region(0, 0, 2, 2))

        assert exc_info.value.strategy == "mss"
        assert exc_info.value.operation == "capture_rect"
        assert "XGetImage" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, ScreenShotError)

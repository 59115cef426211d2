"""Pytest configuration and fixtures."""

import os

import pytest
from PIL import Image

from deskshot.hal.config import HALConfig, reset_config
from deskshot.hal.interfaces.screen_capture import ICaptureStrategy
from deskshot.hal.registry import StrategyRegistry
from deskshot.model import Region


class StubStrategy(ICaptureStrategy):
    """In-memory capture strategy.

    Records every rectangle it is asked to capture together with the
    $DISPLAY value in effect at that moment.
    """

    def __init__(
        self,
        name: str = "stub",
        available: bool = True,
        displays: list[Region] | None = None,
        enumeration_error: Exception | None = None,
        capture_error: Exception | None = None,
    ) -> None:
        self._name = name
        self.available = available
        self.displays = displays if displays is not None else [Region(0, 0, 1920, 1080)]
        self.enumeration_error = enumeration_error
        self.capture_error = capture_error
        self.probe_count = 0
        self.enumeration_count = 0
        self.captured: list[Region] = []
        self.displays_seen: list[str | None] = []

    @property
    def name(self) -> str:
        return self._name

    def is_available(self) -> bool:
        self.probe_count += 1
        return self.available

    def list_displays(self) -> list[Region]:
        self.enumeration_count += 1
        if self.enumeration_error is not None:
            raise self.enumeration_error
        return list(self.displays)

    def capture_rect(self, region: Region) -> Image.Image:
        self.captured.append(region)
        self.displays_seen.append(os.environ.get("DISPLAY"))
        if self.capture_error is not None:
            raise self.capture_error
        return Image.new("RGB", region.size, (40, 80, 120))


@pytest.fixture(autouse=True)
def reset_hal_config():
    """Make every test start from default HAL configuration."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def no_display(monkeypatch):
    """Run without any ambient display target."""
    monkeypatch.delenv("DISPLAY", raising=False)


@pytest.fixture
def hal_config() -> HALConfig:
    """Configuration with a known fallback display."""
    return HALConfig(capture_backends=["mss", "pillow"], fallback_display=":0")


@pytest.fixture
def dual_monitors() -> list[Region]:
    """Two 1080p monitors side by side."""
    return [Region(0, 0, 1920, 1080), Region(1920, 0, 1920, 1080)]


@pytest.fixture
def stub_strategy(dual_monitors) -> StubStrategy:
    return StubStrategy(displays=dual_monitors)


@pytest.fixture
def stub_registry(stub_strategy) -> StrategyRegistry:
    registry = StrategyRegistry()
    registry.register(stub_strategy)
    return registry


@pytest.fixture
def sample_image() -> Image.Image:
    """Image with redundant content so compression levels differ."""
    image = Image.new("RGB", (256, 128))
    pixels = image.load()
    for x in range(256):
        for y in range(128):
            pixels[x, y] = (x, (x * y) % 256 if y % 8 == 0 else y * 2, (x // 16) * 16)
    return image

"""Tests for StrategyRegistry."""

import pytest
from conftest import StubStrategy

from deskshot.capture_exceptions import NoStrategyAvailable
from deskshot.hal.config import HALConfig
from deskshot.hal.implementations import MSSCaptureStrategy, PillowCaptureStrategy
from deskshot.hal.initialization import create_registry
from deskshot.hal.registry import StrategyRegistry
from deskshot.base_exceptions import ConfigurationError


class FlakyProbeStrategy(StubStrategy):
    """Strategy whose availability probe raises."""

    def is_available(self) -> bool:
        raise RuntimeError("probe exploded")


def make_registry(*strategies: StubStrategy) -> StrategyRegistry:
    registry = StrategyRegistry()
    for strategy in strategies:
        registry.register(strategy)
    return registry


class TestActiveStrategy:
    """Test selection of the active strategy."""

    def test_first_available_wins(self) -> None:
        first = StubStrategy("first")
        second = StubStrategy("second")

        assert make_registry(first, second).active_strategy() is first

    def test_skips_unavailable(self) -> None:
        first = StubStrategy("first", available=False)
        second = StubStrategy("second")
        third = StubStrategy("third")

        assert make_registry(first, second, third).active_strategy() is second

    @pytest.mark.parametrize(
        "availability, expected",
        [
            ((True, True, True), 0),
            ((False, True, False), 1),
            ((False, False, True), 2),
            ((True, False, True), 0),
        ],
    )
    def test_selects_first_available_in_order(self, availability, expected) -> None:
        strategies = [
            StubStrategy(f"s{i}", available=flag) for i, flag in enumerate(availability)
        ]

        assert make_registry(*strategies).active_strategy() is strategies[expected]

    def test_stops_probing_after_match(self) -> None:
        first = StubStrategy("first")
        second = StubStrategy("second")

        make_registry(first, second).active_strategy()

        assert first.probe_count == 1
        assert second.probe_count == 0

    def test_none_available_raises(self) -> None:
        registry = make_registry(
            StubStrategy("a", available=False), StubStrategy("b", available=False)
        )

        with pytest.raises(NoStrategyAvailable) as exc_info:
            registry.active_strategy()

        assert exc_info.value.error_code == "NO_STRATEGY"
        assert exc_info.value.context["registered"] == ["a", "b"]
        assert "a, b" in str(exc_info.value)

    def test_empty_registry_raises(self) -> None:
        with pytest.raises(NoStrategyAvailable, match="none registered"):
            StrategyRegistry().active_strategy()

    def test_raising_probe_counts_as_unavailable(self) -> None:
        flaky = FlakyProbeStrategy("flaky")
        fallback = StubStrategy("fallback")

        assert make_registry(flaky, fallback).active_strategy() is fallback

    def test_availability_is_reevaluated(self) -> None:
        first = StubStrategy("first", available=False)
        second = StubStrategy("second")
        registry = make_registry(first, second)

        assert registry.active_strategy() is second
        first.available = True
        assert registry.active_strategy() is first


class TestAvailableStrategies:
    """Test listing of available strategies."""

    def test_filters_and_keeps_order(self) -> None:
        a = StubStrategy("a")
        b = StubStrategy("b", available=False)
        c = StubStrategy("c")

        assert make_registry(a, b, c).available_strategies() == [a, c]

    def test_names_in_registration_order(self) -> None:
        registry = make_registry(StubStrategy("x"), StubStrategy("y", available=False))

        assert registry.names() == ["x", "y"]
        assert len(registry) == 2


class TestCreateRegistry:
    """Test building the registry from configuration."""

    def test_default_order(self) -> None:
        registry = create_registry(HALConfig(capture_backends=["mss", "pillow"]))

        assert registry.names() == ["mss", "pillow"]

    def test_custom_order(self) -> None:
        registry = create_registry(HALConfig(capture_backends=["pillow", "mss"]))

        assert registry.names() == ["pillow", "mss"]

    def test_strategy_types(self) -> None:
        registry = create_registry(HALConfig(capture_backends=["mss", "pillow"]))

        assert [type(s) for s in registry._strategies] == [
            MSSCaptureStrategy,
            PillowCaptureStrategy,
        ]

    def test_unknown_backend_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="unknown capture backend"):
            create_registry(HALConfig(capture_backends=["mss", "wayland"]))

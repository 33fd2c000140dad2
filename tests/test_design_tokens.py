"""Design token table tests."""

from __future__ import annotations

from datetime import timedelta

import pytest

from typescale import DeviceType, device_type
from typescale.design_tokens import (
    ASPECT_RATIOS,
    AVATAR_SIZES,
    DURATIONS,
    ELEVATIONS,
    FEATURE_DURATIONS,
    ICON_SIZES,
    OPACITIES,
    RADIUS,
    SIZES,
    SPACING,
    SPEED_DURATIONS,
)


class TestSizeTables:
    def test_sizes_ascending(self) -> None:
        values = list(SIZES.values())
        assert values == sorted(values)
        assert SIZES["md"] == 12.0
        assert SIZES["colossal"] == 96.0

    def test_spacing_is_prefix_of_sizes(self) -> None:
        assert list(SPACING) == list(SIZES)[: list(SIZES).index("ultra") + 1]
        assert all(SPACING[name] == SIZES[name] for name in SPACING)

    def test_radius(self) -> None:
        assert RADIUS["giant"] == 48.0
        assert RADIUS["circular"] == 999.0
        assert "mega" not in RADIUS

    def test_radius_does_not_mutate_sizes(self) -> None:
        assert "circular" not in SIZES

    def test_icon_sizes(self) -> None:
        assert list(ICON_SIZES) == ["xs", "sm", "md", "lg", "xl", "xxl", "huge"]
        assert ICON_SIZES["xs"] == 12.0
        assert ICON_SIZES["lg"] == 24.0
        assert ICON_SIZES["huge"] == 48.0

    def test_avatar_sizes(self) -> None:
        assert list(AVATAR_SIZES.values()) == [24.0, 32.0, 40.0, 48.0, 64.0, 80.0, 96.0, 128.0]
        assert AVATAR_SIZES["massive"] == 128.0

    def test_elevations(self) -> None:
        assert ELEVATIONS["none"] == 0.0
        assert ELEVATIONS["md"] == 4.0
        assert ELEVATIONS["massive"] == 24.0
        values = list(ELEVATIONS.values())
        assert values == sorted(values)

    def test_opacities(self) -> None:
        assert OPACITIES["hover"] == pytest.approx(0.12)
        assert OPACITIES["disabled"] == pytest.approx(0.38)
        assert OPACITIES["high"] == pytest.approx(0.87)
        assert all(0.0 <= value <= 1.0 for value in OPACITIES.values())
        assert OPACITIES["none"] == 0.0 and OPACITIES["full"] == 1.0

    def test_aspect_ratios(self) -> None:
        assert ASPECT_RATIOS == pytest.approx(
            {"square": 1.0, "standard": 4 / 3, "photo": 1.5, "wide": 16 / 9, "cinematic": 21 / 9}
        )


class TestDurations:
    def test_base_durations(self) -> None:
        assert DURATIONS["xxs"] == timedelta(milliseconds=50)
        assert DURATIONS["md"] == timedelta(milliseconds=300)
        assert DURATIONS["mega"] == timedelta(seconds=3)

    def test_feature_aliases(self) -> None:
        assert FEATURE_DURATIONS["search_debounce"] == timedelta(milliseconds=300)
        assert FEATURE_DURATIONS["snackbar"] == timedelta(milliseconds=2000)
        assert FEATURE_DURATIONS["shimmer_animation"] == DURATIONS["massive"]

    def test_speed_aliases(self) -> None:
        assert SPEED_DURATIONS["very_slow"] == timedelta(milliseconds=800)
        assert SPEED_DURATIONS["ultra_fast"] < SPEED_DURATIONS["fast"] < SPEED_DURATIONS["medium"]


class TestDeviceType:
    @pytest.mark.parametrize(
        "width,expected",
        [
            (0, DeviceType.MOBILE),
            (599, DeviceType.MOBILE),
            (600, DeviceType.TABLET),
            (899.5, DeviceType.TABLET),
            (900, DeviceType.DESKTOP),
            (1920, DeviceType.DESKTOP),
        ],
    )
    def test_breakpoints(self, width: float, expected: DeviceType) -> None:
        assert device_type(width) is expected

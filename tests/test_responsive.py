"""Responsive font size interpolation tests."""

from __future__ import annotations

import pytest

from typescale import ScaleError, interpolate_font_size


class TestInterpolateFontSize:
    def test_endpoints(self) -> None:
        assert interpolate_font_size(320) == 12
        assert interpolate_font_size(1920) == 20

    def test_midpoint(self) -> None:
        assert interpolate_font_size(1120) == pytest.approx(16.0)

    def test_custom_range(self) -> None:
        size = interpolate_font_size(900, smallest=14, largest=18,
                                     smallest_screen_width=600, largest_screen_width=1200)
        assert size == pytest.approx(16.0)

    def test_extrapolates_below_range(self) -> None:
        """Unclamped by default: narrow screens go under the minimum."""
        assert interpolate_font_size(0) == pytest.approx(10.4)

    def test_extrapolates_above_range(self) -> None:
        assert interpolate_font_size(3520) == pytest.approx(28.0)

    def test_clamp(self) -> None:
        assert interpolate_font_size(0, clamp=True) == 12
        assert interpolate_font_size(3520, clamp=True) == 20
        assert interpolate_font_size(1120, clamp=True) == pytest.approx(16.0)

    def test_clamp_with_inverted_bounds(self) -> None:
        assert interpolate_font_size(0, smallest=20, largest=12, clamp=True) == 20
        assert interpolate_font_size(5000, smallest=20, largest=12, clamp=True) == 12

    def test_empty_screen_range(self) -> None:
        with pytest.raises(ScaleError, match="empty"):
            interpolate_font_size(800, smallest_screen_width=600, largest_screen_width=600)

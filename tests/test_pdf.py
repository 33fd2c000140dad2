"""
Specimen PDF tests.

Fonts are resolved from an empty directory so the core-font fallback is
exercised and no TTF files are needed.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path

import pytest

from reportlab.platypus import Table

from typescale import TIER_NAMES, ScaleRatio, TypographicScale
from typescale.design_tokens import ASPECT_RATIOS, AVATAR_SIZES, ELEVATIONS, ICON_SIZES, OPACITIES, SPACING
from typescale.pdf import generate_specimen, main
from typescale.pdf.flowables import TierLine, TokenBars, _interpolate_gradient
from typescale.pdf.generator import (
    FRAME_WIDTH,
    MAX_SET_SIZE,
    build_parser,
    build_specimen,
    build_tokens,
    font_names,
    make_styles,
    register_fonts,
    scale_from_args,
)
from typescale.pdf.palette import GRADIENT_STOPS


@pytest.fixture
def font_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    fonts = tmp_path / "fonts"
    fonts.mkdir()
    monkeypatch.setenv("TYPESCALE_FONT_DIR", str(fonts))
    return fonts


def _is_pdf(path: Path) -> bool:
    return path.exists() and path.read_bytes().startswith(b"%PDF")


class TestGenerateSpecimen:
    def test_default_scale(self, tmp_path: Path, font_dir: Path) -> None:
        out = tmp_path / "default.pdf"
        assert generate_specimen(TypographicScale(), str(out)) == str(out)
        assert _is_pdf(out)

    def test_without_tokens_is_smaller(self, tmp_path: Path, font_dir: Path) -> None:
        full = tmp_path / "full.pdf"
        bare = tmp_path / "bare.pdf"
        generate_specimen(TypographicScale(), str(full))
        generate_specimen(TypographicScale(), str(bare), include_tokens=False)
        assert bare.stat().st_size < full.stat().st_size

    def test_oversized_tiers_do_not_break_layout(self, tmp_path: Path, font_dir: Path) -> None:
        scale = TypographicScale(20, ScaleRatio.EXTRA_LARGE)
        assert scale.display > MAX_SET_SIZE
        out = tmp_path / "huge.pdf"
        generate_specimen(scale, str(out), title="Huge <extra> & large")
        assert _is_pdf(out)

    @pytest.mark.parametrize("base,ratio", [(0, 1.5), (-14, 1.2), (math.nan, 1.2), (10, math.inf)])
    def test_degenerate_scales_still_render(self, tmp_path: Path, font_dir: Path,
                                             base: float, ratio: float) -> None:
        out = tmp_path / "degenerate.pdf"
        generate_specimen(TypographicScale(base, ratio), str(out), include_tokens=False)
        assert _is_pdf(out)

    def test_font_fallback_is_logged(self, font_dir: Path, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="typescale.pdf.generator"):
            fonts = register_fonts()
        assert fonts == {"serif": False, "sans": False}
        assert "using Helvetica" in caplog.text


@pytest.fixture
def names() -> dict:
    return font_names({"serif": False, "sans": False})


def _tier_lines(elements: list) -> list[TierLine]:
    return [element for element in elements if isinstance(element, TierLine)]


class TestBuildSpecimen:
    def test_one_line_per_tier_largest_first(self, names: dict) -> None:
        scale = TypographicScale(14, ScaleRatio.LARGE)
        lines = _tier_lines(build_specimen(scale, make_styles(names), names))
        assert len(lines) == 10
        assert [line.name for line in lines] == list(reversed(TIER_NAMES))
        assert [line.size for line in lines] == [size for _, size in reversed(scale.tiers())]
        assert lines[0].size == scale.display

    def test_sizes_are_never_scaled_down(self, names: dict) -> None:
        scale = TypographicScale(20, ScaleRatio.EXTRA_LARGE)
        lines = _tier_lines(build_specimen(scale, make_styles(names), names))
        assert [line.size for line in lines] == [size for _, size in reversed(scale.tiers())]
        for line in lines:
            line.wrap(FRAME_WIDTH, 800)
            assert line.has_sample() == (line.size <= MAX_SET_SIZE)

    def test_default_scale_sets_every_sample(self, names: dict) -> None:
        lines = _tier_lines(build_specimen(TypographicScale(), make_styles(names), names))
        for line in lines:
            line.wrap(FRAME_WIDTH, 800)
            assert line.has_sample()
            assert line.fitted_sample()

    def test_omitted_sample_is_logged(self, names: dict, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="typescale.pdf.generator"):
            build_specimen(TypographicScale(20, ScaleRatio.EXTRA_LARGE), make_styles(names), names)
        assert "Tier display" in caplog.text
        assert "Tier h1" in caplog.text
        assert "Tier body " not in caplog.text


class TestBuildTokens:
    def test_component_sizes_are_drawn(self, names: dict) -> None:
        elements = build_tokens(make_styles(names), names)
        bars = [element.tokens for element in elements if isinstance(element, TokenBars)]
        assert list(SPACING.items()) in bars
        assert list(ICON_SIZES.items()) in bars
        assert list(AVATAR_SIZES.items()) in bars

    def test_elevation_and_opacity_table(self, names: dict) -> None:
        elements = build_tokens(make_styles(names), names)
        cells = [
            cell
            for element in elements if isinstance(element, Table)
            for row in element._cellvalues for cell in row
        ]
        assert "Elevation" in cells and "Opacity" in cells
        assert all(name in cells for name in ELEVATIONS)
        assert all(name in cells for name in OPACITIES)
        assert all(name in cells for name in ASPECT_RATIOS)
        assert "0.38" in cells
        assert "1.7778" in cells


class TestTierLine:
    def test_sample_fits_column(self) -> None:
        line = TierLine("h1", 60, "A heading much too long to fit the column", width=300)
        text = line.fitted_sample()
        assert text
        assert len(text) < len(line.sample)

    def test_oversized_tier_keeps_label_height(self) -> None:
        line = TierLine("display", 900, "Display", max_size=400)
        _, height = line.wrap(500, 800)
        assert height < 100

    def test_glyph_wider_than_column_keeps_label_height(self) -> None:
        line = TierLine("display", 560, "Display", font_name="Times-Roman", max_size=MAX_SET_SIZE)
        assert 560 < MAX_SET_SIZE
        _, height = line.wrap(FRAME_WIDTH, 800)
        assert not line.has_sample()
        assert height < 100

    def test_glyph_that_fits_is_set(self) -> None:
        line = TierLine("h2", 300, "Heading", font_name="Times-Roman", max_size=MAX_SET_SIZE)
        _, height = line.wrap(FRAME_WIDTH, 800)
        assert line.has_sample()
        assert height == pytest.approx(300 * 1.2 + 6)

    @pytest.mark.parametrize("size", [math.nan, math.inf, -math.inf, 0, -12, MAX_SET_SIZE + 1])
    def test_unsettable_sizes_have_no_sample(self, size: float) -> None:
        line = TierLine("display", size, "Display", max_size=MAX_SET_SIZE)
        _, height = line.wrap(FRAME_WIDTH, 800)
        assert not line.has_sample()
        assert height < 100

    def test_width_follows_available_space(self) -> None:
        line = TierLine("h1", 300, "Heading")
        width, _ = line.wrap(250, 800)
        assert width == 250
        assert not line.has_sample()


class TestGradient:
    def test_endpoints(self) -> None:
        start = _interpolate_gradient(0.0, GRADIENT_STOPS)
        assert start.red == pytest.approx(GRADIENT_STOPS[0][1].red)
        end = _interpolate_gradient(1.0, GRADIENT_STOPS)
        assert end.blue == pytest.approx(GRADIENT_STOPS[-1][1].blue)


class TestCli:
    def test_scale_from_base_and_ratio(self) -> None:
        args = build_parser().parse_args(["out.pdf", "--base", "16", "--ratio", "1.5"])
        assert scale_from_args(args) == TypographicScale(16, 1.5)

    def test_scale_from_ratio_name(self) -> None:
        args = build_parser().parse_args(["out.pdf", "--ratio-name", "extra_large"])
        assert scale_from_args(args) == TypographicScale(14, ScaleRatio.EXTRA_LARGE)

    def test_preset_wins(self) -> None:
        args = build_parser().parse_args(["out.pdf", "--preset", "desktop_compact", "--base", "30"])
        assert scale_from_args(args) == TypographicScale(14, ScaleRatio.NORMAL)

    def test_main_writes_pdf(self, tmp_path: Path, font_dir: Path) -> None:
        out = tmp_path / "cli.pdf"
        assert main([str(out), "--preset", "mobile", "--no-tokens"]) == 0
        assert _is_pdf(out)

    def test_unknown_preset_exits_1(self, tmp_path: Path, font_dir: Path) -> None:
        out = tmp_path / "never.pdf"
        assert main([str(out), "--preset", "nope"]) == 1
        assert not out.exists()

    def test_ratio_and_ratio_name_conflict(self) -> None:
        with pytest.raises(SystemExit) as excinfo:
            build_parser().parse_args(["out.pdf", "--ratio", "1.2", "--ratio-name", "large"])
        assert excinfo.value.code == 2

"""Custom ReportLab flowables for typescale specimen sheets."""

import math

from reportlab.lib.colors import Color
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.platypus import Flowable

from .palette import (
    INK, PANEL, RULE, BODY_TEXT, MUTED,
    GRADIENT_STOPS, GRADIENT_BAR_HEIGHT,
    ACCENT_LINE_WIDTH, ACCENT_LINE_HEIGHT,
    CONTENT_WIDTH, LABEL_SIZE,
)


class GradientBar(Flowable):
    """Horizontal gradient bar across the frame width."""

    def __init__(self, width, height=GRADIENT_BAR_HEIGHT):
        super().__init__()
        self.bar_width = width
        self.bar_height = height

    def wrap(self, availWidth, availHeight):
        return (self.bar_width, self.bar_height)

    def draw(self):
        draw_gradient(self.canv, 0, 0, self.bar_width, self.bar_height, steps=100)


class AccentLine(Flowable):
    """A thin colored line that introduces a section."""

    def __init__(self, color, width=ACCENT_LINE_WIDTH, height=ACCENT_LINE_HEIGHT):
        super().__init__()
        self.color = color
        self.line_width = width
        self.line_height = height

    def wrap(self, availWidth, availHeight):
        return (self.line_width, self.line_height + 8)  # 8pt spacing below

    def draw(self):
        self.canv.setFillColor(self.color)
        self.canv.rect(0, 8, self.line_width, self.line_height, stroke=0, fill=1)


class TierLine(Flowable):
    """One tier of a scale: name and size on the left, sample text at size.

    Sizes that are not positive, not finite, above ``max_size``, or too wide
    for a single glyph to fit the text column keep their label but get no
    sample line.
    """

    LABEL_COLUMN = 96

    def __init__(self, name, size, sample, font_name='Helvetica', label_font='Helvetica',
                 width=None, max_size=400):
        super().__init__()
        self.name = name
        self.size = size
        self.sample = sample
        self.font_name = font_name
        self.label_font = label_font
        self.line_width = width or CONTENT_WIDTH
        self.max_size = max_size
        self._height = 0

    def has_sample(self):
        """Whether the sample line is set at all at the current width."""
        if not (math.isfinite(self.size) and 0 < self.size <= self.max_size):
            return False
        if not self.sample:
            return False
        room = self.line_width - self.LABEL_COLUMN
        return stringWidth(self.sample[0], self.font_name, self.size) <= room

    def wrap(self, availWidth, availHeight):
        self.line_width = min(self.line_width, availWidth)
        text_height = self.size * 1.2 if self.has_sample() else 0
        self._height = max(text_height, LABEL_SIZE * 2.6) + 6
        return (self.line_width, self._height)

    def fitted_sample(self):
        """Trim the sample so it fits the text column at the tier size."""
        room = self.line_width - self.LABEL_COLUMN
        text = self.sample
        while text and stringWidth(text, self.font_name, self.size) > room:
            text = text[:-1]
        return text.rstrip()

    def draw(self):
        canvas = self.canv
        h = self._height

        canvas.setFont(self.label_font, LABEL_SIZE)
        canvas.setFillColor(MUTED)
        canvas.drawString(0, h - LABEL_SIZE - 4, self.name.upper().replace('_', ' '))
        canvas.setFillColor(BODY_TEXT)
        canvas.drawString(0, h - 2 * LABEL_SIZE - 7, f'{self.size:.2f} pt')

        if self.has_sample():
            canvas.setFont(self.font_name, self.size)
            canvas.setFillColor(INK)
            # Baseline sits a fifth of the size above the bottom rule for descenders
            canvas.drawString(self.LABEL_COLUMN, 6 + self.size * 0.2, self.fitted_sample())

        canvas.setStrokeColor(RULE)
        canvas.setLineWidth(0.5)
        canvas.line(0, 0, self.line_width, 0)


class RatioLadder(Flowable):
    """Horizontal bars, one per tier, proportional to the largest tier."""

    BAR_HEIGHT = 10
    BAR_GAP = 6

    def __init__(self, tiers, color, width=None, label_font='Helvetica'):
        super().__init__()
        self.tiers = list(tiers)
        self.color = color
        self.ladder_width = width or CONTENT_WIDTH
        self.label_font = label_font

    def wrap(self, availWidth, availHeight):
        self.ladder_width = min(self.ladder_width, availWidth)
        return (self.ladder_width, len(self.tiers) * (self.BAR_HEIGHT + self.BAR_GAP))

    def draw(self):
        canvas = self.canv
        finite = [size for _, size in self.tiers if math.isfinite(size)]
        peak = max(finite, default=0)
        track = self.ladder_width - 96 - 48
        step = self.BAR_HEIGHT + self.BAR_GAP
        y = len(self.tiers) * step - self.BAR_HEIGHT

        for name, size in self.tiers:
            canvas.setFont(self.label_font, LABEL_SIZE)
            canvas.setFillColor(MUTED)
            canvas.drawString(0, y + 2, name.replace('_', ' '))

            canvas.setFillColor(PANEL)
            canvas.rect(96, y, track, self.BAR_HEIGHT, stroke=0, fill=1)
            if peak > 0 and math.isfinite(size) and size > 0:
                canvas.setFillColor(self.color)
                canvas.rect(96, y, track * size / peak, self.BAR_HEIGHT, stroke=0, fill=1)

            canvas.setFillColor(BODY_TEXT)
            canvas.drawRightString(self.ladder_width, y + 2, f'{size:.1f}')
            y -= step


class TokenBars(Flowable):
    """Named lengths drawn at their true size (1px = 1pt)."""

    ROW = 14

    def __init__(self, tokens, color, width=None, label_font='Helvetica'):
        super().__init__()
        self.tokens = list(tokens.items())
        self.color = color
        self.box_width = width or CONTENT_WIDTH
        self.label_font = label_font

    def wrap(self, availWidth, availHeight):
        self.box_width = min(self.box_width, availWidth)
        return (self.box_width, len(self.tokens) * self.ROW)

    def draw(self):
        canvas = self.canv
        y = len(self.tokens) * self.ROW - self.ROW
        for name, value in self.tokens:
            canvas.setFont(self.label_font, LABEL_SIZE)
            canvas.setFillColor(MUTED)
            canvas.drawString(0, y + 3, name)
            canvas.setFillColor(BODY_TEXT)
            canvas.drawRightString(96, y + 3, f'{value:g}')
            canvas.setFillColor(self.color)
            canvas.rect(108, y + 2, min(value, self.box_width - 108), 8, stroke=0, fill=1)
            y -= self.ROW


class RadiusSwatches(Flowable):
    """Row of squares with increasing corner radius."""

    SWATCH = 40
    GAP = 10

    def __init__(self, radii, color, width=None, label_font='Helvetica'):
        super().__init__()
        self.radii = list(radii.items())
        self.color = color
        self.box_width = width or CONTENT_WIDTH
        self.label_font = label_font

    def _per_row(self):
        return max(1, int((self.box_width + self.GAP) // (self.SWATCH + self.GAP)))

    def wrap(self, availWidth, availHeight):
        self.box_width = min(self.box_width, availWidth)
        rows = math.ceil(len(self.radii) / self._per_row())
        return (self.box_width, rows * (self.SWATCH + 20))

    def draw(self):
        canvas = self.canv
        per_row = self._per_row()
        rows = math.ceil(len(self.radii) / per_row)
        for i, (name, radius) in enumerate(self.radii):
            col, row = i % per_row, i // per_row
            x = col * (self.SWATCH + self.GAP)
            y = (rows - row - 1) * (self.SWATCH + 20) + 14
            canvas.setFillColor(self.color)
            canvas.roundRect(x, y, self.SWATCH, self.SWATCH, min(radius, self.SWATCH / 2),
                             stroke=0, fill=1)
            canvas.setFont(self.label_font, LABEL_SIZE - 1)
            canvas.setFillColor(MUTED)
            canvas.drawCentredString(x + self.SWATCH / 2, y - 10, name)


# ─── Helpers ──────────────────────────────────────────────────────────────────

def draw_gradient(canvas, x, y, width, height, steps=200):
    """Fill a rectangle with the palette gradient."""
    step_width = width / steps
    for i in range(steps):
        canvas.setFillColor(_interpolate_gradient(i / steps, GRADIENT_STOPS))
        canvas.rect(x + i * step_width, y, step_width + 0.5, height, stroke=0, fill=1)


def _interpolate_gradient(t, stops):
    """Interpolate color at position t (0-1) through gradient stops."""
    for i in range(len(stops) - 1):
        t0, c0 = stops[i]
        t1, c1 = stops[i + 1]
        if t0 <= t <= t1:
            frac = (t - t0) / (t1 - t0) if t1 > t0 else 0
            r = c0.red + (c1.red - c0.red) * frac
            g = c0.green + (c1.green - c0.green) * frac
            b = c0.blue + (c1.blue - c0.blue) * frac
            return Color(r, g, b)
    return stops[-1][1]

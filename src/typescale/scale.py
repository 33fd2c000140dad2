"""Geometric typographic scale.

A scale is fully described by two numbers: the size of the smallest tier
(``base``) and the multiplier between adjacent tiers (``ratio``). The ten
tiers are produced by multiplying the previous tier by the ratio, in order:

    body_small, body, body_large, paragraph_title, subheader,
    header, h3, h2, h1, display

Sequential multiplication is used rather than ``base * ratio ** k`` so that
every adjacent pair satisfies ``tier[i + 1] == tier[i] * ratio`` exactly.
"""

import math
from dataclasses import dataclass, replace

from .errors import ScaleError


# ─── Ratios ──────────────────────────────────────────────────────────────────

class ScaleRatio:
    """Canonical ratios. Any float is accepted as a ratio; these are named."""

    SMALL       = 1.1278422438
    NORMAL      = 1.1739902127
    LARGE       = 1.2720281269
    EXTRA_LARGE = 1.6180555556

    @classmethod
    def names(cls):
        return [key.lower() for key, value in vars(cls).items()
                if key.isupper() and isinstance(value, float)]

    @classmethod
    def by_name(cls, name):
        """Look up a ratio by name (``'large'``, ``'extra-large'``, ...)."""
        key = name.strip().lower().replace('-', '_')
        if key not in cls.names():
            raise ScaleError(f'unknown scale ratio {name!r}')
        return getattr(cls, key.upper())


# ─── Tiers ───────────────────────────────────────────────────────────────────

TIER_NAMES = (
    'body_small',
    'body',
    'body_large',
    'paragraph_title',
    'subheader',
    'header',
    'h3',
    'h2',
    'h1',
    'display',
)

DEFAULT_BASE  = 14.0
DEFAULT_RATIO = ScaleRatio.LARGE


@dataclass(frozen=True)
class TypographicScale:
    """Ten-tier font size hierarchy built from ``base`` and ``ratio``.

    No bounds checking is done here: zero, negative or non-finite inputs
    propagate through the arithmetic. Use :meth:`validated` for a checked
    construction.
    """

    base: float = DEFAULT_BASE
    ratio: float = DEFAULT_RATIO

    @classmethod
    def validated(cls, base=DEFAULT_BASE, ratio=DEFAULT_RATIO):
        """Build a scale, rejecting non-positive bases and ratios <= 1."""
        if not math.isfinite(base) or base <= 0:
            raise ScaleError(f'base must be a positive finite number, got {base!r}')
        if not math.isfinite(ratio) or ratio <= 1:
            raise ScaleError(f'ratio must be a finite number > 1, got {ratio!r}')
        return cls(base, ratio)

    @property
    def body_small(self):
        return self.base

    @property
    def body(self):
        return self.body_small * self.ratio

    @property
    def body_large(self):
        return self.body * self.ratio

    @property
    def paragraph_title(self):
        return self.body_large * self.ratio

    @property
    def subheader(self):
        return self.paragraph_title * self.ratio

    @property
    def header(self):
        return self.subheader * self.ratio

    @property
    def h3(self):
        return self.header * self.ratio

    @property
    def h2(self):
        return self.h3 * self.ratio

    @property
    def h1(self):
        return self.h2 * self.ratio

    @property
    def display(self):
        return self.h1 * self.ratio

    def tiers(self):
        """Return ``(name, size)`` pairs from smallest to largest."""
        sizes = []
        size = self.base
        for name in TIER_NAMES:
            sizes.append((name, size))
            size = size * self.ratio
        return sizes

    def as_dict(self):
        return dict(self.tiers())

    def __getitem__(self, name):
        if name not in TIER_NAMES:
            raise KeyError(name)
        return getattr(self, name)

    def with_base(self, base):
        return replace(self, base=base)

    def with_ratio(self, ratio):
        return replace(self, ratio=ratio)

    def describe(self):
        return f'base {self.base:g} pt × {self.ratio:.4f}'


DEFAULT_SCALE = TypographicScale()

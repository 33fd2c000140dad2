"""Design system constants built around a geometric typographic scale."""

from .design_tokens import DeviceType, device_type
from .errors import ScaleError
from .presets import get_preset, preset_for_width, preset_names
from .responsive import interpolate_font_size
from .scale import (
    DEFAULT_BASE,
    DEFAULT_RATIO,
    DEFAULT_SCALE,
    TIER_NAMES,
    ScaleRatio,
    TypographicScale,
)

__version__ = '0.1.0'

__all__ = [
    'DEFAULT_BASE',
    'DEFAULT_RATIO',
    'DEFAULT_SCALE',
    'TIER_NAMES',
    'DeviceType',
    'ScaleError',
    'ScaleRatio',
    'TypographicScale',
    'device_type',
    'get_preset',
    'interpolate_font_size',
    'preset_for_width',
    'preset_names',
]

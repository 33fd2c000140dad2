"""Named ``(base, ratio)`` pairs.

A preset is nothing more than the two constructor arguments of a
:class:`~typescale.scale.TypographicScale`; the tables below only give them
names.
"""

from .design_tokens import DeviceType, device_type
from .errors import ScaleError
from .scale import ScaleRatio, TypographicScale

# ─── Base × ratio grid ───────────────────────────────────────────────────────

_BASES = {
    'small':       12,
    'normal':      14,
    'large':       16,
    'extra_large': 18,
    'huge':        20,
}

_RATIO_SUFFIXES = {
    '':                   ScaleRatio.SMALL,
    '_normal_scale':      ScaleRatio.NORMAL,
    '_large_scale':       ScaleRatio.LARGE,
    '_extra_large_scale': ScaleRatio.EXTRA_LARGE,
}

SCALE_PRESETS = {
    base_name + suffix: TypographicScale(base, ratio)
    for base_name, base in _BASES.items()
    for suffix, ratio in _RATIO_SUFFIXES.items()
}

# ─── Devices ─────────────────────────────────────────────────────────────────

DEVICE_PRESETS = {
    'mobile':             TypographicScale(16, ScaleRatio.LARGE),
    'mobile_compact':     TypographicScale(14, ScaleRatio.LARGE),
    'mobile_comfortable': TypographicScale(18, ScaleRatio.LARGE),
    'tablet':             TypographicScale(16, ScaleRatio.LARGE),
    'tablet_reading':     TypographicScale(18, ScaleRatio.LARGE),
    'desktop':            TypographicScale(16, ScaleRatio.LARGE),
    'desktop_reading':    TypographicScale(18, ScaleRatio.LARGE),
    'desktop_marketing':  TypographicScale(16, ScaleRatio.EXTRA_LARGE),
    'desktop_compact':    TypographicScale(14, ScaleRatio.NORMAL),
}

# ─── Components ──────────────────────────────────────────────────────────────

COMPONENT_PRESETS = {
    # Buttons
    'button_mobile':      TypographicScale(16, ScaleRatio.SMALL),
    'button_tablet':      TypographicScale(17, ScaleRatio.SMALL),
    'button_desktop':     TypographicScale(16, ScaleRatio.SMALL),
    'button_small':       TypographicScale(14, ScaleRatio.SMALL),
    'button_large':       TypographicScale(18, ScaleRatio.SMALL),

    # Captions
    'caption_mobile':     TypographicScale(12, ScaleRatio.SMALL),
    'caption_tablet':     TypographicScale(14, ScaleRatio.SMALL),
    'caption_desktop':    TypographicScale(15, ScaleRatio.SMALL),
    'caption_emphasis':   TypographicScale(14, ScaleRatio.NORMAL),

    # Form labels
    'form_label_mobile':  TypographicScale(16, ScaleRatio.SMALL),
    'form_label_tablet':  TypographicScale(17, ScaleRatio.SMALL),
    'form_label_desktop': TypographicScale(16, ScaleRatio.SMALL),
    'form_hint':          TypographicScale(14, ScaleRatio.SMALL),

    # Overlines
    'overline_small':     TypographicScale(10, ScaleRatio.SMALL),
    'overline_standard':  TypographicScale(12, ScaleRatio.SMALL),
    'overline_large':     TypographicScale(14, ScaleRatio.SMALL),

    'navigation_menu':    TypographicScale(15, ScaleRatio.SMALL),
    'tab_label':          TypographicScale(14, ScaleRatio.NORMAL),
    'notification':       TypographicScale(14, ScaleRatio.NORMAL),
    'badge':              TypographicScale(12, ScaleRatio.NORMAL),
    'list_item_title':    TypographicScale(16, ScaleRatio.NORMAL),
    'list_item_subtitle': TypographicScale(14, ScaleRatio.SMALL),
    'dialog_title':       TypographicScale(20, ScaleRatio.NORMAL),
    'tooltip':            TypographicScale(12, ScaleRatio.SMALL),
}

_ALL_PRESETS = {**SCALE_PRESETS, **DEVICE_PRESETS, **COMPONENT_PRESETS}


def preset_names():
    return sorted(_ALL_PRESETS)


def get_preset(name):
    """Return the scale registered under ``name`` (case-insensitive)."""
    key = name.strip().lower().replace('-', '_')
    try:
        return _ALL_PRESETS[key]
    except KeyError:
        raise ScaleError(f'unknown preset {name!r}') from None


def preset_for_width(width):
    """Device preset for a screen width."""
    kind = device_type(width)
    if kind is DeviceType.MOBILE:
        return DEVICE_PRESETS['mobile']
    if kind is DeviceType.TABLET:
        return DEVICE_PRESETS['tablet']
    return DEVICE_PRESETS['desktop']

"""Design system tokens: sizes, spacing, radius, durations and breakpoints."""

import enum
from datetime import timedelta

# ─── Base size scale (logical pixels) ────────────────────────────────────────

SIZES = {
    'none':     0.0,
    'xxs':      2.0,
    'xs':       4.0,
    'sm':       6.0,
    'smd':      8.0,
    'mds':      10.0,
    'md':       12.0,
    'mdl':      14.0,
    'lg':       16.0,
    'lgx':      18.0,
    'xl':       20.0,
    'xxl':      24.0,
    'xxxl':     28.0,
    'huge':     32.0,
    'massive':  40.0,
    'giant':    48.0,
    'mega':     56.0,
    'ultra':    64.0,
    'extreme':  80.0,
    'colossal': 96.0,
}


def _sizes_through(last):
    names = list(SIZES)
    return {name: SIZES[name] for name in names[:names.index(last) + 1]}


# ─── Spacing & radius ────────────────────────────────────────────────────────

SPACING = _sizes_through('ultra')

RADIUS = _sizes_through('giant')
RADIUS['circular'] = 999.0

# ─── Component sizes ─────────────────────────────────────────────────────────

ICON_SIZES = {
    'xs':   12.0,
    'sm':   16.0,
    'md':   20.0,
    'lg':   24.0,
    'xl':   32.0,
    'xxl':  40.0,
    'huge': 48.0,
}

AVATAR_SIZES = {
    'xs':      24.0,
    'sm':      32.0,
    'md':      40.0,
    'lg':      48.0,
    'xl':      64.0,
    'xxl':     80.0,
    'huge':    96.0,
    'massive': 128.0,
}

ELEVATIONS = {
    'none':    0.0,
    'xs':      1.0,
    'sm':      2.0,
    'md':      4.0,
    'lg':      6.0,
    'xl':      8.0,
    'xxl':     12.0,
    'huge':    16.0,
    'massive': 24.0,
}

OPACITIES = {
    'none':        0.0,
    'hover':       0.12,
    'disabled':    0.38,
    'medium':      0.54,
    'medium_high': 0.70,
    'high':        0.87,
    'full':        1.0,
}

ASPECT_RATIOS = {
    'square':    1.0,
    'standard':  4 / 3,
    'photo':     3 / 2,
    'wide':      16 / 9,
    'cinematic': 21 / 9,
}

# ─── Breakpoints ─────────────────────────────────────────────────────────────

MAX_MOBILE_WIDTH  = 600.0
MAX_TABLET_WIDTH  = 900.0
MAX_DESKTOP_WIDTH = 1200.0
MAX_CONTENT_WIDTH = 1536.0


class DeviceType(enum.Enum):
    MOBILE = 'mobile'
    TABLET = 'tablet'
    DESKTOP = 'desktop'


def device_type(width):
    """Classify a screen width against the mobile and tablet breakpoints."""
    if width < MAX_MOBILE_WIDTH:
        return DeviceType.MOBILE
    if width < MAX_TABLET_WIDTH:
        return DeviceType.TABLET
    return DeviceType.DESKTOP


# ─── Durations ───────────────────────────────────────────────────────────────

DURATIONS = {
    'xxs':     timedelta(milliseconds=50),
    'xs':      timedelta(milliseconds=100),
    'sm':      timedelta(milliseconds=150),
    'smd':     timedelta(milliseconds=200),
    'mds':     timedelta(milliseconds=250),
    'md':      timedelta(milliseconds=300),
    'mdl':     timedelta(milliseconds=350),
    'lg':      timedelta(milliseconds=400),
    'xl':      timedelta(milliseconds=500),
    'xxl':     timedelta(milliseconds=600),
    'xxxl':    timedelta(milliseconds=800),
    'huge':    timedelta(milliseconds=1000),
    'massive': timedelta(milliseconds=1500),
    'giant':   timedelta(milliseconds=2000),
    'mega':    timedelta(milliseconds=3000),
}

# Feature aliases point into DURATIONS
FEATURE_DURATIONS = {
    'search_debounce':     DURATIONS['md'],
    'filter_debounce':     DURATIONS['lg'],
    'quick_debounce':      DURATIONS['smd'],
    'tooltip_delay':       DURATIONS['xl'],
    'snackbar':            DURATIONS['giant'],
    'page_transition':     DURATIONS['sm'],
    'hover_effect':        DURATIONS['xs'],
    'ripple_effect':       DURATIONS['smd'],
    'shimmer_animation':   DURATIONS['massive'],
    'api_simulated_delay': DURATIONS['massive'],
}

SPEED_DURATIONS = {
    'ultra_fast': DURATIONS['xs'],
    'fast':       DURATIONS['smd'],
    'medium':     DURATIONS['md'],
    'slow':       DURATIONS['lg'],
    'very_slow':  DURATIONS['xxxl'],
}

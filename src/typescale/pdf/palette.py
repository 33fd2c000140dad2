"""Colors and page geometry for specimen sheets."""

from reportlab.lib.colors import HexColor
from reportlab.lib.pagesizes import A4

# ─── Colors ──────────────────────────────────────────────────────────────────

INK          = HexColor('#1A1A1A')
PAPER        = HexColor('#FAF8F5')
PANEL        = HexColor('#F5F3EF')
RULE         = HexColor('#E8E5E0')
BODY_TEXT    = HexColor('#4A4A4A')
MUTED        = HexColor('#9A9A9A')
WHITE        = HexColor('#FFFFFF')

INDIGO       = HexColor('#3F51B5')
INDIGO_LIGHT = HexColor('#9FA8DA')
TEAL         = HexColor('#00897B')
AMBER        = HexColor('#FFB300')
ROSE         = HexColor('#D81B60')

# Accent per specimen section
SECTION_COLORS = {
    'scale': INDIGO,
    'ladder': TEAL,
    'tokens': ROSE,
}

GRADIENT_STOPS = [
    (0.0, INDIGO),
    (0.33, TEAL),
    (0.66, AMBER),
    (1.0, ROSE),
]

# ─── Page dimensions ─────────────────────────────────────────────────────────

PAGE_WIDTH, PAGE_HEIGHT = A4

MARGIN = 48

CONTENT_WIDTH = PAGE_WIDTH - 2 * MARGIN

GRADIENT_BAR_HEIGHT = 6
THIN_GRADIENT_HEIGHT = 3
ACCENT_LINE_WIDTH = 40
ACCENT_LINE_HEIGHT = 2

# ─── Chrome type sizes (points) ──────────────────────────────────────────────

LABEL_SIZE    = 7.5
FOOTER_SIZE   = 7.5
CAPTION_SIZE  = 9

"""
typescale specimen generator

Renders a typographic scale, and optionally the design token tables, to a
PDF specimen sheet. Each tier is set at its exact size so the hierarchy can
be judged on paper.

Usage: typescale-specimen <output.pdf> [--preset NAME | --base N --ratio R]
"""

import argparse
import logging
import os
import sys

from reportlab.lib.enums import TA_LEFT, TA_CENTER
from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.colors import Color
from reportlab.pdfbase.pdfmetrics import registerFont, registerFontFamily
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.platypus import (
    Paragraph, Spacer, PageBreak, Table, TableStyle,
    BaseDocTemplate, Frame, PageTemplate, NextPageTemplate,
)

from ..design_tokens import (
    ASPECT_RATIOS, AVATAR_SIZES, DURATIONS, ELEVATIONS, ICON_SIZES, OPACITIES, RADIUS, SPACING,
)
from ..errors import ScaleError
from ..presets import get_preset
from ..scale import DEFAULT_BASE, DEFAULT_RATIO, ScaleRatio, TypographicScale
from .flowables import AccentLine, GradientBar, RadiusSwatches, RatioLadder, TierLine, TokenBars, draw_gradient
from .palette import (
    INK, PAPER, PANEL, RULE, BODY_TEXT, MUTED, WHITE,
    INDIGO_LIGHT, SECTION_COLORS,
    PAGE_WIDTH, PAGE_HEIGHT, MARGIN, CONTENT_WIDTH,
    GRADIENT_BAR_HEIGHT, THIN_GRADIENT_HEIGHT,
    CAPTION_SIZE, FOOTER_SIZE,
)

logger = logging.getLogger(__name__)

FONT_DIR_ENV = 'TYPESCALE_FONT_DIR'

SAMPLE_TEXT = {
    'body_small': 'Captions, footnotes and timestamps sit at the base of the scale.',
    'body': 'Body copy carries paragraphs, list items and form inputs.',
    'body_large': 'Lead paragraphs and callouts stand out.',
    'paragraph_title': 'Paragraph title',
    'subheader': 'Section subheader',
    'header': 'Section header',
    'h3': 'Heading three',
    'h2': 'Heading two',
    'h1': 'Heading one',
    'display': 'Display',
}

# Body tiers are set in the sans face, headings in the serif
BODY_TIERS = ('body_small', 'body', 'body_large')

CONTENT_FRAME_HEIGHT = PAGE_HEIGHT - 2 * MARGIN - 20
# Largest tier that still fits a TierLine inside the content frame
MAX_SET_SIZE = (CONTENT_FRAME_HEIGHT - 48) / 1.2
# Frames keep their default 6pt padding on each side
FRAME_WIDTH = CONTENT_WIDTH - 12


# ─── Font registration ────────────────────────────────────────────────────────

def default_font_dir():
    env = os.environ.get(FONT_DIR_ENV)
    if env:
        return env
    return os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'fonts')


def register_fonts(font_dir=None):
    """Register Inter / Lora TTF files. Falls back to core fonts if not found."""
    font_dir = os.path.normpath(font_dir or default_font_dir())

    fonts_registered = {'serif': False, 'sans': False}

    # Lora
    serif_regular = os.path.join(font_dir, 'Lora-Regular.ttf')
    if os.path.exists(serif_regular):
        registerFont(TTFont('Lora', serif_regular))
        fonts_registered['serif'] = True
        logger.info('Registered Lora from %s', font_dir)
    else:
        logger.warning('Lora not found at %s, using Times-Roman', serif_regular)

    # Inter
    sans_regular = os.path.join(font_dir, 'Inter-Regular.ttf')
    sans_bold = os.path.join(font_dir, 'Inter-Bold.ttf')
    if os.path.exists(sans_regular):
        registerFont(TTFont('Inter', sans_regular))
        registerFont(TTFont('Inter-Bold', sans_bold if os.path.exists(sans_bold) else sans_regular))
        registerFontFamily('Inter', normal='Inter', bold='Inter-Bold',
                           italic='Inter', boldItalic='Inter-Bold')
        fonts_registered['sans'] = True
        logger.info('Registered Inter from %s', font_dir)
    else:
        logger.warning('Inter not found at %s, using Helvetica', sans_regular)

    return fonts_registered


def font_names(fonts):
    """Map registration results to concrete font names."""
    return {
        'serif': 'Lora' if fonts['serif'] else 'Times-Roman',
        'sans': 'Inter' if fonts['sans'] else 'Helvetica',
        'sans_bold': 'Inter-Bold' if fonts['sans'] else 'Helvetica-Bold',
    }


# ─── Style factory ────────────────────────────────────────────────────────────

def make_styles(names):
    """Create the paragraph styles used around the specimen flowables."""
    serif, sans, sans_bold = names['serif'], names['sans'], names['sans_bold']

    return {
        # Cover page
        'cover_overline': ParagraphStyle(
            'cover_overline', fontName=sans, fontSize=8.5,
            leading=12, textColor=INDIGO_LIGHT, alignment=TA_LEFT,
            spaceAfter=8,
        ),
        'cover_title': ParagraphStyle(
            'cover_title', fontName=serif, fontSize=44,
            leading=50, textColor=WHITE, alignment=TA_LEFT,
            spaceAfter=10,
        ),
        'cover_subtitle': ParagraphStyle(
            'cover_subtitle', fontName=sans, fontSize=14,
            leading=20, textColor=Color(1, 1, 1, 0.6), alignment=TA_LEFT,
            spaceAfter=30,
        ),
        'cover_meta': ParagraphStyle(
            'cover_meta', fontName=sans, fontSize=9,
            leading=18, textColor=Color(1, 1, 1, 0.7), alignment=TA_LEFT,
        ),
        'cover_footer': ParagraphStyle(
            'cover_footer', fontName=sans, fontSize=FOOTER_SIZE,
            leading=11, textColor=Color(1, 1, 1, 0.25), alignment=TA_CENTER,
        ),

        # Content pages
        'heading': ParagraphStyle(
            'heading', fontName=serif, fontSize=18,
            leading=24, textColor=INK, alignment=TA_LEFT,
            spaceBefore=6, spaceAfter=8,
        ),
        'subheading': ParagraphStyle(
            'subheading', fontName=sans_bold, fontSize=11,
            leading=16, textColor=INK, alignment=TA_LEFT,
            spaceBefore=14, spaceAfter=6,
        ),
        'caption': ParagraphStyle(
            'caption', fontName=sans, fontSize=CAPTION_SIZE,
            leading=13, textColor=BODY_TEXT, alignment=TA_LEFT,
            spaceAfter=10,
        ),
    }


# ─── Page backgrounds ─────────────────────────────────────────────────────────

def draw_dark_page(canvas, doc):
    """Background for the cover page."""
    canvas.saveState()
    canvas.setFillColor(INK)
    canvas.rect(0, 0, PAGE_WIDTH, PAGE_HEIGHT, stroke=0, fill=1)
    draw_gradient(canvas, 0, PAGE_HEIGHT - GRADIENT_BAR_HEIGHT, PAGE_WIDTH, GRADIENT_BAR_HEIGHT)
    canvas.restoreState()


def draw_content_page(canvas, doc):
    """Background for content pages: paper with thin gradient bar and footer."""
    canvas.saveState()
    canvas.setFillColor(PAPER)
    canvas.rect(0, 0, PAGE_WIDTH, PAGE_HEIGHT, stroke=0, fill=1)

    draw_gradient(canvas, 0, PAGE_HEIGHT - THIN_GRADIENT_HEIGHT, PAGE_WIDTH, THIN_GRADIENT_HEIGHT)

    canvas.setStrokeColor(RULE)
    canvas.setLineWidth(0.5)
    canvas.line(MARGIN, 32, PAGE_WIDTH - MARGIN, 32)

    canvas.setFont(doc.footer_font, FOOTER_SIZE)
    canvas.setFillColor(MUTED)
    canvas.drawString(MARGIN, 20, doc.footer_text)
    canvas.drawRightString(PAGE_WIDTH - MARGIN, 20, str(canvas.getPageNumber()))

    canvas.restoreState()


# ─── Content builders ─────────────────────────────────────────────────────────

def build_cover_page(scale, title, styles):
    """Build cover page flowables."""
    elements = [Spacer(1, PAGE_HEIGHT * 0.3)]
    elements.append(Paragraph('T Y P E   S C A L E   S P E C I M E N', styles['cover_overline']))
    elements.append(Paragraph(_escape_xml(title), styles['cover_title']))
    elements.append(Paragraph(_escape_xml(scale.describe()), styles['cover_subtitle']))

    elements.append(Paragraph(f'<b>Base</b>  {scale.base:g} pt', styles['cover_meta']))
    elements.append(Paragraph(f'<b>Ratio</b>  {scale.ratio:.10g}', styles['cover_meta']))
    elements.append(Paragraph(
        f'<b>Range</b>  {scale.body_small:.2f} pt to {scale.display:.2f} pt',
        styles['cover_meta'],
    ))

    elements.append(Spacer(1, 60))
    elements.append(GradientBar(CONTENT_WIDTH, THIN_GRADIENT_HEIGHT))
    elements.append(Spacer(1, 12))
    elements.append(Paragraph('Generated by typescale', styles['cover_footer']))
    return elements


def build_specimen(scale, styles, names, accent_color=SECTION_COLORS['scale']):
    """One line per tier, largest first, set at the tier's size."""
    elements = [AccentLine(accent_color), Paragraph('Type scale', styles['heading'])]
    elements.append(Paragraph(
        f'Ten tiers, each {scale.ratio:.4f} times the previous, starting at {scale.base:g} pt.',
        styles['caption'],
    ))
    for name, size in reversed(scale.tiers()):
        line = TierLine(
            name, size, SAMPLE_TEXT[name],
            font_name=names['sans'] if name in BODY_TIERS else names['serif'],
            label_font=names['sans'],
            max_size=MAX_SET_SIZE,
            width=FRAME_WIDTH,
        )
        elements.append(line)
        if not line.has_sample():
            logger.debug('Tier %s at %.1f pt does not fit the page, sample omitted', name, size)
    return elements


def build_ladder(scale, styles, names, accent_color=SECTION_COLORS['ladder']):
    """Bars proportional to each tier, smallest first."""
    return [
        Spacer(1, 18),
        AccentLine(accent_color),
        Paragraph('Ratio ladder', styles['heading']),
        RatioLadder(scale.tiers(), accent_color, label_font=names['sans']),
    ]


def build_tokens(styles, names, accent_color=SECTION_COLORS['tokens']):
    """Spacing, radius, component sizes, elevation/opacity and durations."""
    elements = [AccentLine(accent_color), Paragraph('Design tokens', styles['heading'])]

    elements.append(Paragraph('Spacing', styles['subheading']))
    elements.append(TokenBars(SPACING, accent_color, label_font=names['sans']))

    elements.append(Paragraph('Radius', styles['subheading']))
    elements.append(RadiusSwatches(RADIUS, accent_color, label_font=names['sans']))

    elements.append(Paragraph('Icon sizes', styles['subheading']))
    elements.append(TokenBars(ICON_SIZES, accent_color, label_font=names['sans']))

    elements.append(Paragraph('Avatar sizes', styles['subheading']))
    elements.append(TokenBars(AVATAR_SIZES, accent_color, label_font=names['sans']))

    elements.append(Paragraph('Elevation &amp; opacity', styles['subheading']))
    rows = [['Token', 'Elevation', 'Token', 'Opacity']]
    elevations, opacities = list(ELEVATIONS.items()), list(OPACITIES.items())
    for i in range(max(len(elevations), len(opacities))):
        row = []
        for table_rows, fmt in ((elevations, '{:g}'), (opacities, '{:.2f}')):
            if i < len(table_rows):
                name, value = table_rows[i]
                row.extend([name, fmt.format(value)])
            else:
                row.extend(['', ''])
        rows.append(row)
    elements.append(_token_table(rows, [90, 70, 90, 70], names))

    elements.append(Paragraph('Aspect ratios', styles['subheading']))
    rows = [['Token', 'Ratio']]
    rows.extend([name, f'{value:.4f}'] for name, value in ASPECT_RATIOS.items())
    elements.append(_token_table(rows, [120, 100], names))

    elements.append(Paragraph('Durations', styles['subheading']))
    rows = [['Token', 'Milliseconds']]
    for name, duration in DURATIONS.items():
        rows.append([name, f'{duration.total_seconds() * 1000:g}'])
    elements.append(_token_table(rows, [120, 100], names))
    return elements


def _token_table(rows, col_widths, names):
    """Small two-tone table with a header row and right-aligned values."""
    table = Table(rows, colWidths=col_widths, hAlign='LEFT')
    table.setStyle(TableStyle([
        ('FONT', (0, 0), (-1, 0), names['sans_bold'], 8),
        ('FONT', (0, 1), (-1, -1), names['sans'], 8),
        ('TEXTCOLOR', (0, 0), (-1, -1), BODY_TEXT),
        ('BACKGROUND', (0, 0), (-1, 0), PANEL),
        ('LINEBELOW', (0, 0), (-1, -1), 0.5, RULE),
    ] + [('ALIGN', (col, 0), (col, -1), 'RIGHT') for col in range(1, len(col_widths), 2)]))
    return table


def _escape_xml(text):
    """Escape XML special characters for ReportLab paragraphs."""
    if not text:
        return ''
    return (text
            .replace('&', '&amp;')
            .replace('<', '&lt;')
            .replace('>', '&gt;')
            .replace('"', '&quot;'))


# ─── Main PDF builder ─────────────────────────────────────────────────────────

def generate_specimen(scale, output_path, title=None, include_tokens=True, font_dir=None):
    """Write a specimen PDF for ``scale`` to ``output_path``."""
    fonts = register_fonts(font_dir)
    names = font_names(fonts)
    styles = make_styles(names)
    title = title or 'Type scale'

    doc = BaseDocTemplate(
        output_path,
        pagesize=(PAGE_WIDTH, PAGE_HEIGHT),
        leftMargin=MARGIN,
        rightMargin=MARGIN,
        topMargin=MARGIN + 10,
        bottomMargin=MARGIN,
        title=f'{title}: {scale.describe()}',
        author='typescale',
    )
    doc.footer_font = names['sans']
    doc.footer_text = f'typescale · {scale.describe()}'

    dark_frame = Frame(MARGIN, MARGIN, CONTENT_WIDTH, PAGE_HEIGHT - 2 * MARGIN,
                       id='dark_frame', showBoundary=0)
    content_frame = Frame(MARGIN, MARGIN + 10, CONTENT_WIDTH, CONTENT_FRAME_HEIGHT,
                          id='content_frame', showBoundary=0)

    doc.addPageTemplates([
        PageTemplate(id='dark', frames=[dark_frame], onPage=draw_dark_page),
        PageTemplate(id='content', frames=[content_frame], onPage=draw_content_page),
    ])

    story = build_cover_page(scale, title, styles)
    story.append(NextPageTemplate('content'))
    story.append(PageBreak())
    story.extend(build_specimen(scale, styles, names))
    story.extend(build_ladder(scale, styles, names))

    if include_tokens:
        story.append(PageBreak())
        story.extend(build_tokens(styles, names))

    doc.build(story)
    logger.info('Generated: %s', output_path)
    return output_path


# ─── CLI entry point ──────────────────────────────────────────────────────────

def build_parser():
    parser = argparse.ArgumentParser(
        prog='typescale-specimen',
        description='Render a typographic scale to a PDF specimen sheet.',
    )
    parser.add_argument('output', help='path of the PDF to write')
    parser.add_argument('--preset', help='named preset, e.g. normal_large_scale or desktop')
    parser.add_argument('--base', type=float, default=DEFAULT_BASE,
                        help=f'size of the smallest tier in points (default {DEFAULT_BASE:g})')
    ratio = parser.add_mutually_exclusive_group()
    ratio.add_argument('--ratio', type=float, help='multiplier between adjacent tiers')
    ratio.add_argument('--ratio-name', choices=ScaleRatio.names(),
                       help='named ratio (default large)')
    parser.add_argument('--title', help='cover page title')
    parser.add_argument('--no-tokens', action='store_true', help='omit the design token page')
    parser.add_argument('-v', '--verbose', action='store_true', help='debug logging')
    return parser


def scale_from_args(args):
    if args.preset:
        return get_preset(args.preset)
    if args.ratio is not None:
        ratio = args.ratio
    elif args.ratio_name:
        ratio = ScaleRatio.by_name(args.ratio_name)
    else:
        ratio = DEFAULT_RATIO
    return TypographicScale(args.base, ratio)


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='[PDF] %(message)s',
    )

    try:
        scale = scale_from_args(args)
    except ScaleError as exc:
        logger.error('%s', exc)
        return 1

    generate_specimen(scale, args.output, title=args.title or args.preset,
                      include_tokens=not args.no_tokens)
    return 0


if __name__ == '__main__':
    sys.exit(main())

"""Screen-width driven font sizing."""

from .errors import ScaleError

DEFAULT_SMALLEST = 12.0
DEFAULT_LARGEST = 20.0
DEFAULT_SMALLEST_SCREEN_WIDTH = 320.0
DEFAULT_LARGEST_SCREEN_WIDTH = 1920.0


def interpolate_font_size(screen_width, smallest=DEFAULT_SMALLEST, largest=DEFAULT_LARGEST,
                          smallest_screen_width=DEFAULT_SMALLEST_SCREEN_WIDTH,
                          largest_screen_width=DEFAULT_LARGEST_SCREEN_WIDTH,
                          clamp=False):
    """Linearly map ``screen_width`` onto ``[smallest, largest]``.

    Widths outside the screen range extrapolate unless ``clamp`` is set.
    """
    span = largest_screen_width - smallest_screen_width
    if span == 0:
        raise ScaleError(
            f'screen width range is empty ({smallest_screen_width!r} to {largest_screen_width!r})'
        )
    size = smallest + (largest - smallest) * (screen_width - smallest_screen_width) / span
    if clamp:
        low, high = min(smallest, largest), max(smallest, largest)
        size = max(low, min(high, size))
    return size

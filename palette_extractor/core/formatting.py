"""Text rendering of palette colours (hex or rgb), with an optional numbered prefix."""

from palette_extractor.core.types import Color, ColorFormat


def _rgb_to_hex(r: int, g: int, b: int) -> str:
    return f'#{r:02x}{g:02x}{b:02x}'


def format_color(color: Color, fmt: ColorFormat = ColorFormat.HEX) -> str:
    if fmt is ColorFormat.RGB:
        return f'rgb({color.r}, {color.g}, {color.b})'
    return _rgb_to_hex(color.r, color.g, color.b)


def format_line(color: Color, fmt: ColorFormat = ColorFormat.HEX, prefix: str | None = None, index: int = 1) -> str:
    """Format one output line, e.g. 'Color 1: #000000' or just '#000000'."""
    color_str = format_color(color, fmt)
    if prefix is not None:
        return f'{prefix} {index}: {color_str}'
    return color_str


def format_palette(palette: list[Color], fmt: ColorFormat = ColorFormat.HEX, prefix: str | None = None) -> list[str]:
    """One line per colour, in palette order, numbered from 1."""
    return [format_line(color, fmt, prefix, i) for i, color in enumerate(palette, start=1)]

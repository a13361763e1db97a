"""
Quote card export

Renders a finding as a PNG card: the lyric line word-wrapped in quotes, with
a "title — artist" caption underneath. Two themes match the light and dark
modes of the card preview.
"""

from pathlib import Path
from typing import List, Optional, Union

from PIL import Image, ImageDraw, ImageFont

from .discovery.models import LyricFinding
from .exceptions import CardExportError
from .utils.helpers import ensure_directory, sanitize_filename
from .utils.logger import get_logger

logger = get_logger(__name__)

THEMES = {
    'light': {'background': '#fdfbf7', 'text': '#1f2328', 'caption': '#6b7280', 'accent': '#d97706'},
    'dark': {'background': '#111827', 'text': '#f9fafb', 'caption': '#9ca3af', 'accent': '#f59e0b'},
}

QUOTE_FONT_SIZE = 56
CAPTION_FONT_SIZE = 30
PADDING = 80
LINE_SPACING = 1.35


def _load_font(size: int) -> ImageFont.ImageFont:
    try:
        return ImageFont.truetype("DejaVuSans.ttf", size)
    except OSError:
        return ImageFont.load_default(size=size)


def wrap_text(text: str, font, max_width: int, draw: ImageDraw.ImageDraw) -> List[str]:
    """
    Greedy word wrap by rendered width

    A single word wider than max_width is kept on its own line.
    """
    lines: List[str] = []
    current = ""
    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if current and draw.textlength(candidate, font=font) > max_width:
            lines.append(current)
            current = word
        else:
            current = candidate
    if current:
        lines.append(current)
    return lines or [""]


def render_card(finding: LyricFinding, theme: str = "light", width: int = 1080, scale: int = 2) -> Image.Image:
    """
    Render a quote card image

    Args:
        finding: Finding to render
        theme: "light" or "dark"
        width: Logical card width in pixels
        scale: Pixel density multiplier

    Returns:
        RGB image of width * scale pixels

    Raises:
        CardExportError: If the theme is unknown
    """
    if theme not in THEMES:
        raise CardExportError(f"Unknown card theme: {theme}", details={'theme': theme})
    colors = THEMES[theme]

    card_width = width * scale
    padding = PADDING * scale
    quote_font = _load_font(QUOTE_FONT_SIZE * scale)
    caption_font = _load_font(CAPTION_FONT_SIZE * scale)

    # Measure on a scratch canvas before the final height is known
    scratch = ImageDraw.Draw(Image.new('RGB', (1, 1)))
    quote_lines = wrap_text(f"“{finding.line}”", quote_font, card_width - 2 * padding, scratch)
    quote_line_height = int(QUOTE_FONT_SIZE * scale * LINE_SPACING)
    caption_height = int(CAPTION_FONT_SIZE * scale * LINE_SPACING)
    gap = 40 * scale

    card_height = padding * 2 + quote_line_height * len(quote_lines) + gap + caption_height
    image = Image.new('RGB', (card_width, card_height), colors['background'])
    draw = ImageDraw.Draw(image)

    draw.rectangle([0, 0, 12 * scale, card_height], fill=colors['accent'])

    y = padding
    for text_line in quote_lines:
        draw.text((padding, y), text_line, font=quote_font, fill=colors['text'])
        y += quote_line_height

    draw.text((padding, y + gap), finding.caption, font=caption_font, fill=colors['caption'])
    return image


def default_card_filename(finding: LyricFinding) -> str:
    """File name in "<artist> — <title>.png" form, sanitized"""
    return sanitize_filename(f"{finding.artist} — {finding.title}.png")


def save_card(
    finding: LyricFinding,
    path: Optional[Union[str, Path]] = None,
    directory: Optional[Union[str, Path]] = None,
    theme: str = "light",
    width: int = 1080,
    scale: int = 2
) -> Path:
    """
    Render a card and write it as PNG

    Args:
        finding: Finding to render
        path: Target file; when omitted the default file name is used inside directory
        directory: Output directory for the default file name (defaults to cwd)
        theme: "light" or "dark"
        width: Logical card width in pixels
        scale: Pixel density multiplier

    Returns:
        Path of the written file

    Raises:
        CardExportError: If rendering or writing fails
    """
    if path:
        target = Path(path).expanduser()
    else:
        target = Path(directory or ".").expanduser() / default_card_filename(finding)

    image = render_card(finding, theme=theme, width=width, scale=scale)
    try:
        ensure_directory(target.parent)
        image.save(target, format='PNG')
    except (OSError, ValueError) as e:
        logger.error(f"Could not write card to {target}: {e}")
        raise CardExportError(
            f"Could not generate image: {e}",
            details={'path': str(target), 'original_error': str(e)}
        ) from e

    logger.info(f"Card saved to {target}")
    return target

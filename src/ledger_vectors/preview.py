"""
Screen Preview
==============

Shows display lines the way the device lays them out: a title row with
the element name (and page number), then the value split over the top
and bottom rows.

    +-------------------+
    | To [1/2]          |
    | 01010101010101010 |
    | 10101010101010101 |
    +-------------------+

Screens can also be rendered as PNG images (requires Pillow), which is
handy when comparing against photos or emulator screenshots of the
device.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from ledger_vectors.layout.chunker import TOP_ROW_CHAR_COUNT
from ledger_vectors.layout.pages import Page
from ledger_vectors.vectors.reader import parse_line


@dataclass(frozen=True)
class Screen:
    """One device screen: title row and two value rows."""
    title: str
    top: str = ""
    bottom: str = ""

    @property
    def rows(self) -> Tuple[str, str, str]:
        return (self.title, self.top, self.bottom)


def page_screens(page: Page) -> List[Screen]:
    """Screens of a single page, titled like the rendered lines."""
    total = page.page_count
    screens = []
    for number, unit in enumerate(page.units, start=1):
        title = page.name if total == 1 else f"{page.name} [{number}/{total}]"
        screens.append(Screen(title, unit.top, unit.bottom))
    return screens


def screens_from_lines(lines: Iterable[str]) -> List[Screen]:
    """
    Rebuild screens from rendered output lines.

    Raises:
        VectorFormatError: If a line does not follow the display format
    """
    screens = []
    for text in lines:
        line = parse_line(text)
        title = line.name
        if line.numbered:
            title = f"{line.name} [{line.page}/{line.page_count}]"
        screens.append(Screen(
            title,
            line.value[:TOP_ROW_CHAR_COUNT],
            line.value[TOP_ROW_CHAR_COUNT:],
        ))
    return screens


def format_screen(screen: Screen) -> str:
    """Screen as a boxed block of text."""
    width = max(TOP_ROW_CHAR_COUNT, *(len(row) for row in screen.rows))
    border = "+" + "-" * (width + 2) + "+"
    body = [f"| {row:<{width}} |" for row in screen.rows]
    return "\n".join([border, *body, border])


def render_screen_png(
    screen: Screen,
    scale: int = 3,
    bezel: int = 6,
    ink_color: tuple = (250, 250, 250),
    paper_color: tuple = (16, 16, 16),
    bezel_color: tuple = (96, 96, 96),
) -> Optional[bytes]:
    """
    Render a screen as a PNG image (requires PIL).

    Text is drawn with Pillow's built-in bitmap font on a fixed character
    grid, then scaled up without smoothing.

    Args:
        screen: Screen to draw
        scale: Pixel scale factor (default 3)
        bezel: Border size around the display, before scaling
        ink_color: RGB tuple for text (default white, like the OLED)
        paper_color: RGB tuple for the display background
        bezel_color: RGB tuple for the border

    Returns:
        PNG image bytes, or None if PIL not available
    """
    try:
        from PIL import Image, ImageDraw, ImageFont
        import io
    except ImportError:
        return None

    char_width = 6
    char_height = 11
    columns = max(TOP_ROW_CHAR_COUNT, *(len(row) for row in screen.rows))

    display_width = columns * char_width
    display_height = len(screen.rows) * char_height
    img = Image.new(
        "RGB",
        (display_width + 2 * bezel, display_height + 2 * bezel),
        color=bezel_color,
    )
    draw = ImageDraw.Draw(img)
    draw.rectangle(
        [bezel, bezel, bezel + display_width - 1, bezel + display_height - 1],
        fill=paper_color,
    )

    font = ImageFont.load_default()
    for row_index, row in enumerate(screen.rows):
        for col_index, char in enumerate(row):
            draw.text(
                (bezel + col_index * char_width, bezel + row_index * char_height),
                char,
                fill=ink_color,
                font=font,
            )

    if scale > 1:
        img = img.resize((img.width * scale, img.height * scale), Image.Resampling.NEAREST)

    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()

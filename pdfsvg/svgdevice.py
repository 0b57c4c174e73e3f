import logging
import os
import re
from collections.abc import Callable, Mapping, Sequence
from typing import Any, BinaryIO, Union

from reportlab.lib.colors import Color, HexColor
from reportlab.lib.pagesizes import A4
from reportlab.pdfbase.pdfmetrics import registerFont, stringWidth
from reportlab.pdfbase.ttfonts import TTFError, TTFont
from reportlab.pdfgen.canvas import Canvas

from pdfsvg.color import color_to_hex
from pdfsvg.svgexceptions import SVGValueError
from pdfsvg.utils import Point, make_compat_str, nums2str

log = logging.getLogger(__name__)

STANDARD_FONT_NAMES = (
    "Times-Roman",
    "Times-Italic",
    "Times-Bold",
    "Times-BoldItalic",
    "Helvetica",
    "Helvetica-Oblique",
    "Helvetica-Bold",
    "Helvetica-BoldOblique",
    "Courier",
    "Courier-Oblique",
    "Courier-Bold",
    "Courier-BoldOblique",
    "Symbol",
    "ZapfDingbats",
)
DEFAULT_FONT_NAME = "Helvetica"
DEFAULT_FONT_SIZE = 12
_registered_fonts: dict[str, str] = {}

# canonical color codes as returned by color_to_hex
HEX_CODE_RE = re.compile(r"[0-9a-f]{6}", re.IGNORECASE)

Block = Callable[[], None]
TextOptions = Mapping[str, Any]


class SVGBounds:
    """A drawing frame in absolute page coordinates (origin bottom-left)."""

    def __init__(
        self,
        absolute_left: float,
        absolute_top: float,
        width: float,
        height: float,
    ) -> None:
        self.absolute_left = absolute_left
        self.absolute_top = absolute_top
        self.width = width
        self.height = height

    def __repr__(self) -> str:
        return (
            f"<SVGBounds: absolute_left={self.absolute_left!r}, "
            f"absolute_top={self.absolute_top!r}, "
            f"width={self.width!r}, "
            f"height={self.height!r}>"
        )

    @property
    def absolute_bottom(self) -> float:
        return self.absolute_top - self.height

    @property
    def absolute_right(self) -> float:
        return self.absolute_left + self.width


class SVGCanvas:
    """The drawing surface driven by SVGCallInterpreter.

    Every public method is a capability that a call tree may name. Path and
    text coordinates are relative to the bottom-left corner of the current
    bounds, as with Prawn bounding boxes, while transformation matrices and
    raw content apply to the page as a whole. This base class keeps track of
    the bounds and measures text; drawing primitives do nothing.
    """

    def __init__(self, page_width: float = A4[0], page_height: float = A4[1]) -> None:
        self._bounds_stack = [SVGBounds(0, page_height, page_width, page_height)]
        self.font_path: list[str] = []

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}: bounds={self.bounds!r}>"

    def __enter__(self) -> "SVGCanvas":
        return self

    def __exit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        self.close()

    def close(self) -> None:
        return

    @property
    def bounds(self) -> SVGBounds:
        return self._bounds_stack[-1]

    def map_to_absolute(self, point: Point) -> Point:
        (x, y) = point
        return x + self.bounds.absolute_left, y + self.bounds.absolute_bottom

    def bounding_box(
        self,
        at: Sequence[float],
        width: float,
        height: float,
        block: Block | None = None,
    ) -> None:
        """Runs `block` with the bounds set to a box whose top-left is `at`."""
        (left, top) = self.map_to_absolute((at[0], at[1]))
        self._bounds_stack.append(SVGBounds(left, top, width, height))
        try:
            if block is not None:
                block()
        finally:
            self._bounds_stack.pop()

    def load_external_fonts(self, font_path: Sequence[str]) -> None:
        self.font_path = list(font_path)

    def find_font(self, font_name: str) -> str:
        """Returns a font name usable with ReportLab, registering it if needed.

        Non-standard fonts are looked up as `<font_name>.ttf` in the font path.
        Unknown fonts are returned unchanged so that ReportLab reports them.
        """
        if font_name in STANDARD_FONT_NAMES or font_name in _registered_fonts:
            return font_name
        for directory in self.font_path:
            filename = os.path.join(directory, f"{font_name}.ttf")
            if not os.path.isfile(filename):
                continue
            try:
                registerFont(TTFont(font_name, filename))
            except TTFError:
                log.warning("Cannot register font %r from %r", font_name, filename)
                continue
            log.debug("Registered font %r from %r", font_name, filename)
            _registered_fonts[font_name] = filename
            break
        return font_name

    def width_of(
        self, text: Union[str, bytes], options: TextOptions | None = None
    ) -> float:
        """Returns the width of `text` set with the font and size in options."""
        options = options or {}
        font = self.find_font(options.get("font", DEFAULT_FONT_NAME))
        size = options.get("size", DEFAULT_FONT_SIZE)
        return stringWidth(make_compat_str(text), font, size)

    def move_to(self, x: float, y: float) -> None:
        return

    def line_to(self, x: float, y: float) -> None:
        return

    def curve_to(
        self, x1: float, y1: float, x2: float, y2: float, x3: float, y3: float
    ) -> None:
        return

    def rectangle(self, x: float, y: float, width: float, height: float) -> None:
        return

    def close_path(self) -> None:
        return

    def fill(self) -> None:
        return

    def stroke(self) -> None:
        return

    def fill_and_stroke(self) -> None:
        return

    def fill_color(self, color: str) -> None:
        return

    def stroke_color(self, color: str) -> None:
        return

    def line_width(self, width: float) -> None:
        return

    def add_content(self, content: str) -> None:
        return

    def draw_text(self, text: Union[str, bytes], options: TextOptions) -> None:
        return

    def save_graphics_state(self, block: Block | None = None) -> None:
        if block is not None:
            block()

    def restore_graphics_state(self) -> None:
        return

    def transformation_matrix(
        self,
        a: float,
        b: float,
        c: float,
        d: float,
        e: float,
        f: float,
        block: Block | None = None,
    ) -> None:
        if block is not None:
            block()

    def transparent(
        self,
        opacity: float,
        stroke_opacity: float | None = None,
        block: Block | None = None,
    ) -> None:
        if block is not None:
            block()


class ReportLabCanvas(SVGCanvas):
    """Writes the calls into a PDF page using a ReportLab canvas."""

    def __init__(
        self,
        outfp: Union[str, BinaryIO],
        pagesize: tuple[float, float] = A4,
        compress: bool = True,
    ) -> None:
        SVGCanvas.__init__(self, *pagesize)
        self.rlcanvas = Canvas(outfp, pagesize=pagesize, pageCompression=int(compress))

    def close(self) -> None:
        self.rlcanvas.showPage()
        self.rlcanvas.save()

    def _to_hex_color(self, color: str) -> Color:
        if HEX_CODE_RE.fullmatch(color):
            hexcode: str | None = color.lower()
        else:
            hexcode = color_to_hex(color)
        if hexcode is None:
            raise SVGValueError(f"Unrecognized color: {color!r}")
        return HexColor(f"#{hexcode}")

    def _path_op(self, points: Sequence[Point], op: str) -> None:
        coords = []
        for point in points:
            coords.extend(self.map_to_absolute(point))
        self.rlcanvas.addLiteral(f"{nums2str(coords)} {op}")

    def move_to(self, x: float, y: float) -> None:
        self._path_op([(x, y)], "m")

    def line_to(self, x: float, y: float) -> None:
        self._path_op([(x, y)], "l")

    def curve_to(
        self, x1: float, y1: float, x2: float, y2: float, x3: float, y3: float
    ) -> None:
        self._path_op([(x1, y1), (x2, y2), (x3, y3)], "c")

    def rectangle(self, x: float, y: float, width: float, height: float) -> None:
        (x0, y0) = self.map_to_absolute((x, y))
        self.rlcanvas.addLiteral(f"{nums2str((x0, y0, width, height))} re")

    def close_path(self) -> None:
        self.rlcanvas.addLiteral("h")

    def fill(self) -> None:
        self.rlcanvas.addLiteral("f")

    def stroke(self) -> None:
        self.rlcanvas.addLiteral("S")

    def fill_and_stroke(self) -> None:
        self.rlcanvas.addLiteral("B")

    def fill_color(self, color: str) -> None:
        self.rlcanvas.setFillColor(self._to_hex_color(color))

    def stroke_color(self, color: str) -> None:
        self.rlcanvas.setStrokeColor(self._to_hex_color(color))

    def line_width(self, width: float) -> None:
        self.rlcanvas.setLineWidth(width)

    def add_content(self, content: str) -> None:
        self.rlcanvas.addLiteral(content)

    def draw_text(self, text: Union[str, bytes], options: TextOptions) -> None:
        font = self.find_font(options.get("font", DEFAULT_FONT_NAME))
        size = options.get("size", DEFAULT_FONT_SIZE)
        (x, y) = self.map_to_absolute((options["at"][0], options["at"][1]))
        self.rlcanvas.setFont(font, size)
        self.rlcanvas.drawString(x, y, make_compat_str(text))

    def save_graphics_state(self, block: Block | None = None) -> None:
        self.rlcanvas.saveState()
        if block is not None:
            block()
            self.rlcanvas.restoreState()

    def restore_graphics_state(self) -> None:
        self.rlcanvas.restoreState()

    def transformation_matrix(
        self,
        a: float,
        b: float,
        c: float,
        d: float,
        e: float,
        f: float,
        block: Block | None = None,
    ) -> None:
        if block is None:
            self.rlcanvas.transform(a, b, c, d, e, f)
            return
        self.rlcanvas.saveState()
        self.rlcanvas.transform(a, b, c, d, e, f)
        block()
        self.rlcanvas.restoreState()

    def transparent(
        self,
        opacity: float,
        stroke_opacity: float | None = None,
        block: Block | None = None,
    ) -> None:
        if stroke_opacity is None:
            stroke_opacity = opacity
        self.rlcanvas.saveState()
        self.rlcanvas.setFillAlpha(opacity)
        self.rlcanvas.setStrokeAlpha(stroke_opacity)
        if block is not None:
            block()
        self.rlcanvas.restoreState()

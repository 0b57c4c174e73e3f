"""Draws a parsed SVG call tree onto a canvas.

SVGInterface is the entry point of the package: it places the drawing on
the canvas, clips it to its output size and runs the interpreter inside a
single graphics state, so that the calls cannot change the state of the
caller's canvas.
"""

import logging
import os
from collections.abc import Mapping, Sequence
from typing import Any, NamedTuple

from pdfsvg.calltree import CallSpec, make_calls
from pdfsvg.casting import safe_point
from pdfsvg.svgdevice import SVGCanvas
from pdfsvg.svgexceptions import SVGConfigurationError
from pdfsvg.svginterp import CONTENT_CLIP, SVGCallInterpreter

log = logging.getLogger(__name__)

DEFAULT_FONT_PATHS = [
    "/Library/Fonts",
    "/System/Library/Fonts",
    "~/Library/Fonts",
    "/usr/share/fonts/truetype",
]


def default_font_path(candidates: Sequence[str] | None = None) -> list[str]:
    """Returns the font directories from `candidates` that exist."""
    if candidates is None:
        candidates = DEFAULT_FONT_PATHS
    font_path = []
    for path in candidates:
        path = os.path.expanduser(path)
        if os.path.isdir(path):
            font_path.append(path)
    return font_path


class SVGConfig:
    """Settings shared by all drawings of one renderer."""

    def __init__(self, font_path: Sequence[str] | None = None) -> None:
        self.font_path = list(font_path or [])

    def __repr__(self) -> str:
        return f"<SVGConfig: font_path={self.font_path!r}>"

    @classmethod
    def from_environment(cls) -> "SVGConfig":
        return cls(font_path=default_font_path())


class SVGSizing(NamedTuple):
    output_width: float
    output_height: float


class SVGInterface:
    def __init__(
        self,
        calls: Sequence[CallSpec],
        canvas: SVGCanvas,
        sizing: SVGSizing,
        options: Mapping[str, Any],
        config: SVGConfig | None = None,
    ) -> None:
        """Prepares a drawing.

        :param calls: the call tree produced by the SVG parser.
        :param canvas: the canvas to draw on.
        :param sizing: the size of the drawing on the canvas.
        :param options: must contain the key "at", the (x, y) position of the
            top-left corner of the drawing within the current bounds.
        :param config: renderer settings, such as the font path.
        """
        at = options.get("at")
        if at is None:
            raise SVGConfigurationError('options["at"] must be specified')
        point = safe_point(at)
        if point is None:
            raise SVGConfigurationError(
                f'options["at"] must be an (x, y) position, not {at!r}'
            )
        self.at = point
        self.calls = make_calls(calls)
        self.canvas = canvas
        self.sizing = sizing
        self.options = options
        self.config = config if config is not None else SVGConfig()
        self.canvas.load_external_fonts(self.config.font_path)

    def draw(self) -> None:
        """Draws the calls onto the canvas."""
        log.debug("draw: at=%r, sizing=%r", self.at, self.sizing)
        self.canvas.bounding_box(
            self.at,
            width=self.sizing.output_width,
            height=self.sizing.output_height,
            block=self._draw_in_bounds,
        )

    def _draw_in_bounds(self) -> None:
        self.canvas.save_graphics_state(block=self._draw_contents)

    def _draw_contents(self) -> None:
        self.clip_rectangle(0, 0, self.sizing.output_width, self.sizing.output_height)
        SVGCallInterpreter(self.canvas).execute(self.calls)

    def clip_rectangle(self, x: float, y: float, width: float, height: float) -> None:
        self.canvas.move_to(x, y)
        self.canvas.line_to(x + width, y)
        self.canvas.line_to(x + width, y + height)
        self.canvas.line_to(x, y + height)
        self.canvas.close_path()
        self.canvas.add_content(CONTENT_CLIP)

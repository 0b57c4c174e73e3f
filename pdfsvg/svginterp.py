import logging
from collections.abc import Callable, Sequence
from typing import Any, Optional

from pdfsvg.calltree import SVGCall
from pdfsvg.svgdevice import SVGCanvas
from pdfsvg.svgexceptions import SVGException
from pdfsvg.utils import matrix2str

log = logging.getLogger(__name__)


class SVGInterpreterError(SVGException):
    pass


# Raw content stream operators
CONTENT_END_PATH = "n"
CONTENT_CLIP = "W n"

# Calls which only make sense wrapped around some content
CALLS_THAT_MUST_HAVE_A_BLOCK = frozenset(["transparent"])

# (call, arguments) to dispatch, or None when the call must not reach the canvas
Rewrite = Optional[tuple[str, list[Any]]]


class SVGInterpreterState:
    """State carried across sibling calls during one interpretation."""

    def __init__(self) -> None:
        self.relative_text_position: float | None = None

    def __repr__(self) -> str:
        return (
            f"<SVGInterpreterState: "
            f"relative_text_position={self.relative_text_position!r}>"
        )


class SVGCallInterpreter:
    """Replays a call tree on an SVGCanvas.

    Calls are issued depth first, in the order of the tree. Before a call is
    dispatched, the rewrite_<call> method for it (if any) may change its
    arguments or keep it from reaching the canvas.
    """

    def __init__(self, canvas: SVGCanvas) -> None:
        self.canvas = canvas

    def execute(
        self,
        calls: Sequence[SVGCall],
        state: SVGInterpreterState | None = None,
    ) -> None:
        if state is None:
            state = SVGInterpreterState()
        for node in calls:
            self.execute_call(node, state)

    def execute_call(self, node: SVGCall, state: SVGInterpreterState) -> None:
        if node.call == "end_path":
            if node.children:
                self.execute(node.children, state)
            self.canvas.add_content(CONTENT_END_PATH)
            return

        rewritten = self.apply_rewrite(node.call, node.arguments, state)
        if rewritten is None:
            if node.children:
                self.execute(node.children, state)
            return

        (call, arguments) = rewritten
        if not node.children and call in CALLS_THAT_MUST_HAVE_A_BLOCK:
            log.debug("skip: %s without content", call)
            return

        func = self.get_capability(call)
        if node.children:
            log.debug("exec: %s %r {%d}", call, arguments, len(node.children))
            func(*arguments, block=self.make_block(node.children, state))
        else:
            log.debug("exec: %s %r", call, arguments)
            func(*arguments)

    def make_block(
        self,
        calls: Sequence[SVGCall],
        state: SVGInterpreterState,
    ) -> Callable[[], None]:
        def block() -> None:
            self.execute(calls, state)

        return block

    def get_capability(self, call: str) -> Callable[..., Any]:
        func = None
        if not call.startswith("_"):
            func = getattr(self.canvas, call, None)
        if not callable(func):
            raise SVGInterpreterError(f"Unknown call: {call!r}")
        return func

    def apply_rewrite(
        self,
        call: str,
        arguments: Sequence[Any],
        state: SVGInterpreterState,
    ) -> Rewrite:
        """Returns the call to dispatch, or None if it is suppressed.

        The call tree itself is never modified; changed arguments are copies.
        """
        method = f"rewrite_{call}"
        if hasattr(self, method):
            func = getattr(self, method)
            return func(list(arguments), state)
        return call, list(arguments)

    def rewrite_relative_draw_text(
        self, arguments: list[Any], state: SVGInterpreterState
    ) -> Rewrite:
        """Continue the text run where the previous text ended"""
        (text, options) = arguments
        options = dict(options)
        at = list(options.get("at", (0, 0)))
        if state.relative_text_position is not None:
            at[0] = state.relative_text_position
        options["at"] = at
        return self.rewrite_draw_text([text, options], state)

    def rewrite_text_group(
        self, arguments: list[Any], state: SVGInterpreterState
    ) -> Rewrite:
        """Start a new text run"""
        state.relative_text_position = None
        return None

    def rewrite_draw_text(
        self, arguments: list[Any], state: SVGInterpreterState
    ) -> Rewrite:
        """Apply the text anchor and remember where the text ends"""
        (text, options) = arguments
        options = dict(options)
        at = list(options.get("at", (0, 0)))
        options["at"] = at

        width = self.canvas.width_of(text, {**options, "kerning": True})

        anchor = options.pop("text_anchor", None)
        if anchor in ("middle", "end"):
            if anchor == "middle":
                width /= 2
            at[0] -= width

        space_width = self.canvas.width_of("n", options)
        state.relative_text_position = at[0] + width + space_width
        return "draw_text", [text, options]

    def rewrite_transformation_matrix(
        self, arguments: list[Any], state: SVGInterpreterState
    ) -> Rewrite:
        """Move the origin of the matrix to the top-left corner of the bounds"""
        (a, b, c, d, e, f) = arguments[:6]
        left = self.canvas.bounds.absolute_left
        top = self.canvas.bounds.absolute_top
        e += left - (left * a + top * c)
        f += top - (left * b + top * d)
        log.debug(
            "transformation_matrix: %s -> %s",
            matrix2str(tuple(arguments[:6])),
            matrix2str((a, b, c, d, e, f)),
        )
        return "transformation_matrix", [a, b, c, d, e, f, *arguments[6:]]

    def rewrite_clip(
        self, arguments: list[Any], state: SVGInterpreterState
    ) -> Rewrite:
        """Clip to the current path"""
        self.canvas.add_content(CONTENT_CLIP)
        return None

    def rewrite_save(
        self, arguments: list[Any], state: SVGInterpreterState
    ) -> Rewrite:
        """Save graphics state"""
        self.canvas.save_graphics_state()
        return None

    def rewrite_restore(
        self, arguments: list[Any], state: SVGInterpreterState
    ) -> Rewrite:
        """Restore graphics state"""
        self.canvas.restore_graphics_state()
        return None

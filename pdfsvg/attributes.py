"""Resolution of SVG presentation attributes shared by all elements."""

from collections.abc import MutableMapping


class SVGElementState:
    def __init__(self) -> None:
        self.display: str | None = None

    def __repr__(self) -> str:
        return f"<SVGElementState: display={self.display!r}>"


def parse_display_attribute(
    attributes: MutableMapping[str, str], state: SVGElementState
) -> None:
    """Sets state.display from the display and visibility attributes.

    A hidden element is not displayed at all.
    """
    if attributes.get("visibility") == "hidden":
        attributes["display"] = "none"
    display = attributes.get("display")
    if display is not None:
        state.display = display.strip()


def is_displayed(state: SVGElementState) -> bool:
    return state.display != "none"

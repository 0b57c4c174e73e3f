import pytest

from pdfsvg.attributes import (
    SVGElementState,
    is_displayed,
    parse_display_attribute,
)


@pytest.mark.parametrize(
    ("attributes", "expected"),
    [
        ({}, None),
        ({"display": " inline "}, "inline"),
        ({"display": "none"}, "none"),
        ({"visibility": "hidden"}, "none"),
        ({"visibility": "hidden", "display": "inline"}, "none"),
        ({"visibility": "visible", "display": "block"}, "block"),
    ],
)
def test_parse_display_attribute(attributes, expected):
    state = SVGElementState()
    parse_display_attribute(attributes, state)
    assert state.display == expected


def test_hidden_forces_display_attribute():
    attributes = {"visibility": "hidden"}
    parse_display_attribute(attributes, SVGElementState())
    assert attributes["display"] == "none"


def test_is_displayed():
    state = SVGElementState()
    assert is_displayed(state)
    parse_display_attribute({"visibility": "hidden"}, state)
    assert not is_displayed(state)

from typing import Any, Optional

import pytest

from pdfsvg.casting import safe_float, safe_point
from pdfsvg.utils import Point


@pytest.mark.parametrize(
    ("arg", "expected"),
    [
        ([0, 0], (0.0, 0.0)),
        ((1, 2), (1.0, 2.0)),
        ([1, "2.5"], (1.0, 2.5)),
        ([1, 2, 3], (1.0, 2.0)),
        ([1], None),
        ([], None),
        ([0, None], None),
        ("ab", None),
        (None, None),
        (object(), None),
    ],
)
def test_safe_point(arg: Any, expected: Optional[Point]) -> None:
    assert safe_point(arg) == expected


@pytest.mark.parametrize(
    ("arg", "expected"),
    [
        (0, 0.0),
        (1, 1.0),
        ("0", 0.0),
        ("1.5", 1.5),
        (None, None),
        (object(), None),
        (2**1024, None),  # Integer too large to convert to float
    ],
)
def test_safe_float(arg: Any, expected: Optional[float]) -> None:
    assert safe_float(arg) == expected


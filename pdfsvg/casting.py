import itertools
from typing import Any

from pdfsvg.utils import Point


def safe_float(o: Any) -> float | None:
    try:
        return float(o)
    except (TypeError, ValueError, OverflowError):
        return None


def safe_point(value: Any) -> Point | None:
    try:
        values = list(itertools.islice(value, 2))
    except TypeError:
        return None

    if len(values) != 2:
        return None

    x = safe_float(values[0])
    y = safe_float(values[1])

    if x is None or y is None:
        return None

    return x, y

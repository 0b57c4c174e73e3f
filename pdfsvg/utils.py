"""Miscellaneous Routines."""

from collections.abc import Iterable
from typing import Union

import charset_normalizer  # For str encoding detection

Point = tuple[float, float]
Matrix = tuple[float, float, float, float, float, float]


def make_compat_str(o: object) -> str:
    """Converts everything to string, if bytes guessing the encoding."""
    if isinstance(o, bytes):
        enc = charset_normalizer.detect(o)
        if enc["encoding"] is None:
            return str(o)
        try:
            return o.decode(enc["encoding"])
        except UnicodeDecodeError:
            return str(o)
    else:
        return str(o)


def num2str(x: Union[int, float]) -> str:
    """Formats a number the way it is written into a content stream."""
    if isinstance(x, int):
        return str(x)
    s = f"{x:.5f}".rstrip("0").rstrip(".")
    if s == "-0":
        return "0"
    return s


def nums2str(values: Iterable[Union[int, float]]) -> str:
    return " ".join(num2str(v) for v in values)


def matrix2str(m: Matrix) -> str:
    (a, b, c, d, e, f) = m
    return f"[{a:.2f},{b:.2f},{c:.2f},{d:.2f}, ({e:.2f},{f:.2f})]"

"""Normalization of SVG color descriptors to six-digit RGB codes."""

import logging
import re

from pdfsvg.casting import safe_float

log = logging.getLogger(__name__)

HTML_COLORS: dict[str, str] = {
    "aliceblue": "f0f8ff",
    "antiquewhite": "faebd7",
    "aqua": "00ffff",
    "aquamarine": "7fffd4",
    "azure": "f0ffff",
    "beige": "f5f5dc",
    "bisque": "ffe4c4",
    "black": "000000",
    "blanchedalmond": "ffebcd",
    "blue": "0000ff",
    "blueviolet": "8a2be2",
    "brown": "a52a2a",
    "burlywood": "deb887",
    "cadetblue": "5f9ea0",
    "chartreuse": "7fff00",
    "chocolate": "d2691e",
    "coral": "ff7f50",
    "cornflowerblue": "6495ed",
    "cornsilk": "fff8dc",
    "crimson": "dc143c",
    "cyan": "00ffff",
    "darkblue": "00008b",
    "darkcyan": "008b8b",
    "darkgoldenrod": "b8860b",
    "darkgray": "a9a9a9",
    "darkgreen": "006400",
    "darkgrey": "a9a9a9",
    "darkkhaki": "bdb76b",
    "darkmagenta": "8b008b",
    "darkolivegreen": "556b2f",
    "darkorange": "ff8c00",
    "darkorchid": "9932cc",
    "darkred": "8b0000",
    "darksalmon": "e9967a",
    "darkseagreen": "8fbc8f",
    "darkslateblue": "483d8b",
    "darkslategray": "2f4f4f",
    "darkslategrey": "2f4f4f",
    "darkturquoise": "00ced1",
    "darkviolet": "9400d3",
    "deeppink": "ff1493",
    "deepskyblue": "00bfff",
    "dimgray": "696969",
    "dimgrey": "696969",
    "dodgerblue": "1e90ff",
    "firebrick": "b22222",
    "floralwhite": "fffaf0",
    "forestgreen": "228b22",
    "fuchsia": "ff00ff",
    "gainsboro": "dcdcdc",
    "ghostwhite": "f8f8ff",
    "gold": "ffd700",
    "goldenrod": "daa520",
    "gray": "808080",
    "grey": "808080",
    "green": "008000",
    "greenyellow": "adff2f",
    "honeydew": "f0fff0",
    "hotpink": "ff69b4",
    "indianred": "cd5c5c",
    "indigo": "4b0082",
    "ivory": "fffff0",
    "khaki": "f0e68c",
    "lavender": "e6e6fa",
    "lavenderblush": "fff0f5",
    "lawngreen": "7cfc00",
    "lemonchiffon": "fffacd",
    "lightblue": "add8e6",
    "lightcoral": "f08080",
    "lightcyan": "e0ffff",
    "lightgoldenrodyellow": "fafad2",
    "lightgray": "d3d3d3",
    "lightgreen": "90ee90",
    "lightgrey": "d3d3d3",
    "lightpink": "ffb6c1",
    "lightsalmon": "ffa07a",
    "lightseagreen": "20b2aa",
    "lightskyblue": "87cefa",
    "lightslategray": "778899",
    "lightslategrey": "778899",
    "lightsteelblue": "b0c4de",
    "lightyellow": "ffffe0",
    "lime": "00ff00",
    "limegreen": "32cd32",
    "linen": "faf0e6",
    "magenta": "ff00ff",
    "maroon": "800000",
    "mediumaquamarine": "66cdaa",
    "mediumblue": "0000cd",
    "mediumorchid": "ba55d3",
    "mediumpurple": "9370db",
    "mediumseagreen": "3cb371",
    "mediumslateblue": "7b68ee",
    "mediumspringgreen": "00fa9a",
    "mediumturquoise": "48d1cc",
    "mediumvioletred": "c71585",
    "midnightblue": "191970",
    "mintcream": "f5fffa",
    "mistyrose": "ffe4e1",
    "moccasin": "ffe4b5",
    "navajowhite": "ffdead",
    "navy": "000080",
    "oldlace": "fdf5e6",
    "olive": "808000",
    "olivedrab": "6b8e23",
    "orange": "ffa500",
    "orangered": "ff4500",
    "orchid": "da70d6",
    "palegoldenrod": "eee8aa",
    "palegreen": "98fb98",
    "paleturquoise": "afeeee",
    "palevioletred": "db7093",
    "papayawhip": "ffefd5",
    "peachpuff": "ffdab9",
    "peru": "cd853f",
    "pink": "ffc0cb",
    "plum": "dda0dd",
    "powderblue": "b0e0e6",
    "purple": "800080",
    "red": "ff0000",
    "rosybrown": "bc8f8f",
    "royalblue": "4169e1",
    "saddlebrown": "8b4513",
    "salmon": "fa8072",
    "sandybrown": "f4a460",
    "seagreen": "2e8b57",
    "seashell": "fff5ee",
    "sienna": "a0522d",
    "silver": "c0c0c0",
    "skyblue": "87ceeb",
    "slateblue": "6a5acd",
    "slategray": "708090",
    "slategrey": "708090",
    "snow": "fffafa",
    "springgreen": "00ff7f",
    "steelblue": "4682b4",
    "tan": "d2b48c",
    "teal": "008080",
    "thistle": "d8bfd8",
    "tomato": "ff6347",
    "turquoise": "40e0d0",
    "violet": "ee82ee",
    "wheat": "f5deb3",
    "white": "ffffff",
    "whitesmoke": "f5f5f5",
    "yellow": "ffff00",
    "yellowgreen": "9acd32",
}

# a candidate is a run of non-space characters, optionally followed by a
# parenthesized argument list which may itself contain spaces
CANDIDATE_RE = re.compile(r"[^(\s]+(?:\([^)]*\))?")

HEX6_RE = re.compile(r"#([0-9a-f]{6})", re.IGNORECASE)
HEX3_RE = re.compile(r"#([0-9a-f])([0-9a-f])([0-9a-f])", re.IGNORECASE)
RGB_VALUE = r"\s*(-?[0-9.]+%?)\s*"
RGB_RE = re.compile(rf"rgb\({RGB_VALUE},{RGB_VALUE},{RGB_VALUE}\)", re.IGNORECASE)
NAME_RE = re.compile(r"[a-z]+", re.IGNORECASE)


def rgb_component(value: str) -> int | None:
    """Converts one rgb() component to an integer in 0..255.

    Bare numbers are clamped to 0..255, percentages are clamped to 0..100%
    and scaled linearly.
    """
    if value.endswith("%"):
        pct = safe_float(value[:-1])
        if pct is None:
            return None
        pct = min(max(pct, 0.0), 100.0)
        return int(pct * 255 / 100)
    number = safe_float(value)
    if number is None:
        return None
    return min(max(int(number), 0), 255)


def parse_color(candidate: str) -> str | None:
    """Parses a single candidate token, returning its hex code or None."""
    m = HEX6_RE.fullmatch(candidate)
    if m:
        return m.group(1).lower()
    m = HEX3_RE.fullmatch(candidate)
    if m:
        return "".join(digit * 2 for digit in m.groups()).lower()
    m = RGB_RE.fullmatch(candidate)
    if m:
        components = [rgb_component(value) for value in m.groups()]
        if None in components:
            return None
        return "".join(f"{c:02x}" for c in components)
    m = NAME_RE.fullmatch(candidate)
    if m:
        return HTML_COLORS.get(m.group(0).lower())
    return None


def color_to_hex(color_string: str) -> str | None:
    """Returns the first color found in `color_string` as a 6-digit hex code.

    The string is scanned left to right and the first candidate which
    parses as a hex, rgb() or named color wins. None is returned if no
    candidate parses.
    """
    for candidate in CANDIDATE_RE.findall(color_string):
        hexcode = parse_color(candidate)
        if hexcode is not None:
            return hexcode
    log.debug("No color found in %r", color_string)
    return None

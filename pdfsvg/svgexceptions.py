__all__ = [
    "SVGException",
    "SVGTypeError",
    "SVGValueError",
    "SVGConfigurationError",
]


class SVGException(Exception):
    """Base class for exceptions raised while rendering SVG calls."""


class SVGTypeError(SVGException, TypeError):
    pass


class SVGValueError(SVGException, ValueError):
    pass


class SVGConfigurationError(SVGException, ValueError):
    """Raised when a required rendering option is missing or unusable."""

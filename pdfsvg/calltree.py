"""The call tree handed to the interpreter by the SVG parser."""

from collections.abc import Iterable, Sequence
from typing import Any, Union

from pdfsvg.svgexceptions import SVGTypeError


class SVGCall:
    """One drawing instruction.

    `call` names a canvas capability, `arguments` are its positional
    arguments (the last one is often an option dict) and `children` are the
    calls that have to run inside it, in render order.
    """

    __slots__ = ("call", "arguments", "children")

    def __init__(
        self,
        call: str,
        arguments: Sequence[Any] = (),
        children: Sequence["SVGCall"] = (),
    ) -> None:
        self.call = call
        self.arguments = list(arguments)
        self.children = list(children)

    def __repr__(self) -> str:
        return (
            f"<SVGCall: call={self.call!r}, "
            f"arguments={self.arguments!r}, "
            f"children={len(self.children)}>"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SVGCall):
            return NotImplemented
        return (
            self.call == other.call
            and self.arguments == other.arguments
            and self.children == other.children
        )


CallSpec = Union[SVGCall, Sequence[Any]]


def make_calls(specs: Iterable[CallSpec]) -> list[SVGCall]:
    """Builds SVGCall nodes from nested (call, arguments, children) sequences."""
    calls = []
    for spec in specs:
        if isinstance(spec, SVGCall):
            calls.append(spec)
            continue
        if isinstance(spec, (str, bytes)) or not 1 <= len(spec) <= 3:
            raise SVGTypeError(f"Invalid call specification: {spec!r}")
        call = spec[0]
        arguments = spec[1] if len(spec) > 1 else ()
        children = make_calls(spec[2]) if len(spec) > 2 else []
        calls.append(SVGCall(call, arguments, children))
    return calls

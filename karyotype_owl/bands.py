"""Band token classification and the parsed band specification tree."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Tuple, Union

from .errors import BandSyntaxError, UnrecognizedBandSyntax

TELOMERE_MARKER = "Ter"
CENTROMERE_MARKER = "Cen"
P_ARM = "p"
Q_ARM = "q"


class BandKind(Enum):
    TELOMERE = "telomere"
    CENTROMERE = "centromere"
    P_BAND = "p"
    Q_BAND = "q"


def classify(token: str) -> BandKind:
    """Classify an ISCN band token such as ``p36.3``, ``Cen`` or ``qTer``.

    Terminal and centromere markers are checked before the arm letters, so
    ``pTer`` is a telomere rather than a p-arm band.
    """

    if TELOMERE_MARKER in token:
        return BandKind.TELOMERE
    if CENTROMERE_MARKER in token:
        return BandKind.CENTROMERE
    if P_ARM in token:
        return BandKind.P_BAND
    if Q_ARM in token:
        return BandKind.Q_BAND
    raise UnrecognizedBandSyntax(f"Band syntax not recognised: {token!r}")


def telomere_arm(token: str) -> str:
    """Return the arm a telomere token terminates.

    Only ``pTer`` and ``qTer`` are accepted; the arm is read from what
    precedes the marker rather than from a second pass of :func:`classify`.
    """

    if classify(token) is not BandKind.TELOMERE:
        raise UnrecognizedBandSyntax(f"Not a telomere token: {token!r}")
    prefix = token[: token.index(TELOMERE_MARKER)]
    if prefix not in (P_ARM, Q_ARM) or token != prefix + TELOMERE_MARKER:
        raise UnrecognizedBandSyntax(f"Telomere token must be pTer or qTer: {token!r}")
    return prefix


@dataclass(frozen=True)
class Leaf:
    token: str


@dataclass(frozen=True)
class Container:
    """A merged or ambiguous region (``q22q23q24``) and the bands it subsumes."""

    label: str
    children: Tuple["BandNode", ...]

    def __post_init__(self) -> None:
        if not self.children:
            raise BandSyntaxError(self.label, f"Container {self.label!r} has no bands")

    def first_leaf(self) -> Leaf:
        node = self.children[0]
        while isinstance(node, Container):
            node = node.children[0]
        return node


BandNode = Union[Leaf, Container]
RawBandSpec = Union[str, Sequence]


def parse_band_spec(specs: Sequence[RawBandSpec]) -> Tuple[BandNode, ...]:
    """Parse literal band data into :class:`Leaf` and :class:`Container` nodes.

    A string is a leaf; a list is ``[label, child, ...]`` where each child is
    again a string or a list.
    """

    return tuple(_parse_node(spec) for spec in specs)


def _parse_node(spec: RawBandSpec) -> BandNode:
    if isinstance(spec, str):
        return Leaf(spec)
    if isinstance(spec, (list, tuple)):
        if len(spec) < 2 or not isinstance(spec[0], str):
            raise BandSyntaxError(repr(spec), f"Band must be string or sequence: {spec!r}")
        return Container(spec[0], tuple(_parse_node(child) for child in spec[1:]))
    raise BandSyntaxError(repr(spec), f"Band must be string or sequence: {spec!r}")


__all__ = [
    "BandKind",
    "classify",
    "telomere_arm",
    "Leaf",
    "Container",
    "BandNode",
    "parse_band_spec",
]

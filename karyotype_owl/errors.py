"""Exceptions raised while building the karyotype ontology."""
from __future__ import annotations


class KaryotypeError(Exception):
    """Base class for ontology construction errors."""
    pass


class UnrecognizedBandSyntax(KaryotypeError, ValueError):
    """Raised when a band token or identifier matches no known band pattern."""
    pass


class BandSyntaxError(KaryotypeError, ValueError):
    """Raised when a chromosome's band specification cannot be assembled."""

    def __init__(self, token: str, message: str | None = None) -> None:
        self.token = token
        super().__init__(message or f"Band syntax not recognised: {token!r}")


class InvalidEventArgument(KaryotypeError, ValueError):
    """Raised when an event builder receives an entity of the wrong kind."""
    pass


class ArityError(KaryotypeError, ValueError):
    """Raised when an event receives the wrong number of breakpoint bands."""
    pass


class ReasonerError(RuntimeError):
    """Raised when the OWL reasoner cannot be executed."""
    pass

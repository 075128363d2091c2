"""
Error taxonomy for knottheory.

Every error is raised where it is detected and propagated unchanged.
The computations are deterministic, so nothing here is retried.
"""


class KnotTheoryError(Exception):
    """Base class for all knottheory errors."""


class MissingRepresentationError(KnotTheoryError, ValueError):
    """A PD or DT representation required by an operation is absent."""


class MalformedDiagramError(KnotTheoryError, ValueError):
    """A diagram violates the structural assumption of an algorithm."""


class InvalidArcError(KnotTheoryError, ValueError):
    """A negative or otherwise out-of-domain arc label reached a numeric routine."""


class IndexOutOfRangeError(KnotTheoryError, IndexError):
    """A component or matrix index is out of bounds."""


class ComplexityLimitError(KnotTheoryError, ValueError):
    """Crossing count exceeds the state enumeration ceiling."""

    def __init__(self, crossings: int, limit: int):
        self.crossings = crossings
        self.limit = limit
        super().__init__(
            f"Kauffman bracket enumeration allows at most {limit} crossings (got {crossings})"
        )

"""
Knot and link diagram model for knottheory.

Provides immutable value types for planar diagram (PD) codes,
Dowker-Thistlethwaite (DT) codes and the knot/link wrappers that
carry them. Nothing derived from a diagram is cached here; invariants
are computed fresh by the other modules.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Set, Tuple, Union

from .exceptions import MissingRepresentationError

PDEntry = Tuple[int, int, int, int, int]


@dataclass(frozen=True)
class Crossing:
    """
    A crossing in a planar diagram.

    Using standard PD convention:
    - Four arcs meet at each crossing
    - Labeled counter-clockwise starting from the incoming understrand
    - arcs[0]: incoming understrand
    - arcs[1]: outgoing overstrand
    - arcs[2]: outgoing understrand
    - arcs[3]: incoming overstrand

    Attributes:
        arcs: Tuple of 4 arc labels (a, b, c, d), not required to be unique
        sign: +1 or -1, the handedness of the crossing
    """
    arcs: Tuple[int, int, int, int]
    sign: int

    def __post_init__(self):
        object.__setattr__(self, "arcs", tuple(int(a) for a in self.arcs))
        object.__setattr__(self, "sign", int(self.sign))

    @property
    def incoming_under(self) -> int:
        return self.arcs[0]

    @property
    def outgoing_over(self) -> int:
        return self.arcs[1]

    @property
    def outgoing_under(self) -> int:
        return self.arcs[2]

    @property
    def incoming_over(self) -> int:
        return self.arcs[3]

    def has_repeated_arc(self) -> bool:
        """True when some arc label appears twice, i.e. a Reidemeister I kink."""
        return len(set(self.arcs)) < 4

    def to_entry(self) -> PDEntry:
        a, b, c, d = self.arcs
        return (a, b, c, d, self.sign)


@dataclass(frozen=True)
class PlanarDiagram:
    """
    A knot or link diagram given by its crossings.

    Attributes:
        crossings: Ordered crossings of the diagram
        components: Arc labels of each link component, in order. May be
            empty for knots.
    """
    crossings: Tuple[Crossing, ...] = ()
    components: Tuple[Tuple[int, ...], ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "crossings", tuple(self.crossings))
        object.__setattr__(
            self, "components", tuple(tuple(int(a) for a in comp) for comp in self.components)
        )

    @classmethod
    def from_entries(cls, entries: Iterable[Sequence[int]],
                     components: Iterable[Iterable[int]] = ()) -> 'PlanarDiagram':
        """
        Create diagram from raw PD entries.

        Each entry is (a, b, c, d, sign). No validation of the arc graph is
        done; dangling or over-connected arcs are left for the algorithms
        that need well-formed input.
        """
        crossings = []
        for entry in entries:
            if len(entry) != 5:
                raise ValueError(f"Invalid PD code entry: {entry}")
            crossings.append(Crossing(tuple(entry[:4]), entry[4]))
        return cls(tuple(crossings), tuple(tuple(comp) for comp in components))

    def to_entries(self) -> List[PDEntry]:
        """Convert diagram back to (a, b, c, d, sign) entries."""
        return [c.to_entry() for c in self.crossings]

    def arcs(self) -> Set[int]:
        """Return the set of arc labels used by the crossings."""
        return {a for c in self.crossings for a in c.arcs}

    def is_trivial(self) -> bool:
        return len(self.crossings) == 0

    def __len__(self) -> int:
        return len(self.crossings)

    def __repr__(self) -> str:
        return f"PlanarDiagram(crossings={len(self.crossings)}, components={len(self.components)})"


@dataclass(frozen=True)
class DTCode:
    """Dowker-Thistlethwaite code: one signed even integer per crossing."""
    code: Tuple[int, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "code", tuple(int(x) for x in self.code))

    def __len__(self) -> int:
        return len(self.code)


@dataclass(frozen=True)
class Knot:
    """
    A named knot with an optional PD and an optional DT code.

    A knot carrying neither representation is degenerate and has
    crossing number 0.
    """
    name: str
    pd: Optional[PlanarDiagram] = None
    dt: Optional[DTCode] = None


@dataclass(frozen=True)
class Link:
    """A named link; always carries a planar diagram with its components."""
    name: str
    pd: PlanarDiagram = field(default_factory=PlanarDiagram)


def pdcode(entries: Iterable[Sequence[int]],
           components: Iterable[Iterable[int]] = ()) -> PlanarDiagram:
    """Construct a planar diagram from raw (a, b, c, d, sign) tuples."""
    return PlanarDiagram.from_entries(entries, components)


def pd_entries(knot: Union[Knot, Link]) -> List[PDEntry]:
    """Return the PD code entries (a, b, c, d, sign) of a knot or link."""
    if knot.pd is None:
        raise MissingRepresentationError(f"knot {knot.name!r} has no planar diagram")
    return knot.pd.to_entries()


def as_diagram(obj: Union[PlanarDiagram, Knot, Link]) -> PlanarDiagram:
    """Return the planar diagram behind a diagram, knot or link."""
    if isinstance(obj, PlanarDiagram):
        return obj
    if obj.pd is None:
        raise MissingRepresentationError(f"knot {obj.name!r} has no planar diagram")
    return obj.pd


def unknot() -> Knot:
    """Return the unknot as an empty planar diagram."""
    return Knot("unknot", PlanarDiagram(), None)


def trefoil() -> Knot:
    """Return a trefoil knot (DT code only)."""
    return Knot("trefoil", None, DTCode((4, 6, 2)))


def figure_eight() -> Knot:
    """Return a figure-eight knot (DT code only)."""
    return Knot("figure_eight", None, DTCode((4, 6, 8, 2)))

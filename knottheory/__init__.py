"""
knottheory: invariants of knots and links from planar diagrams

Given a combinatorial encoding of crossings, computes numerical and
polynomial invariants and converts between equivalent encodings.

INVARIANTS:
- Crossing number, writhe, linking number
- Seifert circle count and a braid index estimate
- Kauffman bracket and Jones polynomial (exact, O(2^n) state sum)
- Alexander polynomial (heuristic Seifert matrix estimate)

ENCODINGS:
- Planar diagram (PD) code
- Dowker-Thistlethwaite (DT) code
- JSON wire format

Only Reidemeister I kinks are simplified; R2/R3 moves are out of reach.
"""

from .exceptions import (
    KnotTheoryError,
    MissingRepresentationError,
    MalformedDiagramError,
    InvalidArcError,
    IndexOutOfRangeError,
    ComplexityLimitError,
)
from .knot import (
    Crossing,
    PlanarDiagram,
    DTCode,
    Knot,
    Link,
    pdcode,
    pd_entries,
    as_diagram,
    unknot,
    trefoil,
    figure_eight,
)
from .codec import (
    to_dowker,
    dtcode,
    knot_to_dict,
    knot_from_dict,
    dumps_knot,
    loads_knot,
    write_knot_json,
    read_knot_json,
)
from .invariants import (
    crossing_number,
    writhe,
    linking_number,
    count_loops,
    seifert_circles,
    braid_index_estimate,
)
from .bracket import (
    DEFAULT_MAX_CROSSINGS,
    BracketEngine,
    kauffman_bracket,
    normalize_bracket,
    jones_polynomial,
)
from .alexander import seifert_matrix, estimate_alexander, alexander_polynomial
from .simplifier import KnotSimplifier, ReidemeisterMove, MoveType, r1_simplify, simplify_pd
from .table import KnotTableEntry, knot_table, lookup_knot
from .export import to_graph, to_polynomial, from_polynomial
from .polynomial import to_dense, from_dense, format_polynomial
from .logging_config import setup_logging

__version__ = "0.1.0"
__all__ = [
    # Errors
    "KnotTheoryError",
    "MissingRepresentationError",
    "MalformedDiagramError",
    "InvalidArcError",
    "IndexOutOfRangeError",
    "ComplexityLimitError",
    # Diagram model
    "Crossing",
    "PlanarDiagram",
    "DTCode",
    "Knot",
    "Link",
    "pdcode",
    "pd_entries",
    "as_diagram",
    "unknot",
    "trefoil",
    "figure_eight",
    # Codec
    "to_dowker",
    "dtcode",
    "knot_to_dict",
    "knot_from_dict",
    "dumps_knot",
    "loads_knot",
    "write_knot_json",
    "read_knot_json",
    # Topology metrics
    "crossing_number",
    "writhe",
    "linking_number",
    "count_loops",
    "seifert_circles",
    "braid_index_estimate",
    # Bracket engine
    "DEFAULT_MAX_CROSSINGS",
    "BracketEngine",
    "kauffman_bracket",
    "normalize_bracket",
    "jones_polynomial",
    # Alexander estimator
    "seifert_matrix",
    "estimate_alexander",
    "alexander_polynomial",
    # Simplifier
    "KnotSimplifier",
    "ReidemeisterMove",
    "MoveType",
    "r1_simplify",
    "simplify_pd",
    # Knot table
    "KnotTableEntry",
    "knot_table",
    "lookup_knot",
    # Export
    "to_graph",
    "to_polynomial",
    "from_polynomial",
    "to_dense",
    "from_dense",
    "format_polynomial",
    # Logging
    "setup_logging",
]

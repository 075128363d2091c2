"""
Topology metrics for knottheory.

This module provides the cheap combinatorial invariants of a diagram:

- Crossing number: length of the PD or DT code (O(1))
- Writhe: Sum of crossing signs (O(n))
- Linking number: For links (O(n))
- Seifert circles: Components of the oriented smoothing (O(n))
- Braid index estimate from the Seifert circle count

It also exposes count_loops, the connected-components primitive shared
with the Kauffman bracket state sum.
"""

from collections import defaultdict
from fractions import Fraction
from typing import Dict, Iterable, List, Tuple, Union

from .exceptions import IndexOutOfRangeError, MissingRepresentationError
from .knot import Knot, Link, PlanarDiagram, as_diagram

Diagramlike = Union[PlanarDiagram, Knot, Link]


def crossing_number(obj: Diagramlike) -> int:
    """
    Return the number of crossings.

    Uses the planar diagram when present, else the DT code, else 0.
    """
    if isinstance(obj, PlanarDiagram):
        return len(obj.crossings)
    if obj.pd is not None:
        return len(obj.pd.crossings)
    if isinstance(obj, Knot) and obj.dt is not None:
        return len(obj.dt.code)
    return 0


def writhe(obj: Diagramlike) -> int:
    """
    Compute the writhe of a diagram.

    The writhe is the sum of crossing signs:
    - Positive crossing: +1
    - Negative crossing: -1

    Note: The writhe is NOT a knot invariant (depends on diagram).
    DT codes alone are not enough here; a planar diagram is required.

    Time complexity: O(n) where n = number of crossings
    """
    if isinstance(obj, Knot) and obj.pd is None:
        raise MissingRepresentationError("writhe requires a planar diagram")
    return sum(c.sign for c in as_diagram(obj).crossings)


def linking_number(link: Union[Link, PlanarDiagram], component1: int, component2: int) -> Fraction:
    """
    Compute the linking number between two components of a link.

    The linking number is half the sum of signed crossings touching both
    components. A malformed diagram can give a non-integer result; it is
    returned as is.

    Args:
        link: The link (or its diagram)
        component1: 1-based index of first component
        component2: 1-based index of second component

    Returns:
        The linking number as a Fraction
    """
    components = as_diagram(link).components
    for index in (component1, component2):
        if index < 1 or index > len(components):
            raise IndexOutOfRangeError(
                f"component index {index} out of range (link has {len(components)} components)"
            )

    owner: Dict[int, int] = {}
    for i, comp in enumerate(components, start=1):
        for arc in comp:
            owner[arc] = i

    total = 0
    for crossing in as_diagram(link).crossings:
        touched = {owner.get(arc, 0) for arc in crossing.arcs}
        if component1 in touched and component2 in touched:
            total += crossing.sign

    return Fraction(total, 2)


def count_loops(pairs: Iterable[Tuple[int, int]]) -> int:
    """
    Count connected components of the undirected graph with the given edges.

    Only nodes that appear in some pair are counted. Traversal uses an
    explicit stack, so large graphs do not hit the recursion limit.
    """
    adjacency: Dict[int, List[int]] = defaultdict(list)
    for a, b in pairs:
        adjacency[a].append(b)
        adjacency[b].append(a)

    seen = set()
    loops = 0
    for node in adjacency:
        if node in seen:
            continue
        stack = [node]
        while stack:
            current = stack.pop()
            if current in seen:
                continue
            seen.add(current)
            for neighbor in adjacency[current]:
                if neighbor not in seen:
                    stack.append(neighbor)
        loops += 1

    return loops


def seifert_pairs(diagram: PlanarDiagram) -> List[Tuple[int, int]]:
    """
    Smooth every crossing along the orientation.

    Positive (and zero) signs join (a, b) and (c, d); negative signs join
    (b, c) and (d, a).
    """
    pairs = []
    for crossing in diagram.crossings:
        a, b, c, d = crossing.arcs
        if crossing.sign >= 0:
            pairs.append((a, b))
            pairs.append((c, d))
        else:
            pairs.append((b, c))
            pairs.append((d, a))
    return pairs


def seifert_circles(obj: Diagramlike) -> int:
    """
    Count Seifert circles by smoothing crossings.

    Uses a simple PD convention and is best for small, well-formed
    diagrams. The count depends only on how arcs are connected, not on
    their labels.
    """
    return count_loops(seifert_pairs(as_diagram(obj)))


def braid_index_estimate(obj: Diagramlike) -> int:
    """
    Estimate the braid index using the Seifert circle count.

    This is a crude heuristic, not a proven braid index.
    """
    return max(1, seifert_circles(obj))

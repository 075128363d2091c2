"""
Export of diagrams and polynomials to third-party structures.

to_graph gives a networkx graph over arc labels. The export is lossy:
crossing signs and repeated edges are dropped, so the diagram cannot be
rebuilt from the graph.

to_polynomial gives a numpy Polynomial plus the exponent offset needed
for Laurent polynomials.
"""

from typing import Tuple

import networkx as nx
from numpy.polynomial import Polynomial

from .knot import PlanarDiagram
from .polynomial import Poly, from_dense, to_dense


def to_graph(diagram: PlanarDiagram) -> nx.Graph:
    """
    Convert a planar diagram to an undirected graph on arc labels.

    Nodes are 1..max_arc; each crossing (a, b, c, d) adds the edges
    (a, b), (b, c), (c, d) and (d, a).
    """
    graph = nx.Graph()
    max_arc = max((max(c.arcs) for c in diagram.crossings), default=0)
    graph.add_nodes_from(range(1, max_arc + 1))
    for crossing in diagram.crossings:
        a, b, c, d = crossing.arcs
        graph.add_edges_from([(a, b), (b, c), (c, d), (d, a)])
    return graph


def to_polynomial(poly: Poly) -> Tuple[Polynomial, int]:
    """
    Convert a sparse polynomial to a numpy Polynomial.

    Returns (p, offset) with poly == x^offset * p(x). The offset is the
    most negative exponent, or 0 when there is none.
    """
    coeffs, offset = to_dense(poly)
    return Polynomial(coeffs), offset


def from_polynomial(p: Polynomial, offset: int = 0) -> Poly:
    """Expand a numpy Polynomial and offset back into a sparse polynomial."""
    return from_dense([int(round(c)) for c in p.coef], offset)

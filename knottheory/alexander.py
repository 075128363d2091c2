"""
Alexander polynomial estimate for knottheory.

The Seifert matrix used here is a heuristic built from arc labels, not
one read off an actual Seifert surface, so the result is an
approximation. Two evaluations are offered behind estimate_alexander:

- the default two-point estimate, which evaluates det(V) and det(V - V^T)
  numerically and interpolates linearly in t;
- exact=True, which expands det(V - t V^T) symbolically over integer
  polynomials in t.
"""

import logging
from typing import Dict, FrozenSet, List, Union

import numpy as np

from . import polynomial
from .exceptions import IndexOutOfRangeError, InvalidArcError
from .invariants import seifert_circles
from .knot import Knot, Link, PlanarDiagram, as_diagram
from .polynomial import Poly

logger = logging.getLogger(__name__)


def seifert_matrix(diagram: PlanarDiagram, size: int) -> np.ndarray:
    """
    Build the size x size heuristic Seifert matrix of a diagram.

    Each crossing adds its sign at row (a mod size) + 1, column
    (c mod size) + 1, where a and c are its first and third arcs
    (1-based indices; the array itself is 0-based).
    """
    V = np.zeros((size, size), dtype=int)
    for crossing in diagram.crossings:
        if any(a < 0 for a in crossing.arcs):
            raise InvalidArcError(f"Crossing arcs must be non-negative, got {crossing.arcs}")

        a, _, c, _ = crossing.arcs
        row = (a % size) + 1
        col = (c % size) + 1
        if not (1 <= row <= size and 1 <= col <= size):
            raise IndexOutOfRangeError(f"Seifert matrix index ({row}, {col}) outside 1..{size}")

        V[row - 1, col - 1] += crossing.sign
    return V


def _two_point_estimate(V: np.ndarray) -> Poly:
    det0 = int(round(np.linalg.det(V.astype(float))))
    det1 = int(round(np.linalg.det((V - V.T).astype(float))))
    return polynomial.canonical({0: det0, 1: det1 - det0})


def polynomial_determinant(matrix: List[List[Poly]]) -> Poly:
    """
    Determinant of a square matrix of sparse polynomials.

    Cofactor expansion along successive rows, memoized on the set of
    columns still available, so the cost is O(n 2^n) products.
    """
    n = len(matrix)
    if n == 0:
        return {0: 1}

    memo: Dict[FrozenSet[int], Poly] = {}

    def minor(row: int, cols: FrozenSet[int]) -> Poly:
        if row == n:
            return {0: 1}
        if cols in memo:
            return memo[cols]
        total: Poly = {}
        for position, col in enumerate(sorted(cols)):
            entry = matrix[row][col]
            if not entry:
                continue
            term = polynomial.multiply(entry, minor(row + 1, cols - {col}))
            if position % 2:
                term = polynomial.scale(term, -1)
            total = polynomial.add(total, term)
        memo[cols] = total
        return total

    return minor(0, frozenset(range(n)))


def _symbolic_determinant(V: np.ndarray) -> Poly:
    n = V.shape[0]
    matrix = [
        [polynomial.canonical({0: int(V[i, j]), 1: -int(V[j, i])}) for j in range(n)]
        for i in range(n)
    ]
    return polynomial_determinant(matrix)


def estimate_alexander(obj: Union[PlanarDiagram, Knot, Link], exact: bool = False) -> Poly:
    """
    Estimate the Alexander polynomial from a heuristic Seifert matrix.

    Args:
        obj: Diagram, or a knot/link carrying one
        exact: Expand det(V - t V^T) symbolically instead of the
            two-point numeric estimate

    Returns:
        Dict exponent -> coefficient in t
    """
    diagram = as_diagram(obj)
    n = seifert_circles(diagram)
    if n <= 1:
        return {0: 1}

    V = seifert_matrix(diagram, n)
    logger.debug(f"Seifert matrix of size {n} for {len(diagram.crossings)} crossings")

    if exact:
        return _symbolic_determinant(V)
    return _two_point_estimate(V)


def alexander_polynomial(obj: Union[PlanarDiagram, Knot, Link], exact: bool = False) -> Poly:
    """Compute the Alexander polynomial estimate of a diagram, knot or link."""
    return estimate_alexander(obj, exact=exact)

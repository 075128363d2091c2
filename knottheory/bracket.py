"""
Kauffman bracket and Jones polynomial for knottheory.

The bracket is computed via state sum:
<K> = Σ_s A^{σ(s)} (-A^2 - A^{-2})^{|s|-1}

where s ranges over the 2^n smoothings of the n crossings, σ(s) is the
number of A-smoothings minus the number of B-smoothings, and |s| is the
number of resulting loops. The Jones polynomial is then

V(K) = (-A^3)^{-w} <K>

with w the writhe, returned in terms of t where A = t^{-1/4}. Exponents
of the result are in quarter units of t.

Enumeration is exponential, so diagrams above a configurable crossing
ceiling are refused before any work is done.
"""

import logging
from collections import defaultdict
from typing import Dict, List, Optional, Tuple, Union

from . import polynomial
from .exceptions import ComplexityLimitError
from .invariants import count_loops, writhe as diagram_writhe
from .knot import Knot, Link, PlanarDiagram, as_diagram
from .polynomial import Poly

logger = logging.getLogger(__name__)

DEFAULT_MAX_CROSSINGS = 20

LOOP_VALUE: Poly = {2: -1, -2: -1}


def arc_slot_pairs(diagram: PlanarDiagram) -> List[Tuple[int, int]]:
    """
    Pair up the two slots at which each arc meets a crossing.

    Crossing idx owns slots 4*idx .. 4*idx + 3, in the order of its arcs.
    Arcs that do not appear exactly twice contribute no edge.
    """
    positions: Dict[int, List[int]] = defaultdict(list)
    for idx, crossing in enumerate(diagram.crossings):
        for k, arc in enumerate(crossing.arcs):
            positions[arc].append(4 * idx + k)

    return [(slots[0], slots[1]) for slots in positions.values() if len(slots) == 2]


def normalize_bracket(bracket: Poly, writhe: int) -> Poly:
    """
    Turn a bracket in A into the Jones polynomial in quarter powers of t.

    Shifts every exponent by -3w, flips the sign for odd w and maps A^e to
    t^{-e/4}.
    """
    a_shift = -3 * writhe
    sign = -1 if writhe % 2 else 1
    jones: Poly = {}
    for e, c in bracket.items():
        t_exp = -(e + a_shift)
        jones[t_exp] = jones.get(t_exp, 0) + sign * c
    return polynomial.canonical(jones)


class BracketEngine:
    """
    Evaluates Kauffman brackets by full state enumeration.

    Args:
        max_crossings: Largest crossing count accepted. Larger diagrams
            raise ComplexityLimitError without enumerating anything.
    """

    def __init__(self, max_crossings: int = DEFAULT_MAX_CROSSINGS):
        self.max_crossings = max_crossings

    def check_size(self, diagram: PlanarDiagram) -> None:
        n = len(diagram.crossings)
        if n > self.max_crossings:
            raise ComplexityLimitError(n, self.max_crossings)

    def bracket(self, obj: Union[PlanarDiagram, Knot, Link]) -> Poly:
        """
        Compute the Kauffman bracket polynomial.

        Returns polynomial as dict: power of A -> coefficient
        """
        diagram = as_diagram(obj)
        self.check_size(diagram)

        n = len(diagram.crossings)
        if n == 0:
            return {0: 1}

        logger.debug(f"Enumerating {2 ** n} smoothing states for {n} crossings")

        base_pairs = arc_slot_pairs(diagram)
        loop_factors: Dict[int, Poly] = {}
        result: Poly = {}

        # Work list of (next crossing, smoothing edges chosen so far, A exponent)
        stack: List[Tuple[int, Tuple[Tuple[int, int], ...], int]] = [(0, (), 0)]
        while stack:
            idx, chosen, a_exp = stack.pop()

            if idx == n:
                loops = count_loops(base_pairs + list(chosen))
                if loops not in loop_factors:
                    loop_factors[loops] = polynomial.power(LOOP_VALUE, loops - 1)
                for e, c in loop_factors[loops].items():
                    result[e + a_exp] = result.get(e + a_exp, 0) + c
                continue

            s1, s2, s3, s4 = (4 * idx, 4 * idx + 1, 4 * idx + 2, 4 * idx + 3)
            stack.append((idx + 1, chosen + ((s2, s3), (s4, s1)), a_exp - 1))
            stack.append((idx + 1, chosen + ((s1, s2), (s3, s4)), a_exp + 1))

        return polynomial.canonical(result)

    def jones(self, obj: Union[PlanarDiagram, Knot, Link],
              writhe: Optional[int] = None) -> Poly:
        """
        Compute the Jones polynomial V(K, t).

        Args:
            obj: Diagram, or a knot/link carrying one
            writhe: Writhe used for normalization; defaults to the
                diagram's own writhe

        Returns:
            Dict mapping exponent in quarters of t to coefficient
        """
        diagram = as_diagram(obj)
        self.check_size(diagram)
        if writhe is None:
            writhe = diagram_writhe(diagram)
        return normalize_bracket(self.bracket(diagram), writhe)


def kauffman_bracket(obj: Union[PlanarDiagram, Knot, Link],
                     max_crossings: int = DEFAULT_MAX_CROSSINGS) -> Poly:
    """Compute the Kauffman bracket of a diagram."""
    return BracketEngine(max_crossings=max_crossings).bracket(obj)


def jones_polynomial(obj: Union[PlanarDiagram, Knot, Link],
                     writhe: Optional[int] = None,
                     max_crossings: int = DEFAULT_MAX_CROSSINGS) -> Poly:
    """Compute the Jones polynomial of a diagram, in quarter powers of t."""
    return BracketEngine(max_crossings=max_crossings).jones(obj, writhe=writhe)

"""
Knot Simplification using Reidemeister I moves for knottheory.

A crossing whose four arc labels are not pairwise distinct is read as
a Reidemeister I kink and removed. Remaining arcs are not renumbered,
and no R2/R3 reduction is attempted.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .knot import PlanarDiagram

logger = logging.getLogger(__name__)


class MoveType(Enum):
    R1_REMOVE = "R1-"


@dataclass(frozen=True)
class ReidemeisterMove:
    """
    A Reidemeister move applied to a diagram.

    Attributes:
        move_type: Type of Reidemeister move
        crossing: Index of the crossing in the input diagram
        loop_arc: Arc label that closes the kink
    """
    move_type: MoveType
    crossing: int
    loop_arc: Optional[int] = None


class KnotSimplifier:
    """
    Removes Reidemeister I kinks from planar diagrams in a single pass.

    The moves applied by the last call to simplify are kept in
    move_history.
    """

    def __init__(self):
        self.move_history: List[ReidemeisterMove] = []

    def simplify(self, diagram: PlanarDiagram) -> PlanarDiagram:
        """Return a new diagram without kink crossings; components are kept."""
        self.move_history = []
        kept = []
        for idx, crossing in enumerate(diagram.crossings):
            if not crossing.has_repeated_arc():
                kept.append(crossing)
                continue
            loop_arc = next(a for a in crossing.arcs if crossing.arcs.count(a) > 1)
            self.move_history.append(ReidemeisterMove(MoveType.R1_REMOVE, idx, loop_arc))

        if self.move_history:
            logger.debug(f"Removed {len(self.move_history)} R1 kink(s) from {len(diagram.crossings)} crossings")

        return PlanarDiagram(tuple(kept), diagram.components)

    def get_move_history(self) -> List[ReidemeisterMove]:
        return list(self.move_history)


def r1_simplify(diagram: PlanarDiagram) -> PlanarDiagram:
    """Apply a basic Reidemeister I simplification pass."""
    return KnotSimplifier().simplify(diagram)


def simplify_pd(diagram: PlanarDiagram) -> PlanarDiagram:
    """Simplify a planar diagram using basic R1 reductions."""
    return r1_simplify(diagram)

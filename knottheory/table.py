"""Small table of tabulated knots with their DT codes."""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class KnotTableEntry:
    name: str
    dt: Tuple[int, ...]
    crossings: int


_TABLE = (
    KnotTableEntry("unknot", (), 0),
    KnotTableEntry("trefoil", (4, 6, 2), 3),
    KnotTableEntry("figure_eight", (4, 6, 8, 2), 4),
)


def knot_table() -> Dict[str, KnotTableEntry]:
    """Return the knot table keyed by name."""
    return {entry.name: entry for entry in _TABLE}


def lookup_knot(name: str) -> Optional[KnotTableEntry]:
    """Lookup a knot entry by name; None when it is not tabulated."""
    return knot_table().get(name)

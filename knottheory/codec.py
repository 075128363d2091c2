"""
Conversion between PD codes, DT codes and the JSON wire format.

JSON layout, one object per knot:

    {
      "name": "<string>",
      "pd": [[a, b, c, d, sign], ...],     # only with a planar diagram
      "components": [[arc, ...], ...],     # only with a planar diagram
      "dt": [int, ...]                     # only with a DT code
    }

Absent keys mean an absent representation; null placeholders are never
written.
"""

import json
import logging
from typing import Any, Dict, Union

from .exceptions import MalformedDiagramError, MissingRepresentationError
from .knot import DTCode, Knot, PlanarDiagram

logger = logging.getLogger(__name__)

UNNAMED = "unnamed"


def to_dowker(diagram: PlanarDiagram) -> DTCode:
    """
    Compute the Dowker-Thistlethwaite code of a planar diagram.

    Assumes a single component whose arcs are numbered so that odd and
    even labels alternate along the strand. Each odd label is looked up
    in the crossing that holds it (the later crossing when it appears in
    two), and that crossing's first even label is reported with the
    crossing's sign.

    Time complexity: O(n) where n = number of crossings
    """
    arc_to_crossing: Dict[int, int] = {}
    for idx, crossing in enumerate(diagram.crossings):
        for arc in crossing.arcs:
            arc_to_crossing[arc] = idx

    max_arc = max(arc_to_crossing) if arc_to_crossing else 0
    code = []
    for odd in range(1, max_arc + 1, 2):
        if odd not in arc_to_crossing:
            raise MalformedDiagramError(f"odd arc {odd} does not appear in any crossing")
        crossing = diagram.crossings[arc_to_crossing[odd]]
        even = next((a for a in crossing.arcs if a != 0 and a % 2 == 0), None)
        if even is None:
            raise MalformedDiagramError(f"could not derive even arc for odd arc {odd}")
        code.append(crossing.sign * even)

    return DTCode(tuple(code))


def dtcode(knot: Knot) -> DTCode:
    """Return the stored DT code of a knot, deriving it from the PD if needed."""
    if knot.dt is not None:
        return knot.dt
    if knot.pd is None:
        raise MissingRepresentationError(f"knot {knot.name!r} has no DT code or planar diagram")
    return to_dowker(knot.pd)


def knot_to_dict(knot: Knot) -> Dict[str, Any]:
    """Encode a knot as a JSON-ready dict."""
    obj: Dict[str, Any] = {"name": str(knot.name)}
    if knot.pd is not None:
        obj["pd"] = [list(entry) for entry in knot.pd.to_entries()]
        obj["components"] = [list(comp) for comp in knot.pd.components]
    if knot.dt is not None:
        obj["dt"] = list(knot.dt.code)
    return obj


def knot_from_dict(obj: Dict[str, Any]) -> Knot:
    """Decode a dict produced by knot_to_dict."""
    if not isinstance(obj, dict):
        raise MalformedDiagramError(f"expected a JSON object, got {type(obj).__name__}")

    name = obj.get("name")
    if name is None:
        name = UNNAMED
    elif not isinstance(name, str):
        raise MalformedDiagramError(f"knot name must be a string, got {name!r}")

    try:
        pd = None
        if "pd" in obj:
            entries = [tuple(_as_int(x) for x in entry) for entry in obj["pd"]]
            components = [[_as_int(x) for x in comp] for comp in obj.get("components", [])]
            pd = PlanarDiagram.from_entries(entries, components)

        dt = None
        if "dt" in obj:
            dt = DTCode(tuple(_as_int(x) for x in obj["dt"]))
    except (TypeError, ValueError) as e:
        raise MalformedDiagramError(f"invalid knot {name!r}: {e}") from e

    return Knot(name, pd, dt)


def _as_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"expected an integer, got {value!r}")
    return value


def dumps_knot(knot: Knot) -> str:
    """Serialize a knot to JSON text."""
    return json.dumps(knot_to_dict(knot))


def loads_knot(text: Union[str, bytes]) -> Knot:
    """Parse JSON text (or UTF-8 bytes) produced by dumps_knot."""
    try:
        obj = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedDiagramError(f"invalid knot JSON: {e}") from e
    return knot_from_dict(obj)


def write_knot_json(path: str, knot: Knot) -> str:
    """Write a knot to JSON at the given path and return the path."""
    logger.info(f"Writing knot {knot.name!r} to: {path}")
    with open(path, "w", encoding="utf-8") as f:
        json.dump(knot_to_dict(knot), f)
    return path


def read_knot_json(path: str) -> Knot:
    """Read a knot from JSON produced by write_knot_json."""
    logger.info(f"Reading knot from: {path}")
    with open(path, "rb") as f:
        data = f.read()
    knot = loads_knot(data)
    logger.debug(f"Loaded knot {knot.name!r}")
    return knot

"""
Tests for the knottheory diagram model.
"""

import dataclasses
import unittest

from knottheory.exceptions import MissingRepresentationError
from knottheory.knot import (
    Crossing, PlanarDiagram, DTCode, Knot, Link,
    pdcode, pd_entries, as_diagram, unknot, trefoil, figure_eight,
)

TREFOIL_PD = [(1, 4, 2, 5, -1), (3, 6, 4, 1, -1), (5, 2, 6, 3, -1)]


class TestCrossing(unittest.TestCase):
    """Tests for crossing values."""

    def test_coerces_types(self):
        crossing = Crossing(["1", 2.0, 3, 4], "-1")
        self.assertEqual(crossing.arcs, (1, 2, 3, 4))
        self.assertEqual(crossing.sign, -1)

    def test_slot_roles(self):
        crossing = Crossing((1, 5, 2, 4), 1)
        self.assertEqual(crossing.incoming_under, 1)
        self.assertEqual(crossing.outgoing_over, 5)
        self.assertEqual(crossing.outgoing_under, 2)
        self.assertEqual(crossing.incoming_over, 4)

    def test_repeated_arc(self):
        self.assertTrue(Crossing((1, 1, 2, 2), 1).has_repeated_arc())
        self.assertFalse(Crossing((1, 2, 3, 4), 1).has_repeated_arc())

    def test_immutable(self):
        crossing = Crossing((1, 2, 3, 4), 1)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            crossing.sign = -1


class TestPlanarDiagram(unittest.TestCase):
    """Tests for planar diagram construction."""

    def test_entries_round_trip(self):
        diagram = pdcode(TREFOIL_PD)
        self.assertEqual(len(diagram), 3)
        self.assertEqual(diagram.to_entries(), TREFOIL_PD)

    def test_components_become_tuples(self):
        diagram = pdcode([(1, 3, 2, 4, 1)], components=[[1, 2], [3, 4]])
        self.assertEqual(diagram.components, ((1, 2), (3, 4)))
        self.assertEqual(diagram, pdcode([(1, 3, 2, 4, 1)], components=((1, 2), (3, 4))))

    def test_no_validation_of_arc_graph(self):
        # Dangling arcs are accepted; algorithms deal with them later
        diagram = pdcode([(1, 2, 3, 4, 1)])
        self.assertEqual(diagram.arcs(), {1, 2, 3, 4})

    def test_bad_entry_length(self):
        with self.assertRaises(ValueError):
            pdcode([(1, 2, 3, 4)])

    def test_empty_is_trivial(self):
        self.assertTrue(PlanarDiagram().is_trivial())
        self.assertFalse(pdcode(TREFOIL_PD).is_trivial())


class TestKnotAndLink(unittest.TestCase):
    """Tests for knot/link wrappers and factories."""

    def test_pd_entries(self):
        knot = Knot("3_1", pdcode(TREFOIL_PD))
        self.assertEqual(pd_entries(knot), TREFOIL_PD)

    def test_pd_entries_missing(self):
        with self.assertRaises(MissingRepresentationError):
            pd_entries(trefoil())

    def test_factories(self):
        self.assertEqual(unknot().name, "unknot")
        self.assertEqual(unknot().pd, PlanarDiagram())
        self.assertIsNone(unknot().dt)
        self.assertEqual(trefoil().dt, DTCode((4, 6, 2)))
        self.assertIsNone(trefoil().pd)
        self.assertEqual(figure_eight().dt.code, (4, 6, 8, 2))

    def test_as_diagram(self):
        diagram = pdcode(TREFOIL_PD)
        self.assertIs(as_diagram(diagram), diagram)
        self.assertIs(as_diagram(Knot("k", diagram)), diagram)
        self.assertIs(as_diagram(Link("l", diagram)), diagram)
        with self.assertRaises(MissingRepresentationError):
            as_diagram(Knot("empty"))

    def test_link_defaults_to_empty_diagram(self):
        self.assertEqual(Link("empty").pd, PlanarDiagram())


if __name__ == '__main__':
    unittest.main()

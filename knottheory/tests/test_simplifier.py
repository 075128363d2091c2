"""
Tests for Reidemeister I simplification.
"""

import unittest

from knottheory.invariants import crossing_number
from knottheory.knot import pdcode
from knottheory.simplifier import KnotSimplifier, MoveType, r1_simplify, simplify_pd


class TestR1Simplify(unittest.TestCase):

    def test_single_kink_removed(self):
        result = r1_simplify(pdcode([(1, 1, 2, 2, 1)]))
        self.assertEqual(crossing_number(result), 0)

    def test_keeps_distinct_crossings_and_components(self):
        diagram = pdcode(
            [(1, 2, 3, 4, 1), (5, 5, 6, 7, -1), (3, 1, 4, 2, 1)],
            components=[[1, 2], [3, 4]],
        )
        result = r1_simplify(diagram)
        self.assertEqual(result.to_entries(), [(1, 2, 3, 4, 1), (3, 1, 4, 2, 1)])
        self.assertEqual(result.components, diagram.components)
        self.assertEqual(len(diagram), 3)

    def test_no_renumbering(self):
        result = r1_simplify(pdcode([(1, 1, 2, 3, 1), (7, 8, 9, 10, -1)]))
        self.assertEqual(result.to_entries(), [(7, 8, 9, 10, -1)])

    def test_simplify_pd_alias(self):
        diagram = pdcode([(1, 1, 2, 2, 1), (3, 4, 5, 6, 1)])
        self.assertEqual(simplify_pd(diagram), r1_simplify(diagram))

    def test_move_history(self):
        simplifier = KnotSimplifier()
        simplifier.simplify(pdcode([(1, 2, 3, 4, 1), (5, 6, 6, 7, 1)]))
        history = simplifier.get_move_history()
        self.assertEqual(len(history), 1)
        self.assertEqual(history[0].move_type, MoveType.R1_REMOVE)
        self.assertEqual(history[0].crossing, 1)
        self.assertEqual(history[0].loop_arc, 6)

        simplifier.simplify(pdcode([(1, 2, 3, 4, 1)]))
        self.assertEqual(simplifier.get_move_history(), [])


if __name__ == '__main__':
    unittest.main()

"""
Tests for the Alexander polynomial estimate.
"""

import unittest

import numpy as np

from knottheory.alexander import (
    seifert_matrix, estimate_alexander, alexander_polynomial, polynomial_determinant,
)
from knottheory.exceptions import InvalidArcError, MissingRepresentationError
from knottheory.knot import Knot, pdcode, unknot, trefoil

TREFOIL_PD = [(1, 4, 2, 5, -1), (3, 6, 4, 1, -1), (5, 2, 6, 3, -1)]
HOPF_PD = [(1, 3, 2, 4, 1), (3, 1, 4, 2, 1)]


class TestSeifertMatrix(unittest.TestCase):

    def test_trefoil_matrix(self):
        V = seifert_matrix(pdcode(TREFOIL_PD), 2)
        np.testing.assert_array_equal(V, np.array([[0, 0], [-3, 0]]))

    def test_negative_arc(self):
        with self.assertRaises(InvalidArcError):
            seifert_matrix(pdcode([(-1, 3, 2, 4, 1)]), 2)


class TestEstimate(unittest.TestCase):

    def test_unknot(self):
        self.assertEqual(estimate_alexander(unknot()), {0: 1})
        self.assertEqual(estimate_alexander(pdcode([(1, 2, 2, 1, 1)])), {0: 1})

    def test_two_point_estimate(self):
        self.assertEqual(estimate_alexander(pdcode(TREFOIL_PD)), {1: 9})
        self.assertEqual(estimate_alexander(pdcode(HOPF_PD)), {1: 4})

    def test_exact_determinant(self):
        self.assertEqual(estimate_alexander(pdcode(TREFOIL_PD), exact=True), {1: 9})
        self.assertEqual(alexander_polynomial(Knot("hopf", pdcode(HOPF_PD)), exact=True), {1: 4})

    def test_negative_arc_rejected(self):
        diagram = pdcode([(-1, 3, 2, 4, 1), (3, -1, 4, 2, 1)])
        with self.assertRaises(InvalidArcError):
            estimate_alexander(diagram)

    def test_requires_planar_diagram(self):
        with self.assertRaises(MissingRepresentationError):
            alexander_polynomial(trefoil())


class TestPolynomialDeterminant(unittest.TestCase):

    def test_constant_matrix(self):
        matrix = [[{0: 1}, {0: 2}], [{0: 3}, {0: 4}]]
        self.assertEqual(polynomial_determinant(matrix), {0: -2})

    def test_identity(self):
        identity = [[{0: 1} if i == j else {} for j in range(3)] for i in range(3)]
        self.assertEqual(polynomial_determinant(identity), {0: 1})

    def test_polynomial_entries(self):
        matrix = [[{1: 1}, {0: 1}], [{0: 1}, {1: 1}]]
        self.assertEqual(polynomial_determinant(matrix), {0: -1, 2: 1})

    def test_matches_numpy(self):
        values = [[2, -1, 0, 3], [1, 4, -2, 0], [0, 1, 1, -1], [5, 0, 2, 1]]
        matrix = [[{0: v} if v else {} for v in row] for row in values]
        expected = int(round(np.linalg.det(np.array(values, dtype=float))))
        self.assertEqual(polynomial_determinant(matrix), {0: expected})

    def test_empty_matrix(self):
        self.assertEqual(polynomial_determinant([]), {0: 1})


if __name__ == '__main__':
    unittest.main()

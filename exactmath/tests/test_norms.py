"""
Unit tests for vector p-norms and the real-valued helpers.
"""

import unittest
import math
import sys
import os

import numpy as np
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from exactmath import (
    p_norm, squared_norm, p_normalized,
    lg, arccosh, arcsinh, arctanh, real_mod,
    InvalidArgument,
)


class TestNorms(unittest.TestCase):

    def test_p_norm(self):
        self.assertAlmostEqual(p_norm(2.0, [3.0, 4.0]), 5.0)
        self.assertAlmostEqual(p_norm(1.0, [-1, 2, -3]), 6.0)
        self.assertAlmostEqual(p_norm(3.0, [1.0, 1.0]), 2.0 ** (1.0 / 3.0))
        self.assertEqual(p_norm(2.0, []), 0.0)

    def test_p_norm_large_p_approaches_max(self):
        self.assertAlmostEqual(p_norm(200.0, [0.5, -2.0, 1.0]), 2.0, places=6)

    def test_p_below_one_rejected(self):
        for p in (0.5, 0.0, -2.0):
            with self.assertRaises(InvalidArgument):
                p_norm(p, [1.0, 2.0])
            with self.assertRaises(InvalidArgument):
                p_normalized(p, [1.0, 2.0])

    def test_non_vector_rejected(self):
        with self.assertRaises(InvalidArgument):
            p_norm(2.0, [[1.0, 2.0], [3.0, 4.0]])

    def test_squared_norm(self):
        self.assertEqual(squared_norm([3, 4]), 25.0)
        self.assertEqual(squared_norm(np.array([-1.0, 1.0, 2.0])), 6.0)

    def test_p_normalized(self):
        out = p_normalized(2.0, [3.0, 4.0])
        np.testing.assert_allclose(out, [0.6, 0.8])
        self.assertAlmostEqual(p_norm(2.0, out), 1.0)
        out = p_normalized(1.0, [1.0, -3.0])
        np.testing.assert_allclose(out, [0.25, -0.75])

    def test_zero_vector_unchanged(self):
        out = p_normalized(2.0, [0.0, 0.0, 0.0])
        np.testing.assert_array_equal(out, [0.0, 0.0, 0.0])
        self.assertFalse(np.isnan(out).any())


class TestRealHelpers(unittest.TestCase):

    def test_lg(self):
        self.assertEqual(lg(8.0), 3.0)
        self.assertAlmostEqual(lg(10.0), math.log2(10.0))
        with self.assertRaises(InvalidArgument):
            lg(0.0)

    def test_inverse_hyperbolic(self):
        self.assertEqual(arccosh(1.0), 0.0)
        self.assertAlmostEqual(arccosh(math.cosh(2.0)), 2.0)
        self.assertAlmostEqual(arcsinh(math.sinh(-1.5)), -1.5)
        self.assertAlmostEqual(arctanh(math.tanh(0.3)), 0.3)
        with self.assertRaises(InvalidArgument):
            arccosh(0.5)
        with self.assertRaises(InvalidArgument):
            arctanh(1.0)

    def test_real_mod(self):
        self.assertAlmostEqual(real_mod(7.5, 2.0, 0.0), 1.5)
        self.assertAlmostEqual(real_mod(-0.5, 2.0, 0.0), 1.5)
        self.assertAlmostEqual(real_mod(1.5 * math.pi, 2 * math.pi, -math.pi),
                               -0.5 * math.pi)
        self.assertAlmostEqual(real_mod(-0.5, 2 * math.pi, -math.pi), -0.5)
        with self.assertRaises(InvalidArgument):
            real_mod(1.0, 0.0, 0.0)


@pytest.mark.parametrize("p", [1.0, 1.5, 2.0, 4.0])
def test_p_normalized_has_unit_norm(p):
    rng = np.random.default_rng(17)
    v = rng.normal(size=12)
    assert p_norm(p, p_normalized(p, v)) == pytest.approx(1.0)

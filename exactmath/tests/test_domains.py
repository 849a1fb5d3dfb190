"""
Unit tests for integer domains and toolkit configuration.

Covers truncating division semantics, fixed-width range checks, overflow
trapping, domain inference from inputs and environment-driven defaults.
"""

import unittest
import random
import sys
import os

import numpy as np

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from exactmath import (
    BIG, INT64, INT32, FixedWidthDomain, get_domain, domain_for,
    ToolkitConfig, load_config, get_config, set_config, default_domain,
    mod_floor, InvalidArgument, ArithmeticOverflow,
)
from exactmath.domains import describe


class TestTruncatingDivision(unittest.TestCase):
    """quot rounds toward zero and rem takes the sign of the dividend."""

    CASES = [(7, 2, 3, 1), (-7, 2, -3, -1), (7, -2, -3, 1), (-7, -2, 3, -1),
             (-8, 2, -4, 0), (0, 5, 0, 0), (5, 7, 0, 5), (-5, 7, 0, -5)]

    def test_big(self):
        for a, b, q, r in self.CASES:
            self.assertEqual(BIG.quot(a, b), q, f"quot({a}, {b})")
            self.assertEqual(BIG.rem(a, b), r, f"rem({a}, {b})")

    def test_fixed(self):
        for a, b, q, r in self.CASES:
            a64, b64 = INT64.coerce(a), INT64.coerce(b)
            self.assertEqual(INT64.quot(a64, b64), q, f"quot({a}, {b})")
            self.assertEqual(INT64.rem(a64, b64), r, f"rem({a}, {b})")

    def test_random_identity(self):
        rng = random.Random(5)
        for _ in range(300):
            a = rng.randint(-10**12, 10**12)
            b = rng.choice([-1, 1]) * rng.randint(1, 10**6)
            for d in (BIG, INT64):
                aa, bb = d.coerce(a), d.coerce(b)
                q, r = d.quot(aa, bb), d.rem(aa, bb)
                self.assertEqual(int(q) * b + int(r), a)
                self.assertLess(abs(int(r)), abs(b))

    def test_sign_and_abs(self):
        self.assertEqual([BIG.sign(v) for v in (-3, 0, 4)], [-1, 0, 1])
        self.assertEqual([int(INT64.sign(INT64.coerce(v))) for v in (-3, 0, 4)],
                         [-1, 0, 1])
        self.assertEqual(BIG.abs(-12), 12)
        self.assertEqual(INT64.abs(INT64.coerce(-12)), 12)


class TestFixedWidth(unittest.TestCase):

    def test_limits(self):
        self.assertEqual(INT64.bits, 64)
        self.assertEqual(INT64.max_value, 2**63 - 1)
        self.assertEqual(INT32.min_value, -2**31)
        self.assertEqual(describe(INT32)["bits"], 32)
        self.assertIsNone(describe(BIG)["bits"])

    def test_coerce_range(self):
        self.assertIsInstance(INT64.coerce(2**63 - 1), np.int64)
        with self.assertRaises(ArithmeticOverflow):
            INT64.coerce(2**63)
        with self.assertRaises(ArithmeticOverflow):
            INT32.coerce(-2**31 - 1)

    def test_coerce_rejects_non_integers(self):
        for bad in (2.5, "7", None):
            with self.assertRaises(InvalidArgument):
                INT64.coerce(bad)
            with self.assertRaises(InvalidArgument):
                BIG.coerce(bad)

    def test_overflow_is_trapped(self):
        a = INT64.coerce(2**62)
        with self.assertRaises(ArithmeticOverflow):
            with INT64.guard():
                a * INT64.coerce(4)

    def test_abs_of_minimum(self):
        with self.assertRaises(ArithmeticOverflow):
            INT64.abs(INT64.coerce(-2**63))

    def test_unsigned_dtype_rejected(self):
        with self.assertRaises(InvalidArgument):
            FixedWidthDomain(np.uint32)
        with self.assertRaises(InvalidArgument):
            FixedWidthDomain(np.float64)


class TestDomainSelection(unittest.TestCase):

    def tearDown(self):
        set_config(None)

    def test_plain_ints_use_default(self):
        set_config(ToolkitConfig())
        self.assertIs(domain_for(1, 2), BIG)

    def test_numpy_inputs_select_fixed_width(self):
        self.assertIs(domain_for(np.int64(1), 2), INT64)
        self.assertIs(domain_for(np.int32(1)), INT32)
        self.assertIs(domain_for(np.int32(1), np.int64(2)), INT64)

    def test_explicit_domain_wins(self):
        self.assertIs(domain_for(np.int64(1), domain=BIG), BIG)
        self.assertIs(domain_for(1, domain="int32"), INT32)
        self.assertIs(domain_for(1, domain="big"), BIG)

    def test_unknown_explicit_domain(self):
        for bad in ("int7", np.int64, "float64"):
            with self.assertRaises(InvalidArgument):
                domain_for(1, domain=bad)
        with self.assertRaises(InvalidArgument):
            mod_floor(-1, 5, domain="int7")

    def test_unsigned_inputs_rejected(self):
        with self.assertRaises(InvalidArgument):
            domain_for(np.uint64(3))

    def test_get_domain(self):
        self.assertIs(get_domain("int64"), INT64)
        self.assertEqual(get_domain("int16").bits, 16)
        self.assertFalse(get_domain("int64", check_overflow=False).check_overflow)
        with self.assertRaises(KeyError):
            get_domain("int128")


class TestConfig(unittest.TestCase):

    def tearDown(self):
        set_config(None)

    def test_defaults(self):
        self.assertEqual(load_config({}), ToolkitConfig())
        self.assertEqual(load_config({}).to_dict(),
                         {"default_domain": "big", "check_overflow": True})

    def test_environment_values(self):
        cfg = load_config({"EXACTMATH_DEFAULT_DOMAIN": "int64",
                           "EXACTMATH_CHECK_OVERFLOW": "off"})
        self.assertEqual(cfg.default_domain, "int64")
        self.assertFalse(cfg.check_overflow)

    def test_unknown_domain_warns_and_falls_back(self):
        with self.assertWarns(RuntimeWarning):
            cfg = load_config({"EXACTMATH_DEFAULT_DOMAIN": "int7"})
        self.assertEqual(cfg.default_domain, "big")

    def test_bad_boolean_warns(self):
        with self.assertWarns(RuntimeWarning):
            cfg = load_config({"EXACTMATH_CHECK_OVERFLOW": "maybe"})
        self.assertTrue(cfg.check_overflow)

    def test_default_domain_applies_to_plain_ints(self):
        set_config(ToolkitConfig(default_domain="int64"))
        self.assertEqual(get_config().default_domain, "int64")
        self.assertIs(default_domain(), INT64)
        r = mod_floor(-1, 5)
        self.assertIsInstance(r, np.int64)
        self.assertEqual(r, 4)

    def test_unchecked_default_domain(self):
        set_config(ToolkitConfig(default_domain="int32", check_overflow=False))
        d = default_domain()
        self.assertEqual(d.name, "int32")
        self.assertFalse(d.check_overflow)


if __name__ == "__main__":
    unittest.main()

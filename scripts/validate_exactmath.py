#!/usr/bin/env python3
"""
Validation script for exactmath.

Runs a sequence of checks:
1. Integer domains and configuration
2. Canonical modulus and modular exponentiation
3. Extended GCD and modular inverse
4. Bounded continued-fraction convergents
5. Supporting helpers (bit length, factorials, norms)
6. Cross-check against sympy (if installed)

Usage:
    python scripts/validate_exactmath.py
    python scripts/validate_exactmath.py --samples 2000 --seed 7
"""

import argparse
import math
import random
import sys
import traceback
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))


def section(name: str):
    print(f"\n{'='*60}")
    print(f"  {name}")
    print(f"{'='*60}")


def check(name: str, passed: bool, detail: str = ""):
    status = "PASS" if passed else "FAIL"
    mark = "✓" if passed else "✗"
    print(f"  [{status}] {mark} {name}" + (f" -- {detail}" if detail else ""))
    return passed


def main(argv=None):
    parser = argparse.ArgumentParser(description="Validate exactmath")
    parser.add_argument("--samples", type=int, default=500,
                        help="random cases per property check")
    parser.add_argument("--seed", type=int, default=42)
    args = parser.parse_args(argv)

    import numpy as np
    import exactmath as em
    from exactmath.domains import describe

    print("exactmath Validation Suite")
    print(f"Python: {sys.version}")
    print(f"exactmath {em.__version__}, numpy {np.__version__}")
    print(f"Config: {em.get_config().to_dict()}")

    rng = random.Random(args.seed)
    results = []

    # ---------------------------------------------------------------
    # 1. Domains
    # ---------------------------------------------------------------
    section("1. Integer Domains")

    try:
        for d in (em.BIG, em.INT64, em.INT32):
            print(f"  {describe(d)}")
        results.append(check("numpy inputs select int64",
                             em.domain_for(np.int64(3)) is em.INT64))
        try:
            em.INT64.coerce(2**63)
            trapped = False
        except em.ArithmeticOverflow:
            trapped = True
        results.append(check("int64 range enforced", trapped))
    except Exception as e:
        results.append(check("Integer domains", False, str(e)))
        traceback.print_exc()

    # ---------------------------------------------------------------
    # 2. Modulus + exponentiation
    # ---------------------------------------------------------------
    section("2. Canonical Modulus / Modular Exponentiation")

    try:
        results.append(check("mod_floor(-1, 5) == 4", em.mod_floor(-1, 5) == 4))
        bad = 0
        for _ in range(args.samples):
            m = rng.randint(1, 10**9)
            v = rng.randint(-10**18, 10**18)
            if em.mod_floor(v, m) != v % m:
                bad += 1
        results.append(check(f"mod_floor vs % ({args.samples} cases)",
                             bad == 0, f"{bad} mismatches"))

        results.append(check("pow_mod(4, 13, 497) == 445",
                             em.pow_mod(4, 13, 497) == 445))
        bad = 0
        for _ in range(args.samples):
            m = rng.randint(1, (1 << 31) - 1)
            b = rng.randint(1, 1 << 40)
            e = rng.randint(0, 1 << 62)
            big = em.pow_mod(b, e, m)
            fixed = em.pow_mod(np.int64(b), np.int64(e), np.int64(m))
            if big != pow(b, e, m) or int(fixed) != big:
                bad += 1
        results.append(check("pow_mod big/int64 vs pow()", bad == 0,
                             f"{bad} mismatches"))
    except Exception as e:
        results.append(check("Modular arithmetic", False, str(e)))
        traceback.print_exc()

    # ---------------------------------------------------------------
    # 3. Extended GCD / inverse
    # ---------------------------------------------------------------
    section("3. Extended GCD / Modular Inverse")

    try:
        results.append(check("extgcd(240, 46) == (-9, 47)",
                             em.extgcd(240, 46) == (-9, 47)))
        bad = 0
        for _ in range(args.samples):
            a = rng.randint(-(1 << 128), 1 << 128)
            b = rng.randint(-(1 << 128), 1 << 128)
            u, v = em.extgcd(a, b)
            if u * a + v * b != math.gcd(a, b):
                bad += 1
        results.append(check("Bezout identity", bad == 0, f"{bad} mismatches"))

        results.append(check("inverse_mod(3, 11) == 4",
                             em.inverse_mod(3, 11) == 4))
        p = 2**127 - 1
        bad = 0
        for _ in range(args.samples):
            a = rng.randint(1, p - 1)
            if (a * em.inverse_mod(a, p)) % p != 1:
                bad += 1
        results.append(check("inverse_mod mod 2^127-1", bad == 0,
                             f"{bad} mismatches"))
    except Exception as e:
        results.append(check("Extended GCD", False, str(e)))
        traceback.print_exc()

    # ---------------------------------------------------------------
    # 4. Convergents
    # ---------------------------------------------------------------
    section("4. Continued-Fraction Convergents")

    try:
        got = em.convergent(em.Fraction(355, 113), 10)
        results.append(check("convergent(355/113, 10) == 22/7",
                             got == em.Fraction(22, 7), str(got)))
        bad = 0
        for _ in range(args.samples):
            frac = em.Fraction(rng.randint(-10**12, 10**12),
                               rng.randint(1, 10**12))
            bound = rng.randint(1, 10**6)
            c = em.convergent(frac, bound)
            within = [x for x in em.convergents(frac) if x.denominator <= bound]
            if c.denominator > bound or c != within[-1]:
                bad += 1
        results.append(check("last convergent within bound", bad == 0,
                             f"{bad} mismatches"))
    except Exception as e:
        results.append(check("Convergents", False, str(e)))
        traceback.print_exc()

    # ---------------------------------------------------------------
    # 5. Helpers
    # ---------------------------------------------------------------
    section("5. Supporting Helpers")

    try:
        results.append(check("bit_length(0), bit_length(255)",
                             (em.bit_length(0), em.bit_length(255)) == (0, 8)))
        results.append(check("factorial_exact_integer(20)",
                             int(em.factorial_exact_integer(20)) == math.factorial(20)))
        results.append(check("p_norm(2, [3, 4]) == 5",
                             abs(em.p_norm(2.0, [3.0, 4.0]) - 5.0) < 1e-12))
    except Exception as e:
        results.append(check("Helpers", False, str(e)))
        traceback.print_exc()

    # ---------------------------------------------------------------
    # 6. sympy cross-check
    # ---------------------------------------------------------------
    section("6. sympy Cross-Check")

    try:
        import sympy
        bad = 0
        for _ in range(min(args.samples, 200)):
            a = rng.randint(1, 10**30)
            b = rng.randint(1, 10**30)
            if em.gcd(a, b) != sympy.igcd(a, b):
                bad += 1
            if sympy.igcd(a, b) == 1 and em.inverse_mod(a, b) != sympy.mod_inverse(a, b):
                bad += 1
        results.append(check("gcd / inverse_mod vs sympy", bad == 0,
                             f"{bad} mismatches"))
    except ImportError:
        print("  sympy not installed, skipping (pip install exactmath[sympy])")
    except Exception as e:
        results.append(check("sympy cross-check", False, str(e)))
        traceback.print_exc()

    # ---------------------------------------------------------------
    # Summary
    # ---------------------------------------------------------------
    section("Summary")

    n_pass = sum(1 for r in results if r)
    n_fail = sum(1 for r in results if not r)
    n_total = len(results)

    print(f"\n  {n_pass}/{n_total} checks passed, {n_fail} failed")
    if n_fail == 0:
        print("\n  All checks PASSED.")
    else:
        print("\n  Some checks FAILED. Review output above.")

    return 0 if n_fail == 0 else 1


if __name__ == "__main__":
    sys.exit(main())

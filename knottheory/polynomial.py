"""
Sparse Laurent polynomials for knottheory.

A polynomial is a dict mapping integer exponent to integer coefficient,
with implicit zeros elsewhere. Every operation here drops zero
coefficients, so two equal polynomials compare equal as dicts and the
zero polynomial is {}.
"""

from typing import Dict, List, Tuple

Poly = Dict[int, int]


def canonical(poly: Poly) -> Poly:
    """Drop zero coefficients and order by exponent."""
    return {k: poly[k] for k in sorted(poly) if poly[k] != 0}


def add(p1: Poly, p2: Poly) -> Poly:
    """Add two polynomials."""
    result = dict(p1)
    for k, v in p2.items():
        result[k] = result.get(k, 0) + v
    return canonical(result)


def shift(poly: Poly, power: int) -> Poly:
    """Multiply polynomial by x^power."""
    return canonical({k + power: v for k, v in poly.items()})


def scale(poly: Poly, factor: int) -> Poly:
    return canonical({k: v * factor for k, v in poly.items()})


def multiply(p1: Poly, p2: Poly) -> Poly:
    """Multiply two polynomials."""
    result: Poly = {}
    for k1, v1 in p1.items():
        for k2, v2 in p2.items():
            k = k1 + k2
            result[k] = result.get(k, 0) + v1 * v2
    return canonical(result)


def power(poly: Poly, n: int) -> Poly:
    """Raise polynomial to a non-negative integer power by repeated convolution."""
    if n < 0:
        raise ValueError(f"power must be non-negative, got {n}")
    result = {0: 1}
    for _ in range(n):
        result = multiply(result, poly)
    return result


def to_dense(poly: Poly) -> Tuple[List[int], int]:
    """
    Convert to a dense coefficient list indexed from the minimum exponent.

    Returns (coeffs, offset) where coeffs[i] is the coefficient of
    x^(i + offset). The offset is never positive: polynomials without
    negative exponents are indexed from x^0. The zero polynomial
    gives ([0], 0).
    """
    poly = canonical(poly)
    if not poly:
        return [0], 0
    offset = min(0, min(poly))
    coeffs = [0] * (max(poly) - offset + 1)
    for k, v in poly.items():
        coeffs[k - offset] = v
    return coeffs, offset


def from_dense(coeffs, offset: int = 0) -> Poly:
    """Inverse of to_dense."""
    return canonical({i + offset: int(c) for i, c in enumerate(coeffs)})


def format_polynomial(poly: Poly, variable: str = "t", quarter: bool = False) -> str:
    """
    Render a polynomial as text, highest power first.

    With quarter=True exponents are read in quarter units, as the Jones
    polynomial is returned, and printed as fractions where needed.
    """
    poly = canonical(poly)
    if not poly:
        return "0"

    terms = []
    for exp in sorted(poly, reverse=True):
        coeff = poly[exp]
        if quarter:
            if exp % 4 == 0:
                exp_text = str(exp // 4)
            elif exp % 2 == 0:
                exp_text = f"{exp // 2}/2"
            else:
                exp_text = f"{exp}/4"
        else:
            exp_text = str(exp)

        if exp == 0:
            body = str(abs(coeff))
        else:
            mono = variable if exp_text == "1" else f"{variable}^{exp_text}"
            body = mono if abs(coeff) == 1 else f"{abs(coeff)}*{mono}"

        if not terms:
            terms.append(f"-{body}" if coeff < 0 else body)
        else:
            terms.append(f"- {body}" if coeff < 0 else f"+ {body}")

    return " ".join(terms)

# sigfig-lab/notation.py

from __future__ import annotations

import math
from typing import Union

from pydantic import BaseModel, ConfigDict
from sympy import Rational, floor

Number = Union[int, float, Rational]

# toLocaleString(maximumFractionDigits=12) equivalent used for standard form
STANDARD_MAX_FRACTION_DIGITS = 12
COEFFICIENT_PLACES = 4


class ScientificValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    coefficient: float
    exponent: int


ZERO = ScientificValue(coefficient=0.0, exponent=0)


# --- Exact decimal helpers ---------------------------------------------------------


def exact(value: Number | str) -> Rational:
    """
    Exact rational value of a decimal as the user sees it.
    Floats go through their shortest repr so 2.3 becomes 23/10, not the binary double.
    """
    if isinstance(value, Rational):
        return value
    if isinstance(value, str):
        return Rational(value.strip())
    if isinstance(value, int):
        return Rational(value)
    return Rational(repr(float(value)))


def _magnitude(value: Rational) -> int:
    # floor(log10(|v|)) without trusting float log10 near powers of ten
    v = abs(value)
    m = math.floor(math.log10(float(v)))
    while v >= Rational(10) ** (m + 1):
        m += 1
    while v < Rational(10) ** m:
        m -= 1
    return m


def round_half_up(value: Number | str, places: int = 0) -> float:
    """Round half away from zero at a fixed number of decimal places."""
    v = exact(value)
    scale = Rational(10) ** places
    sign = -1 if v < 0 else 1
    rounded = floor(abs(v) * scale + Rational(1, 2)) / scale
    return float(sign * rounded)


def round_to_sig_figs(value: Number | str, sig_figs: int) -> float:
    v = exact(value)
    if v == 0:
        return 0.0
    if sig_figs < 1:
        raise ValueError("sig_figs must be >= 1")
    scale = Rational(10) ** (_magnitude(v) - sig_figs + 1)
    sign = -1 if v < 0 else 1
    rounded = floor(abs(v) / scale + Rational(1, 2)) * scale
    return float(sign * rounded)


# --- Scientific notation -----------------------------------------------------------


def normalize(coefficient: Number, exponent: int, places: int = COEFFICIENT_PLACES) -> ScientificValue:
    """
    Shift a coefficient into [1, 10) and round it, adjusting the exponent.
    Rounding can land exactly on 10 (9.99996 -> 10.0000), so check again afterwards.
    """
    if coefficient == 0:
        return ZERO
    c = exact(coefficient)
    e = int(exponent)
    while abs(c) >= 10:
        c /= 10
        e += 1
    while abs(c) < 1:
        c *= 10
        e -= 1
    rounded = round_half_up(c, places)
    if abs(rounded) >= 10:
        rounded = round_half_up(exact(rounded) / 10, places)
        e += 1
    return ScientificValue(coefficient=rounded, exponent=e)


def to_scientific_notation(x: Number) -> ScientificValue:
    v = exact(x)
    if v == 0:
        return ZERO
    exponent = _magnitude(v)
    return normalize(v / Rational(10) ** exponent, exponent, COEFFICIENT_PLACES)


def from_scientific(value: ScientificValue) -> float:
    return float(exact(value.coefficient) * Rational(10) ** value.exponent)


# --- Significant figures -----------------------------------------------------------


def count_significant_figures(numeral: str) -> int:
    """
    Count sig figs from the written numeral, not its value: "40.0" and "40" differ.

    - leading zeros never count
    - zeros between non-zero digits always count
    - trailing zeros count only when a decimal point is written
    - the exponent part of "1.20e5" never counts
    """
    s = str(numeral).strip()
    if s[:1] in ("-", "+"):
        s = s[1:]

    for marker in ("e", "E"):
        if marker in s:
            return count_significant_figures(s.split(marker, 1)[0])

    has_point = "." in s
    digits = s.replace(".", "", 1).lstrip("0")

    if has_point:
        # "0.00" has no non-zero digit; still one measured figure
        return len(digits) or 1
    return len(digits.rstrip("0")) or 1


# --- Display -----------------------------------------------------------------------


def format_decimal(x: Number) -> str:
    """Shortest text for a number; integral values print without '.0'."""
    if isinstance(x, Rational):
        x = float(x)
    if isinstance(x, float) and math.isfinite(x) and x == int(x) and abs(x) < 1e16:
        return str(int(x))
    if isinstance(x, float) and (abs(x) >= 1e16 or (x != 0 and abs(x) < 1e-4)):
        return format_standard(x)
    return repr(x) if isinstance(x, float) else str(x)


def format_standard(x: Number) -> str:
    """Standard form: no grouping separators, at most 12 fractional digits."""
    s = f"{float(x):.{STANDARD_MAX_FRACTION_DIGITS}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    if s in ("-0", ""):
        s = "0"
    return s


def format_scientific(value: ScientificValue) -> str:
    return f"{format_decimal(value.coefficient)} × 10^{value.exponent}"

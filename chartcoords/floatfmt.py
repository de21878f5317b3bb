"""Short, readable formatting of floating point numbers."""

from __future__ import annotations

import math

_U64_MAX = 2**64 - 1


def _floor(x: float) -> float:
    return float(math.floor(x)) if math.isfinite(x) else x


def _ceil(x: float) -> float:
    return float(math.ceil(x)) if math.isfinite(x) else x


def _round_to_u64(x: float) -> int:
    """Round half away from zero and saturate into an unsigned 64-bit value."""
    if math.isnan(x) or x <= 0:
        return 0
    if x >= _U64_MAX:
        return _U64_MAX
    whole = math.floor(x)
    return whole + 1 if x - whole >= 0.5 else whole


def _find_minimal_repr(n: float, eps: float) -> tuple[float, int]:
    if eps >= 1.0:
        return (n, 0)
    if n - _floor(n) < eps:
        return (_floor(n), 0)
    if _ceil(n) - n < eps:
        return (_ceil(n), 0)
    rem, precision = _find_minimal_repr((n - _floor(n)) * 10.0, eps * 10.0)
    return (_floor(n) + rem / 10.0, precision + 1)


def _float_to_string(n: float, max_precision: int) -> str:
    sign, n = ("-", -n) if n < 0.0 else ("", n)
    int_part = _floor(n)
    dec_part = _round_to_u64((abs(n) - abs(int_part)) * 10.0**max_precision)

    if dec_part == 0 or max_precision == 0:
        return f"{sign}{int_part:.0f}"

    digits = str(dec_part)
    leading = "0" * max(0, max_precision - len(digits))
    return f"{sign}{int_part:.0f}.{leading}{digits.rstrip('0')}"


def pretty_print_float(n: float, allow_sn: bool) -> str:
    """Format ``n`` with the shortest representation within a small error.

    With ``allow_sn`` scientific notation is used when it is clearly shorter.
    """
    n, precision = _find_minimal_repr(n, 1e-10)
    decimal = _float_to_string(n, precision)
    if not allow_sn:
        return decimal
    if n == 0.0:
        return "0"

    idx = _floor(math.log10(abs(n)))
    exp = 10.0**idx
    if abs(n) / exp + 1e-5 >= 10.0:
        idx += 1.0
        exp *= 10.0

    if abs(idx) < 3.0:
        return decimal

    mantissa, mantissa_precision = _find_minimal_repr(n / exp, 1e-5)
    scientific = (
        f"{_float_to_string(mantissa, mantissa_precision)}e{_float_to_string(idx, 0)}"
    )
    return scientific if len(scientific) + 1 < len(decimal) else decimal
"""
Tolerance tiers for floating-point comparison.

Defines precision expectations for comparing float64 results:
- EXACT: bitwise-equal values only (transpose, copies)
- FP64: a handful of roundings, e.g. short dot products
- FP64_ACCUMULATED: long index-ordered reductions where rounding error
  grows with the number of terms

Used by Vector.isclose / Matrix.isclose and by the test suite.
"""

from dataclasses import dataclass

from pyvecmat.core.exceptions import ValidationError


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Exact equality, no rounding allowed',
)

FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision, few roundings',
)

FP64_ACCUMULATED = ToleranceTier(
    rtol=1e-6,
    atol=1e-6,
    name='fp64_accumulated',
    description='Double precision, long uncompensated sums',
)

_TIERS = {tier.name: tier for tier in (EXACT, FP64, FP64_ACCUMULATED)}


def select_tolerance(tolerance: ToleranceTier | str) -> ToleranceTier:
    """Resolve a tolerance tier, passing tiers through and looking up names."""
    if isinstance(tolerance, ToleranceTier):
        return tolerance
    if not isinstance(tolerance, str) or tolerance not in _TIERS:
        raise ValidationError(
            f"Unknown tolerance tier: {tolerance!r}. "
            f"Expected one of {sorted(_TIERS)}"
        )
    return _TIERS[tolerance]

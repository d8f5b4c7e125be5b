"""
Shared numeric infrastructure for PyVecMat.

Submodules:
    tolerances: Tolerance tiers for floating-point comparison
"""

from pyvecmat.core.compute.tolerances import (
    ToleranceTier,
    EXACT,
    FP64,
    FP64_ACCUMULATED,
    select_tolerance,
)

__all__ = [
    "ToleranceTier",
    "EXACT",
    "FP64",
    "FP64_ACCUMULATED",
    "select_tolerance",
]

"""Central numerical tolerances.

Numeric thresholds used by the kernels live here so they
can be tuned consistently and referenced without scattering literals.
"""
from __future__ import annotations

# Construction tolerances
EPS_COLINEAR: float = 1e-15       # sin(angle) at or below which a circumcenter is undefined

# Exact kernel
EXACT_SQRT_BITS: int = 64         # relative precision of an irrational square root

__all__ = [
    'EPS_COLINEAR',
    'EXACT_SQRT_BITS',
]

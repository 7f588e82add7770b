"""Point types and geometric traits (kernels).

A kernel bundles a field type ``FT``, its own ``Point2``/``Point3`` types and
the predicates and constructions the weight computations need:

    angle_2(p, q, r)          -> Angle      (angle at q)
    midpoint_2(p, q)          -> Point2
    circumcenter_2(p, q, r)   -> Point2
    positive_area_2(p, q, r)  -> FT         (non-negative)

and the same four operations with a ``_3`` suffix for points in space.

Two kernels are provided:

- ``FloatKernel``: double precision via numpy float64.
- ``ExactKernel``: ``fractions.Fraction`` arithmetic, exact except for the
  square root in ``positive_area_3`` when the squared area is not a perfect
  square.

Any object implementing ``GeomTraits2`` / ``GeomTraits3`` can be passed as
``traits`` to the weight functions; the kernels here are not special.
"""
from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from fractions import Fraction
from typing import Any, ClassVar, Dict, Optional, Protocol, Union, runtime_checkable

import numpy as np

from . import geometry as geom
from .config import KernelConfig
from .constants import EXACT_SQRT_BITS
from .geometry import Angle


@dataclass(frozen=True)
class Point2:
    """Immutable point in the plane; ``kernel`` is set on kernel-bound subclasses."""
    x: Any
    y: Any
    kernel: ClassVar[Optional[type]] = None

    def __post_init__(self):
        if self.kernel is not None:
            ft = self.kernel.FT
            object.__setattr__(self, 'x', ft(self.x))
            object.__setattr__(self, 'y', ft(self.y))

    def __iter__(self):
        return iter((self.x, self.y))

    def __len__(self):
        return 2

    def __getitem__(self, i):
        return (self.x, self.y)[i]


@dataclass(frozen=True)
class Point3:
    """Immutable point in space; ``kernel`` is set on kernel-bound subclasses."""
    x: Any
    y: Any
    z: Any
    kernel: ClassVar[Optional[type]] = None

    def __post_init__(self):
        if self.kernel is not None:
            ft = self.kernel.FT
            object.__setattr__(self, 'x', ft(self.x))
            object.__setattr__(self, 'y', ft(self.y))
            object.__setattr__(self, 'z', ft(self.z))

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def __len__(self):
        return 3

    def __getitem__(self, i):
        return (self.x, self.y, self.z)[i]


def sqrt_fraction(x, bits: int = EXACT_SQRT_BITS) -> Fraction:
    """Square root of a non-negative rational without going through a float.

    Exact when numerator and denominator are perfect squares, otherwise
    ``isqrt(n * d * 4**bits) / (d * 2**bits)``, which is never off by more
    than one part in ``2**bits``.
    """
    x = Fraction(x)
    if x < 0:
        raise ValueError(f"square root of negative value {x}")
    n, d = x.numerator, x.denominator
    rn, rd = math.isqrt(n), math.isqrt(d)
    if rn * rn == n and rd * rd == d:
        return Fraction(rn, rd)
    return Fraction(math.isqrt(n * d << (2 * bits)), d << bits)


@runtime_checkable
class GeomTraits2(Protocol):
    def angle_2(self, p, q, r) -> Angle: ...
    def midpoint_2(self, p, q): ...
    def circumcenter_2(self, p, q, r): ...
    def positive_area_2(self, p, q, r): ...


@runtime_checkable
class GeomTraits3(Protocol):
    def angle_3(self, p, q, r) -> Angle: ...
    def midpoint_3(self, p, q): ...
    def circumcenter_3(self, p, q, r): ...
    def positive_area_3(self, p, q, r): ...


def _bind_points(kernel):
    """Attach kernel-owned Point2/Point3 subclasses to ``kernel``."""
    name = kernel.__name__.replace('Kernel', '')
    kernel.Point2 = type(f'{name}Point2', (Point2,), {'kernel': kernel})
    kernel.Point3 = type(f'{name}Point3', (Point3,), {'kernel': kernel})
    return kernel


@_bind_points
class FloatKernel:
    """Double precision kernel.

    Predicates use the exact sign of the float64 result (no tolerance), so a
    right angle is only reported when the dot product is exactly zero.
    Circumcenters raise DegenerateTriangleError when the sine of the angle at
    the first vertex is at most ``config.circumcenter_eps``.
    """
    FT = float
    Point2: ClassVar[type]
    Point3: ClassVar[type]

    def __init__(self, config: Optional[KernelConfig] = None):
        self.config = config if config is not None else KernelConfig()

    def __repr__(self):
        return f'FloatKernel(circumcenter_eps={self.config.circumcenter_eps!r})'

    @staticmethod
    def _coords(p, dim: int) -> np.ndarray:
        arr = np.asarray(tuple(p), dtype=np.float64)
        if arr.shape != (dim,):
            raise ValueError(f'expected a point with {dim} coordinates, got shape {arr.shape}')
        return arr

    # --- plane ---

    def angle_2(self, p, q, r) -> Angle:
        a = self._coords(p, 2); b = self._coords(q, 2); c = self._coords(r, 2)
        return geom.angle_from_dot(float(np.dot(a - b, c - b)))

    def midpoint_2(self, p, q):
        m = 0.5 * (self._coords(p, 2) + self._coords(q, 2))
        return self.Point2(m[0], m[1])

    def circumcenter_2(self, p, q, r):
        a = self._coords(p, 2); b = self._coords(q, 2); c = self._coords(r, 2)
        x, y = geom.circumcenter_2(a, b, c, eps=self.config.circumcenter_eps)
        return self.Point2(x, y)

    def area_2(self, p, q, r) -> float:
        a = self._coords(p, 2); b = self._coords(q, 2); c = self._coords(r, 2)
        return float(geom.signed_area_2(a, b, c))

    def positive_area_2(self, p, q, r) -> float:
        return abs(self.area_2(p, q, r))

    # --- space ---

    def angle_3(self, p, q, r) -> Angle:
        a = self._coords(p, 3); b = self._coords(q, 3); c = self._coords(r, 3)
        return geom.angle_from_dot(float(np.dot(a - b, c - b)))

    def midpoint_3(self, p, q):
        m = 0.5 * (self._coords(p, 3) + self._coords(q, 3))
        return self.Point3(m[0], m[1], m[2])

    def circumcenter_3(self, p, q, r):
        a = self._coords(p, 3); b = self._coords(q, 3); c = self._coords(r, 3)
        x, y, z = geom.circumcenter_3(a, b, c, eps=self.config.circumcenter_eps)
        return self.Point3(x, y, z)

    def squared_area_3(self, p, q, r) -> float:
        a = self._coords(p, 3); b = self._coords(q, 3); c = self._coords(r, 3)
        n = np.cross(b - a, c - a)
        return 0.25 * float(np.dot(n, n))

    def positive_area_3(self, p, q, r) -> float:
        return float(np.sqrt(self.squared_area_3(p, q, r)))


@_bind_points
class ExactKernel:
    """Rational kernel backed by ``fractions.Fraction``.

    Every predicate and construction is exact. ``positive_area_3`` is exact
    whenever the squared area is the square of a rational; otherwise it keeps
    ``EXACT_SQRT_BITS`` bits of relative precision at any magnitude.
    """
    FT = Fraction
    Point2: ClassVar[type]
    Point3: ClassVar[type]

    def __repr__(self):
        return 'ExactKernel()'

    @staticmethod
    def _coords(p, dim: int):
        coords = tuple(Fraction(int(c)) if isinstance(c, numbers.Integral) else Fraction(c) for c in p)
        if len(coords) != dim:
            raise ValueError(f'expected a point with {dim} coordinates, got {len(coords)}')
        return coords

    def angle_2(self, p, q, r) -> Angle:
        return geom.angle_at(self._coords(p, 2), self._coords(q, 2), self._coords(r, 2))

    def midpoint_2(self, p, q):
        return self.Point2(*geom.midpoint(self._coords(p, 2), self._coords(q, 2)))

    def circumcenter_2(self, p, q, r):
        return self.Point2(*geom.circumcenter_2(self._coords(p, 2), self._coords(q, 2), self._coords(r, 2)))

    def area_2(self, p, q, r) -> Fraction:
        return geom.signed_area_2(self._coords(p, 2), self._coords(q, 2), self._coords(r, 2))

    def positive_area_2(self, p, q, r) -> Fraction:
        return abs(self.area_2(p, q, r))

    def angle_3(self, p, q, r) -> Angle:
        return geom.angle_at(self._coords(p, 3), self._coords(q, 3), self._coords(r, 3))

    def midpoint_3(self, p, q):
        return self.Point3(*geom.midpoint(self._coords(p, 3), self._coords(q, 3)))

    def circumcenter_3(self, p, q, r):
        return self.Point3(*geom.circumcenter_3(self._coords(p, 3), self._coords(q, 3), self._coords(r, 3)))

    def squared_area_3(self, p, q, r) -> Fraction:
        return geom.squared_area_3(self._coords(p, 3), self._coords(q, 3), self._coords(r, 3))

    def positive_area_3(self, p, q, r) -> Fraction:
        return sqrt_fraction(self.squared_area_3(p, q, r))


KERNELS: Dict[str, type] = {
    'float': FloatKernel,
    'exact': ExactKernel,
}


def resolve_kernel(kernel: Union[str, type]) -> type:
    """Return the kernel class registered under ``kernel`` (or ``kernel`` itself if a class)."""
    if isinstance(kernel, type):
        return kernel
    try:
        return KERNELS[str(kernel).lower()]
    except KeyError:
        raise ValueError(f"unknown kernel '{kernel}', expected one of {sorted(KERNELS)}") from None


__all__ = [
    'Point2', 'Point3', 'GeomTraits2', 'GeomTraits3',
    'FloatKernel', 'ExactKernel', 'KERNELS', 'resolve_kernel', 'sqrt_fraction',
]

"""Coordinate-level geometry primitives shared by the kernels.

Helpers here operate on plain coordinate sequences (tuples, lists, numpy
arrays) using only ``+ - * /`` and comparisons, so the same formulas serve the
floating-point kernel and the exact rational kernel. Kernels are responsible
for coercing coordinates to their field type before calling in.
"""
from __future__ import annotations

from enum import IntEnum


class DegenerateTriangleError(ValueError):
    """Raised by a construction that is undefined for collinear or coincident points."""


class Angle(IntEnum):
    """Classification of the angle at the middle point of a triple.

    Values follow the sign of ``(a - b) . (c - b)``.
    """
    OBTUSE = -1
    RIGHT = 0
    ACUTE = 1


def angle_from_dot(value) -> Angle:
    if value > 0:
        return Angle.ACUTE
    if value < 0:
        return Angle.OBTUSE
    return Angle.RIGHT


def sub(a, b):
    return tuple(x - y for x, y in zip(a, b))


def dot(u, v):
    total = u[0] * v[0]
    for i in range(1, len(u)):
        total = total + u[i] * v[i]
    return total


def midpoint(a, b):
    return tuple((x + y) / 2 for x, y in zip(a, b))


def cross_2(u, v):
    """Scalar 2D cross product (z component of the 3D cross product)."""
    return u[0] * v[1] - u[1] * v[0]


def cross_3(u, v):
    return (
        u[1] * v[2] - u[2] * v[1],
        u[2] * v[0] - u[0] * v[2],
        u[0] * v[1] - u[1] * v[0],
    )


def angle_at(a, b, c) -> Angle:
    """Classify the angle at ``b`` in the triple ``(a, b, c)``."""
    return angle_from_dot(dot(sub(a, b), sub(c, b)))


def signed_area_2(a, b, c):
    """Signed area of triangle abc; positive when counter-clockwise."""
    return cross_2(sub(b, a), sub(c, a)) / 2


def squared_area_3(a, b, c):
    n = cross_3(sub(b, a), sub(c, a))
    return dot(n, n) / 4


def circumcenter_2(a, b, c, eps=0):
    """Circumcenter of triangle abc in the plane.

    Raises DegenerateTriangleError when the sine of the angle at ``a`` is at
    most ``eps`` (collinear or coincident points). The test is scale-free and
    compares squares, so it stays exact for rational coordinates.
    """
    u = sub(b, a)
    v = sub(c, a)
    uu = dot(u, u)
    vv = dot(v, v)
    cr = cross_2(u, v)
    if cr * cr <= eps * eps * uu * vv:
        raise DegenerateTriangleError(f'circumcenter undefined for collinear points {a}, {b}, {c}')
    det = 2 * cr
    ox = (v[1] * uu - u[1] * vv) / det
    oy = (u[0] * vv - v[0] * uu) / det
    return (a[0] + ox, a[1] + oy)


def circumcenter_3(a, b, c, eps=0):
    """Circumcenter of triangle abc in space (lies in the triangle's plane).

    With ``u = b - a``, ``v = c - a`` and ``w = u x v`` the offset from ``a`` is
    ``(|u|^2 (v x w) + |v|^2 (w x u)) / (2 |w|^2)``.
    Degeneracy is tested the same way as ``circumcenter_2``.
    """
    u = sub(b, a)
    v = sub(c, a)
    w = cross_3(u, v)
    uu = dot(u, u)
    vv = dot(v, v)
    ww = dot(w, w)
    if ww <= eps * eps * uu * vv:
        raise DegenerateTriangleError(f'circumcenter undefined for collinear points {a}, {b}, {c}')
    det = 2 * ww
    vw = cross_3(v, w)
    wu = cross_3(w, u)
    return tuple(a[i] + (uu * vw[i] + vv * wu[i]) / det for i in range(3))


__all__ = [
    'DegenerateTriangleError', 'Angle', 'angle_from_dot', 'angle_at',
    'sub', 'dot', 'midpoint', 'cross_2', 'cross_3',
    'signed_area_2', 'squared_area_3', 'circumcenter_2', 'circumcenter_3',
]

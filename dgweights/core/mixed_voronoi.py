"""Mixed Voronoi cell areas (Meyer et al. 2003).

The mixed Voronoi area of vertex ``q`` in triangle ``(p, q, r)`` is the part of
the triangle attributed to ``q`` when building per-vertex area weights for
cotangent Laplacians, curvature estimates and smoothing:

- non-obtuse triangle: the true Voronoi region, bounded by the edge
  midpoints adjacent to ``q`` and the circumcenter;
- obtuse triangle: the circumcenter would fall outside, so the midpoint of
  the edge opposite ``q`` (``rp``) is used instead.

A right angle is not obtuse and therefore uses the circumcenter.

Input is not validated. Degenerate triangles are handled by whatever the
traits do; the kernels in ``dgweights.core.kernels`` raise
``DegenerateTriangleError`` when a circumcenter is requested for collinear or
coincident points, and that error propagates to the caller unchanged.
"""
from __future__ import annotations

from functools import singledispatch
from dataclasses import replace
from typing import Optional

from .config import DEFAULT_CONFIG, WeightsConfig
from .geometry import Angle
from .kernels import FloatKernel, Point2, Point3, resolve_kernel
from .logging_utils import get_logger

logger = get_logger('dgweights.mixed_voronoi')


def _mixed_voronoi_area(p, q, r, angle, midpoint, circumcenter, positive_area):
    # Shared by both dimensions; the four primitives come from one traits object.
    a1 = angle(p, q, r)
    a2 = angle(q, r, p)
    a3 = angle(r, p, q)

    if a1 != Angle.OBTUSE and a2 != Angle.OBTUSE and a3 != Angle.OBTUSE:
        center = circumcenter(p, q, r)
        logger.debug('mixed_voronoi_area: non-obtuse triangle, circumcenter %s', center)
    else:
        center = midpoint(r, p)
        logger.debug('mixed_voronoi_area: obtuse triangle (%r, %r, %r), opposite midpoint %s',
                     a1, a2, a3, center)

    m1 = midpoint(q, r)
    m2 = midpoint(q, p)

    A1 = positive_area(q, m1, center)
    A2 = positive_area(q, center, m2)
    return A1 + A2


def default_traits(point, config: Optional[WeightsConfig] = None):
    """Build the traits object implied by ``point``.

    Kernel-bound points (``FloatKernel.Point2``, ``ExactKernel.Point3``, ...)
    get a default-constructed instance of their kernel. Anything else
    (tuples, numpy arrays, bare ``Point2``/``Point3``) gets the kernel named
    by ``config.default_kernel``.
    """
    kernel = getattr(type(point), 'kernel', None)
    if kernel is not None:
        return kernel()
    cfg = config if config is not None else DEFAULT_CONFIG
    kernel = resolve_kernel(cfg.default_kernel)
    if kernel is FloatKernel:
        return FloatKernel(replace(cfg.kernel))
    return kernel()


def mixed_voronoi_area_2(p, q, r, traits=None, *, config: Optional[WeightsConfig] = None):
    """Area of the mixed Voronoi cell of ``q`` in the planar triangle ``(p, q, r)``.

    Parameters
    ----------
    p, q, r : point-like
        Triangle vertices; ``q`` is the vertex whose region is measured.
    traits : GeomTraits2, optional
        Provides ``angle_2``, ``midpoint_2``, ``circumcenter_2`` and
        ``positive_area_2``. Defaults to ``default_traits(p, config)``.
    config : WeightsConfig, optional
        Only consulted when ``traits`` is None and ``p`` carries no kernel.

    Returns
    -------
    FT
        Non-negative area in the traits' field type.
    """
    if traits is None:
        traits = default_traits(p, config)
    return _mixed_voronoi_area(p, q, r, traits.angle_2, traits.midpoint_2,
                               traits.circumcenter_2, traits.positive_area_2)


def mixed_voronoi_area_3(p, q, r, traits=None, *, config: Optional[WeightsConfig] = None):
    """Area of the mixed Voronoi cell of ``q`` in the triangle ``(p, q, r)`` in space.

    Same construction as ``mixed_voronoi_area_2`` using the ``_3`` primitives
    of ``traits``. No projection is done; midpoints and the circumcenter all
    lie in the triangle's plane.
    """
    if traits is None:
        traits = default_traits(p, config)
    return _mixed_voronoi_area(p, q, r, traits.angle_3, traits.midpoint_3,
                               traits.circumcenter_3, traits.positive_area_3)


@singledispatch
def mixed_voronoi_area(p, q, r, traits=None, *, config: Optional[WeightsConfig] = None):
    """Mixed Voronoi area of ``q``, dispatched on the point type of ``p``.

    ``Point2`` values use the planar variant and ``Point3`` values the spatial
    one. Other point-likes must call ``mixed_voronoi_area_2`` or
    ``mixed_voronoi_area_3`` directly.
    """
    raise TypeError(
        f'mixed_voronoi_area: unsupported point type {type(p).__name__}; '
        'use Point2/Point3 or call mixed_voronoi_area_2 / mixed_voronoi_area_3'
    )


@mixed_voronoi_area.register(Point2)
def _(p, q, r, traits=None, *, config: Optional[WeightsConfig] = None):
    return mixed_voronoi_area_2(p, q, r, traits, config=config)


@mixed_voronoi_area.register(Point3)
def _(p, q, r, traits=None, *, config: Optional[WeightsConfig] = None):
    return mixed_voronoi_area_3(p, q, r, traits, config=config)


__all__ = [
    'mixed_voronoi_area', 'mixed_voronoi_area_2', 'mixed_voronoi_area_3',
    'default_traits',
]

"""Public package API for dgweights.

This facade provides a flat import surface on top of the internal
implementation package ``dgweights.core``.

Example
-------
    from dgweights import mixed_voronoi_area_2, ExactKernel

    area = mixed_voronoi_area_2((0, 0), (4, 0), (1, 3), ExactKernel())

The deeper modules (``dgweights.core.*``) are considered internal and may
change; rely on this layer for public symbols.
"""
from importlib import import_module as _imp
import logging as _logging

from importlib.metadata import version as _pkg_version, PackageNotFoundError as _NotFound

try:
    __version__ = _pkg_version("dgweights")  # populated when installed
except _NotFound:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

_const = _imp('dgweights.core.constants')
_config = _imp('dgweights.core.config')
_geom = _imp('dgweights.core.geometry')
_kernels = _imp('dgweights.core.kernels')
_mv = _imp('dgweights.core.mixed_voronoi')
_log = _imp('dgweights.core.logging_utils')

# Weights
mixed_voronoi_area = _mv.mixed_voronoi_area
mixed_voronoi_area_2 = _mv.mixed_voronoi_area_2
mixed_voronoi_area_3 = _mv.mixed_voronoi_area_3
default_traits = _mv.default_traits

# Kernels and points
Point2 = _kernels.Point2
Point3 = _kernels.Point3
GeomTraits2 = _kernels.GeomTraits2
GeomTraits3 = _kernels.GeomTraits3
FloatKernel = _kernels.FloatKernel
ExactKernel = _kernels.ExactKernel
KERNELS = _kernels.KERNELS
resolve_kernel = _kernels.resolve_kernel
sqrt_fraction = _kernels.sqrt_fraction

# Geometry
Angle = _geom.Angle
DegenerateTriangleError = _geom.DegenerateTriangleError

# Configuration
KernelConfig = _config.KernelConfig
WeightsConfig = _config.WeightsConfig
EPS_COLINEAR = _const.EPS_COLINEAR

configure_logging = _log.configure_logging
get_logger = _log.get_logger

# Namespace submodules for exploratory users
geometry = _geom
kernels = _kernels
constants = _const
config = _config

__all__ = [
    '__version__',
    # weights
    'mixed_voronoi_area', 'mixed_voronoi_area_2', 'mixed_voronoi_area_3', 'default_traits',
    # kernels
    'Point2', 'Point3', 'GeomTraits2', 'GeomTraits3', 'FloatKernel', 'ExactKernel',
    'KERNELS', 'resolve_kernel', 'sqrt_fraction',
    # geometry
    'Angle', 'DegenerateTriangleError',
    # configuration / logging
    'KernelConfig', 'WeightsConfig', 'EPS_COLINEAR', 'configure_logging', 'get_logger',
    # submodules
    'geometry', 'kernels', 'constants', 'config',
]

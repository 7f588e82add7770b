"""Configuration objects for dgweights kernels and default-traits selection."""
from __future__ import annotations

from dataclasses import dataclass, field

from .constants import EPS_COLINEAR


@dataclass
class KernelConfig:
    """Tolerances of the floating-point kernel.

    - circumcenter_eps: a circumcenter is undefined when the sine of the angle
      at its first vertex is at or below this threshold. Relative, so it does
      not depend on the size of the triangle.
    """
    circumcenter_eps: float = EPS_COLINEAR


@dataclass
class WeightsConfig:
    """Unified configuration.

    Attributes
    ----------
    default_kernel : str
        Kernel used when a point carries none (tuples, lists, numpy arrays,
        bare Point2/Point3). One of the names registered in ``KERNELS``.
    kernel : KernelConfig
        Parameters handed to the floating-point kernel when it is built as
        the default.
    """
    default_kernel: str = 'float'
    kernel: KernelConfig = field(default_factory=KernelConfig)


DEFAULT_CONFIG = WeightsConfig()

__all__ = ['KernelConfig', 'WeightsConfig', 'DEFAULT_CONFIG']

# BeamType, LoadType, BeamConfiguration, AnalysisResult

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

import numpy as np


class BeamType(str, Enum):
    """Boundary-condition class. Values match the identifiers callers send."""
    SIMPLY_SUPPORTED = "simply-supported"
    FIXED_FIXED = "fixed-fixed"
    CANTILEVER = "cantilever"


class LoadType(str, Enum):
    """Which single load acts on the span."""
    POINT = "point"
    DISTRIBUTED = "distributed"
    MOMENT = "moment"


@dataclass(frozen=True)
class BeamConfiguration:
    """
    Complete input to one analysis.

    beam_type / load_type accept the enums or their string values. Anything
    else is carried through unchanged and produces a zero response.

    Only the magnitude matching load_type is used: P for "point",
    q for "distributed", M0 for "moment". The others are ignored.

    a is measured from the left end (the fixed end for a cantilever) and
    defaults to L/2. It is not used for a distributed load, or for the
    cantilever end moment.
    """
    beam_type: Union[BeamType, str]
    load_type: Union[LoadType, str]
    L: float            # Span (m)
    E: float            # Young's modulus (Pa)
    I: float            # Second moment of area (m⁴)
    P: float = 0.0      # Point load (N)
    q: float = 0.0      # Distributed load (N/m)
    M0: float = 0.0     # Applied moment (N·m)
    a: Optional[float] = None  # Load position (m)
    num_points: int = 100

    @property
    def EI(self) -> float:
        return self.E * self.I

    @property
    def load_position(self) -> float:
        return self.L / 2 if self.a is None else self.a


@dataclass(frozen=True)
class AnalysisResult:
    """
    Sampled response along the span.

    All five arrays have length num_points + 1 and share the same index.
    Arrays are read-only; a new analysis produces a new result.
    """
    x: np.ndarray
    deflection: np.ndarray
    slope: np.ndarray
    moment: np.ndarray
    shear: np.ndarray
    max_deflection: float
    max_slope: float
    max_moment: float
    max_shear: float
    EI: float

    def __post_init__(self):
        for name in ("x", "deflection", "slope", "moment", "shear"):
            arr = np.array(getattr(self, name), dtype=float)
            arr.setflags(write=False)
            object.__setattr__(self, name, arr)

    @property
    def num_points(self) -> int:
        return len(self.x) - 1

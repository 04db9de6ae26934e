# beamcalc - Closed-form Euler-Bernoulli beam analysis
"""
BEAMCALC: Single-Span Beam Response
===================================

This package provides:
- Closed-form deflection, slope, moment and shear along a prismatic beam
- Three boundary conditions (simply supported, fixed-fixed, cantilever)
- Three load types (point force, full-span UDL, applied moment)
- Peak values and extreme-fiber bending stress for display

ARCHITECTURE:
-------------
    catalog.py      Material name -> Young's modulus
    section.py      Rectangular section properties (I = b·h³/12)
    model.py        BeamType, LoadType, BeamConfiguration, AnalysisResult
    solvers.py      Per-station closed forms, one function per support type
    analysis.py     analyze(), stress(), max_stress()
    config.py       Input defaults and load-position clamping
    post.py         Display summary, colour ratios, tables
"""

from .analysis import analyze, max_stress, stress
from .catalog import DEFAULT_CATALOG, MaterialCatalog, elastic_modulus
from .errors import InvalidConfiguration
from .model import AnalysisResult, BeamConfiguration, BeamType, LoadType
from .section import RectangularSection, moment_of_inertia

# Version
__version__ = "0.1.0"

__all__ = [
    "analyze",
    "stress",
    "max_stress",
    "elastic_modulus",
    "moment_of_inertia",
    "MaterialCatalog",
    "DEFAULT_CATALOG",
    "RectangularSection",
    "BeamConfiguration",
    "AnalysisResult",
    "BeamType",
    "LoadType",
    "InvalidConfiguration",
]

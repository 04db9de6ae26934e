# beamcalc/config.py
"""
INPUT DEFAULTS AND CLAMPING
===========================

The engine trusts its BeamConfiguration. This module is the layer in front
of it that turns raw user input (form fields, request bodies, CLI flags)
into a configuration:

1. Missing, zero or NaN numbers fall back to the defaults below
2. E comes from the material catalog, I from the rectangular section
3. The load position defaults to midspan and is clamped into
   [margin, L - margin] so it never sits on a support
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from .catalog import DEFAULT_CATALOG, MaterialCatalog
from .model import BeamConfiguration
from .section import RectangularSection


@dataclass
class EngineConfig:
    """Defaults applied to user input."""

    default_beam_type: str = "simply-supported"
    default_load_type: str = "point"
    default_material: str = "steel"

    default_length: float = 2.0             # m
    default_width: float = 0.1              # m
    default_height: float = 0.15            # m
    default_custom_E_gpa: float = 200.0     # GPa
    default_point_load: float = 10000.0     # N
    default_distributed_load: float = 5000.0  # N/m
    default_moment_load: float = 5000.0     # N·m

    default_num_points: int = 100

    # Closest a load may come to either support (m)
    position_margin: float = 0.01


# Global config instance
CONFIG = EngineConfig()


@dataclass
class BeamInputs:
    """Raw user input. None means "use the default"."""
    beam_type: Optional[str] = None
    load_type: Optional[str] = None
    material: Optional[str] = None
    length: Optional[float] = None
    width: Optional[float] = None
    height: Optional[float] = None
    custom_E_gpa: Optional[float] = None
    point_load: Optional[float] = None
    distributed_load: Optional[float] = None
    moment_load: Optional[float] = None
    load_position: Optional[float] = None
    num_points: Optional[int] = None


def _or_default(value: Optional[float], default: float) -> float:
    """Treat None, 0 and NaN as "not entered"."""
    if value is None or value == 0 or math.isnan(value):
        return default
    return float(value)


def clamp_position(a: float, L: float, margin: float = CONFIG.position_margin) -> float:
    """Clamp a load position into [margin, L - margin]."""
    return min(max(a, margin), L - margin)


def build_configuration(
    inputs: BeamInputs,
    config: EngineConfig = CONFIG,
    catalog: MaterialCatalog = DEFAULT_CATALOG,
) -> Tuple[BeamConfiguration, RectangularSection]:
    """
    Turn raw inputs into an engine configuration plus the section it uses.

    Parameters:
    -----------
    inputs : BeamInputs
        User input, any field may be None
    config : EngineConfig
        Defaults (module CONFIG unless overridden)
    catalog : MaterialCatalog
        Material lookup for E

    Returns:
    --------
    (BeamConfiguration, RectangularSection)
        The section is returned so callers can compute stress with the
        same h and I.
    """
    L = _or_default(inputs.length, config.default_length)
    b = _or_default(inputs.width, config.default_width)
    h = _or_default(inputs.height, config.default_height)
    section = RectangularSection(b=b, h=h)

    custom_E = _or_default(inputs.custom_E_gpa, config.default_custom_E_gpa)
    E = catalog.elastic_modulus(inputs.material or config.default_material, custom_E)

    a = _or_default(inputs.load_position, L / 2)
    a = clamp_position(a, L, config.position_margin)

    beam_config = BeamConfiguration(
        beam_type=inputs.beam_type or config.default_beam_type,
        load_type=inputs.load_type or config.default_load_type,
        L=L,
        E=E,
        I=section.I,
        P=_or_default(inputs.point_load, config.default_point_load),
        q=_or_default(inputs.distributed_load, config.default_distributed_load),
        M0=_or_default(inputs.moment_load, config.default_moment_load),
        a=a,
        num_points=inputs.num_points or config.default_num_points,
    )
    return beam_config, section

# beamcalc/analysis.py
"""
ANALYSIS ENGINE
===============

Samples the closed-form response of a single-span beam and reduces it to
peak values.

    config ──► EI = E·I ──► x_i = (i / n)·L, i = 0..n ──► solver(x_i) ──► maxima

The engine is a pure function of its BeamConfiguration: no state, no I/O,
and identical input gives bit-identical output.
"""

import numpy as np

from .errors import InvalidConfiguration
from .model import AnalysisResult, BeamConfiguration
from .solvers import solve_station


def validate_configuration(config: BeamConfiguration) -> float:
    """
    Check the inputs that would otherwise produce NaN/Inf results.

    Returns:
    --------
    float
        Flexural rigidity EI (N·m²)

    Raises:
    -------
    InvalidConfiguration
        If EI <= 0 (or not finite), L <= 0, or num_points < 1
    """
    EI = config.E * config.I
    if not (np.isfinite(EI) and EI > 0.0):
        raise InvalidConfiguration(f"Flexural rigidity must be positive (EI={EI}).")
    if not (np.isfinite(config.L) and config.L > 0.0):
        raise InvalidConfiguration(f"Span must be positive (L={config.L}).")
    if config.num_points < 1:
        raise InvalidConfiguration(f"Need at least one interval (num_points={config.num_points}).")
    return EI


def analyze(config: BeamConfiguration) -> AnalysisResult:
    """
    Compute deflection, slope, moment and shear along the beam.

    Parameters:
    -----------
    config : BeamConfiguration
        Beam type, load type, geometry, stiffness and load

    Returns:
    --------
    AnalysisResult
        Five arrays of length num_points + 1, the peak absolute value of
        each response, and EI

    Raises:
    -------
    InvalidConfiguration
        See validate_configuration
    """
    EI = validate_configuration(config)
    L = config.L
    n = config.num_points
    a = config.load_position

    x = []
    deflection = []
    slope = []
    moment = []
    shear = []

    for i in range(n + 1):
        xi = (i / n) * L
        w, theta, M, V = solve_station(
            config.beam_type, xi, L, EI, config.load_type,
            config.P, config.q, config.M0, a,
        )
        x.append(xi)
        deflection.append(w)
        slope.append(theta)
        moment.append(M)
        shear.append(V)

    deflection = np.array(deflection, dtype=float)
    slope = np.array(slope, dtype=float)
    moment = np.array(moment, dtype=float)
    shear = np.array(shear, dtype=float)

    return AnalysisResult(
        x=np.array(x, dtype=float),
        deflection=deflection,
        slope=slope,
        moment=moment,
        shear=shear,
        max_deflection=float(np.max(np.abs(deflection))),
        max_slope=float(np.max(np.abs(slope))),
        max_moment=float(np.max(np.abs(moment))),
        max_shear=float(np.max(np.abs(shear))),
        EI=EI,
    )


def stress(M: float, y: float, I: float) -> float:
    """Bending stress sigma = M·y / I at distance y from the neutral axis (Pa)."""
    return M * y / I


def max_stress(max_moment: float, h: float, I: float) -> float:
    """Extreme-fiber stress |M|·(h/2) / I for a rectangular section (Pa)."""
    return abs(max_moment * (h / 2) / I)

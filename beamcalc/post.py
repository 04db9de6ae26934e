# display summary, colour ratios, number formatting, tabular export

import math
from dataclasses import dataclass
from typing import Dict

import numpy as np
import pandas as pd

from .analysis import max_stress
from .model import AnalysisResult
from .section import RectangularSection


@dataclass(frozen=True)
class BeamSummary:
    """Scalar results shown next to the diagrams."""
    max_deflection: float   # m
    max_stress: float       # Pa, extreme fiber
    max_slope_deg: float    # degrees
    max_moment: float       # N·m
    max_shear: float        # N
    I: float                # m⁴
    EI: float               # N·m²


def summarize(result: AnalysisResult, section: RectangularSection) -> BeamSummary:
    """
    Reduce an analysis to the values a results panel displays.

    Stress uses the section height for the extreme-fiber distance, so the
    section must be the one the analysis I came from.
    """
    I = section.I
    return BeamSummary(
        max_deflection=result.max_deflection,
        max_stress=max_stress(result.max_moment, section.h, I),
        max_slope_deg=math.degrees(result.max_slope),
        max_moment=result.max_moment,
        max_shear=result.max_shear,
        I=I,
        EI=result.EI,
    )


def deflection_ratio(result: AnalysisResult) -> np.ndarray:
    """
    Per-sample |w| / max|w| in [0, 1], used to colour the deformed beam.

    An undeflected beam gives all zeros.
    """
    peak = result.max_deflection or 1.0
    return np.abs(result.deflection) / peak


_PREFIXES = (
    (1e9, "G", 2),
    (1e6, "M", 2),
    (1e3, "k", 2),
    (1.0, "", 3),
    (1e-3, "m", 3),
    (1e-6, "μ", 3),
)


def format_engineering(value: float, unit: str) -> str:
    """
    Format a value with an SI prefix, e.g. 12345.0, "N" -> "12.35 kN".

    Values below 1e-6 in magnitude fall back to exponent notation.
    """
    magnitude = abs(value)
    for scale, prefix, digits in _PREFIXES:
        if magnitude >= scale:
            if prefix:
                return f"{value / scale:.{digits}f} {prefix}{unit}"
            return f"{value:.{digits}f} {unit}"
    return f"{value:.2e} {unit}"


def format_summary(summary: BeamSummary) -> Dict[str, str]:
    """Display strings for every field of a BeamSummary."""
    return {
        "max_deflection": format_engineering(summary.max_deflection, "m"),
        "max_stress": format_engineering(summary.max_stress, "Pa"),
        "max_slope": f"{summary.max_slope_deg:.4f}°",
        "max_moment": format_engineering(summary.max_moment, "N·m"),
        "max_shear": format_engineering(summary.max_shear, "N"),
        "moment_of_inertia": format_engineering(summary.I, "m⁴"),
    }


def results_table(result: AnalysisResult) -> pd.DataFrame:
    """One row per sample: x, deflection, slope, moment, shear."""
    return pd.DataFrame({
        "x": result.x,
        "deflection": result.deflection,
        "slope": result.slope,
        "moment": result.moment,
        "shear": result.shear,
    })

# beamcalc/errors.py
"""Exceptions raised by the analysis engine."""


class InvalidConfiguration(ValueError):
    """Raised when geometry or stiffness is degenerate (EI <= 0, L <= 0, num_points < 1)."""
    pass

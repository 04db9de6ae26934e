# beamcalc/section.py
"""
RECTANGULAR CROSS-SECTION
=========================

The only section shape the engine models:

        ┌─────b─────┐
        │           │  ┬
        │ ─ ─ N.A. ─│  h
        │           │  ┴
        └───────────┘

    A = b × h
    I = b × h³ / 12      (about the horizontal neutral axis)
    c = h / 2            (distance to the extreme fiber)
    S = I / c = b × h² / 6
"""

from dataclasses import dataclass

from .errors import InvalidConfiguration


def moment_of_inertia(b: float, h: float) -> float:
    """
    Second moment of area of a b × h rectangle, I = b·h³/12 (m⁴).

    Raises:
        InvalidConfiguration: if b <= 0 or h <= 0
    """
    if not (b > 0.0 and h > 0.0):
        raise InvalidConfiguration(f"Section dimensions must be positive (b={b}, h={h}).")
    return (b * h**3) / 12


@dataclass(frozen=True)
class RectangularSection:
    """Solid rectangular section, width b and height h in meters."""
    b: float
    h: float

    def __post_init__(self):
        if not (self.b > 0.0 and self.h > 0.0):
            raise InvalidConfiguration(
                f"Section dimensions must be positive (b={self.b}, h={self.h})."
            )

    @property
    def A(self) -> float:
        return self.b * self.h

    @property
    def I(self) -> float:
        return moment_of_inertia(self.b, self.h)

    @property
    def c(self) -> float:
        return self.h / 2

    @property
    def S(self) -> float:
        return self.I / self.c

# beamcalc/solvers.py
"""
CLOSED-FORM BEAM SOLUTIONS
==========================

One function per boundary condition. Each evaluates the response at a
single station x and returns (w, theta, M, V):

    w     : deflection (m), positive in the direction of the load
    theta : slope dw/dx (rad)
    M     : bending moment (N·m), positive sagging, EI·w'' = -M
    V     : shear force (N), V = dM/dx

CONCENTRATED LOADS:
-------------------
A point load or point moment at x = a makes the solution piecewise.
Left of the load the expression is written in x, right of it in the
distance from the right end, x_R = L - x. Stations with x == a take the
left branch.

    P or M0
       ↓
    ●──────────●──────────●
    0          a          L
    |<-- x  -->|<-- x_R ->|

A full-span UDL needs no split: every quantity is one polynomial in x.

UNSUPPORTED LOAD TYPES:
-----------------------
A load type a solver does not recognise gives (0, 0, 0, 0).
"""

from typing import Callable, Dict, Tuple

from .model import BeamType, LoadType


Response = Tuple[float, float, float, float]

ZERO_RESPONSE: Response = (0.0, 0.0, 0.0, 0.0)


def simply_supported(x, L, EI, load_type, P, q, M0, a) -> Response:
    """Pinned at x = 0, roller at x = L."""
    b = L - a

    if load_type == LoadType.POINT:
        if x <= a:
            Pb = P * b
            w = (Pb * x) / (6 * L * EI) * (L * L - b * b - x * x)
            theta = Pb / (6 * L * EI) * (L * L - b * b - 3 * x * x)
            M = (Pb * x) / L
            V = Pb / L
        else:
            Pa = P * a
            xR = L - x
            w = (Pa * xR) / (6 * L * EI) * (L * L - a * a - xR * xR)
            theta = -Pa / (6 * L * EI) * (L * L - a * a - 3 * xR * xR)
            M = (Pa * xR) / L
            V = -Pa / L
        return w, theta, M, V

    if load_type == LoadType.DISTRIBUTED:
        w = (q * x) / (24 * EI) * (L**3 - 2 * L * x * x + x**3)
        theta = q / (24 * EI) * (L**3 - 6 * L * x * x + 4 * x**3)
        M = (q * x) / 2 * (L - x)
        V = q * (L / 2 - x)
        return w, theta, M, V

    if load_type == LoadType.MOMENT:
        # Reactions ±M0/L: shear is the same on both sides, moment drops by M0 at a
        V = M0 / L
        if x <= a:
            w = (M0 * x) / (6 * L * EI) * (L * L - 3 * b * b - x * x)
            theta = M0 / (6 * L * EI) * (L * L - 3 * b * b - 3 * x * x)
            M = (M0 * x) / L
        else:
            xR = L - x
            w = -(M0 * xR) / (6 * L * EI) * (L * L - 3 * a * a - xR * xR)
            theta = M0 / (6 * L * EI) * (L * L - 3 * a * a - 3 * xR * xR)
            M = (M0 * x) / L - M0
        return w, theta, M, V

    return ZERO_RESPONSE


def fixed_fixed(x, L, EI, load_type, P, q, M0, a) -> Response:
    """Both ends clamped (w = theta = 0 at x = 0 and x = L)."""
    b = L - a
    L3 = L**3

    if load_type == LoadType.POINT:
        if x <= a:
            R_left = P * b * b * (3 * a + b) / L3
            M_left = P * a * b * b / (L * L)     # hogging fixed-end moment
            w = (P * b * b * x * x) / (6 * EI * L3) * (3 * a * L - 3 * a * x - b * x)
            theta = (P * b * b * x) / (2 * EI * L3) * (2 * a * L - 3 * a * x - b * x)
            M = -M_left + R_left * x
            V = R_left
        else:
            xR = L - x
            R_right = P * a * a * (3 * b + a) / L3
            M_right = P * a * a * b / (L * L)
            w = (P * a * a * xR * xR) / (6 * EI * L3) * (3 * b * L - 3 * b * xR - a * xR)
            theta = -(P * a * a * xR) / (2 * EI * L3) * (2 * b * L - 3 * b * xR - a * xR)
            M = -M_right + R_right * xR
            V = -R_right
        return w, theta, M, V

    if load_type == LoadType.DISTRIBUTED:
        w = (q * x * x) / (24 * EI) * (L - x) * (L - x)
        theta = (q * x) / (12 * EI) * (L - x) * (L - 2 * x)
        M = (q / 12) * (6 * L * x - 6 * x * x - L * L)
        V = q * (L / 2 - x)
        return w, theta, M, V

    if load_type == LoadType.MOMENT:
        # Simplified polynomial, not the exact clamped-clamped point-moment
        # solution. Independent of a.
        w = (M0 * x * x) / (6 * EI * L * L) * (3 * L - 4 * x)
        theta = (M0 * x) / (2 * EI * L * L) * (L - 2 * x)
        M = M0 * (1 - 4 * x / L + 3 * x * x / (L * L))
        V = M0 * 6 / (L * L) * (1 - 2 * x / L)
        return w, theta, M, V

    return ZERO_RESPONSE


def cantilever(x, L, EI, load_type, P, q, M0, a) -> Response:
    """Clamped at x = 0, free at x = L. The moment load acts at the free end."""
    if load_type == LoadType.POINT:
        if x <= a:
            w = (P * x * x) / (6 * EI) * (3 * a - x)
            theta = (P * x) / (2 * EI) * (2 * a - x)
            M = -P * (a - x)
            V = P
        else:
            # Unloaded beyond a: straight line, no internal forces
            w = (P * a * a) / (6 * EI) * (3 * x - a)
            theta = (P * a * a) / (2 * EI)
            M = 0.0
            V = 0.0
        return w, theta, M, V

    if load_type == LoadType.DISTRIBUTED:
        w = (q * x * x) / (24 * EI) * (x * x - 4 * L * x + 6 * L * L)
        theta = (q * x) / (6 * EI) * (x * x - 3 * L * x + 3 * L * L)
        M = -(q / 2) * (L - x) * (L - x)
        V = q * (L - x)
        return w, theta, M, V

    if load_type == LoadType.MOMENT:
        w = (M0 * x * x) / (2 * EI)
        theta = (M0 * x) / EI
        M = -M0
        V = 0.0
        return w, theta, M, V

    return ZERO_RESPONSE


SOLVERS: Dict[BeamType, Callable[..., Response]] = {
    BeamType.SIMPLY_SUPPORTED: simply_supported,
    BeamType.FIXED_FIXED: fixed_fixed,
    BeamType.CANTILEVER: cantilever,
}


def solve_station(beam_type, x, L, EI, load_type, P, q, M0, a) -> Response:
    """Evaluate one station with the solver for beam_type, or zeros if there is none."""
    try:
        beam_type = BeamType(beam_type)
    except ValueError:
        return ZERO_RESPONSE
    return SOLVERS[beam_type](x, L, EI, load_type, P, q, M0, a)

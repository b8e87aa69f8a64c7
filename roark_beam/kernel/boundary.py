# roark_beam/kernel/boundary.py
"""
BOUNDARY CONDITIONS AT END A
============================

For a single point load P at x = a, this module returns the four left-end
quantities Roark's general equations need: reaction Ra, moment Ma, slope θa
and deflection ya.

CASES:
------
Six restraint pairs are tabulated directly (Roark Table 8.1, 1a to 1f):

    Case   A-B              Code
    1a     Free-Fixed       41
    1b     Guided-Fixed     31
    1c     Simple-Fixed     21
    1d     Fixed-Fixed      11
    1e     Simple-Simple    22
    1f     Guided-Simple    32

The remaining four valid pairs are the same beams seen from the other end:

    Fixed-Free 14, Fixed-Guided 13, Fixed-Simple 12, Simple-Guided 23

REFLECTION:
-----------
With ξ = L - x the deflected shape is unchanged, y(x) = y'(ξ). Differentiating
once flips the sign, so slope and shear change sign; differentiating twice
does not, so moment keeps its sign. End A of the original beam is end B of
the reflected one, which gives:

    Ra = Rb'        (upward reaction at B' = P - Ra')
    Ma = M'(L)
    θa = -θ'(L)
    ya = y'(L)

where the primed beam has the restraints swapped and the load at a' = L - a.
"""

import math
from dataclasses import dataclass, replace
from typing import Optional

from .errors import InvalidConfigurationError, InvalidLoadError, InvalidRestraintError
from .restraints import CodeLike, Restraint, RestraintCode, as_restraint_code
from .response import point_load_moment, point_load_slope, point_load_deflection


@dataclass(frozen=True)
class BoundaryConditions:
    """Left-end (x = 0) values for one point load."""
    Ra: float        # Reaction force, positive upward
    Ma: float        # Internal bending moment, positive sagging
    theta_a: float   # Slope
    y_a: float       # Deflection, positive upward


@dataclass(frozen=True)
class EndValues:
    """Right-end (x = L) values for one point load."""
    R: float         # Reaction force, positive upward
    M: float         # Internal bending moment at x = L
    theta: float
    y: float


def _check_inputs(P: float, E: float, I: float, L: float, a: float) -> None:
    for name, value in (("E", E), ("I", I), ("L", L)):
        if not math.isfinite(value) or value <= 0:
            raise InvalidConfigurationError(f"{name} must be positive and finite, got {value}")
    if not (0.0 <= a <= L):
        raise InvalidLoadError((P, a), L)


def _resolve_base(code: RestraintCode, P: float, E: float, I: float, L: float, a: float) -> BoundaryConditions:
    """Directly tabulated cases, Roark Table 8.1 1a-1f."""
    EI = E * I
    b = L - a
    pair = (code.end_a, code.end_b)

    if pair == (Restraint.FREE, Restraint.FIXED):
        return BoundaryConditions(
            Ra=0.0,
            Ma=0.0,
            theta_a=P * b**2 / (2 * EI),
            y_a=-P / (6 * EI) * (2 * L**3 - 3 * L**2 * a + a**3),
        )

    if pair == (Restraint.GUIDED, Restraint.FIXED):
        return BoundaryConditions(
            Ra=0.0,
            Ma=P * b**2 / (2 * L),
            theta_a=0.0,
            y_a=-P / (12 * EI) * b**2 * (L + 2 * a),
        )

    if pair == (Restraint.SIMPLE, Restraint.FIXED):
        # One redundant: zero slope and deflection at B fix Ra and θa
        return BoundaryConditions(
            Ra=P * b**2 * (2 * L + a) / (2 * L**3),
            Ma=0.0,
            theta_a=-P * a * b**2 / (4 * EI * L),
            y_a=0.0,
        )

    if pair == (Restraint.FIXED, Restraint.FIXED):
        # Two redundants: zero slope and deflection at B fix Ra and Ma
        return BoundaryConditions(
            Ra=P * b**2 * (L + 2 * a) / L**3,
            Ma=-P * a * b**2 / L**2,
            theta_a=0.0,
            y_a=0.0,
        )

    if pair == (Restraint.SIMPLE, Restraint.SIMPLE):
        return BoundaryConditions(
            Ra=P * b / L,
            Ma=0.0,
            theta_a=-P * a * (2 * L - a) * b / (6 * EI * L),
            y_a=0.0,
        )

    if pair == (Restraint.GUIDED, Restraint.SIMPLE):
        # Guided end carries no shear; M(L) = 0 gives Ma, y(L) = 0 gives ya
        return BoundaryConditions(
            Ra=0.0,
            Ma=P * b,
            theta_a=0.0,
            y_a=-P * b / (6 * EI) * (2 * L**2 + 2 * a * L - a**2),
        )

    raise InvalidRestraintError(code)


def _far_end(bc: BoundaryConditions, P: float, E: float, I: float, L: float, a: float) -> EndValues:
    return EndValues(
        R=P - bc.Ra,
        M=point_load_moment(L, a, P, bc.Ra, bc.Ma),
        theta=point_load_slope(L, a, P, bc.Ra, bc.Ma, bc.theta_a, E, I),
        y=point_load_deflection(L, a, P, bc.Ra, bc.Ma, bc.theta_a, bc.y_a, E, I),
    )


def _clamp_known_zeros(end: Restraint, bc: BoundaryConditions) -> BoundaryConditions:
    # Reflection reproduces these zeros only to round-off
    if end is Restraint.FIXED:
        return replace(bc, theta_a=0.0, y_a=0.0)
    if end is Restraint.SIMPLE:
        return replace(bc, Ma=0.0, y_a=0.0)
    return bc


def resolve_boundary_conditions(
    code: CodeLike,
    P: float,
    E: float,
    I: float,
    L: float,
    a: float,
) -> BoundaryConditions:
    """
    Left-end reaction, moment, slope and deflection for one point load.

    Args:
        code: End restraint pair (RestraintCode, two-digit int such as 41,
            or a string such as "free-fixed")
        P: Load magnitude, positive downward
        E: Elastic modulus
        I: Second moment of area
        L: Beam length
        a: Load location from end A, 0 <= a <= L

    Returns:
        BoundaryConditions(Ra, Ma, theta_a, y_a)

    Raises:
        InvalidRestraintError: code is not one of the ten valid pairs
        InvalidConfigurationError: E, I or L not positive
        InvalidLoadError: a outside [0, L]
    """
    code = as_restraint_code(code)
    _check_inputs(P, E, I, L, a)

    if not code.is_mirrored:
        return _resolve_base(code, P, E, I, L, a)

    a_reflected = L - a
    reflected = _resolve_base(code.swapped(), P, E, I, L, a_reflected)
    far = _far_end(reflected, P, E, I, L, a_reflected)

    bc = BoundaryConditions(
        Ra=far.R,
        Ma=far.M,
        theta_a=-far.theta,
        y_a=far.y,
    )
    return _clamp_known_zeros(code.end_a, bc)


def resolve_far_end(
    code: CodeLike,
    P: float,
    E: float,
    I: float,
    L: float,
    a: float,
    bc: Optional[BoundaryConditions] = None,
) -> EndValues:
    """
    Right-end reaction, moment, slope and deflection for one point load.

    The reaction follows from vertical equilibrium (Rb = P - Ra); moment,
    slope and deflection are the response equations evaluated at x = L.
    Pass ``bc`` when the left-end conditions for this load are already known.
    """
    if bc is None:
        bc = resolve_boundary_conditions(code, P, E, I, L, a)
    return _far_end(bc, P, E, I, L, a)

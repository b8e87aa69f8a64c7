# roark_beam/kernel/response.py
"""
POINT-LOAD RESPONSE
===================

Roark's general beam equations for a concentrated load W = P at x = a
(Table 8.1, case 1):

    V(x) = Ra - P<x-a>^0
    M(x) = Ma + Ra*x - P<x-a>^1
    θ(x) = θa + Ma*x/EI + Ra*x²/(2EI) - P/(2EI)<x-a>^2
    y(x) = ya + θa*x + Ma*x²/(2EI) + Ra*x³/(6EI) - P/(6EI)<x-a>^3

Each line is the integral of the one above it (divided by EI going from
moment to slope). The step function switches the load term on past x = a,
which gives the jump in shear and the kink in moment at the load.

SIGN CONVENTIONS (Roark):
-------------------------
- P positive downward
- Ra positive upward
- Positive M causes compression on the top fiber (sagging)
- y positive upward, θ = dy/dx
"""

from dataclasses import dataclass

from .singularity import step


@dataclass(frozen=True)
class CrossSectionResponse:
    """Shear, moment, slope and deflection at one cross-section."""
    shear: float
    moment: float
    slope: float
    deflection: float

    def __add__(self, other: "CrossSectionResponse") -> "CrossSectionResponse":
        return CrossSectionResponse(
            shear=self.shear + other.shear,
            moment=self.moment + other.moment,
            slope=self.slope + other.slope,
            deflection=self.deflection + other.deflection,
        )


ZERO_RESPONSE = CrossSectionResponse(0.0, 0.0, 0.0, 0.0)


def point_load_shear(x: float, a: float, P: float, Ra: float) -> float:
    return Ra - P * step(x, a, 0)


def point_load_moment(x: float, a: float, P: float, Ra: float, Ma: float) -> float:
    return Ma + Ra * x - P * step(x, a, 1)


def point_load_slope(
    x: float, a: float, P: float,
    Ra: float, Ma: float, theta_a: float,
    E: float, I: float,
) -> float:
    EI = E * I
    return (theta_a
            + Ma * x / EI
            + Ra * x**2 / (2 * EI)
            - P / (2 * EI) * step(x, a, 2))


def point_load_deflection(
    x: float, a: float, P: float,
    Ra: float, Ma: float, theta_a: float, y_a: float,
    E: float, I: float,
) -> float:
    EI = E * I
    return (y_a
            + theta_a * x
            + Ma * x**2 / (2 * EI)
            + Ra * x**3 / (6 * EI)
            - P / (6 * EI) * step(x, a, 3))


def point_load_response(
    x: float, a: float, P: float,
    Ra: float, Ma: float, theta_a: float, y_a: float,
    E: float, I: float,
) -> CrossSectionResponse:
    """
    Evaluate all four response quantities at x for one point load.

    Args:
        x: Cross-section coordinate measured from end A
        a: Load location measured from end A
        P: Load magnitude (positive downward)
        Ra, Ma, theta_a, y_a: Left-end values from resolve_boundary_conditions
        E: Elastic modulus
        I: Second moment of area

    Returns:
        CrossSectionResponse at x
    """
    return CrossSectionResponse(
        shear=point_load_shear(x, a, P, Ra),
        moment=point_load_moment(x, a, P, Ra, Ma),
        slope=point_load_slope(x, a, P, Ra, Ma, theta_a, E, I),
        deflection=point_load_deflection(x, a, P, Ra, Ma, theta_a, y_a, E, I),
    )

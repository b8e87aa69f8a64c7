# roark_beam/superpose.py
"""
SUPERPOSITION OVER POINT LOADS
==============================

The governing equation EI y'''' = q(x) is linear, so the response to several
point loads is the sum of the responses to each load on its own. Boundary
conditions are resolved once per load; each section then sums the per-load
contributions.

Loads are summed in the order given. Floating-point addition is not
associative, so a different order can change the last bits of a result
(never its correctness); keeping the order fixed keeps runs reproducible.

GRID:
-----
Sections are numbered 1..N and evenly spaced from end A to end B:

    x_i = (i - 1) / (N - 1) * L,   so x_1 = 0 and x_N = L
"""

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from .kernel import (
    BoundaryConditions,
    CrossSectionResponse,
    InvalidConfigurationError,
    ZERO_RESPONSE,
    as_restraint_code,
    point_load_response,
    resolve_boundary_conditions,
)
from .kernel.restraints import CodeLike
from .model import BeamSpec, PointLoad


@dataclass(frozen=True)
class SectionResult:
    """Superposed response at one section of the grid."""
    section: int        # 1-based section number
    x: float            # Distance from end A
    shear: float
    moment: float
    slope: float
    deflection: float


def _check_section_count(section_count: int) -> None:
    if isinstance(section_count, bool) or not isinstance(section_count, int):
        raise InvalidConfigurationError(
            f"section count must be an integer, got {section_count!r}"
        )
    if section_count < 2:
        raise InvalidConfigurationError(
            f"section count must be at least 2, got {section_count}"
        )


def section_coordinate(section_number: int, length: float, section_count: int) -> float:
    """
    Coordinate of one section (1-based).

    >>> section_coordinate(1, 360.0, 10)
    0.0
    >>> section_coordinate(10, 360.0, 10)
    360.0
    """
    _check_section_count(section_count)
    if not 1 <= section_number <= section_count:
        raise InvalidConfigurationError(
            f"section number {section_number} out of range [1, {section_count}]"
        )
    return (section_number - 1) * length / (section_count - 1)


def discretization_grid(length: float, section_count: int) -> List[float]:
    """All N section coordinates from 0 to L inclusive."""
    _check_section_count(section_count)
    return [section_coordinate(i, length, section_count) for i in range(1, section_count + 1)]


def resolve_all(
    beam: BeamSpec,
    code: CodeLike,
    loads: Iterable[PointLoad],
) -> List[Tuple[PointLoad, BoundaryConditions]]:
    """
    Validate every load, then resolve boundary conditions once per load.

    Raises:
        InvalidRestraintError: Unsupported restraint pair
        InvalidLoadError: First load found outside [0, L]
    """
    code = as_restraint_code(code)
    loads = list(loads)
    for load in loads:
        load.check_location(beam.L)

    return [
        (load, resolve_boundary_conditions(code, load.P, beam.E, beam.I, beam.L, load.a))
        for load in loads
    ]


def point_load_response_for(
    code: CodeLike,
    beam: BeamSpec,
    load: PointLoad,
    x: float,
) -> CrossSectionResponse:
    """Resolve one load's boundary conditions and evaluate it at x."""
    load.check_location(beam.L)
    bc = resolve_boundary_conditions(code, load.P, beam.E, beam.I, beam.L, load.a)
    return point_load_response(x, load.a, load.P, bc.Ra, bc.Ma, bc.theta_a, bc.y_a, beam.E, beam.I)


def _sum_at(x: float, beam: BeamSpec, resolved) -> CrossSectionResponse:
    total = ZERO_RESPONSE
    for load, bc in resolved:
        total = total + point_load_response(
            x, load.a, load.P, bc.Ra, bc.Ma, bc.theta_a, bc.y_a, beam.E, beam.I
        )
    return total


def superpose(
    beam: BeamSpec,
    code: CodeLike,
    loads: Iterable[PointLoad],
    section_count: int,
) -> List[SectionResult]:
    """
    Summed response of all loads at each of N evenly spaced sections.

    Args:
        beam: Beam properties (E, I, L)
        code: End restraint pair
        loads: Point loads; order only affects floating-point summation order
        section_count: Number of sections N (>= 2)

    Returns:
        N SectionResult values, section 1 at x = 0 and section N at x = L

    Raises:
        InvalidConfigurationError: section_count < 2
        InvalidRestraintError: Unsupported restraint pair
        InvalidLoadError: A load lies outside the beam
    """
    grid = discretization_grid(beam.L, section_count)
    resolved = resolve_all(beam, code, loads)

    results = []
    for i, x in enumerate(grid, start=1):
        r = _sum_at(x, beam, resolved)
        results.append(SectionResult(
            section=i,
            x=x,
            shear=r.shear,
            moment=r.moment,
            slope=r.slope,
            deflection=r.deflection,
        ))
    return results


def superpose_at(
    beam: BeamSpec,
    code: CodeLike,
    loads: Iterable[PointLoad],
    x: float,
) -> CrossSectionResponse:
    """Summed response of all loads at a single coordinate x."""
    if not 0.0 <= x <= beam.L:
        raise InvalidConfigurationError(f"x = {x} lies outside the beam [0, {beam.L}]")
    return _sum_at(x, beam, resolve_all(beam, code, loads))

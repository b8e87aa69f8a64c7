# roark_beam/beam.py
"""
SIMPLE BEAM: DIAGRAMS FROM THE CLOSED-FORM KERNEL
=================================================

A SimpleBeam bundles a beam, its restraint pair and its point loads, and
turns the kernel's pure functions into diagrams sampled on a grid of
sections. It adds no engineering of its own: every number comes from
superpose() or the boundary resolver.

The grid is recomputed when the number of sections changes and cached
otherwise.

Units must be consistent (for example kip, inch, ksi).

Example:
--------
>>> beam = SimpleBeam(29000, 100, 360, [(1, 180)])
>>> float(beam.shear()[0])
0.5
"""

from typing import Dict, Iterable, List, Optional, Tuple, Union

import numpy as np
import pandas as pd

from .config import CONFIG
from .kernel import RestraintCode, as_restraint_code, resolve_far_end
from .kernel.restraints import CodeLike
from .model import BeamSpec, PointLoad
from .superpose import SectionResult, resolve_all, section_coordinate, superpose

LoadLike = Union[PointLoad, Tuple[float, float]]


def _as_point_load(load: LoadLike) -> PointLoad:
    if isinstance(load, PointLoad):
        return load
    P, a = load
    return PointLoad(P=float(P), a=float(a))


class SimpleBeam:
    """
    Beam with point loads and a pair of end restraints.

    Parameters:
    -----------
    E : float
        Elastic modulus (force / length²)
    I : float
        Second moment of area (length⁴)
    L : float
        Length
    point_loads : iterable
        PointLoad objects or (P, a) pairs, P positive downward, a from end A
    code : RestraintCode, int or str, optional
        End restraints, e.g. 22 or "simple-simple" (default from CONFIG)
    number_of_sections : int, optional
        Analysis sections along the beam (default from CONFIG)
    """

    def __init__(
        self,
        E: float,
        I: float,
        L: float,
        point_loads: Iterable[LoadLike] = (),
        code: Optional[CodeLike] = None,
        number_of_sections: Optional[int] = None,
    ):
        self.spec = BeamSpec(E=E, I=I, L=L)
        self.point_loads: Tuple[PointLoad, ...] = tuple(_as_point_load(p) for p in point_loads)
        self.code: RestraintCode = as_restraint_code(
            CONFIG.default_restraint_code if code is None else code
        )
        self._number_of_sections = CONFIG.default_number_of_sections
        self._results: Optional[List[SectionResult]] = None

        # Fail on construction rather than on first use
        resolve_all(self.spec, self.code, self.point_loads)
        if number_of_sections is not None:
            self.number_of_sections = number_of_sections

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------
    @property
    def elastic_modulus(self) -> float:
        return self.spec.E

    @property
    def moment_of_inertia(self) -> float:
        return self.spec.I

    @property
    def length(self) -> float:
        return self.spec.L

    @property
    def number_of_sections(self) -> int:
        return self._number_of_sections

    @number_of_sections.setter
    def number_of_sections(self, value: int) -> None:
        # Validates before anything is changed
        section_coordinate(1, self.length, value)
        self._number_of_sections = value
        self._results = None

    # ------------------------------------------------------------------
    # Grid
    # ------------------------------------------------------------------
    def x_coord(self, section_number: int) -> float:
        """Coordinate of section ``section_number`` (1 -> 0, N -> L)."""
        return section_coordinate(section_number, self.length, self.number_of_sections)

    def x_coords(self) -> np.ndarray:
        return np.array([r.x for r in self.results()], dtype=float)

    # ------------------------------------------------------------------
    # Diagrams
    # ------------------------------------------------------------------
    def results(self) -> List[SectionResult]:
        if self._results is None:
            self._results = superpose(self.spec, self.code, self.point_loads, self.number_of_sections)
        return self._results

    def shear(self) -> np.ndarray:
        """
        Shear at each section. At a section that coincides with a load the
        value just to the left of the load is reported.
        """
        return np.array([r.shear for r in self.results()], dtype=float)

    def bending_moment(self) -> np.ndarray:
        return np.array([r.moment for r in self.results()], dtype=float)

    def slope(self) -> np.ndarray:
        return np.array([r.slope for r in self.results()], dtype=float)

    def deflection(self) -> np.ndarray:
        return np.array([r.deflection for r in self.results()], dtype=float)

    # ------------------------------------------------------------------
    # Reactions and summaries
    # ------------------------------------------------------------------
    def reactions(self) -> Dict[str, Dict[str, float]]:
        """
        End values at A and B summed over all loads.

        Returns:
        --------
        Dict[str, Dict[str, float]]
            {'A': {'R', 'M', 'theta', 'y'}, 'B': {'R', 'M', 'theta', 'y'}}
            R is the upward reaction, M the internal bending moment at the end.
        """
        E, I, L = self.spec.E, self.spec.I, self.spec.L
        end_a = {'R': 0.0, 'M': 0.0, 'theta': 0.0, 'y': 0.0}
        end_b = {'R': 0.0, 'M': 0.0, 'theta': 0.0, 'y': 0.0}

        for load, bc in resolve_all(self.spec, self.code, self.point_loads):
            far = resolve_far_end(self.code, load.P, E, I, L, load.a, bc=bc)
            end_a['R'] += bc.Ra
            end_a['M'] += bc.Ma
            end_a['theta'] += bc.theta_a
            end_a['y'] += bc.y_a
            end_b['R'] += far.R
            end_b['M'] += far.M
            end_b['theta'] += far.theta
            end_b['y'] += far.y

        return {'A': end_a, 'B': end_b}

    def summary(self) -> Dict[str, float]:
        """Maximum absolute value of each diagram and where it occurs."""
        x = self.x_coords()
        out = {}
        for name, values in (
            ('shear', self.shear()),
            ('moment', self.bending_moment()),
            ('slope', self.slope()),
            ('deflection', self.deflection()),
        ):
            idx = int(np.argmax(np.abs(values)))
            out[f'max_{name}'] = float(values[idx])
            out[f'x_max_{name}'] = float(x[idx])
        return out

    def to_dataframe(self) -> pd.DataFrame:
        """One row per section: section, x, shear, moment, slope, deflection."""
        return pd.DataFrame(
            [
                {
                    'section': r.section,
                    'x': r.x,
                    'shear': r.shear,
                    'moment': r.moment,
                    'slope': r.slope,
                    'deflection': r.deflection,
                }
                for r in self.results()
            ],
            columns=['section', 'x', 'shear', 'moment', 'slope', 'deflection'],
        )

    def print_to_console(self) -> None:
        print("Beam Properties")
        print("=" * 50)
        print(f"The elastic modulus is {self.elastic_modulus}")
        print(f"The moment of inertia is {self.moment_of_inertia}")
        print(f"The beam is {self.length} units long")
        print(f"End restraints (A-B): {self.code} (code {int(self.code)})")
        print(f"Number of sections: {self.number_of_sections}")
        print(f"Point loads: {len(self.point_loads)}")
        for i, load in enumerate(self.point_loads, start=1):
            print(f"  {i}. P = {load.P} at a = {load.a}")

    def __repr__(self) -> str:
        return (f"SimpleBeam(E={self.spec.E}, I={self.spec.I}, L={self.spec.L}, "
                f"code={int(self.code)}, loads={len(self.point_loads)})")

# roark_beam - Closed-form beam response for point loads
"""
ROARK_BEAM: Shear, Moment, Slope and Deflection of Elastic Beams
================================================================

Closed-form solutions from Roark's Formulas for Stress and Strain (7th ed.),
Table 8.1, for straight elastic beams carrying transverse point loads, with
any of the ten statically valid end-restraint pairs.

ARCHITECTURE:
-------------
    kernel/         Pure functions: step function, restraint codes,
                    boundary conditions at end A, point-load response
    model.py        BeamSpec and PointLoad
    superpose.py    Section grid and superposition over loads
    beam.py         SimpleBeam: sampled diagrams, reactions, DataFrame export
    viz.py          Diagram plots
    config.py       Defaults
"""

from .kernel import (
    InvalidConfigurationError,
    InvalidLoadError,
    InvalidRestraintError,
    Restraint,
    RestraintCode,
    VALID_CODES,
    BoundaryConditions,
    EndValues,
    CrossSectionResponse,
    step,
    resolve_boundary_conditions,
    resolve_far_end,
    point_load_response,
)
from .model import BeamSpec, PointLoad
from .superpose import (
    SectionResult,
    discretization_grid,
    point_load_response_for,
    section_coordinate,
    superpose,
    superpose_at,
)
from .beam import SimpleBeam

__version__ = "0.1.0"

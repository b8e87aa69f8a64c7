# roark_beam/kernel - Closed-form point-load solutions
"""
KERNEL: ROARK TABLE 8.1 FOR POINT LOADS
=======================================

Everything in here is a pure function of its arguments:

- singularity.py   step(x, a, n), the <x - a>^n bracket
- restraints.py    Fixed / Simple / Guided / Free and the ten valid pairs
- boundary.py      End-A values (Ra, Ma, θa, ya), six tabulated cases plus
                   four obtained by reflecting the beam end-for-end
- response.py      Shear, moment, slope and deflection at any section
- errors.py        InvalidRestraintError, InvalidLoadError,
                   InvalidConfigurationError
"""

from .errors import InvalidConfigurationError, InvalidLoadError, InvalidRestraintError
from .singularity import step
from .restraints import Restraint, RestraintCode, VALID_CODES, as_restraint_code
from .boundary import BoundaryConditions, EndValues, resolve_boundary_conditions, resolve_far_end
from .response import (
    CrossSectionResponse,
    ZERO_RESPONSE,
    point_load_shear,
    point_load_moment,
    point_load_slope,
    point_load_deflection,
    point_load_response,
)

__all__ = [
    'InvalidConfigurationError',
    'InvalidLoadError',
    'InvalidRestraintError',
    'step',
    'Restraint',
    'RestraintCode',
    'VALID_CODES',
    'as_restraint_code',
    'BoundaryConditions',
    'EndValues',
    'resolve_boundary_conditions',
    'resolve_far_end',
    'CrossSectionResponse',
    'ZERO_RESPONSE',
    'point_load_shear',
    'point_load_moment',
    'point_load_slope',
    'point_load_deflection',
    'point_load_response',
]

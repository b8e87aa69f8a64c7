# roark_beam/config.py
"""
Analysis configuration and defaults.
"""

from dataclasses import dataclass
from typing import Dict


@dataclass
class AnalysisConfig:
    """Defaults shared by SimpleBeam, the plots and the demo scripts."""

    # Number of analysis sections along the beam (segments = sections - 1)
    default_number_of_sections: int = 10

    # Restraint pair used when a SimpleBeam is built without one
    default_restraint_code: int = 22  # Simple-Simple

    # Sections sampled per diagram when plotting
    diagram_sections: int = 201

    # Decimal places in console tables
    display_precision: int = 6

    # Diagram colours
    colors: Dict[str, str] = None

    def __post_init__(self):
        if self.colors is None:
            self.colors = {
                'shear': '#3498DB',
                'moment': '#E74C3C',
                'slope': '#27AE60',
                'deflection': '#9B59B6',
                'axis': '#2C3E50',
                'load': '#E67E22',
            }


# Global config instance
CONFIG = AnalysisConfig()

"""
VISUALIZATION: BEAM DIAGRAMS
============================

Draws the four classic beam diagrams stacked on a shared x axis:

    1. Shear force V(x)
    2. Bending moment M(x)
    3. Slope θ(x)
    4. Deflection y(x)

Point loads are marked on every panel with a dashed vertical line so the
jump in shear and the kink in moment can be read against the load position.

The diagrams are sampled much more densely than a SimpleBeam's analysis
grid (CONFIG.diagram_sections) so curves look smooth; the analysis grid
itself is not changed.
"""

import os
from typing import Optional

import numpy as np
import matplotlib.pyplot as plt

from .beam import SimpleBeam
from .config import CONFIG
from .superpose import superpose

FONT_TITLE = {'family': 'sans-serif', 'weight': 'bold', 'size': 14}
FONT_LABEL = {'family': 'sans-serif', 'weight': 'normal', 'size': 11}


def plot_beam_diagrams(
    beam: SimpleBeam,
    outpath: Optional[str] = None,
    n_points: Optional[int] = None,
    title: Optional[str] = None,
):
    """
    Plot shear, moment, slope and deflection diagrams for a SimpleBeam.

    Parameters:
    -----------
    beam : SimpleBeam
        Beam to draw
    outpath : str, optional
        If given, the figure is saved there (directory created if needed)
        and closed. Supports .png, .pdf, .svg.
    n_points : int, optional
        Samples per diagram (default CONFIG.diagram_sections)
    title : str, optional
        Figure title (default names the restraint pair)

    Returns:
    --------
    matplotlib.figure.Figure
    """
    if n_points is None:
        n_points = CONFIG.diagram_sections

    results = superpose(beam.spec, beam.code, beam.point_loads, n_points)
    x = np.array([r.x for r in results])
    panels = [
        ('shear', 'Shear V', np.array([r.shear for r in results])),
        ('moment', 'Moment M', np.array([r.moment for r in results])),
        ('slope', 'Slope θ', np.array([r.slope for r in results])),
        ('deflection', 'Deflection y', np.array([r.deflection for r in results])),
    ]

    fig, axes = plt.subplots(len(panels), 1, figsize=(10, 10), sharex=True)

    for ax, (key, label, values) in zip(axes, panels):
        color = CONFIG.colors[key]
        ax.plot(x, values, color=color, linewidth=2)
        ax.fill_between(x, 0, values, color=color, alpha=0.15)
        ax.axhline(y=0, color=CONFIG.colors['axis'], linewidth=1)

        for load in beam.point_loads:
            ax.axvline(x=load.a, color=CONFIG.colors['load'], linestyle='--', linewidth=1, alpha=0.7)

        ax.set_ylabel(label, fontdict=FONT_LABEL)
        ax.grid(True, alpha=0.3)

    axes[-1].set_xlabel('x (from end A)', fontdict=FONT_LABEL)

    if title is None:
        title = f"{beam.code} beam, {len(beam.point_loads)} point load(s)"
    fig.suptitle(title, fontsize=FONT_TITLE['size'], fontweight=FONT_TITLE['weight'])
    fig.tight_layout()

    if outpath is not None:
        os.makedirs(os.path.dirname(outpath) if os.path.dirname(outpath) else '.', exist_ok=True)
        fig.savefig(outpath, dpi=150, bbox_inches='tight')
        plt.close(fig)

    return fig

# File: tests/test_beam.py
"""
TEST: SimpleBeam
================

The beam object only samples the kernel, so these tests check the sampling
and bookkeeping: the grid, caching when the section count changes, reactions
summed over loads, DataFrame export, the console report and the plot.
"""

import matplotlib
matplotlib.use("Agg")

import numpy as np
import pandas as pd
import pytest

from roark_beam import (
    InvalidConfigurationError,
    InvalidLoadError,
    InvalidRestraintError,
    PointLoad,
    SimpleBeam,
)
from roark_beam.viz import plot_beam_diagrams


@pytest.fixture
def beam():
    # 360 in. beam, 1 kip at midspan, simply supported
    return SimpleBeam(29000, 100, 360, [[1, 180]])


def test_defaults(beam):
    assert int(beam.code) == 22
    assert beam.number_of_sections == 10
    assert beam.point_loads == (PointLoad(1.0, 180.0),)


def test_x_coords(beam):
    np.testing.assert_allclose(beam.x_coords(), np.arange(0, 361, 40))
    assert beam.x_coord(1) == 0.0
    assert beam.x_coord(10) == 360.0


def test_shear_diagram(beam):
    expected = np.array([0.5] * 5 + [-0.5] * 5)
    np.testing.assert_allclose(beam.shear(), expected)


def test_bending_moment_diagram(beam):
    x = beam.x_coords()
    expected = np.where(x <= 180, 0.5 * x, 0.5 * (360 - x))
    np.testing.assert_allclose(beam.bending_moment(), expected, atol=1e-12)


def test_deflection_zero_at_supports(beam):
    y = beam.deflection()
    assert np.isclose(y[0], 0.0, atol=1e-15)
    assert np.isclose(y[-1], 0.0, atol=1e-15)
    assert np.all(y[1:-1] < 0)


def test_changing_sections_recomputes(beam):
    assert len(beam.shear()) == 10
    beam.number_of_sections = 5
    assert len(beam.shear()) == 5
    np.testing.assert_allclose(beam.x_coords(), [0, 90, 180, 270, 360])
    # Section 3 sits on the load: shear just left of it
    assert beam.shear()[2] == 0.5
    assert np.isclose(beam.bending_moment()[2], 90.0)


def test_bad_section_count_leaves_beam_unchanged(beam):
    with pytest.raises(InvalidConfigurationError):
        beam.number_of_sections = 1
    assert beam.number_of_sections == 10


def test_construction_validates_inputs():
    with pytest.raises(InvalidLoadError):
        SimpleBeam(29000, 100, 360, [(1, 361)])
    with pytest.raises(InvalidRestraintError):
        SimpleBeam(29000, 100, 360, [(1, 180)], code=44)
    with pytest.raises(InvalidConfigurationError):
        SimpleBeam(29000, 0, 360, [(1, 180)])
    with pytest.raises(InvalidConfigurationError):
        SimpleBeam(29000, 100, 360, [(1, 180)], number_of_sections=1)


def test_reactions_sum_over_loads():
    b = SimpleBeam(29000, 100, 360, [(1, 90), (2, 270)], code="fixed-fixed")
    r = b.reactions()
    assert np.isclose(r['A']['R'] + r['B']['R'], 3.0)
    assert r['A']['theta'] == 0.0
    assert r['A']['y'] == 0.0
    assert np.isclose(r['B']['theta'], 0.0, atol=1e-12)
    assert np.isclose(r['B']['y'], 0.0, atol=1e-9)
    # Heavier load sits nearer B, so B carries more
    assert r['B']['R'] > r['A']['R']


def test_summary(beam):
    s = beam.summary()
    assert np.isclose(s['max_moment'], 80.0)
    assert s['x_max_moment'] == 160.0
    assert s['max_shear'] == 0.5
    assert s['max_deflection'] < 0


def test_to_dataframe(beam):
    df = beam.to_dataframe()
    assert isinstance(df, pd.DataFrame)
    assert list(df.columns) == ['section', 'x', 'shear', 'moment', 'slope', 'deflection']
    assert len(df) == 10
    assert df['section'].tolist() == list(range(1, 11))
    np.testing.assert_allclose(df['moment'].to_numpy(), beam.bending_moment())


def test_print_to_console(beam, capsys):
    beam.print_to_console()
    out = capsys.readouterr().out
    assert "The elastic modulus is 29000" in out
    assert "The beam is 360 units long" in out
    assert "Simple-Simple" in out


def test_plot_beam_diagrams(beam, tmp_path):
    outpath = tmp_path / "plots" / "diagrams.png"
    fig = plot_beam_diagrams(beam, outpath=str(outpath), n_points=51)
    assert outpath.exists()
    assert len(fig.axes) == 4


def test_reactions_resolve_each_load_once(monkeypatch):
    """
    WHAT: reactions() resolves the left-end conditions once per load.
    WHY: The far-end values are derived from the same resolved conditions,
         so a second resolution would only repeat the work.
    """
    import roark_beam.kernel.boundary as boundary
    import importlib
    superpose_module = importlib.import_module("roark_beam.superpose")

    b = SimpleBeam(29000, 100, 360, [(1, 90), (2, 270), (0.5, 180)], code=41)
    expected = b.reactions()

    calls = []
    original = boundary.resolve_boundary_conditions

    def counting(*args, **kwargs):
        calls.append(args)
        return original(*args, **kwargs)

    monkeypatch.setattr(boundary, "resolve_boundary_conditions", counting)
    monkeypatch.setattr(superpose_module, "resolve_boundary_conditions", counting)

    r = b.reactions()
    assert len(calls) == 3
    assert r == expected
    # Cantilever fixed at B carries the full load there
    assert np.isclose(r['B']['R'], 3.5)

import numpy as np
import pytest

from roark_beam import (
    BeamSpec,
    InvalidConfigurationError,
    InvalidLoadError,
    InvalidRestraintError,
    PointLoad,
    discretization_grid,
    point_load_response_for,
    section_coordinate,
    superpose,
    superpose_at,
)

BEAM = BeamSpec(E=29000.0, I=100.0, L=360.0)


def test_grid_is_evenly_spaced_and_inclusive():
    grid = discretization_grid(360.0, 10)
    assert len(grid) == 10
    assert grid[0] == 0.0
    assert grid[-1] == 360.0
    np.testing.assert_allclose(np.diff(grid), 40.0)


def test_section_coordinate_is_one_based():
    assert section_coordinate(1, 360.0, 10) == 0.0
    assert section_coordinate(2, 360.0, 10) == 40.0
    assert section_coordinate(10, 360.0, 10) == 360.0


@pytest.mark.parametrize("n", [1, 0, -3])
def test_section_count_below_two_rejected(n):
    with pytest.raises(InvalidConfigurationError):
        discretization_grid(360.0, n)
    with pytest.raises(InvalidConfigurationError):
        superpose(BEAM, 22, [PointLoad(1.0, 180.0)], n)


def test_section_count_must_be_integer():
    with pytest.raises(InvalidConfigurationError):
        discretization_grid(360.0, 10.0)


@pytest.mark.parametrize("i", [0, 11])
def test_section_number_out_of_range(i):
    with pytest.raises(InvalidConfigurationError):
        section_coordinate(i, 360.0, 10)


def test_superpose_returns_one_result_per_section():
    results = superpose(BEAM, 22, [PointLoad(1.0, 180.0)], 10)
    assert [r.section for r in results] == list(range(1, 11))
    assert [r.x for r in results] == discretization_grid(360.0, 10)


def test_no_loads_gives_zero_response():
    results = superpose(BEAM, 11, [], 5)
    assert len(results) == 5
    for r in results:
        assert (r.shear, r.moment, r.slope, r.deflection) == (0.0, 0.0, 0.0, 0.0)


def test_bad_load_fails_the_whole_call():
    good = PointLoad(1.0, 100.0)
    bad = PointLoad(1.0, 400.0)
    with pytest.raises(InvalidLoadError) as excinfo:
        superpose(BEAM, 22, [good, bad], 10)
    assert excinfo.value.load == bad


def test_negative_location_rejected():
    with pytest.raises(InvalidLoadError):
        superpose(BEAM, 22, [PointLoad(1.0, -1.0)], 10)


def test_invalid_restraint_rejected():
    with pytest.raises(InvalidRestraintError):
        superpose(BEAM, 44, [PointLoad(1.0, 100.0)], 10)


def test_loads_at_the_ends_are_accepted():
    results = superpose(BEAM, 22, [PointLoad(1.0, 0.0), PointLoad(1.0, 360.0)], 4)
    # Both loads go straight into the supports
    for r in results:
        assert np.isclose(r.moment, 0.0, atol=1e-12)
        assert np.isclose(r.deflection, 0.0, atol=1e-15)


def test_superpose_at_matches_grid():
    loads = [PointLoad(1.0, 100.0), PointLoad(2.0, 250.0)]
    results = superpose(BEAM, 12, loads, 10)
    for r in results:
        single = superpose_at(BEAM, 12, loads, r.x)
        assert np.isclose(single.moment, r.moment)
        assert np.isclose(single.deflection, r.deflection)


def test_superpose_at_outside_beam_rejected():
    with pytest.raises(InvalidConfigurationError):
        superpose_at(BEAM, 22, [PointLoad(1.0, 100.0)], 361.0)


def test_point_load_response_for_single_load():
    r = point_load_response_for(22, BEAM, PointLoad(1.0, 180.0), 90.0)
    assert np.isclose(r.shear, 0.5)
    assert np.isclose(r.moment, 45.0)


def test_non_positive_beam_properties_rejected():
    with pytest.raises(InvalidConfigurationError):
        BeamSpec(E=0.0, I=100.0, L=360.0)
    with pytest.raises(InvalidConfigurationError):
        BeamSpec(E=29000.0, I=-1.0, L=360.0)
    with pytest.raises(InvalidConfigurationError):
        BeamSpec(E=29000.0, I=100.0, L=float('inf'))


def test_loads_given_as_generator():
    """
    WHAT: A one-shot iterable of loads gives the same diagram as a list.
    WHY: The loads are validated and then resolved; both passes must see
         every load, or the beam silently reports zero response.
    """
    loads = [PointLoad(1.0, 180.0)]
    from_list = superpose(BEAM, 22, loads, 5)
    from_gen = superpose(BEAM, 22, (load for load in loads), 5)
    assert [r.shear for r in from_gen] == [r.shear for r in from_list]
    assert [r.shear for r in from_gen] == [0.5, 0.5, 0.5, -0.5, -0.5]

    single = superpose_at(BEAM, 22, (load for load in loads), 90.0)
    assert np.isclose(single.moment, 45.0)


def test_numpy_integer_code_accepted():
    # Codes read back from a DataFrame column arrive as numpy integers
    code = np.array([22, 41])[0]
    results = superpose(BEAM, code, [PointLoad(1.0, 180.0)], 5)
    assert [r.shear for r in results] == [0.5, 0.5, 0.5, -0.5, -0.5]

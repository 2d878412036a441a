import numpy as np
import pytest

from bezier_editor.core import (
    ControlPoint,
    PointIndexError,
    PointStore,
    euclidean_distance,
    from_coordinate_pair,
    lerp,
    manhattan_distance,
    to_coordinate_pair,
)


def test_add_point_appends_in_order():
    store = PointStore()
    assert store.count() == 0
    assert store.add_point((1, 2)) == 0
    assert store.add_point((3.5, -4)) == 1
    assert store.count() == 2
    assert len(store) == 2
    assert store.at(0).as_pair() == (1.0, 2.0)
    assert store.at(1).as_pair() == (3.5, -4.0)
    assert [p.as_pair() for p in store] == [(1.0, 2.0), (3.5, -4.0)]


@pytest.mark.parametrize("index", [-1, 2, 10])
def test_at_out_of_range(index):
    store = PointStore()
    store.add_point((0, 0))
    store.add_point((1, 1))
    with pytest.raises(PointIndexError):
        store.at(index)


def test_out_of_range_is_an_index_error():
    with pytest.raises(IndexError):
        PointStore().at(0)


def test_points_use_identity_equality():
    a = ControlPoint(1.0, 2.0)
    b = ControlPoint(1.0, 2.0)
    assert a != b
    assert a == a

    store = PointStore()
    store.add_point((5, 5))
    store.add_point((5, 5))
    first, second = store.at(0), store.at(1)
    assert first is not second
    assert first != second
    assert first.as_pair() == second.as_pair()


def test_points_mutate_in_place():
    store = PointStore()
    store.add_point((0, 0))
    point = store.at(0)
    point.x = 7.0
    point.move_to((8, 9))
    assert store.at(0) is point
    assert np.allclose(store.coordinates(), [[8.0, 9.0]])


def test_coordinates_snapshot():
    store = PointStore()
    assert store.coordinates().shape == (0, 2)
    store.add_point((1, 2))
    store.add_point((3, 4))
    coords = store.coordinates()
    assert coords.dtype == np.float64
    assert np.allclose(coords, [[1, 2], [3, 4]])
    coords[0, 0] = 100.0
    assert store.at(0).x == 1.0


def test_coordinate_pair_conversions():
    point = from_coordinate_pair((3, 4))
    assert isinstance(point, ControlPoint)
    assert (point.x, point.y) == (3.0, 4.0)
    assert to_coordinate_pair(point) == (3.0, 4.0)
    assert to_coordinate_pair((1, 2)) == (1.0, 2.0)
    assert from_coordinate_pair((3, 4)) is not point


def test_distances_and_lerp():
    assert manhattan_distance((0, 0), (3, -4)) == 7.0
    assert euclidean_distance((0, 0), (3, -4)) == 5.0
    assert euclidean_distance(ControlPoint(1, 1), (1, 1)) == 0.0
    assert lerp((0, 0), (10, 20), 0.0) == (0.0, 0.0)
    assert lerp((0, 0), (10, 20), 1.0) == (10.0, 20.0)
    assert lerp((0, 0), (10, 20), 0.25) == (2.5, 5.0)

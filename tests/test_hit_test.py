import pytest

from bezier_editor.core import HitTester, PointStore, SelectionChange, find_nearest


def make_store(*positions):
    store = PointStore()
    for position in positions:
        store.add_point(position)
    return store


def test_empty_sequence_has_no_selection():
    assert find_nearest([], (0, 0)) is None
    assert HitTester().hit(PointStore(), (0, 0)) is None


def test_cursor_near_first_point_selects_it():
    store = make_store((0, 0), (100, 100))
    nearest = find_nearest(store, (1, 1))
    assert nearest.index == 0
    assert nearest.manhattan == 2.0
    assert nearest.distance == pytest.approx(2 ** 0.5)
    assert HitTester(12).hit(store, (1, 1)) == 0


def test_cursor_far_from_all_points_selects_nothing():
    store = make_store((0, 0), (100, 100))
    assert HitTester(12).hit(store, (50, 50)) is None


def test_later_closer_point_replaces_candidate():
    store = make_store((100, 100), (0, 0), (50, 50))
    assert find_nearest(store, (2, 1)).index == 1
    assert HitTester(12).hit(store, (2, 1)) == 1


def test_single_point_subject_to_radius():
    store = make_store((10, 10))
    assert HitTester(12).hit(store, (15, 15)) == 0
    assert HitTester(12).hit(store, (30, 30)) is None


def test_radius_comparison_is_strict():
    store = make_store((12, 0))
    assert find_nearest(store, (0, 0)).distance == 12.0
    assert HitTester(12).hit(store, (0, 0)) is None
    assert HitTester(12.5).hit(store, (0, 0)) == 0


def test_manhattan_gate_prunes_euclidean_closer_point():
    # (6, 6) is nearer by Euclidean distance (8.49 < 10) but its Manhattan
    # distance (12) is worse than the first point's (10), so it is skipped.
    store = make_store((10, 0), (6, 6))
    nearest = find_nearest(store, (0, 0))
    assert nearest.index == 0
    assert nearest.distance == 10.0
    assert HitTester(12).hit(store, (0, 0)) == 0
    # within radius 9 only (6, 6) qualifies, yet the scan never promotes it
    assert HitTester(9).hit(store, (0, 0)) is None


def test_euclidean_gate_rejects_point_passing_manhattan():
    # (10, 0): Manhattan 10 < 14 passes, Euclidean 10 > 9.9 is rejected.
    store = make_store((7, 7), (10, 0))
    nearest = find_nearest(store, (0, 0))
    assert nearest.index == 0
    assert nearest.manhattan == 14.0


def test_ties_keep_earlier_point():
    assert find_nearest(make_store((5, 0), (0, 5)), (0, 0)).index == 0
    assert find_nearest(make_store((3, 3), (3, 3)), (3, 3)).index == 0


def test_selection_radius_must_be_positive():
    with pytest.raises(ValueError):
        HitTester(0)


def test_selection_change_compares_indices():
    assert SelectionChange(None, 0).changed
    assert SelectionChange(0, None).changed
    assert not SelectionChange(2, 2).changed
    assert not SelectionChange(None, None).changed

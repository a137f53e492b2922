import pytest

from cube       import Cube
from errors     import InvariantViolationError
from notation   import RotDirection, EdgeSlot, CornerSlot
from invariants import permutation_parity, corner_twist, edge_flip, check_invariants, assert_legal


@pytest.mark.parametrize('perm, parity', [
    ([0, 1, 2, 3], 0),
    ([1, 0, 2, 3], 1),
    ([1, 2, 0, 3], 0),
    ([1, 2, 3, 0], 1),
    ([1, 0, 3, 2], 0),
    ([], 0),
])
def test_permutation_parity(perm, parity):
    assert permutation_parity(perm) == parity


def test_permutation_parity_rejects_non_permutation():
    with pytest.raises(ValueError):
        permutation_parity([0, 0, 1])


def test_solved_cube_is_legal():
    report = check_invariants(Cube())
    assert report.ok
    assert report == (0, 0, 0, 0, 0)
    assert report.problems() == []


def test_face_turn_has_matching_odd_parities():
    report = check_invariants(Cube().turn('R'))
    assert report.corner_parity == 1
    assert report.edge_parity == 1
    assert report.center_parity == 0
    assert report.ok


def test_slice_turn_moves_parity_to_centers():
    report = check_invariants(Cube().turn('M'))
    assert report.corner_parity == 0
    assert report.edge_parity == 1
    assert report.center_parity == 1
    assert report.ok


def test_lone_corner_four_cycle_breaks_parity():
    cube = Cube().cycle([CornerSlot.A, CornerSlot.B, CornerSlot.C, CornerSlot.D])
    report = check_invariants(cube)
    assert not report.parity_ok
    with pytest.raises(InvariantViolationError):
        assert_legal(cube)


def test_lone_corner_twist_is_detected():
    cube = Cube().corner_swap_right((CornerSlot.A, RotDirection.RIGHT), CornerSlot.B, CornerSlot.C)
    assert corner_twist(cube) == 1
    report = check_invariants(cube)
    assert report.parity_ok
    assert not report.twist_ok
    assert 'corner twist' in report.problems()[0]


def test_lone_edge_flip_is_detected():
    cube = Cube().edge_swap_right((EdgeSlot.I, RotDirection.LEFT), EdgeSlot.J, EdgeSlot.K)
    assert edge_flip(cube) == 1
    assert not check_invariants(cube).flip_ok


def test_three_cycles_are_legal():
    cube = Cube().edge_swap_left(EdgeSlot.I, EdgeSlot.J, EdgeSlot.K).corner_swap_right(CornerSlot.A, CornerSlot.G, CornerSlot.H)
    assert assert_legal(cube).ok

from itertools import permutations

import numpy as np
import pytest

from cube      import Cube
from pieces    import Edge, Corner
from errors    import InvalidCycleError
from comutator import Comutation, invert_comutations
from notation  import RotDirection, EdgeOrientation, CornerOrientation, EdgeSlot, CornerSlot, CenterSlot

I, J, K = EdgeSlot.I, EdgeSlot.J, EdgeSlot.K
A, B, C = CornerSlot.A, CornerSlot.B, CornerSlot.C
RIGHT, LEFT = RotDirection.RIGHT, RotDirection.LEFT


@pytest.fixture
def scrambled():
    return Cube().turn("R U2 F' L D' B2 M E' S r' x y2 z'")


def test_edge_swap_left_equals_reversed_swap_right():
    cube_a = Cube()
    cube_a.edge_swap_left(Comutation(I, None), Comutation(J, None), Comutation(K, None))
    cube_b = Cube()
    cube_b.edge_swap_right(Comutation(K, None), Comutation(J, None), Comutation(I, None))
    assert cube_a == cube_b
    assert not cube_a.is_solved()


def test_swap_right_moves_a_to_b_to_c():
    cube = Cube().edge_swap_right(I, J, K)
    assert cube[J].home is I
    assert cube[K].home is J
    assert cube[I].home is K


def test_swap_left_moves_a_to_c_to_b():
    cube = Cube().corner_swap_left(A, B, C)
    assert cube[C].home is A
    assert cube[B].home is C
    assert cube[A].home is B


def test_accepts_slot_rotation_pairs():
    assert Cube().edge_swap_right((I, None), (J, None), (K, None)) == Cube().edge_swap_right(I, J, K)


def test_pre_rotation_twists_piece_before_moving_it():
    cube = Cube().corner_swap_right((A, RIGHT), B, (C, LEFT))
    assert cube[B] == Corner(CornerOrientation.X_FACING, A)
    assert cube[A] == Corner(CornerOrientation.Z_FACING, C)
    assert cube[C] == Corner(CornerOrientation.Y_FACING, B)


def test_edge_pre_rotation_only_touches_edges():
    cube = Cube().edge_swap_right((I, RIGHT), J, K)
    assert cube[J] == Edge(EdgeOrientation.FLIPPED, I)
    assert cube.corners == Cube().corners


@pytest.mark.parametrize('slots', list(permutations(CornerSlot, 3)))
def test_corner_swap_left_undoes_swap_right(scrambled, slots):
    cube = scrambled.copy()
    cube.corner_swap_right(*slots)
    cube.corner_swap_left(*slots)
    assert cube == scrambled


def test_edge_swap_left_undoes_swap_right(scrambled):
    for slots in permutations(EdgeSlot, 3):
        cube = scrambled.copy()
        cube.edge_swap_right(*slots)
        assert cube != scrambled
        cube.edge_swap_left(*slots)
        assert cube == scrambled, slots


def test_swap_right_undoes_swap_left(scrambled):
    cube = scrambled.copy()
    cube.edge_swap_left(EdgeSlot.U, EdgeSlot.M, EdgeSlot.P).edge_swap_right(EdgeSlot.U, EdgeSlot.M, EdgeSlot.P)
    assert cube == scrambled


def test_inverted_comutations_undo_pre_rotations(scrambled):
    rng = np.random.default_rng(7)
    rotations = [None, RIGHT, LEFT]
    for _ in range(200):
        slots = rng.choice(len(CornerSlot), size=3, replace=False)
        comutations = [Comutation(CornerSlot(int(s)), rotations[int(rng.integers(3))]) for s in slots]
        cube = scrambled.copy()
        cube.corner_swap_right(*comutations)
        cube.corner_swap_left(*invert_comutations(comutations))
        assert cube == scrambled, comutations


def test_three_swap_right_is_identity(scrambled):
    cube = scrambled.copy()
    for _ in range(3):
        cube.edge_swap_right(EdgeSlot.R, EdgeSlot.S, EdgeSlot.T)
    assert cube == scrambled


@pytest.mark.parametrize('slots', [(I, I, J), (I, J, I), (K, K, K)])
def test_repeated_slot_is_rejected_without_mutation(scrambled, slots):
    cube = scrambled.copy()
    with pytest.raises(InvalidCycleError):
        cube.edge_swap_right(*slots)
    with pytest.raises(InvalidCycleError):
        cube.edge_swap_left(*slots)
    assert cube == scrambled


def test_slots_of_wrong_class_are_rejected():
    cube = Cube()
    with pytest.raises(InvalidCycleError):
        cube.edge_swap_right(A, B, C)
    with pytest.raises(InvalidCycleError):
        cube.corner_swap_left(A, B, I)
    assert cube.is_solved()


def test_generic_cycle_needs_three_slots():
    cube = Cube()
    with pytest.raises(InvalidCycleError):
        cube.cycle([A, B])
    assert cube.is_solved()
    with pytest.raises(InvalidCycleError):
        Cube().cycle([EdgeSlot.I, EdgeSlot.J], reverse=True)
    with pytest.raises(InvalidCycleError):
        Cube().cycle([A])
    with pytest.raises(InvalidCycleError):
        Cube().cycle([])


def test_generic_four_cycle_forward_and_reverse():
    slots = [EdgeSlot.I, EdgeSlot.J, EdgeSlot.K, EdgeSlot.L]
    cube = Cube().cycle(slots)
    assert [cube[s].home for s in slots] == [EdgeSlot.L, EdgeSlot.I, EdgeSlot.J, EdgeSlot.K]
    cube.cycle(slots, reverse=True)
    assert cube.is_solved()


def test_generic_cycle_moves_centers():
    cube = Cube().cycle([CenterSlot.U, CenterSlot.F, CenterSlot.D, CenterSlot.B])
    assert cube[CenterSlot.F].home is CenterSlot.U
    assert cube[CenterSlot.U].home is CenterSlot.B


def test_comutation_of():
    assert Comutation.of(A) == Comutation(A, None)
    assert Comutation.of((A, RIGHT)) == Comutation(A, RIGHT)
    assert Comutation.of(Comutation(A, LEFT)).rotation is LEFT

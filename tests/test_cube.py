import numpy as np
import pytest

from cube     import Cube, CubeSnapshot, new_solved_cube
from pieces   import Edge, Corner, Center
from notation import Move, EdgeSlot, CornerSlot, CenterSlot, EdgeOrientation, CornerOrientation


def test_new_solved_cube_is_identity():
    cube = new_solved_cube()
    assert cube.is_solved()
    assert cube.corners == tuple(Corner(CornerOrientation.Y_FACING, s) for s in CornerSlot)
    assert cube.edges == tuple(Edge(EdgeOrientation.CORRECT, s) for s in EdgeSlot)
    assert cube.centers == tuple(Center(s) for s in CenterSlot)


def test_pieces_lists_corners_then_edges():
    pieces = Cube().pieces()
    assert len(pieces) == 20
    assert [slot for slot, _ in pieces] == list(CornerSlot) + list(EdgeSlot)
    assert all(slot is piece.home for slot, piece in pieces)


def test_equality_is_structural():
    assert Cube() == Cube()
    assert Cube().turn('R U') == Cube().turn('R U')
    assert Cube().turn('R U') != Cube().turn('U R')
    assert Cube() != 'solved'


def test_snapshot_is_immutable_and_hashable():
    cube = Cube().turn("R U R'")
    snapshot = cube.snapshot()
    assert isinstance(snapshot, CubeSnapshot)
    assert snapshot == Cube().turn("R U R'").snapshot()
    assert len({snapshot, Cube().turn("R U R'").snapshot()}) == 1
    cube.apply_move(Move.F)
    assert snapshot != cube.snapshot()


def test_corners_view_does_not_leak_state():
    cube = Cube()
    corners = cube.corners
    cube.apply_move(Move.R)
    assert corners == Cube().corners


def test_to_arrays():
    arrays = Cube().turn('F').to_arrays()
    assert arrays['corner_permutation'].shape == (8,)
    assert arrays['edge_orientation'].shape == (12,)
    assert arrays['center_permutation'].shape == (6,)
    assert sorted(arrays['corner_permutation'].tolist()) == list(range(8))
    assert arrays['edge_orientation'].sum() == 4
    solved = Cube().to_arrays()
    assert np.array_equal(solved['edge_permutation'], np.arange(12))
    assert not solved['corner_orientation'].any()


def test_copy_is_independent():
    cube = Cube().turn('R')
    copy = cube.copy()
    copy.apply_move(Move.U)
    assert cube == Cube().turn('R')
    assert copy != cube


def test_turn_returns_new_cube_and_turn_mutates():
    cube = Cube()
    turned = cube.turn("R U")
    assert cube.is_solved()
    cube.turn_("R U")
    assert cube == turned
    assert cube.turn("U' R'").is_solved()


def test_turn_with_reset():
    cube = Cube().turn('F B')
    assert cube.turn('R', reset=True) == Cube().turn('R')
    cube.turn_('R', reset=True)
    assert cube == Cube().turn('R')


def test_reset():
    cube = Cube().turn("R U F")
    assert cube.reset().is_solved()
    assert not cube.is_solved()
    cube.reset_()
    assert cube.is_solved()


def test_apply_move_accepts_tokens_and_chains():
    cube = Cube().apply_move('R').apply_move(Move.Rp)
    assert cube.is_solved()


def test_rotated_cube_is_not_identity_state():
    cube = Cube().apply_move(Move.x)
    assert not cube.is_solved()
    assert cube.turn("x'").is_solved()


def test_get_scramble_moves():
    rng = np.random.default_rng(3)
    scramble = Cube.get_scramble_moves(25, rng=rng)
    assert len(scramble) == 25
    assert all(m.layer.is_face or m.layer.is_slice for m in scramble)
    assert Cube.get_scramble_moves(0) == []
    only_r = Cube.get_scramble_moves(5, custom_turns_list=['R'], rng=rng)
    assert only_r == [Move.R] * 5
    weighted = Cube.get_scramble_moves(10, p=[0.0, 1.0], custom_turns_list=['R', "U'"], rng=rng)
    assert weighted == [Move.Up] * 10


def test_scramble_is_deterministic_for_seed():
    a = Cube().scramble(30, with_rotations=True, rng=np.random.default_rng(11))
    b = Cube().scramble(30, with_rotations=True, rng=np.random.default_rng(11))
    assert a == b


def test_scramble_in_place_returns_moves():
    cube = Cube()
    scramble = cube.scramble_(20, rng=np.random.default_rng(5))
    assert len(scramble) == 20
    assert cube == Cube().turn(scramble)


def test_getitem_rejects_non_slot():
    with pytest.raises(TypeError):
        Cube()['A']


def test_str_lists_pieces():
    text = str(Cube())
    assert text.startswith('corners[A0 B0')
    assert 'centers[URFDLB]' in text

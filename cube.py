import typing
import numpy as np

from pieces     import Edge, Corner, Center, Piece, solved_edges, solved_corners, solved_centers
from notation   import EdgeSlot, CornerSlot, CenterSlot, Move, parse_moves
from comutator  import Comutation, Slot, check_cycle, cycle_pieces
from cubetyping import ComutationLike, MoveLike, MoveSequence
from defaults   import SCRAMBLE_TURNS2, CUBE_TURNSi

import moves


class CubeSnapshot(typing.NamedTuple):
    """
    Immutable view of a cube state. Hashable, so it can be stored or compared freely.
    """
    corners : typing.Tuple[Corner, ...]
    edges   : typing.Tuple[Edge, ...]
    centers : typing.Tuple[Center, ...]


class Cube:
    """
    3x3x3 cube as 8 corners, 12 edges and 6 centers, each list indexed by its slot.
    The cube is created solved: every piece is in its home slot with orientation 0.

    Pieces are only ever moved by the comutator primitives (`corner_swap_right`,
    `corner_swap_left`, `edge_swap_right`, `edge_swap_left` and the generic `cycle`),
    moves are translated to these calls by the `moves` module.
    Methods with a trailing underscore mutate the cube, their counterparts return a new cube.
    """
    def __init__(self):
        self._corners = solved_corners()
        self._edges   = solved_edges()
        self._centers = solved_centers()

    @property
    def corners(self) -> typing.Tuple[Corner, ...]:
        return tuple(self._corners)

    @property
    def edges(self) -> typing.Tuple[Edge, ...]:
        return tuple(self._edges)

    @property
    def centers(self) -> typing.Tuple[Center, ...]:
        return tuple(self._centers)

    def __getitem__(self, slot : Slot) -> Piece:
        return self._pieces_of(slot)[slot.index]

    def __eq__(self, other : 'Cube') -> bool:
        if not isinstance(other, Cube):
            return NotImplemented
        return self.snapshot() == other.snapshot()

    __hash__ = None

    def __repr__(self):
        return f'Cube({self})'

    def __str__(self):
        def fmt(pieces):
            return ' '.join(f'{p.home.name}{int(p.orientation)}' for p in pieces)
        return f'corners[{fmt(self._corners)}] edges[{fmt(self._edges)}] centers[{"".join(c.home.name for c in self._centers)}]'

    def _pieces_of(self, slot : Slot) -> typing.List[Piece]:
        if isinstance(slot, CornerSlot):
            return self._corners
        if isinstance(slot, EdgeSlot):
            return self._edges
        if isinstance(slot, CenterSlot):
            return self._centers
        raise TypeError(f'Not a slot: {slot!r}')

    def copy(self) -> 'Cube':
        """
        Get a copy of cube
        """
        cube = Cube()
        cube._corners = list(self._corners)
        cube._edges   = list(self._edges)
        cube._centers = list(self._centers)
        return cube

    def reset(self) -> 'Cube':
        """
        Get solved cube
        """
        return Cube()

    def reset_(self):
        """
        Reset cube to solved state
        """
        self._corners = solved_corners()
        self._edges   = solved_edges()
        self._centers = solved_centers()

    def is_solved(self) -> bool:
        return self == Cube()

    # ------------------------------------------------------------------ #
    # comutator primitives
    # ------------------------------------------------------------------ #

    def cycle(self, comutations : typing.Sequence[ComutationLike], reverse : bool = False) -> 'Cube':
        """
        Twist then cycle three or more slots of one piece class

        Parameters
        ----------
        `comutations` : Sequence[Comutation]
            slots to cycle with optional twists applied before the cycle
        `reverse` : bool, optional
            if False the piece in the first slot goes to the second one, the second to the third, ..., the last to the first.
            if True the inverse permutation is applied

        Returns
        -------
        `cube` : Cube
            the cube itself

        Raises
        ------
        InvalidCycleError
            if there are fewer than three slots, slots are not distinct or of different piece classes, the cube is left untouched
        """
        comutations = [Comutation.of(c) for c in comutations]
        check_cycle(comutations)
        cycle_pieces(self._pieces_of(comutations[0].slot), comutations, reverse)
        return self

    def _swap3(self, slot_type : type, a : ComutationLike, b : ComutationLike, c : ComutationLike, reverse : bool) -> 'Cube':
        comutations = [Comutation.of(a), Comutation.of(b), Comutation.of(c)]
        check_cycle(comutations, size=3, slot_type=slot_type)
        cycle_pieces(self._pieces_of(comutations[0].slot), comutations, reverse)
        return self

    def corner_swap_right(self, a : ComutationLike, b : ComutationLike, c : ComutationLike) -> 'Cube':
        """
        Twist then move corner in `a` to `b`, `b` to `c` and `c` to `a`, swapping (a, c) then (b, c)
        """
        return self._swap3(CornerSlot, a, b, c, reverse=False)

    def corner_swap_left(self, a : ComutationLike, b : ComutationLike, c : ComutationLike) -> 'Cube':
        """
        Twist then move corner in `a` to `c`, `c` to `b` and `b` to `a`, swapping (a, c) then (a, b)
        """
        return self._swap3(CornerSlot, a, b, c, reverse=True)

    def edge_swap_right(self, a : ComutationLike, b : ComutationLike, c : ComutationLike) -> 'Cube':
        """
        Twist then move edge in `a` to `b`, `b` to `c` and `c` to `a`, swapping (a, c) then (b, c)
        """
        return self._swap3(EdgeSlot, a, b, c, reverse=False)

    def edge_swap_left(self, a : ComutationLike, b : ComutationLike, c : ComutationLike) -> 'Cube':
        """
        Twist then move edge in `a` to `c`, `c` to `b` and `b` to `a`, swapping (a, c) then (a, b)
        """
        return self._swap3(EdgeSlot, a, b, c, reverse=True)

    # ------------------------------------------------------------------ #
    # moves
    # ------------------------------------------------------------------ #

    def apply_move(self, move : MoveLike) -> 'Cube':
        """
        Apply single move to the cube itself

        Raises
        ------
        InvalidMoveError
            if `move` is a token that can not be parsed
        """
        moves.apply_move(self, move)
        return self

    def turn(self, turns : MoveSequence, reset : bool = False) -> 'Cube':
        """
        Apply turns to copy of cube and return it

        Parameters
        ----------
        `turns` : list | str
            Single turn or list of turns in letter notation to perform on cube in it's current state
        `reset` : bool, optional
            If True, then the cube will be reseted to solved state before moves

        Returns
        -------
        `cube` : Cube
            Cube with applied moves
        """
        cube = self.reset() if reset else self.copy()
        cube.turn_(turns)
        return cube

    def turn_(self, turns : MoveSequence, reset : bool = False):
        """
        Apply turns to cube itself.
        The whole sequence is parsed before the first move is applied.

        Parameters
        ----------
        `turns` : list | str
            Single turn or list of turns in letter notation to perform on cube in it's current state
        `reset` : bool, optional
            If True, then the cube itself will be reseted to solved state before moves
        """
        parsed = parse_moves(turns)
        if reset:
            self.reset_()
        for move in parsed:
            moves.apply_move(self, move)

    @staticmethod
    def get_scramble_moves(
            n_turns : int,
            p : typing.Iterable[float] = None,
            with_rotations : bool = False,
            custom_turns_list : typing.Iterable[str] = None,
            rng : np.random.Generator = None,
        ) -> typing.List[Move]:
        """
        Get N random scramble moves

        Parameters
        ----------
        `n_turns` : int
            Amount of random moves
        `p` : Iterable, optional
            Probability distribution to pick turns
        `with_rotations` : bool
            Use wide turns and x, y, z rotations in scramble
        `custom_turns_list` : Iterable, optional
            If is not None, then the list will be used to get random turns
        `rng` : np.random.Generator, optional
            Random generator to use

        Returns
        -------
        `scramble` : list[Move]
            List of moves to scramble cube
        """
        if n_turns == 0:
            return []
        rng   = rng if rng is not None else np.random.default_rng()
        turns = CUBE_TURNSi if with_rotations else SCRAMBLE_TURNS2
        if custom_turns_list:
            turns = tuple(custom_turns_list)
        pi    = np.zeros(len(turns)).astype(np.float64)
        pi[:] = 1.0/len(turns) if p is None else p
        picks = rng.choice(len(turns), size=n_turns, p=pi)
        return [Move.from_token(turns[i]) for i in picks]

    def scramble(self, n_turns : int, reset : bool = True, with_rotations : bool = False, rng : np.random.Generator = None) -> 'Cube':
        """
        Returns scrambled copy of cube by N random moves

        Parameters
        ----------
        `n_turns` : int
            Amount of random moves
        `reset` : bool, optional
            If True, then the cube will be reseted to solved state before scramble
        `with_rotations` : bool
            Use wide turns and x, y, z rotations in scramble
        `rng` : np.random.Generator, optional
            Random generator to use

        Returns
        -------
        `cube` : Cube
            Scrambled cube
        """
        return self.turn(Cube.get_scramble_moves(n_turns, with_rotations=with_rotations, rng=rng), reset=reset)

    def scramble_(self, n_turns : int, reset : bool = True, with_rotations : bool = False, rng : np.random.Generator = None) -> typing.List[Move]:
        """
        Scramble cube itself by N random moves and return the moves used
        """
        scramble = Cube.get_scramble_moves(n_turns, with_rotations=with_rotations, rng=rng)
        self.turn_(scramble, reset=reset)
        return scramble

    # ------------------------------------------------------------------ #
    # inspection
    # ------------------------------------------------------------------ #

    def pieces(self) -> typing.Tuple[typing.Tuple[Slot, Piece], ...]:
        """
        Get (slot, piece) pairs of all corners followed by all edges
        """
        return tuple(zip(CornerSlot, self._corners)) + tuple(zip(EdgeSlot, self._edges))

    def snapshot(self) -> CubeSnapshot:
        return CubeSnapshot(tuple(self._corners), tuple(self._edges), tuple(self._centers))

    def to_arrays(self) -> typing.Dict[str, np.ndarray]:
        """
        Get permutation and orientation vectors of cube.
        Permutation vectors hold the home slot index of the piece in each slot.

        Returns
        -------
        `arrays` : dict[str, np.ndarray]
            `corner_permutation` (8,), `corner_orientation` (8,), `edge_permutation` (12,),
            `edge_orientation` (12,) and `center_permutation` (6,) integer vectors
        """
        return {
            'corner_permutation' : np.array([c.home.index for c in self._corners], dtype=np.int64),
            'corner_orientation' : np.array([int(c.orientation) for c in self._corners], dtype=np.int64),
            'edge_permutation'   : np.array([e.home.index for e in self._edges], dtype=np.int64),
            'edge_orientation'   : np.array([int(e.orientation) for e in self._edges], dtype=np.int64),
            'center_permutation' : np.array([c.home.index for c in self._centers], dtype=np.int64),
        }


def new_solved_cube() -> Cube:
    """
    Get cube in solved (identity) state
    """
    return Cube()

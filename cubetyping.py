import typing

from notation  import Move, RotDirection
from comutator import Comutation, Slot

MoveStr      = typing.NewType('MoveStr', str)
MoveStr.__doc__ = \
    """
    String representation of a single move.
    Possible values for clockwise turns:
        R, U, L, D, F, B - outer faces,
        r, u, l, d, f, b - wide turns, outer face with adjacent slice,
        M, E, S          - slices between L and R, U and D, F and B,
        x, y, z          - whole cube rotations.
    For counter-clockwise turns add ' sign or i at the end of the turn:
        U' or Ui - up counter-clockwise turn,
    For half turns add 2:
        R2 - right face turned twice.
    """

# Objects of type Move or MoveStr
MoveLike     = typing.Union[Move, MoveStr, str]

# White space separated move tokens, a single Move or an iterable of moves and tokens
MoveSequence = typing.Union[str, Move, typing.Iterable[MoveLike]]

# Comutation, bare slot or (slot, rotation) pair
ComutationLike = typing.Union[Comutation, Slot, typing.Tuple[Slot, typing.Optional[RotDirection]]]

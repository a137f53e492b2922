import re
import enum
import typing

from errors   import InvalidMoveError
from defaults import SKIP_TURN


class RotDirection(enum.Enum):
    """
    Direction of a piece twist, seen from outside the cube looking at the piece
    """
    RIGHT = 'right'
    LEFT  = 'left'

    @property
    def inverse(self) -> 'RotDirection':
        return RotDirection.LEFT if self is RotDirection.RIGHT else RotDirection.RIGHT


class EdgeOrientation(enum.IntEnum):
    """
    Orientation of an edge relative to the F/B axis.
    An edge is CORRECT when its reference sticker (U/D colour, or F/B colour for
    the middle layer edges) lies on the reference face of the slot it occupies.
    """
    CORRECT   = 0
    FLIPPED   = 1
    INCORRECT = 1


class CornerOrientation(enum.IntEnum):
    """
    Orientation of a corner as the number of clockwise twists of its U/D sticker.
    Y_FACING means the U/D sticker points along the vertical (Y) axis.
    """
    Y_FACING = 0
    X_FACING = 1
    Z_FACING = 2


class _Slot(enum.Enum):
    """
    Fixed position on the cube frame. The value is the dense array index of the slot.
    """
    @property
    def index(self) -> int:
        return self.value

    @property
    def position(self) -> str:
        return self._positions()[self.value]

    @classmethod
    def _positions(cls) -> typing.Tuple[str, ...]:
        raise NotImplementedError

    @classmethod
    def from_position(cls, position : str) -> '_Slot':
        for slot in cls:
            if set(slot.position) == set(position.upper()) and len(position) == len(slot.position):
                return slot
        raise KeyError(position)

    def __repr__(self):
        return f'{type(self).__name__}.{self.name}'


class EdgeSlot(_Slot):
    """
    Twelve edge positions. Reference face first:
        I UR   J UF   K UL   L UB
        M DR   N DF   O DL   P DB
        R FR   S FL   T BL   U BR
    """
    I = 0
    J = 1
    K = 2
    L = 3
    M = 4
    N = 5
    O = 6
    P = 7
    R = 8
    S = 9
    T = 10
    U = 11

    @classmethod
    def _positions(cls):
        return EDGE_POSITIONS


class CornerSlot(_Slot):
    """
    Eight corner positions. Faces are listed clockwise starting from the U/D face:
        A URF   B UFL   C ULB   D UBR
        E DFR   F DLF   G DBL   H DRB
    """
    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5
    G = 6
    H = 7

    @classmethod
    def _positions(cls):
        return CORNER_POSITIONS


class CenterSlot(_Slot):
    """
    Six face centers. They only move under slice turns and whole cube rotations.
    """
    U = 0
    R = 1
    F = 2
    D = 3
    L = 4
    B = 5

    @classmethod
    def _positions(cls):
        return CENTER_POSITIONS


EDGE_POSITIONS   = ('UR', 'UF', 'UL', 'UB', 'DR', 'DF', 'DL', 'DB', 'FR', 'FL', 'BL', 'BR')
CORNER_POSITIONS = ('URF', 'UFL', 'ULB', 'UBR', 'DFR', 'DLF', 'DBL', 'DRB')
CENTER_POSITIONS = ('U', 'R', 'F', 'D', 'L', 'B')


class Layer(enum.Enum):
    """
    Part of the cube a move turns.
    Faces follow their own clockwise direction, M follows L, E follows D, S follows F,
    wide layers turn the face together with the adjacent slice,
    rotations x, y, z follow R, U, F.
    """
    R = 'R'
    U = 'U'
    L = 'L'
    D = 'D'
    F = 'F'
    B = 'B'
    r = 'r'
    u = 'u'
    l = 'l'
    d = 'd'
    f = 'f'
    b = 'b'
    M = 'M'
    E = 'E'
    S = 'S'
    x = 'x'
    y = 'y'
    z = 'z'

    @property
    def is_face(self) -> bool:
        return self.value in 'RULDFB'

    @property
    def is_wide(self) -> bool:
        return self.value in 'rudlfb'

    @property
    def is_slice(self) -> bool:
        return self.value in 'MES'

    @property
    def is_rotation(self) -> bool:
        return self.value in 'xyz'


class Move(enum.Enum):
    """
    Move notation token.
    Members are named after the token: `Rp` is R', `R2` is the half turn R2.
    """
    R = "R"; Rp = "R'"; R2 = "R2"
    U = "U"; Up = "U'"; U2 = "U2"
    L = "L"; Lp = "L'"; L2 = "L2"
    D = "D"; Dp = "D'"; D2 = "D2"
    F = "F"; Fp = "F'"; F2 = "F2"
    B = "B"; Bp = "B'"; B2 = "B2"
    r = "r"; rp = "r'"; r2 = "r2"
    u = "u"; up = "u'"; u2 = "u2"
    l = "l"; lp = "l'"; l2 = "l2"
    d = "d"; dp = "d'"; d2 = "d2"
    f = "f"; fp = "f'"; f2 = "f2"
    b = "b"; bp = "b'"; b2 = "b2"
    M = "M"; Mp = "M'"; M2 = "M2"
    E = "E"; Ep = "E'"; E2 = "E2"
    S = "S"; Sp = "S'"; S2 = "S2"
    x = "x"; xp = "x'"; x2 = "x2"
    y = "y"; yp = "y'"; y2 = "y2"
    z = "z"; zp = "z'"; z2 = "z2"

    @property
    def token(self) -> str:
        return self.value

    @property
    def layer(self) -> Layer:
        return Layer(self.value[0])

    @property
    def amount(self) -> int:
        """
        Number of clockwise quarter turns: 1, 2 or 3 (inverse)
        """
        if self.value.endswith("'"):
            return 3
        if self.value.endswith('2'):
            return 2
        return 1

    @property
    def inverse(self) -> 'Move':
        return Move.of(self.layer, -self.amount)

    @staticmethod
    def of(layer : Layer, amount : int) -> 'Move':
        """
        Get move turning `layer` by `amount` clockwise quarter turns (taken mod 4, non zero)
        """
        amount %= 4
        if amount == 0:
            raise InvalidMoveError(f'{layer.value} turned by a multiple of 4 quarter turns is not a move')
        suffix = {1: '', 2: '2', 3: "'"}[amount]
        return Move(layer.value + suffix)

    @staticmethod
    def from_token(token : str) -> 'Move':
        """
        Parse a single move token.
        Accepts R, R', Ri, R2, R2', Rw (same as r) and upper-case rotations X, Y, Z.

        Raises
        ------
        InvalidMoveError
            if the token is not a move or is a full turn (e.g. R4)
        """
        match = TOKEN_PATTERN.fullmatch(token.strip())
        if match is None:
            raise InvalidMoveError(f'Unrecognized move token {token!r}')
        letter, wide, count, prime = match.groups()
        if letter in 'XYZ':
            letter = letter.lower()
        if wide:
            if letter not in 'RULDFB':
                raise InvalidMoveError(f'Only face turns have a wide form, got {token!r}')
            letter = letter.lower()
        amount = int(count) if count else 1
        if prime:
            amount = -amount
        return Move.of(Layer(letter), amount)

    def __str__(self):
        return self.value

    def __repr__(self):
        return f'Move({self.value!r})'


TOKEN_PATTERN = re.compile(r"([RULDFBrudlfbMESxyzXYZ])(w?)(\d*)(['i]?)")
# single move tokens, the no-op token, any other character is an unknown token
MOVES_PATTERN = re.compile(TOKEN_PATTERN.pattern + "|" + re.escape(SKIP_TURN) + r"|\S")


def parse_moves(moves : typing.Union[str, Move, typing.Iterable[typing.Union[str, Move]]]) -> typing.List[Move]:
    """
    Parse a sequence of moves written in letter notation

    Parameters
    ----------
    `moves` : str | Move | Iterable
        Moves in letter notation, separated by white space or written together ("R U R' U'", "RUR'U'"),
        a single Move or a list of tokens and moves.
        The no-op token '-' is skipped, a repeated token such as R4 is skipped as well.

    Returns
    -------
    `parsed` : list[Move]
        Parsed moves in order
    """
    if isinstance(moves, Move):
        return [moves]
    if isinstance(moves, str):
        moves = moves.split()
    parsed = []
    for move in moves:
        if isinstance(move, Move):
            parsed.append(move)
            continue
        for token in (match.group() for match in MOVES_PATTERN.finditer(str(move))):
            if token == SKIP_TURN:
                continue
            count = re.search(r'\d+', token)
            if count and int(count.group()) % 4 == 0:
                continue
            parsed.append(Move.from_token(token))
    return parsed


def reverse_moves(moves : typing.Union[str, Move, typing.Iterable[typing.Union[str, Move]]]) -> typing.List[Move]:
    """
    For each move get the inverse one in reversed order

    Parameters
    ----------
    `moves` : str | Move | Iterable
        Moves to reverse

    Returns
    -------
    `reversed_moves` : list[Move]
        Sequence undoing `moves`
    """
    return [move.inverse for move in reversed(parse_moves(moves))]

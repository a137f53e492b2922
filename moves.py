"""
Move interpreter: translates move notation into comutator calls.

Every quarter turn of R U L D F B M E S is described once by the slots it cycles.
A cycle is written as slot letters followed by a twist digit, the piece in each slot
is twisted by that digit and then moved to the next slot of the cycle (the last one
moves to the first):

    corner twist  0 - none, 1 - clockwise (RIGHT), 2 - counter-clockwise (LEFT)
    edge twist    0 - none, 1 - flip

Corner twist is counted for the U/D sticker, edge flip is relative to the F/B axis,
so R, L, U, D never flip edges while F, B, S, M, E flip the four edges they move.

Slices and rotations also move centers. Wide turns and rotations are compositions of
the quarter turns:

    r = R M'    l = L M     u = U E'    d = D E     f = F S     b = B S'
    x = R M' L'             y = U E' D'             z = F S B'

An inverse move runs the quarter turn cycles backward with inverted twists,
a half turn runs the quarter turn twice.
"""
import typing

from errors    import UnrecognizedMoveError, InvalidMoveError
from notation  import Layer, Move, RotDirection, EdgeSlot, CornerSlot, CenterSlot
from comutator  import Comutation, check_cycle, invert_comutations
from cubetyping import MoveLike


#                corners        edges          centers
QUARTER_TURNS = {
    Layer.U : ('A0 B0 C0 D0', 'I0 J0 K0 L0', ''),
    Layer.R : ('A1 D2 H1 E2', 'I0 U0 M0 R0', ''),
    Layer.F : ('A2 E1 F2 B1', 'J1 R1 N1 S1', ''),
    Layer.D : ('E0 H0 G0 F0', 'M0 P0 O0 N0', ''),
    Layer.L : ('B2 F1 G2 C1', 'K0 S0 O0 T0', ''),
    Layer.B : ('C2 G1 H2 D1', 'L1 T1 P1 U1', ''),
    Layer.M : ('',            'J1 N1 P1 L1', 'U F D B'),
    Layer.E : ('',            'S1 R1 U1 T1', 'F R B L'),
    Layer.S : ('',            'K1 I1 M1 O1', 'U R D L'),
}

# (layer, quarter turns) components, 3 quarter turns is the inverse
COMPOSITE_TURNS = {
    Layer.r : ((Layer.R, 1), (Layer.M, 3)),
    Layer.l : ((Layer.L, 1), (Layer.M, 1)),
    Layer.u : ((Layer.U, 1), (Layer.E, 3)),
    Layer.d : ((Layer.D, 1), (Layer.E, 1)),
    Layer.f : ((Layer.F, 1), (Layer.S, 1)),
    Layer.b : ((Layer.B, 1), (Layer.S, 3)),
    Layer.x : ((Layer.R, 1), (Layer.M, 3), (Layer.L, 3)),
    Layer.y : ((Layer.U, 1), (Layer.E, 3), (Layer.D, 3)),
    Layer.z : ((Layer.F, 1), (Layer.S, 1), (Layer.B, 3)),
}

_TWISTS = {'0': None, '1': RotDirection.RIGHT, '2': RotDirection.LEFT}


class Step(typing.NamedTuple):
    """
    Single comutator invocation: cycle `comutations` forward or in reverse
    """
    comutations : typing.Tuple[Comutation, ...]
    reverse     : bool = False


def _parse_cycle(slot_type : type, cycle : str) -> typing.Tuple[Comutation, ...]:
    comutations = []
    for item in cycle.split():
        if slot_type is CenterSlot:
            comutations.append(Comutation(CenterSlot[item]))
        else:
            comutations.append(Comutation(slot_type[item[0]], _TWISTS[item[1]]))
    return tuple(comutations)


def _quarter_turn_steps(corners : str, edges : str, centers : str) -> typing.Tuple[Step, ...]:
    steps = []
    for slot_type, cycle in ((CornerSlot, corners), (EdgeSlot, edges), (CenterSlot, centers)):
        if cycle:
            comutations = _parse_cycle(slot_type, cycle)
            check_cycle(comutations, slot_type=slot_type)
            steps.append(Step(comutations))
    return tuple(steps)


_FORWARD  = {layer: _quarter_turn_steps(*cycles) for layer, cycles in QUARTER_TURNS.items()}
_BACKWARD = {layer: tuple(Step(invert_comutations(s.comutations), reverse=True) for s in reversed(steps))
             for layer, steps in _FORWARD.items()}


def _components(layer : Layer) -> typing.Tuple[typing.Tuple[Layer, int], ...]:
    if layer in QUARTER_TURNS:
        return ((layer, 1),)
    if layer in COMPOSITE_TURNS:
        return COMPOSITE_TURNS[layer]
    raise UnrecognizedMoveError(f'No table entry for layer {layer!r}')


def _build_plan(move : Move) -> typing.Tuple[Step, ...]:
    components = _components(move.layer)
    if move.amount == 3:
        components = tuple(reversed(components))
    plan = []
    for layer, quarter_turns in components:
        amount = (quarter_turns * move.amount) % 4
        if amount == 1:
            plan.extend(_FORWARD[layer])
        elif amount == 2:
            plan.extend(_FORWARD[layer] * 2)
        else:
            plan.extend(_BACKWARD[layer])
    return tuple(plan)


_missing = set(Layer) - set(QUARTER_TURNS) - set(COMPOSITE_TURNS)
if _missing:
    raise UnrecognizedMoveError(f'Layers without table entry: {sorted(layer.value for layer in _missing)}')

MOVE_PLANS = {move: _build_plan(move) for move in Move}


def to_move(move : MoveLike) -> Move:
    """
    Coerce move token to Move

    Raises
    ------
    InvalidMoveError
        if `move` is neither a Move nor a valid token
    """
    if isinstance(move, Move):
        return move
    if isinstance(move, str):
        return Move.from_token(move)
    raise InvalidMoveError(f'Not a move: {move!r}')


def resolve(move : MoveLike) -> typing.Tuple[Step, ...]:
    """
    Get comutator invocations reproducing `move`

    Parameters
    ----------
    `move` : Move | str
        move to resolve

    Returns
    -------
    `plan` : tuple[Step]
        steps to apply in order with `Cube.cycle`
    """
    move = to_move(move)
    try:
        return MOVE_PLANS[move]
    except KeyError:
        raise UnrecognizedMoveError(f'No table entry for move {move!r}') from None


def apply_move(cube, move : MoveLike):
    """
    Apply single move to `cube` in place.
    The move is resolved before the cube is touched, an invalid move leaves the cube unchanged.
    """
    for step in resolve(move):
        cube.cycle(step.comutations, step.reverse)
    return cube

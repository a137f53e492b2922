class CubeError(Exception):
    """
    Base class for errors raised by the cube engine
    """


class InvalidCycleError(CubeError, ValueError):
    """
    Comutator call received fewer than 3 distinct slots, or slots of different piece classes.
    Raised before the cube is mutated, so the cube state is unchanged.
    """


class InvalidMoveError(CubeError, ValueError):
    """
    Move token could not be recognised
    """


class UnrecognizedMoveError(InvalidMoveError):
    """
    Move has no entry in the move tables. The move vocabulary is closed,
    so this points to a bug in the tables rather than to bad input.
    """


class InvariantViolationError(CubeError, AssertionError):
    """
    Cube state left the legal cube group
    """

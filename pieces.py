import typing

from notation import RotDirection, EdgeOrientation, CornerOrientation, EdgeSlot, CornerSlot, CenterSlot


class Edge(typing.NamedTuple):
    """
    Edge piece.

    Parameters
    ----------
    `orientation` : EdgeOrientation
        current orientation of the piece in its slot
    `home` : EdgeSlot
        slot the piece belongs to on the solved cube, travels with the piece
    """
    orientation : EdgeOrientation
    home        : EdgeSlot

    def rotate(self, direction : RotDirection = RotDirection.RIGHT) -> 'Edge':
        """
        Flip the edge. Edges have two orientations, so the direction does not matter.
        """
        if self.orientation == EdgeOrientation.CORRECT:
            return self._replace(orientation=EdgeOrientation.FLIPPED)
        return self._replace(orientation=EdgeOrientation.CORRECT)


# Y -> X -> Z -> Y for RIGHT and back for LEFT
_CORNER_ROTATIONS = {
    (CornerOrientation.Y_FACING, RotDirection.RIGHT): CornerOrientation.X_FACING,
    (CornerOrientation.X_FACING, RotDirection.RIGHT): CornerOrientation.Z_FACING,
    (CornerOrientation.Z_FACING, RotDirection.RIGHT): CornerOrientation.Y_FACING,
    (CornerOrientation.Y_FACING, RotDirection.LEFT):  CornerOrientation.Z_FACING,
    (CornerOrientation.X_FACING, RotDirection.LEFT):  CornerOrientation.Y_FACING,
    (CornerOrientation.Z_FACING, RotDirection.LEFT):  CornerOrientation.X_FACING,
}


class Corner(typing.NamedTuple):
    """
    Corner piece.

    Parameters
    ----------
    `orientation` : CornerOrientation
        current twist of the piece in its slot
    `home` : CornerSlot
        slot the piece belongs to on the solved cube, travels with the piece
    """
    orientation : CornerOrientation
    home        : CornerSlot

    def rotate(self, direction : RotDirection = RotDirection.RIGHT) -> 'Corner':
        """
        Twist the corner one step clockwise (RIGHT) or counter-clockwise (LEFT)
        """
        return self._replace(orientation=_CORNER_ROTATIONS[self.orientation, direction])


class Center(typing.NamedTuple):
    home : CenterSlot

    def rotate(self, direction : RotDirection = RotDirection.RIGHT) -> 'Center':
        return self


Piece = typing.Union[Edge, Corner, Center]


def rotate(piece : Piece, direction : RotDirection) -> Piece:
    """
    Get piece with orientation advanced in `direction`. The home of the piece is kept.
    """
    return piece.rotate(direction)


def solved_edges() -> typing.List[Edge]:
    return [Edge(EdgeOrientation.CORRECT, slot) for slot in EdgeSlot]


def solved_corners() -> typing.List[Corner]:
    return [Corner(CornerOrientation.Y_FACING, slot) for slot in CornerSlot]


def solved_centers() -> typing.List[Center]:
    return [Center(slot) for slot in CenterSlot]

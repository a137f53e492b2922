import typing

from errors   import InvalidCycleError
from notation import RotDirection, EdgeSlot, CornerSlot, CenterSlot

Slot = typing.Union[EdgeSlot, CornerSlot, CenterSlot]


class Comutation(typing.NamedTuple):
    """
    Slot taking part in a cycle, with an optional twist applied to the piece
    in that slot before the cycle moves it.

    Parameters
    ----------
    `slot` : EdgeSlot | CornerSlot | CenterSlot
        slot to cycle
    `rotation` : RotDirection, optional
        twist to apply to the piece before it is moved
    """
    slot     : Slot
    rotation : typing.Optional[RotDirection] = None

    @staticmethod
    def of(comutation : typing.Union['Comutation', Slot, typing.Tuple[Slot, typing.Optional[RotDirection]]]) -> 'Comutation':
        """
        Coerce a bare slot or a (slot, rotation) pair to Comutation
        """
        if isinstance(comutation, Comutation):
            return comutation
        if isinstance(comutation, tuple):
            return Comutation(*comutation)
        return Comutation(comutation)

    def inverted(self) -> 'Comutation':
        if self.rotation is None:
            return self
        return Comutation(self.slot, self.rotation.inverse)


def check_cycle(comutations : typing.Sequence[Comutation], size : int = None, slot_type : type = None):
    """
    Check that comutations name pairwise distinct slots of one piece class

    Parameters
    ----------
    `comutations` : Sequence[Comutation]
        comutations forming the cycle
    `size` : int, optional
        exact amount of slots required, any amount of at least three if None
    `slot_type` : type, optional
        required slot class

    Raises
    ------
    InvalidCycleError
        if the cycle is not valid
    """
    slots = [c.slot for c in comutations]
    if size is not None and len(slots) != size:
        raise InvalidCycleError(f'Expected {size} slots, got {len(slots)}: {slots}')
    if len(slots) < 3:
        raise InvalidCycleError(f'Cycle needs at least 3 slots, got {slots}')
    kinds = {type(slot) for slot in slots}
    if len(kinds) != 1 or not issubclass(kinds.pop(), (EdgeSlot, CornerSlot, CenterSlot)):
        raise InvalidCycleError(f'Cycle slots must be of one piece class, got {slots}')
    if slot_type is not None and not isinstance(slots[0], slot_type):
        raise InvalidCycleError(f'Expected {slot_type.__name__} slots, got {slots}')
    if len(set(slots)) != len(slots):
        raise InvalidCycleError(f'Cycle slots must be distinct, got {slots}')
    for c in comutations:
        if c.rotation is not None and not isinstance(c.rotation, RotDirection):
            raise InvalidCycleError(f'Unknown rotation {c.rotation!r} for slot {c.slot!r}')


def cycle_pieces(pieces : typing.MutableSequence, comutations : typing.Sequence[Comutation], reverse : bool = False):
    """
    Twist then cycle pieces in place.
    Forward moves the piece in slot 0 to slot 1, slot 1 to slot 2, ..., the last slot to slot 0.
    Reverse is the inverse permutation: slot 0 to the last slot, slot 1 to slot 0, ...
    Comutations must have passed `check_cycle`.
    """
    for c in comutations:
        if c.rotation is not None:
            pieces[c.slot.index] = pieces[c.slot.index].rotate(c.rotation)
    idx  = [c.slot.index for c in comutations]
    last = idx[-1]
    if not reverse:
        for i in idx[:-1]:
            pieces[i], pieces[last] = pieces[last], pieces[i]
    else:
        first = idx[0]
        for i in reversed(idx[1:]):
            pieces[first], pieces[i] = pieces[i], pieces[first]


def invert_comutations(comutations : typing.Sequence[Comutation]) -> typing.Tuple[Comutation, ...]:
    """
    Get comutations whose reverse cycle undoes the forward cycle of `comutations`.
    The piece twisted at slot k and moved to slot k+1 is twisted back at slot k+1.
    """
    rotations = [c.rotation for c in comutations]
    rotations = rotations[-1:] + rotations[:-1]
    return tuple(Comutation(c.slot, r).inverted() for c, r in zip(comutations, rotations))

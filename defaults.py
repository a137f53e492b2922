"""
Possible cube turns notations
"""
# outer layer turns
FACE_TURNS     = ('R', 'U', 'L', 'D', 'F', 'B')
# two layer turns, outer layer with the adjacent slice
WIDE_TURNS     = ('r', 'u', 'l', 'd', 'f', 'b')
# middle layer turns, M follows L, E follows D, S follows F
SLICE_TURNS    = ('M', 'E', 'S')
# whole cube rotations, x follows R, y follows U, z follows F
ROTATION_TURNS = ('x', 'y', 'z')

SCRAMBLE_TURNS  = FACE_TURNS + SLICE_TURNS # possible clock-wise turns
SCRAMBLE_TURNSi = SCRAMBLE_TURNS + tuple(t + "'" for t in SCRAMBLE_TURNS) # possible clock-wise and counter clock-wise turns
SCRAMBLE_TURNS2 = SCRAMBLE_TURNSi + tuple(t + '2' for t in SCRAMBLE_TURNS) # with half turns


# every turn the interpreter understands
CUBE_TURNS  = FACE_TURNS + WIDE_TURNS + SLICE_TURNS + ROTATION_TURNS
CUBE_TURNSi = CUBE_TURNS + tuple(t + "'" for t in CUBE_TURNS) + tuple(t + '2' for t in CUBE_TURNS)

SKIP_TURN = '-' # no turn at all

"""
Default parameters of the self-check run, see yparams.YParams
"""
DEFAULT_PARAMS = {
    'validation_epochs'  : 100,   # amount of random scrambles to check
    'min_scramble_turns' : 1,
    'max_scramble_turns' : 25,
    'with_rotations'     : True,  # use wide turns and x, y, z rotations in scrambles
    'balance_turns'      : True,  # pick rarely used turns more often
    'seed'               : None,
    'log_path'           : '',
    'log_filename'       : '',
    'clear_log'          : False,
}

import typing

import numpy as np

from tqdm import tqdm
from collections import Counter
from numpy.typing import ArrayLike

from cube       import Cube
from logger     import Logger
from yparams    import YParams
from notation   import Move, reverse_moves
from invariants import check_invariants
from defaults   import CUBE_TURNSi, SCRAMBLE_TURNS2


class ValidationFailure(typing.NamedTuple):
    epoch    : int
    scramble : typing.Tuple[str, ...]
    reason   : str


def get_moves_p_reversed_distribution(moves_picking : Counter, initial_tuple : tuple) -> typing.Optional[ArrayLike]:
    """
    Get probability distribution for moves to pick in scramble. The most often used moves will be with the least probability to pick.

    Parameters
    ----------
    `moves_picking` : Counter
        Dictionary with move tokens as key and amount of picking this move as value
    `initial_tuple` : tuple
        Tuple of keys of Counter object

    Returns
    -------
    `p` : ArrayLike | None
        Probability distribution, None if every move was picked equally often
    """
    p = np.zeros(len(initial_tuple)).astype(np.float64)
    for i, move in enumerate(initial_tuple):
        p[i] = moves_picking[move]
    p = p.max() - p
    if p.sum() == 0:
        return None
    p /= p.sum()
    return p


def validate(
        validation_epochs : int = 100,
        min_scramble_turns : int = 1,
        max_scramble_turns : int = 25,
        with_rotations : bool = True,
        balance_turns : bool = True,
        seed : int = None,
        logger : Logger = None,
        progress : bool = True,
    ) -> typing.Tuple[float, typing.List[ValidationFailure]]:
    """
    Self-check of the move tables: scramble solved cubes by random moves, check
    the group invariants after every single move, then undo the scramble and
    check the cube is solved again.

    Parameters
    ----------
    `validation_epochs` : int
        Amount of scrambles to check
    `min_scramble_turns` : int
        Minimum amount of moves in scramble
    `max_scramble_turns` : int
        Maximum amount of moves in scramble
    `with_rotations` : bool
        Use wide turns and x, y, z rotations in scrambles
    `balance_turns` : bool
        Pick the least used moves more often, so every move gets checked
    `seed` : int, optional
        Seed of random generator
    `logger` : Logger, optional
        logger to log results
    `progress` : bool, optional
        whether show tqdm progress bar

    Returns
    -------
    `passed` : float
        Ratio of scrambles which passed every check
    `failures` : list[ValidationFailure]
        Failed scrambles with the reason of failure
    """
    rng   = np.random.default_rng(seed)
    turns = CUBE_TURNSi if with_rotations else SCRAMBLE_TURNS2
    moves_picking = Counter()

    val_pbar   = tqdm(range(validation_epochs), disable=not progress)
    val_logger = Logger(pbar=val_pbar) if progress else None

    failures = []
    for epoch in val_pbar:
        num_scrambles = int(rng.integers(min_scramble_turns, max_scramble_turns + 1))
        p        = get_moves_p_reversed_distribution(moves_picking, turns) if balance_turns else None
        scramble = Cube.get_scramble_moves(num_scrambles, p=p, custom_turns_list=turns, rng=rng)
        moves_picking.update(move.token for move in scramble)
        tokens   = tuple(move.token for move in scramble)

        reason = _check_scramble(scramble)
        if reason:
            failures.append(ValidationFailure(epoch, tokens, reason))

        message = f'{"FAIL" if reason else "ok":4} {len(scramble):3} moves {" ".join(tokens)}'
        if reason:
            message += f' -- {reason}'
        if val_logger:
            val_logger.tqdmlog(message, add_iter_num=True)
        if logger:
            logger.filelog(message)

    passed = 1.0 - len(failures) / validation_epochs if validation_epochs else 1.0
    return passed, failures


def _check_scramble(scramble : typing.List[Move]) -> str:
    cube = Cube()
    for i, move in enumerate(scramble):
        cube.apply_move(move)
        report = check_invariants(cube)
        if not report.ok:
            return f'after move {i} ({move.token}): ' + '; '.join(report.problems())
    cube.turn_(reverse_moves(scramble))
    if not cube.is_solved():
        return f'reversed scramble does not solve the cube: {cube}'
    return ''


def get_logf(logger : Logger):
    if logger:
        return lambda message, f=True, a=True, e=False: logger.tqdmlog(message, to_file=f, attention=a, add_iter_num=e)
    return None


def selfcheck_logger_preprocessing(params : YParams, pbar : tqdm = None) -> Logger:
    """
    Prepare logger using self-check parameters

    Parameters
    ----------
    `params` : YParams
        self-check parameters
    `pbar` : tqdm, optional
        progress bar to write messages through

    Returns
    -------
    `logger` : Logger
        Logger object for logging during self-check
    """
    return Logger(
        log_dir=params.log_path, log_filename=params.log_filename,
        clear=params.clear_log, pbar=pbar,
    )

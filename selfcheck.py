import sys
import typing
import argparse

from tqdm import tqdm

from yparams import YParams
from utils   import validate, get_logf, selfcheck_logger_preprocessing


def start_selfcheck(params_path : str = None, **overrides) -> typing.Tuple[float, list]:
    """
    Run move table self-check with parameters from yaml file

    Parameters
    ----------
    `params_path` : str, optional
        path to file with self-check parameters, defaults are used if None
    `overrides` : dict
        parameters taking precedence over the file

    Returns
    -------
    `passed` : float
        ratio of scrambles passing every check
    `failures` : list[ValidationFailure]
        failed scrambles
    """
    params = YParams(params_path, **overrides)
    logger = selfcheck_logger_preprocessing(params, pbar=tqdm(total=0, disable=True))
    logf   = get_logf(logger)

    params.display(logger.filelog)
    passed, failures = validate(
        validation_epochs=params.validation_epochs,
        min_scramble_turns=params.min_scramble_turns,
        max_scramble_turns=params.max_scramble_turns,
        with_rotations=params.with_rotations,
        balance_turns=params.balance_turns,
        seed=params.seed,
        logger=logger,
    )
    logf(f'Self-check passed {passed:.2%} of {params.validation_epochs} scrambles, {len(failures)} failures')
    for failure in failures:
        logger.failurelog(failure)
    return passed, failures


def main(argv : typing.List[str] = None) -> int:
    parser = argparse.ArgumentParser(description='Check move tables keep the cube in the legal cube group')
    parser.add_argument('--params', type=str, default=None, help='path to yaml file with self-check parameters')
    parser.add_argument('--epochs', type=int, default=None, help='amount of scrambles to check')
    parser.add_argument('--seed',   type=int, default=None, help='seed of random generator')
    args = parser.parse_args(argv)

    overrides = {}
    if args.epochs is not None:
        overrides['validation_epochs'] = args.epochs
    if args.seed is not None:
        overrides['seed'] = args.seed

    _, failures = start_selfcheck(args.params, **overrides)
    return 1 if failures else 0


if __name__ == '__main__':
    sys.exit(main())

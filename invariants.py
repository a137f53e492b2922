"""
Legal cube group checks.

A state reachable by turning the cube keeps:
    1. corner permutation parity XOR edge permutation parity == center permutation parity
       (with centers at home this is the usual "corner and edge parity match")
    2. sum of corner twists == 0 (mod 3)
    3. sum of edge flips == 0 (mod 2)
"""
import typing
import numpy as np

from numpy.typing import ArrayLike

from errors import InvariantViolationError


def permutation_parity(perm : ArrayLike) -> int:
    """
    Get parity of permutation: 0 for even, 1 for odd

    Parameters
    ----------
    `perm` : ArrayLike
        permutation of 0..n-1

    Raises
    ------
    ValueError
        if `perm` is not a permutation
    """
    perm = np.asarray(perm, dtype=np.int64)
    n    = len(perm)
    if not np.array_equal(np.sort(perm), np.arange(n)):
        raise ValueError(f'Not a permutation: {perm.tolist()}')
    visited = np.zeros(n, dtype=bool)
    cycles  = 0
    for start in range(n):
        if visited[start]:
            continue
        cycles += 1
        i = start
        while not visited[i]:
            visited[i] = True
            i = perm[i]
    return (n - cycles) % 2


def corner_twist(cube) -> int:
    """
    Sum of corner orientations mod 3
    """
    return int(cube.to_arrays()['corner_orientation'].sum() % 3)


def edge_flip(cube) -> int:
    """
    Sum of edge orientations mod 2
    """
    return int(cube.to_arrays()['edge_orientation'].sum() % 2)


class InvariantReport(typing.NamedTuple):
    corner_parity : int
    edge_parity   : int
    center_parity : int
    corner_twist  : int
    edge_flip     : int

    @property
    def parity_ok(self) -> bool:
        return self.corner_parity ^ self.edge_parity == self.center_parity

    @property
    def twist_ok(self) -> bool:
        return self.corner_twist == 0

    @property
    def flip_ok(self) -> bool:
        return self.edge_flip == 0

    @property
    def ok(self) -> bool:
        return self.parity_ok and self.twist_ok and self.flip_ok

    def problems(self) -> typing.List[str]:
        problems = []
        if not self.parity_ok:
            problems.append(f'parity mismatch: corners {self.corner_parity}, edges {self.edge_parity}, centers {self.center_parity}')
        if not self.twist_ok:
            problems.append(f'corner twist {self.corner_twist} (mod 3)')
        if not self.flip_ok:
            problems.append(f'edge flip {self.edge_flip} (mod 2)')
        return problems


def check_invariants(cube) -> InvariantReport:
    """
    Compute group invariants of `cube`

    Returns
    -------
    `report` : InvariantReport
        parities of each piece class permutation, corner twist and edge flip sums
    """
    arrays = cube.to_arrays()
    return InvariantReport(
        corner_parity=permutation_parity(arrays['corner_permutation']),
        edge_parity=permutation_parity(arrays['edge_permutation']),
        center_parity=permutation_parity(arrays['center_permutation']),
        corner_twist=corner_twist(cube),
        edge_flip=edge_flip(cube),
    )


def assert_legal(cube):
    """
    Raise InvariantViolationError if `cube` is outside the legal cube group
    """
    report = check_invariants(cube)
    if not report.ok:
        raise InvariantViolationError('; '.join(report.problems()))
    return report

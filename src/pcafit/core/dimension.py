"""Selection of the number of principal components."""

from __future__ import annotations

import numpy as np
import numpy.typing as npt


def descending_order(values: npt.NDArray[np.float64]) -> npt.NDArray[np.intp]:
    """Permutation sorting values from largest to smallest.

    Equal values keep their original relative order (lower index first).
    """
    return np.argsort(-values, kind="stable")


def choose_pcadim(
    values: npt.NDArray[np.float64],
    order: npt.NDArray[np.intp],
    vsum: float,
    maxoutdim: int,
    pratio: float,
) -> int:
    """Pick how many leading components to keep.

    Components are accumulated in the given order until their summed variance
    reaches ``vsum * pratio`` or the cap ``min(len(values), maxoutdim)`` is hit.

    Args:
        values: Variance of every candidate component, in any order
        order: Descending-order permutation of values
        vsum: Sum of all values
        maxoutdim: Maximum number of components to keep
        pratio: Fraction of vsum the kept components should reach

    Returns:
        Number of components to keep, at least 1
    """
    md = min(len(values), maxoutdim)
    k = 1
    acc = values[order[0]]
    thres = vsum * pratio
    while k < md and acc < thres:
        acc += values[order[k]]
        k += 1
    return k

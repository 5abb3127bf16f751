"""
Evaluate a resolved policy over read lengths.

Thresholds that depend on read length (minimum score, score floor, N ceiling, and seed geometry)
are computed for each read length and returned as one table row per read length. Columns follow
`alnpolicy.schema.POLICY_TABLE`.
"""

__all__ = [
    'policy_table',
]

from collections.abc import Iterable

import numpy as np
import polars as pl

from . import schema
from .model import ResolvedPolicy

def policy_table(
        policy: ResolvedPolicy,
        read_lengths: Iterable[int]
) -> pl.DataFrame:
    """
    Get a table of policy thresholds for each read length.

    :param policy: Resolved policy.
    :param read_lengths: Read lengths. Rows are returned in the same order.

    :return: A table with one row per read length.

    :raises ValueError: If `policy` is None or any read length is less than 1.
    """

    if policy is None:
        raise ValueError('policy: None')

    read_len = np.fromiter(read_lengths, dtype=np.int64)

    if np.any(read_len < 1):
        raise ValueError(f'Read lengths must be positive: {", ".join(str(val) for val in read_len[read_len < 1])}')

    return pl.DataFrame(
        {
            'read_len': read_len,
            'min_score': policy.min_score(read_len.astype(float)),
            'score_floor': policy.score_floor(read_len.astype(float)),
            'n_ceil': policy.n_ceil(read_len.astype(float)),
            'seed_len': policy.seed_len(read_len),
            'seed_period': policy.seed_period(read_len),
            'seed_count': policy.seed_count(read_len),
        },
        schema=schema.POLICY_TABLE
    )

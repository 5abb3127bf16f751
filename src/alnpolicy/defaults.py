"""Default policy for a combination of mode flags."""

__all__ = [
    'resolve_defaults',
    'default_gaps',
]

from . import const
from .model import (
    LinearFunction,
    ResolvedPolicy,
)

def default_gaps(
        noisy_hpolymer: bool
) -> tuple[LinearFunction, LinearFunction]:
    """
    Get default read and reference gap penalties.

    Gap defaults depend only on the noisy homopolymer flag, not on local or global alignment mode.

    :param noisy_hpolymer: Penalize gaps less for sequencing technologies with noisy homopolymers.

    :return: A tuple of read gap and reference gap penalties.
    """

    if noisy_hpolymer:
        return const.READ_GAP_BADHPOLY, const.REF_GAP_BADHPOLY

    return const.READ_GAP, const.REF_GAP


def resolve_defaults(
        local: bool = False,
        noisy_hpolymer: bool = False
) -> ResolvedPolicy:
    """
    Get a fully-populated default policy.

    The result depends only on the two flags and is a new value for every call.

    :param local: Local alignment mode. Selects the match bonus, minimum score, and score floor.
    :param noisy_hpolymer: Noisy homopolymer mode. Selects gap penalties.

    :return: Default policy.
    """

    read_gap, ref_gap = default_gaps(noisy_hpolymer)

    return ResolvedPolicy(
        match_bonus=const.MATCH_BONUS_LOCAL if local else const.MATCH_BONUS,
        mismatch=const.MM_PENALTY,
        snp=const.SNP_PENALTY,
        n_penalty=const.N_PENALTY,
        read_gap=read_gap,
        ref_gap=ref_gap,
        min_score=const.MIN_SCORE_LOCAL if local else const.MIN_SCORE,
        score_floor=const.SCORE_FLOOR_LOCAL if local else const.SCORE_FLOOR,
        n_ceil=const.N_CEIL,
        n_cat_pair=const.N_CAT_PAIR,
        seed=const.SEED,
        seed_interval=const.SEED_IVAL,
        posmin=const.POSMIN,
        posfrac=const.POSFRAC,
        rowmin=const.ROWMIN,
        rowmult=const.ROWMULT,
    )

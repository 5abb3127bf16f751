"""
Resolved alignment policy values.

A resolved policy is the fully-populated, immutable set of parameters produced by parsing a policy
string. It parameterizes an alignment scoring function (bonuses, penalties, score thresholds) and a
seed extraction strategy (seed length, interval, and search effort). All objects in this module are
frozen dataclasses and can be shared freely.

Functions of read length (minimum score, score floor, N ceiling, seed interval) accept scalars or
numpy arrays so a caller can evaluate a policy over many reads at once.
"""

__all__ = [
    'CostModelType',
    'CostModel',
    'LinearFunction',
    'SeedIntervalType',
    'SeedIntervalFunction',
    'SeedSpec',
    'ResolvedPolicy',
]

from dataclasses import dataclass
import enum
from typing import Optional, TypeAlias

import numpy as np

NumericType: TypeAlias = int | float | np.ndarray
"""Scalar or array argument for policy functions."""


class CostModelType(enum.Enum):
    """How a bonus or penalty is computed for one alignment position."""

    CONSTANT = 'C'
    """A fixed value."""

    QUAL = 'Q'
    """The base quality value."""

    ROUNDED_QUAL = 'R'
    """The base quality rounded to the nearest 10 and capped at 30."""


@dataclass(frozen=True)
class CostModel:
    """
    Bonus or penalty model for matches, mismatches, and N positions.

    :ivar type: Cost model type.
    :ivar value: Constant value for `CostModelType.CONSTANT` models and None for quality models.
    """
    type: CostModelType
    value: Optional[int] = None

    # Quality values are rounded to the nearest multiple and capped
    ROUND_TO = 10
    ROUND_MAX = 30

    def penalty(
            self,
            qual: NumericType = 0
    ) -> NumericType:
        """
        Get the cost for a position.

        :param qual: Base quality value (Phred scale). Ignored for constant models.

        :return: Cost for each quality value.
        """

        if self.type == CostModelType.CONSTANT:
            if isinstance(qual, np.ndarray):
                return np.full(qual.shape, self.value, dtype=int)

            return self.value

        if self.type == CostModelType.QUAL:
            return qual

        rounded = np.minimum(
            np.floor(np.asarray(qual) / self.ROUND_TO + 0.5) * self.ROUND_TO,
            self.ROUND_MAX
        ).astype(int)

        return rounded if isinstance(qual, np.ndarray) else int(rounded)

    def to_token(self) -> str:
        """
        Get the policy string token for this model ("C6", "Q", or "R").

        :return: Token string.
        """
        if self.type == CostModelType.CONSTANT:
            return f'C{self.value}'

        return self.type.value


@dataclass(frozen=True)
class LinearFunction:
    """
    A function `const + linear * x`.

    For score thresholds (minimum score, score floor, N ceiling), `x` is the read length. For gap
    penalties, `const` is the gap open penalty, `linear` is the extension penalty, and `x` is the gap
    length.

    :ivar const: Constant term.
    :ivar linear: Linear coefficient.
    """
    const: int | float
    linear: int | float

    def __call__(
            self,
            x: NumericType
    ) -> NumericType:
        """
        Evaluate the function.

        :param x: Read length or gap length.

        :return: Function value.
        """
        return self.const + self.linear * x

    def to_tokens(self) -> list[str]:
        """
        Get policy string tokens for this function.

        :return: A list of two tokens.
        """
        return [_num_token(self.const), _num_token(self.linear)]


class SeedIntervalType(enum.Enum):
    """Function of read length used to space seeds."""

    LINEAR = 'L'
    SQUARE_ROOT = 'S'
    CUBE_ROOT = 'C'


@dataclass(frozen=True)
class SeedIntervalFunction:
    """
    Interval between seeds as a function of read length.

    The interval is `a * f(len) + b` where `f` is the identity, square root, or cube root. Fractional
    intervals are truncated, and intervals less than 1 are rounded up to 1.

    :ivar type: Function of read length.
    :ivar a: Coefficient for `f(len)`.
    :ivar b: Constant term.
    """
    type: SeedIntervalType
    a: float
    b: float

    def interval(
            self,
            read_len: NumericType
    ) -> NumericType:
        """
        Get the interval between seeds.

        :param read_len: Read length.

        :return: Seed interval (at least 1).
        """

        x = np.asarray(read_len, dtype=float)

        if self.type == SeedIntervalType.SQUARE_ROOT:
            x = np.sqrt(x)
        elif self.type == SeedIntervalType.CUBE_ROOT:
            x = np.cbrt(x)

        ival = np.maximum(np.floor(self.a * x + self.b), 1).astype(int)

        return ival if isinstance(read_len, np.ndarray) else int(ival)

    def to_tokens(self) -> list[str]:
        """
        Get policy string tokens for this function.

        :return: A list of three tokens (type, a, b).
        """
        return [self.type.value, _num_token(self.a), _num_token(self.b)]


@dataclass(frozen=True)
class SeedSpec:
    """
    Seed geometry.

    :ivar mismatches: Maximum number of mismatches allowed in a seed alignment (0 to 2).
    :ivar length: Seed length.
    :ivar period: Fixed interval between seeds or None to derive it from the seed interval function.
    """
    mismatches: int
    length: int
    period: Optional[int] = None


@dataclass(frozen=True)
class ResolvedPolicy:
    """
    A fully-resolved alignment and seed policy.

    :ivar match_bonus: Bonus for a matching position.
    :ivar mismatch: Penalty for a mismatched position.
    :ivar snp: Penalty for a nucleotide difference in a decoded colorspace alignment.
    :ivar n_penalty: Penalty for a position with an N in the read or the reference.
    :ivar read_gap: Read gap penalty (open, extension).
    :ivar ref_gap: Reference gap penalty (open, extension).
    :ivar min_score: Minimum score for a valid alignment as a function of read length.
    :ivar score_floor: Dynamic programming cells scoring below this function of read length cannot
        be part of a valid alignment.
    :ivar n_ceil: Maximum number of N positions as a function of read length.
    :ivar n_cat_pair: Concatenate mates before applying the N ceiling.
    :ivar seed: Seed geometry.
    :ivar seed_interval: Seed interval function used when `seed.period` is None.
    :ivar posmin: Always examine at least this many seed positions.
    :ivar posfrac: Examine this fraction of additional seed positions.
    :ivar rowmin: Minimum number of seed extensions tried from a seed position.
    :ivar rowmult: Seed extensions tried from a seed position per seed hit.
    """
    match_bonus: CostModel
    mismatch: CostModel
    snp: int
    n_penalty: CostModel
    read_gap: LinearFunction
    ref_gap: LinearFunction
    min_score: LinearFunction
    score_floor: LinearFunction
    n_ceil: LinearFunction
    n_cat_pair: bool
    seed: SeedSpec
    seed_interval: SeedIntervalFunction
    posmin: float
    posfrac: float
    rowmin: float
    rowmult: float

    def seed_len(
            self,
            read_len: NumericType
    ) -> NumericType:
        """
        Get the seed length for a read. Seeds longer than the read are shrunk to the read length.

        :param read_len: Read length.

        :return: Seed length.
        """
        return np.minimum(self.seed.length, read_len)

    def seed_period(
            self,
            read_len: NumericType
    ) -> NumericType:
        """
        Get the interval between seeds for a read.

        :param read_len: Read length.

        :return: Fixed seed period if set, otherwise the seed interval function evaluated for
            `read_len`. Periods less than 1 are rounded up to 1.
        """
        if self.seed.period is not None:
            period = max(self.seed.period, 1)

            if isinstance(read_len, np.ndarray):
                return np.full(read_len.shape, period, dtype=int)

            return period

        return self.seed_interval.interval(read_len)

    def seed_count(
            self,
            read_len: NumericType
    ) -> NumericType:
        """
        Get the number of seeds extracted from one strand of a read.

        Seeds start at offsets 0, period, 2 * period, ... and must fit on the read. At least one seed
        is always extracted.

        :param read_len: Read length.

        :return: Number of seeds.
        """
        seed_len = self.seed_len(read_len)
        period = self.seed_period(read_len)

        count = np.maximum((np.asarray(read_len) - seed_len) // period + 1, 1).astype(int)

        return count if isinstance(read_len, np.ndarray) else int(count)

    def to_policy_string(self) -> str:
        """
        Get a policy string that resolves to this policy.

        The string is parsed to an equal policy under the same mode flags used to create this
        policy. The match bonus type is not part of the policy language and is not represented.

        :return: Policy string.
        """

        seed_tokens = [str(self.seed.mismatches), str(self.seed.length)]

        if self.seed.period is not None:
            seed_tokens.append(str(self.seed.period))

        clauses = [
            ('MA', [str(self.match_bonus.value)]),
            ('MMP', [self.mismatch.to_token()]),
            ('SNP', [str(self.snp)]),
            ('NP', [self.n_penalty.to_token()]),
            ('RDG', self.read_gap.to_tokens()),
            ('RFG', self.ref_gap.to_tokens()),
            ('MIN', self.min_score.to_tokens()),
            ('FL', self.score_floor.to_tokens()),
            ('NCEIL', self.n_ceil.to_tokens()),
            ('SEED', seed_tokens),
            ('IVAL', self.seed_interval.to_tokens()),
            ('POSF', [_num_token(self.posmin), _num_token(self.posfrac)]),
            ('ROWM', [_num_token(self.rowmult), _num_token(self.rowmin)]),
        ]

        return ';'.join(
            f'{tag}={",".join(tokens)}' for tag, tokens in clauses
        )


def _num_token(val: int | float) -> str:
    """Format a number as a policy token."""

    if isinstance(val, float) and np.isinf(val):
        return '-inf' if val < 0 else 'inf'

    return repr(val) if isinstance(val, float) else str(val)

"""
Accumulate clause effects before creating a resolved policy.

Clause handlers write to a `PolicyBuilder`, which starts from the default policy for a pair of mode
flags. The builder is only converted to a `ResolvedPolicy` after every clause is applied, so a
policy string that fails part way through never produces a policy.
"""

__all__ = [
    'PolicyBuilder',
]

from dataclasses import dataclass, fields
from typing import Any

from ..defaults import default_gaps, resolve_defaults
from ..model import (
    CostModel,
    LinearFunction,
    ResolvedPolicy,
    SeedIntervalFunction,
    SeedSpec,
)


@dataclass
class PolicyBuilder:
    """
    Mutable policy fields.

    Fields mirror `ResolvedPolicy`. Mode flags are kept so handlers can reset omitted values to
    mode-dependent defaults.

    :ivar local: Local alignment mode.
    :ivar noisy_hpolymer: Noisy homopolymer mode.
    """
    local: bool
    noisy_hpolymer: bool

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

    @classmethod
    def from_defaults(
            cls,
            local: bool = False,
            noisy_hpolymer: bool = False
    ) -> 'PolicyBuilder':
        """
        Create a builder initialized to the default policy.

        :param local: Local alignment mode.
        :param noisy_hpolymer: Noisy homopolymer mode.

        :return: New builder.
        """

        return cls.from_policy(
            resolve_defaults(local, noisy_hpolymer),
            local=local,
            noisy_hpolymer=noisy_hpolymer,
        )

    @classmethod
    def from_policy(
            cls,
            policy: ResolvedPolicy,
            local: bool = False,
            noisy_hpolymer: bool = False
    ) -> 'PolicyBuilder':
        """
        Create a builder initialized to an existing policy.

        :param policy: Initial policy.
        :param local: Local alignment mode.
        :param noisy_hpolymer: Noisy homopolymer mode.

        :return: New builder.
        """

        return cls(
            local=local,
            noisy_hpolymer=noisy_hpolymer,
            **_policy_dict(policy)
        )

    def default_gaps(self) -> tuple[LinearFunction, LinearFunction]:
        """
        Get default read and reference gap penalties for this builder's mode flags.

        :return: A tuple of read gap and reference gap penalties.
        """
        return default_gaps(self.noisy_hpolymer)

    def update(
            self,
            **kwargs: Any
    ) -> None:
        """
        Set policy fields.

        :param kwargs: Field names and values.

        :raises AttributeError: If a field name is not a policy field.
        """

        for name, val in kwargs.items():
            if name not in _POLICY_FIELDS:
                raise AttributeError(f'Not a policy field: {name}')

            setattr(self, name, val)

    def build(self) -> ResolvedPolicy:
        """
        Create a resolved policy from the current fields.

        :return: Resolved policy.
        """
        return ResolvedPolicy(
            **{name: getattr(self, name) for name in _POLICY_FIELDS}
        )


_POLICY_FIELDS: tuple[str, ...] = tuple(f.name for f in fields(ResolvedPolicy))


def _policy_dict(
        policy: ResolvedPolicy
) -> dict[str, Any]:
    """Get policy fields as a dictionary (shallow, values are immutable)."""
    return {name: getattr(policy, name) for name in _POLICY_FIELDS}

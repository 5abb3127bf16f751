"""
Resources for policy parsing tests.
"""

import itertools
import math
import pytest
from typing import Any
import warnings

import alnpolicy
from alnpolicy.model import (
    CostModel,
    CostModelType,
    LinearFunction,
    SeedIntervalFunction,
    SeedIntervalType,
    SeedSpec,
)

FLAG_TUPLES = list(itertools.product([False, True], repeat=2))
"""All (local, noisy_hpolymer) combinations."""

FLAG_KEY_SPEC = 'local,noisy_hpolymer'
"""String representation of flag keys."""

DEFAULTS_GLOBAL = {
    'match_bonus': CostModel(CostModelType.CONSTANT, 0),
    'mismatch': CostModel(CostModelType.CONSTANT, 6),
    'snp': 6,
    'n_penalty': CostModel(CostModelType.CONSTANT, 1),
    'read_gap': LinearFunction(5, 3),
    'ref_gap': LinearFunction(5, 3),
    'min_score': LinearFunction(-0.6, -0.6),
    'score_floor': LinearFunction(-math.inf, 0.0),
    'n_ceil': LinearFunction(0.0, 0.15),
    'n_cat_pair': False,
    'seed': SeedSpec(0, 22, None),
    'seed_interval': SeedIntervalFunction(SeedIntervalType.SQUARE_ROOT, 1.0, 0.0),
    'posmin': 2.0,
    'posfrac': 0.1,
    'rowmin': 2.0,
    'rowmult': 2.0,
}
"""Expected defaults for global alignment with standard gap penalties."""

DEFAULTS_LOCAL = {
    'match_bonus': CostModel(CostModelType.CONSTANT, 2),
    'min_score': LinearFunction(0.0, 0.66),
    'score_floor': LinearFunction(0.0, 0.0),
}
"""Fields that differ in local alignment mode."""

DEFAULTS_HPOLY = {
    'read_gap': LinearFunction(3, 1),
    'ref_gap': LinearFunction(3, 1),
}
"""Fields that differ in noisy homopolymer mode."""

SIMPLE_POLICY = 'MMP=C44;MA=4;RFG=24,12;FL=8;RDG=2;SNP=10;NP=C4;MIN=7'
"""A policy string setting several tags with some omitted tokens."""


def expected_defaults(
        local: bool,
        noisy_hpolymer: bool
) -> dict[str, Any]:
    """Get expected default fields.

    :param local: Local alignment mode.
    :param noisy_hpolymer: Noisy homopolymer mode.

    :return: A dictionary of expected policy fields.
    """

    fields = dict(DEFAULTS_GLOBAL)

    if local:
        fields |= DEFAULTS_LOCAL

    if noisy_hpolymer:
        fields |= DEFAULTS_HPOLY

    return fields


def policy_dict(
        policy: alnpolicy.ResolvedPolicy
) -> dict[str, Any]:
    """Get policy fields as a dictionary for assert comparisons.

    :param policy: Resolved policy.

    :return: A dictionary of policy fields.
    """

    return {
        key: getattr(policy, key) for key in DEFAULTS_GLOBAL.keys()
    }


def parse(
        policy: str,
        local: bool = False,
        noisy_hpolymer: bool = False
) -> alnpolicy.ResolvedPolicy:
    """Parse a policy string failing on warnings.

    :param policy: Policy string.
    :param local: Local alignment mode.
    :param noisy_hpolymer: Noisy homopolymer mode.

    :return: Resolved policy.
    """

    with warnings.catch_warnings():
        warnings.simplefilter('error')
        return alnpolicy.parse_policy(policy, local=local, noisy_hpolymer=noisy_hpolymer)


#
# Fixtures
#

@pytest.fixture(scope='class')
def default_policy(
        local: bool,
        noisy_hpolymer: bool
) -> alnpolicy.ResolvedPolicy:
    """Get a policy parsed from an empty string.

    :param local: Local alignment mode.
    :param noisy_hpolymer: Noisy homopolymer mode.

    :return: Default policy.
    """

    return parse('', local, noisy_hpolymer)

"""
Targeted tests for resolved policy values.
"""

import math

import numpy as np
import pytest

import alnpolicy
from alnpolicy.model import (
    CostModel,
    CostModelType,
    LinearFunction,
    SeedIntervalFunction,
    SeedIntervalType,
    SeedSpec,
)


#
# Cost models
#

def test_cost_constant() -> None:
    model = CostModel(CostModelType.CONSTANT, 6)

    assert model.penalty() == 6
    assert model.penalty(40) == 6
    assert list(model.penalty(np.array([0, 20, 40]))) == [6, 6, 6]


def test_cost_qual() -> None:
    model = CostModel(CostModelType.QUAL)

    assert model.penalty(17) == 17
    assert list(model.penalty(np.array([3, 35]))) == [3, 35]


def test_cost_rounded_qual() -> None:
    """Qualities are rounded to the nearest 10 and capped at 30."""

    model = CostModel(CostModelType.ROUNDED_QUAL)

    assert model.penalty(4) == 0
    assert model.penalty(5) == 10
    assert model.penalty(14) == 10
    assert model.penalty(26) == 30
    assert model.penalty(41) == 30

    assert list(model.penalty(np.array([4, 15, 25, 38]))) == [0, 20, 30, 30]


def test_cost_token() -> None:
    assert CostModel(CostModelType.CONSTANT, 44).to_token() == 'C44'
    assert CostModel(CostModelType.QUAL).to_token() == 'Q'
    assert CostModel(CostModelType.ROUNDED_QUAL).to_token() == 'R'


#
# Functions of read length
#

def test_linear_function() -> None:
    func = LinearFunction(-0.6, -0.6)

    assert func(100) == pytest.approx(-60.6)
    assert list(func(np.array([10, 100]))) == pytest.approx([-6.6, -60.6])

    # Gap penalty: open + extension * length
    assert LinearFunction(5, 3)(2) == 11


def test_linear_function_inf() -> None:
    assert LinearFunction(-math.inf, 0.0)(100) == -math.inf
    assert LinearFunction(-math.inf, 0.0).to_tokens() == ['-inf', '0.0']


@pytest.mark.parametrize('ival_type,a,b,read_len,exp', [
    (SeedIntervalType.LINEAR, 0.1, 2.0, 100, 12),
    (SeedIntervalType.LINEAR, 0.0, 0.0, 100, 1),
    (SeedIntervalType.SQUARE_ROOT, 1.0, 0.0, 100, 10),
    (SeedIntervalType.SQUARE_ROOT, 1.15, 0.0, 150, 14),
    (SeedIntervalType.CUBE_ROOT, 2.0, 1.5, 125, 11),
    (SeedIntervalType.CUBE_ROOT, -1.0, 0.0, 125, 1),
])
def test_seed_interval(ival_type, a, b, read_len, exp) -> None:
    """Intervals are truncated and at least 1."""

    func = SeedIntervalFunction(ival_type, a, b)

    assert func.interval(read_len) == exp
    assert list(func.interval(np.array([read_len, read_len]))) == [exp, exp]


#
# Seeds
#

def test_seed_period() -> None:
    """A fixed period overrides the interval function."""

    policy = alnpolicy.resolve_defaults()

    assert policy.seed_period(100) == 10
    assert policy.seed_period(400) == 20

    policy = alnpolicy.parse_policy('SEED=1,10,5')

    assert policy.seed_period(100) == 5
    assert list(policy.seed_period(np.array([20, 400]))) == [5, 5]


def test_seed_count() -> None:
    """Seeds are extracted while they fit on the read."""

    # Seeds at 0, 5, 10 on a 20 bp read
    policy = alnpolicy.parse_policy('SEED=1,10,5')
    assert policy.seed_count(20) == 3

    # Seed length shrinks to the read length
    policy = alnpolicy.parse_policy('SEED=1,20,20')
    assert policy.seed_len(15) == 15
    assert policy.seed_count(15) == 1

    # A second seed would overhang the read
    policy = alnpolicy.parse_policy('SEED=1,10,10')
    assert policy.seed_count(15) == 1

    assert list(policy.seed_count(np.array([15, 20, 35]))) == [1, 2, 3]


def test_seed_spec_default_period() -> None:
    assert SeedSpec(0, 22).period is None


@pytest.mark.parametrize('period', [0, -5])
def test_seed_period_floor(period: int) -> None:
    """Fixed periods less than 1 are rounded up to 1."""

    with pytest.warns(UserWarning, match='Seed period'):
        policy = alnpolicy.parse_policy(f'SEED=0,22,{period}')

    assert policy.seed_period(100) == 1
    assert policy.seed_count(100) == 79
    assert list(policy.seed_count(np.array([22, 100]))) == [1, 79]

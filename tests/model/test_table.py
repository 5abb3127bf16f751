"""
Targeted tests for per-read-length policy tables.
"""

import math

import polars as pl
import pytest

import alnpolicy
import alnpolicy.table


def test_table_schema() -> None:
    df = alnpolicy.table.policy_table(alnpolicy.resolve_defaults(), [100, 250])

    assert list(df.columns) == list(alnpolicy.schema.POLICY_TABLE.keys())
    assert dict(df.schema) == alnpolicy.schema.POLICY_TABLE
    assert df.height == 2


def test_table_global() -> None:
    df = alnpolicy.table.policy_table(alnpolicy.resolve_defaults(), [100])

    row = df.row(0, named=True)

    assert row['read_len'] == 100
    assert row['min_score'] == pytest.approx(-60.6)
    assert row['score_floor'] == -math.inf
    assert row['n_ceil'] == pytest.approx(15.0)
    assert row['seed_len'] == 22
    assert row['seed_period'] == 10
    assert row['seed_count'] == 8


def test_table_local() -> None:
    policy = alnpolicy.parse_policy('SEED=0,20,10;MIN=5,1', local=True)

    df = alnpolicy.table.policy_table(policy, [15, 50])

    assert df.get_column('min_score').to_list() == pytest.approx([20.0, 55.0])
    assert df.get_column('score_floor').to_list() == [0.0, 0.0]
    assert df.get_column('seed_len').to_list() == [15, 20]
    assert df.get_column('seed_period').to_list() == [10, 10]
    assert df.get_column('seed_count').to_list() == [1, 4]


def test_table_empty() -> None:
    df = alnpolicy.table.policy_table(alnpolicy.resolve_defaults(), [])

    assert df.height == 0
    assert dict(df.schema) == alnpolicy.schema.POLICY_TABLE


def test_table_bad_read_len() -> None:
    with pytest.raises(ValueError):
        alnpolicy.table.policy_table(alnpolicy.resolve_defaults(), [100, 0])

    with pytest.raises(ValueError):
        alnpolicy.table.policy_table(None, [100])


def test_table_zero_period() -> None:
    """A zero seed period places a seed at every position."""

    with pytest.warns(UserWarning, match='Seed period'):
        policy = alnpolicy.parse_policy('SEED=0,22,0')

    row = alnpolicy.table.policy_table(policy, [100]).row(0, named=True)

    assert row['seed_period'] == 1
    assert row['seed_count'] == 79

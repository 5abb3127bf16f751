"""
Standard schema for alnpolicy tables.
"""

import polars as pl

# Per-read-length policy thresholds
POLICY_TABLE = {
    'read_len': pl.Int64,
    'min_score': pl.Float64,
    'score_floor': pl.Float64,
    'n_ceil': pl.Float64,
    'seed_len': pl.Int64,
    'seed_period': pl.Int64,
    'seed_count': pl.Int64,
}

"""
Default alignment policy values.

Defaults are selected by two mode flags: local alignment mode and noisy homopolymer mode. Values
here are immutable; `alnpolicy.defaults.resolve_defaults()` assembles them into a policy.
"""

from .model import (
    CostModel,
    CostModelType,
    LinearFunction,
    SeedIntervalFunction,
    SeedIntervalType,
    SeedSpec,
)

# Match bonus (MA)
MATCH_BONUS = CostModel(CostModelType.CONSTANT, 0)
MATCH_BONUS_LOCAL = CostModel(CostModelType.CONSTANT, 2)

# Mismatch and N penalties (MMP, NP, SNP)
MM_PENALTY = CostModel(CostModelType.CONSTANT, 6)
N_PENALTY = CostModel(CostModelType.CONSTANT, 1)
SNP_PENALTY = 6

# Gap penalties (RDG, RFG). Noisy homopolymer mode penalizes gaps less.
READ_GAP = LinearFunction(5, 3)
REF_GAP = LinearFunction(5, 3)

READ_GAP_BADHPOLY = LinearFunction(3, 1)
REF_GAP_BADHPOLY = LinearFunction(3, 1)

# Minimum score (MIN). Global alignment scores may be negative.
MIN_SCORE = LinearFunction(-0.6, -0.6)
MIN_SCORE_LOCAL = LinearFunction(0.0, 0.66)

# Score floor (FL). Local alignment scores are floored at 0.
SCORE_FLOOR = LinearFunction(float('-inf'), 0.0)
SCORE_FLOOR_LOCAL = LinearFunction(0.0, 0.0)

# N ceiling (NCEIL)
N_CEIL = LinearFunction(0.0, 0.15)
N_CAT_PAIR = False

# Seeds (SEED, IVAL)
SEED_MMS = 0
SEED_LEN = 22
SEED_PERIOD = None

SEED = SeedSpec(SEED_MMS, SEED_LEN, SEED_PERIOD)

SEED_IVAL_A = 1.0
SEED_IVAL_B = 0.0

SEED_IVAL = SeedIntervalFunction(SeedIntervalType.SQUARE_ROOT, SEED_IVAL_A, SEED_IVAL_B)

# Maximum number of seed mismatches supported by seed search
SEED_MMS_MAX = 2

# Seed position search effort (POSF, ROWM)
POSMIN = 2.0
POSFRAC = 0.1
ROWMIN = 2.0
ROWMULT = 2.0

#!/usr/bin/env python3

import argparse
import sys

import polars as pl

import alnpolicy
import alnpolicy.table


#
# Main
#

if __name__ == "__main__":

    # Parse command-line arguments
    epilog = \
"""
Policy strings are semicolon-separated "tag=value" clauses, for example:
"MMP=C44;MA=4;RFG=24,12;FL=8;RDG=2;SNP=10;NP=C4;MIN=7"
"""

    parser = argparse.ArgumentParser(
        description='alnpolicy: Resolve an alignment and seed policy string.',
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument('policy', nargs='?', default='',
                        help='Policy string. If omitted, print the default policy.')

    parser.add_argument('--local', action='store_true',
                        help='Use local alignment defaults.')

    parser.add_argument('--noisy-hpolymer', action='store_true',
                        help='Use gap defaults for sequencing technologies with noisy homopolymers.')

    parser.add_argument('--read-len', type=int, action='append', default=[],
                        help='Print thresholds for this read length (may be repeated).')

    args = parser.parse_args()

    try:
        policy = alnpolicy.parse_policy(args.policy, local=args.local, noisy_hpolymer=args.noisy_hpolymer)
    except alnpolicy.PolicyError as e:
        print(e, file=sys.stderr)
        sys.exit(1)

    print(policy.to_policy_string())

    if args.read_len:
        try:
            df = alnpolicy.table.policy_table(policy, args.read_len)
        except ValueError as e:
            print(e, file=sys.stderr)
            sys.exit(1)

        with pl.Config(tbl_rows=-1):
            print(df)

"""
Alignment policy strings describe scoring and seed parameters in a compact form.

A policy string is a list of "tag=value" clauses separated by semicolons, for example
"MMP=C44;MA=4;RFG=24,12;FL=8". Clauses override defaults that are selected by two mode flags (local
alignment and noisy homopolymer mode).

This module is organized into several submodules:
* tokenize: Splits policy strings into clauses and tokens.
* lexer: Lexes numeric tokens.
* clause: Handlers for each tag and the interpreter that applies clauses.
* builder: Accumulates clause effects before creating a resolved policy.
* parser: Ties the submodules together. Most code outside this module only needs
    `parser.parse_policy()`.
"""

from . import builder
from . import clause
from . import lexer
from . import parser
from . import tokenize

from .parser import PolicyParser, parse_policy

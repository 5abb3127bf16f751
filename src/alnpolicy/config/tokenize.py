"""
Split alignment policy strings into clauses and tokens.

A policy string is a list of clauses separated by ";". Each clause is a tag and a value separated
by "=", and each value is a list of one to three tokens separated by ",":

.. code-block:: text

    MMP=C44;MA=4;RFG=24,12;FL=8;RDG=2;SNP=10;NP=C4;MIN=7
"""

__all__ = [
    'Clause',
    'split_clauses',
    'split_tag_value',
    'split_sub_tokens',
    'tokenize',
    'MAX_TOKENS',
]

from dataclasses import dataclass
from typing import Optional

from ..errors import (
    EmptyTokenError,
    MalformedClauseError,
    PolicyError,
    TooManyTokensError,
)

# Maximum number of comma-separated tokens in a clause value
MAX_TOKENS = 3


@dataclass(frozen=True)
class Clause:
    """
    One "tag=value" clause.

    :ivar index: 1-based position of this clause in the policy string.
    :ivar tag: Clause tag.
    :ivar tokens: Value tokens (1 to 3 non-empty strings).
    """
    index: int
    tag: str
    tokens: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.tokens)


def split_clauses(
        text: Optional[str]
) -> list[str]:
    """
    Split a policy string into clauses.

    An empty string has no clauses. A trailing ";" ends the last clause and does not start a new
    one, but empty clauses anywhere else are returned and rejected by `split_tag_value()`.

    :param text: Policy string.

    :return: A list of clause strings.
    """

    if not text:
        return []

    clauses = text.split(';')

    if clauses[-1] == '':
        clauses = clauses[:-1]

    return clauses


def split_tag_value(
        clause: str
) -> tuple[str, str]:
    """
    Split a clause into a tag and a value.

    :param clause: Clause string.

    :return: A tuple of tag and value strings.

    :raises MalformedClauseError: If the clause does not contain exactly one "=".
    """

    tag_val = clause.split('=')

    if len(tag_val) != 2:
        raise MalformedClauseError(
            f'Must be bisected by one "=" sign (found {len(tag_val) - 1})',
            token=clause
        )

    return tag_val[0], tag_val[1]


def split_sub_tokens(
        value: str
) -> list[str]:
    """
    Split a clause value into comma-separated tokens.

    :param value: Clause value.

    :return: A list of 1 to 3 non-empty tokens.

    :raises TooManyTokensError: If there are more than 3 tokens.
    :raises EmptyTokenError: If any token is empty.
    """

    tok_list = value.split(',')

    if len(tok_list) > MAX_TOKENS:
        raise TooManyTokensError(
            f'Right-hand side must have at most {MAX_TOKENS} tokens (found {len(tok_list)})',
            token=value
        )

    for index, tok in enumerate(tok_list):
        if len(tok) == 0:
            raise EmptyTokenError(
                f'Token {index + 1} on the right-hand side has length 0',
                token=value
            )

    return tok_list


def tokenize(
        text: Optional[str]
) -> list[Clause]:
    """
    Split a policy string into clauses.

    :param text: Policy string.

    :return: A list of clauses in the order they appear in `text`.

    :raises PolicyError: If any clause is malformed.
    """

    clause_list = []

    for index, clause_str in enumerate(split_clauses(text), 1):
        try:
            tag, value = split_tag_value(clause_str)
        except PolicyError as e:
            raise e.with_context(policy=text, clause_index=index)

        try:
            tok_list = split_sub_tokens(value)
        except PolicyError as e:
            raise e.with_context(policy=text, clause_index=index, tag=tag)

        clause_list.append(Clause(index, tag, tuple(tok_list)))

    return clause_list

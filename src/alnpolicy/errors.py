"""
Errors raised while parsing alignment policy strings.

All errors derive from `PolicyError`, which is a `ValueError`. Parsing stops at the first error and
no partial policy is returned. Each error records where it occurred so the caller (usually a
command-line layer) can decide how to report it.
"""

__all__ = [
    'PolicyError',
    'MalformedClauseError',
    'EmptyTokenError',
    'TooManyTokensError',
    'TokenCountError',
    'UnknownTagError',
    'CostModelPrefixError',
    'IntervalTypeError',
    'NumericParseError',
]

from typing import Optional

from .util.str import abbreviate

# Maximum length of the policy string reported in error messages
POLICY_MSG_LEN = 60


class PolicyError(ValueError):
    """
    Base class for alignment policy errors.

    :ivar reason: Reason the policy was rejected.
    :ivar policy: Full policy string being parsed or None if not known where the error was raised.
    :ivar clause_index: 1-based index of the offending clause or None if not known.
    :ivar tag: Tag of the offending clause or None if not known.
    :ivar token: Offending token or None if the error is not specific to one token.
    """
    reason: str
    policy: Optional[str]
    clause_index: Optional[int]
    tag: Optional[str]
    token: Optional[str]

    def __init__(
            self,
            reason: str,
            policy: Optional[str] = None,
            clause_index: Optional[int] = None,
            tag: Optional[str] = None,
            token: Optional[str] = None,
    ) -> None:
        self.reason = reason
        self.policy = policy
        self.clause_index = clause_index
        self.tag = tag
        self.token = token

        super().__init__(self._format())

    def with_context(
            self,
            policy: Optional[str] = None,
            clause_index: Optional[int] = None,
            tag: Optional[str] = None,
    ) -> 'PolicyError':
        """
        Fill in location fields that were not known where the error was raised.

        Fields that are already set are not changed.

        :param policy: Full policy string.
        :param clause_index: 1-based clause index.
        :param tag: Clause tag.

        :return: This error (for `raise err.with_context(...)`).
        """

        if self.policy is None:
            self.policy = policy

        if self.clause_index is None:
            self.clause_index = clause_index

        if self.tag is None:
            self.tag = tag

        self.args = (self._format(),)

        return self

    def _format(self) -> str:

        location = []

        if self.clause_index is not None:
            location.append(f'setting {self.clause_index}')

        if self.tag is not None:
            location.append(f'tag "{self.tag}"')

        if self.token is not None:
            location.append(f'token "{abbreviate(self.token)}"')

        msg = 'Error parsing alignment policy'

        if location:
            msg += ' ' + ', '.join(location)

        msg += f': {self.reason}'

        if self.policy is not None:
            msg += f' (policy: "{abbreviate(self.policy, POLICY_MSG_LEN)}")'

        return msg


class MalformedClauseError(PolicyError):
    """Clause is not bisected by exactly one "=" sign."""
    pass


class EmptyTokenError(PolicyError):
    """A comma-separated token on the right-hand side of a clause is empty."""
    pass


class TooManyTokensError(PolicyError):
    """The right-hand side of a clause has more than three tokens."""
    pass


class TokenCountError(PolicyError):
    """The number of tokens is outside the range accepted by a tag."""
    pass


class UnknownTagError(PolicyError):
    """The clause tag is not recognized."""
    pass


class CostModelPrefixError(PolicyError):
    """A cost model does not start with "C", "Q", or "R"."""
    pass


class IntervalTypeError(PolicyError):
    """A seed interval function type does not start with "L", "S", or "C"."""
    pass


class NumericParseError(PolicyError):
    """A token could not be parsed as the number type its field requires."""
    pass

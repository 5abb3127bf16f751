from collections.abc import Mapping
from typing import Optional

from ..errors import PolicyError
from ..model import ResolvedPolicy

from .builder import PolicyBuilder
from .clause import ClauseHandler, ClauseInterpreter
from .tokenize import tokenize

__all__ = ['PolicyParser', 'parse_policy']

class PolicyParser(object):
    """
    Alignment policy parser.

    A parser holds the mode flags used to select defaults. It has no state that changes while
    parsing and can be reused and shared.

    :ivar local: Local alignment mode.
    :ivar noisy_hpolymer: Noisy homopolymer mode.
    :ivar handlers: Clause handlers keyed by tag or None for the standard handlers.
    """
    local: bool
    noisy_hpolymer: bool
    handlers: Optional[Mapping[str, ClauseHandler]]

    def __init__(self,
        local: bool = False,
        noisy_hpolymer: bool = False,
        handlers: Optional[Mapping[str, ClauseHandler]] = None
    ):
        """
        Init parser.

        :param local: Local alignment mode.
        :param noisy_hpolymer: Noisy homopolymer mode.
        :param handlers: Clause handlers keyed by tag. If None, use `clause.CLAUSE_HANDLERS`.
        """
        self.local = bool(local)
        self.noisy_hpolymer = bool(noisy_hpolymer)
        self.handlers = handlers

    def defaults(self) -> ResolvedPolicy:
        """
        Get the default policy for this parser's mode flags.

        :return: Default policy.
        """
        return PolicyBuilder.from_defaults(self.local, self.noisy_hpolymer).build()

    # Parse
    def parse(self,
        policy: Optional[str]
    ) -> ResolvedPolicy:
        """
        Parse a policy string.

        Clauses are applied in order, so a tag appearing more than once is set by its last clause
        (subject to that tag's rules for omitted tokens). Leading and trailing whitespace is ignored,
        and a missing or empty string resolves to the default policy.

        :param policy: Policy string.

        :return: Resolved policy.

        :raises PolicyError: If the policy string is not valid. No policy is returned.
        """

        policy_str = policy.strip() if policy is not None else ''

        builder = PolicyBuilder.from_defaults(self.local, self.noisy_hpolymer)
        interpreter = ClauseInterpreter(self.handlers)

        try:
            for clause in tokenize(policy_str):
                interpreter.apply(builder, clause)

        except PolicyError as e:
            raise e.with_context(policy=policy)

        return builder.build()

    def __repr__(self):
        return f'PolicyParser(local={self.local}, noisy_hpolymer={self.noisy_hpolymer})'


def parse_policy(
        policy: Optional[str],
        local: bool = False,
        noisy_hpolymer: bool = False
) -> ResolvedPolicy:
    """
    Parse an alignment policy string.

    :param policy: Policy string (e.g. "MMP=C44;MA=4;RFG=24,12").
    :param local: Local alignment mode.
    :param noisy_hpolymer: Noisy homopolymer mode.

    :return: Resolved policy.

    :raises PolicyError: If the policy string is not valid.
    """
    return PolicyParser(local, noisy_hpolymer).parse(policy)

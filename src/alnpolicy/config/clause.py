"""
Clause handlers.

Each policy tag has a handler that checks the clause tokens and writes the fields it controls to a
`PolicyBuilder`. Handlers are stateless and are looked up by tag in `CLAUSE_HANDLERS`.

A handler describes its tokens as a sequence of slots. Each slot parses one token, and when the
token is omitted, the slot either keeps the value already in the builder or resets it to a default.
Which slots keep and which reset differs between tags:

==========  ==========================  ==================================================
Tag         Tokens                      Omitted tokens
==========  ==========================  ==================================================
MA          bonus                       (required)
SNP         penalty                     (required)
MMP         cost model                  (required)
NP          cost model                  (required)
RDG         open, extension             reset to the gap default for the homopolymer mode
RFG         open, extension             reset to the gap default for the homopolymer mode
MIN         const, linear               keep
FL          const, linear               keep
NCEIL       const, linear               const is kept, linear resets to the default
POSF        posmin, posfrac             keep
ROWM        rowmult, rowmin             keep
SEED        mismatches, length, period  mismatches are kept, length and period reset
IVAL        type, a, b                  a resets to 1.0, b resets to 0.0
==========  ==========================  ==================================================
"""

__all__ = [
    'Slot',
    'ClauseHandler',
    'FieldHandler',
    'MatchBonusHandler',
    'LinearFunctionHandler',
    'SeedHandler',
    'SeedIntervalHandler',
    'ClauseInterpreter',
    'CLAUSE_HANDLERS',
    'parse_cost_model',
    'parse_interval_type',
]

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Any, Optional
from warnings import warn

from .. import const
from ..errors import (
    CostModelPrefixError,
    IntervalTypeError,
    NumericParseError,
    PolicyError,
    TokenCountError,
    UnknownTagError,
)
from ..model import (
    CostModel,
    CostModelType,
    LinearFunction,
    SeedIntervalFunction,
    SeedIntervalType,
    SeedSpec,
)

from .builder import PolicyBuilder
from .lexer import PolicyNumberLexer
from .tokenize import Clause

#
# Token parsers
#

def parse_int(
        lexer: PolicyNumberLexer,
        token: str
) -> int:
    """Parse an integer token."""
    return lexer.parse_int(token)


def parse_float(
        lexer: PolicyNumberLexer,
        token: str
) -> float:
    """Parse a float token."""
    return lexer.parse_float(token)


def parse_cost_model(
        lexer: PolicyNumberLexer,
        token: str
) -> CostModel:
    """
    Parse a cost model token.

    The first character selects the model:

    * C: Constant cost. The remaining characters are an integer (e.g. "C6").
    * Q: Cost is the base quality.
    * R: Cost is the base quality rounded to the nearest 10 and capped at 30 (written "RQ" in some
        policy strings).

    Characters after "Q" or "R" are ignored.

    :param lexer: Number lexer.
    :param token: Cost model token.

    :return: Cost model.

    :raises CostModelPrefixError: If the first character is not "C", "Q", or "R".
    :raises NumericParseError: If a constant cost is missing or not an integer.
    """

    prefix = token[:1]

    if prefix == CostModelType.CONSTANT.value:
        if len(token) == 1:
            raise NumericParseError('Constant cost model must be followed by an integer', token=token)

        return CostModel(CostModelType.CONSTANT, lexer.parse_int(token[1:]))

    if prefix == CostModelType.QUAL.value:
        return CostModel(CostModelType.QUAL)

    if prefix == CostModelType.ROUNDED_QUAL.value:
        return CostModel(CostModelType.ROUNDED_QUAL)

    raise CostModelPrefixError('Cost model must start with C, Q, or R', token=token)


def parse_interval_type(
        lexer: PolicyNumberLexer,
        token: str
) -> SeedIntervalType:
    """
    Parse a seed interval function type. Only the first character is used: L (linear), S (square
    root), or C (cube root).

    :param lexer: Number lexer.
    :param token: Interval type token.

    :return: Interval type.

    :raises IntervalTypeError: If the first character is not "L", "S", or "C".
    """

    for ival_type in SeedIntervalType:
        if token[:1] == ival_type.value:
            return ival_type

    raise IntervalTypeError('Seed interval type must start with L, S, or C', token=token)


#
# Handlers
#

@dataclass(frozen=True)
class Slot:
    """
    One token position in a clause.

    :ivar name: Slot name (for error messages).
    :ivar parse: Converts a token to a value.
    :ivar reset: Called to get a value when the token is omitted. If None, the value already in the
        builder is kept.
    """
    name: str
    parse: Callable[[PolicyNumberLexer, str], Any]
    reset: Optional[Callable[[PolicyBuilder], Any]] = None


class ClauseHandler(ABC):
    """
    Base class for clause handlers.

    :ivar tag: Clause tag.
    :ivar slots: Token slots in order.
    :ivar min_tokens: Minimum number of tokens. The maximum is the number of slots.
    """
    tag: str
    slots: tuple[Slot, ...]
    min_tokens: int

    def __init__(
            self,
            tag: str,
            slots: Sequence[Slot],
            min_tokens: int = 1
    ) -> None:
        self.tag = tag
        self.slots = tuple(slots)
        self.min_tokens = min_tokens

        if not 1 <= min_tokens <= len(self.slots):
            raise ValueError(f'Handler {tag}: min_tokens must be in [1, {len(self.slots)}]: {min_tokens}')

    @property
    def max_tokens(self) -> int:
        return len(self.slots)

    @abstractmethod
    def get(
            self,
            builder: PolicyBuilder
    ) -> tuple:
        """
        Get current values for each slot.

        :param builder: Policy builder.

        :return: A tuple with one value per slot.
        """
        ...

    @abstractmethod
    def put(
            self,
            builder: PolicyBuilder,
            values: tuple
    ) -> None:
        """
        Write slot values to the builder.

        :param builder: Policy builder.
        :param values: A tuple with one value per slot.
        """
        ...

    def apply(
            self,
            builder: PolicyBuilder,
            tokens: Sequence[str],
            lexer: PolicyNumberLexer
    ) -> None:
        """
        Parse clause tokens and update the builder.

        All tokens are parsed before the builder is changed.

        :param builder: Policy builder.
        :param tokens: Clause tokens.
        :param lexer: Number lexer.

        :raises PolicyError: If the tokens are not valid for this tag.
        """

        if not self.min_tokens <= len(tokens) <= self.max_tokens:
            if self.min_tokens == self.max_tokens:
                expected = f'{self.max_tokens}'
            else:
                expected = f'{self.min_tokens} to {self.max_tokens}'

            raise TokenCountError(
                f'Right-hand side must have {expected} token{"s" if self.max_tokens > 1 else ""} '
                f'({", ".join(slot.name for slot in self.slots)}), found {len(tokens)}',
                token=','.join(tokens)
            )

        values = list(self.get(builder))

        for index, slot in enumerate(self.slots):
            if index < len(tokens):
                values[index] = slot.parse(lexer, tokens[index])
            elif slot.reset is not None:
                values[index] = slot.reset(builder)

        self.put(builder, tuple(values))

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.tag})'


class FieldHandler(ClauseHandler):
    """Each slot is a policy field."""

    field_names: tuple[str, ...]

    def __init__(
            self,
            tag: str,
            field_names: Sequence[str],
            parse: Callable[[PolicyNumberLexer, str], Any],
            min_tokens: int = 1
    ) -> None:
        self.field_names = tuple(field_names)

        super().__init__(
            tag,
            [Slot(name, parse) for name in self.field_names],
            min_tokens
        )

    def get(self, builder):
        return tuple(getattr(builder, name) for name in self.field_names)

    def put(self, builder, values):
        builder.update(**dict(zip(self.field_names, values)))


class MatchBonusHandler(ClauseHandler):
    """Set the match bonus value. The bonus type is not changed."""

    def __init__(self) -> None:
        super().__init__('MA', [Slot('bonus', parse_int)])

    def get(self, builder):
        return (builder.match_bonus.value,)

    def put(self, builder, values):
        builder.match_bonus = replace(builder.match_bonus, value=values[0])


class LinearFunctionHandler(ClauseHandler):
    """Set a `LinearFunction` field from constant and linear tokens."""

    field_name: str

    def __init__(
            self,
            tag: str,
            field_name: str,
            parse: Callable[[PolicyNumberLexer, str], Any],
            const_reset: Optional[Callable[[PolicyBuilder], Any]] = None,
            linear_reset: Optional[Callable[[PolicyBuilder], Any]] = None,
    ) -> None:
        self.field_name = field_name

        super().__init__(
            tag,
            [
                Slot('const', parse, const_reset),
                Slot('linear', parse, linear_reset),
            ]
        )

    def get(self, builder):
        func = getattr(builder, self.field_name)
        return func.const, func.linear

    def put(self, builder, values):
        builder.update(**{self.field_name: LinearFunction(*values)})


class SeedHandler(ClauseHandler):
    """Set seed mismatches, length, and period."""

    def __init__(self) -> None:
        super().__init__(
            'SEED',
            [
                Slot('mismatches', parse_int),
                Slot('length', parse_int, lambda builder: const.SEED_LEN),
                Slot('period', parse_int, lambda builder: const.SEED_PERIOD),
            ]
        )

    def get(self, builder):
        return builder.seed.mismatches, builder.seed.length, builder.seed.period

    def put(self, builder, values):
        seed = SeedSpec(*values)

        if not 0 <= seed.mismatches <= const.SEED_MMS_MAX:
            warn(f'Seed mismatches should be in [0, {const.SEED_MMS_MAX}]: {seed.mismatches}')

        if seed.length < 1:
            warn(f'Seed length is not positive: {seed.length}')

        if seed.period is not None and seed.period < 1:
            warn(f'Seed period is not positive (seeds are extracted at every position): {seed.period}')

        builder.seed = seed


class SeedIntervalHandler(ClauseHandler):
    """Set the seed interval function."""

    def __init__(self) -> None:
        super().__init__(
            'IVAL',
            [
                Slot('type', parse_interval_type),
                Slot('a', parse_float, lambda builder: const.SEED_IVAL_A),
                Slot('b', parse_float, lambda builder: const.SEED_IVAL_B),
            ]
        )

    def get(self, builder):
        ival = builder.seed_interval
        return ival.type, ival.a, ival.b

    def put(self, builder, values):
        builder.seed_interval = SeedIntervalFunction(*values)


def _make_handlers() -> Mapping[str, ClauseHandler]:
    """Create the handler table."""

    handler_list = [
        MatchBonusHandler(),
        FieldHandler('SNP', ['snp'], parse_int),
        FieldHandler('MMP', ['mismatch'], parse_cost_model),
        FieldHandler('NP', ['n_penalty'], parse_cost_model),
        LinearFunctionHandler(
            'RDG', 'read_gap', parse_int,
            lambda builder: builder.default_gaps()[0].const,
            lambda builder: builder.default_gaps()[0].linear,
        ),
        LinearFunctionHandler(
            'RFG', 'ref_gap', parse_int,
            lambda builder: builder.default_gaps()[1].const,
            lambda builder: builder.default_gaps()[1].linear,
        ),
        LinearFunctionHandler('MIN', 'min_score', parse_float),
        LinearFunctionHandler('FL', 'score_floor', parse_float),
        LinearFunctionHandler(
            'NCEIL', 'n_ceil', parse_float,
            linear_reset=lambda builder: const.N_CEIL.linear,
        ),
        FieldHandler('POSF', ['posmin', 'posfrac'], parse_float),
        FieldHandler('ROWM', ['rowmult', 'rowmin'], parse_float),
        SeedHandler(),
        SeedIntervalHandler(),
    ]

    return MappingProxyType({handler.tag: handler for handler in handler_list})


CLAUSE_HANDLERS: Mapping[str, ClauseHandler] = _make_handlers()
"""Clause handlers keyed by tag."""


class ClauseInterpreter(object):
    """
    Apply clauses to a policy builder.

    An interpreter owns a number lexer and must not be shared between threads.

    :ivar handlers: Clause handlers keyed by tag.
    :ivar lexer: Number lexer.
    """
    handlers: Mapping[str, ClauseHandler]
    lexer: PolicyNumberLexer

    def __init__(
            self,
            handlers: Optional[Mapping[str, ClauseHandler]] = None
    ) -> None:
        self.handlers = handlers if handlers is not None else CLAUSE_HANDLERS
        self.lexer = PolicyNumberLexer()

    def apply(
            self,
            builder: PolicyBuilder,
            clause: Clause
    ) -> None:
        """
        Apply one clause.

        :param builder: Policy builder.
        :param clause: Clause.

        :raises PolicyError: If the tag is unknown or the clause tokens are not valid for the tag.
        """

        try:
            handler = self.handlers[clause.tag]
        except KeyError:
            raise UnknownTagError(
                'Unexpected alignment policy setting', clause_index=clause.index, tag=clause.tag
            ) from None

        try:
            handler.apply(builder, clause.tokens, self.lexer)
        except PolicyError as e:
            raise e.with_context(clause_index=clause.index, tag=clause.tag)

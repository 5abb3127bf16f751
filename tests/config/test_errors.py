"""
Invalid policy strings.
"""

from tests.config.resources import *

from alnpolicy import errors


ERROR_CASES = [
    ('MA', errors.MalformedClauseError, 1, None),
    ('MA=4=5', errors.MalformedClauseError, 1, None),
    ('MA=4;;SNP=3', errors.MalformedClauseError, 2, None),
    ('MA=', errors.EmptyTokenError, 1, 'MA'),
    ('MIN=4,', errors.EmptyTokenError, 1, 'MIN'),
    ('SNP=3;SEED=1,,2', errors.EmptyTokenError, 2, 'SEED'),
    ('SEED=1,2,3,4', errors.TooManyTokensError, 1, 'SEED'),
    ('MA=4;XX=1', errors.UnknownTagError, 2, 'XX'),
    ('ma=4', errors.UnknownTagError, 1, 'ma'),
    ('=4', errors.UnknownTagError, 1, ''),
    ('MMP=X5', errors.CostModelPrefixError, 1, 'MMP'),
    ('MA=1;NP=5', errors.CostModelPrefixError, 2, 'NP'),
    ('IVAL=Q,1,2', errors.IntervalTypeError, 1, 'IVAL'),
    ('MA=4,5', errors.TokenCountError, 1, 'MA'),
    ('MMP=C4,Q', errors.TokenCountError, 1, 'MMP'),
    ('RDG=1,2,3', errors.TokenCountError, 1, 'RDG'),
    ('MA=four', errors.NumericParseError, 1, 'MA'),
    ('MA=4.5', errors.NumericParseError, 1, 'MA'),
    ('MMP=C', errors.NumericParseError, 1, 'MMP'),
    ('MMP=C4x', errors.NumericParseError, 1, 'MMP'),
    ('MIN=0.5.5', errors.NumericParseError, 1, 'MIN'),
    ('FL=1, 2', errors.NumericParseError, 1, 'FL'),
    ('SEED=1,2.0', errors.NumericParseError, 1, 'SEED'),
    ('MA=\u0663', errors.NumericParseError, 1, 'MA'),
    ('MIN=\uff11.5', errors.NumericParseError, 1, 'MIN'),
]
"""Policy string, error class, clause index, and tag."""


@pytest.mark.parametrize('policy_str,err_class,clause_index,tag', ERROR_CASES)
class TestError:
    """Each grammar violation raises a typed error."""

    def test_error_class(self, policy_str: str, err_class: type, clause_index: int, tag: str) -> None:
        for local, noisy_hpolymer in FLAG_TUPLES:
            with pytest.raises(err_class):
                alnpolicy.parse_policy(policy_str, local, noisy_hpolymer)

    def test_error_location(self, policy_str: str, err_class: type, clause_index: int, tag: str) -> None:
        with pytest.raises(errors.PolicyError) as exc_info:
            alnpolicy.parse_policy(policy_str)

        err = exc_info.value

        assert err.clause_index == clause_index
        assert err.tag == tag
        assert err.policy == policy_str
        assert err.reason

        assert f'setting {clause_index}' in str(err)
        assert policy_str in str(err)

    def test_value_error(self, policy_str: str, err_class: type, clause_index: int, tag: str) -> None:
        """Policy errors are value errors."""

        with pytest.raises(ValueError):
            alnpolicy.parse_policy(policy_str)


def test_error_token() -> None:
    """Errors report the offending token."""

    with pytest.raises(errors.NumericParseError) as exc_info:
        alnpolicy.parse_policy('MA=1;RFG=5,x3')

    assert exc_info.value.token == 'x3'
    assert exc_info.value.clause_index == 2
    assert exc_info.value.tag == 'RFG'


def test_error_after_valid_clauses() -> None:
    """An error in a later clause discards earlier clauses."""

    parser = alnpolicy.config.PolicyParser(local=True)

    with pytest.raises(errors.UnknownTagError):
        parser.parse('MA=9;SNP=12;BAD=1')

    # Parser is reusable and unaffected
    assert parser.parse('') == alnpolicy.resolve_defaults(local=True)


def test_trailing_semicolon() -> None:
    """A trailing semicolon does not add an empty clause."""

    assert parse('MA=4;') == parse('MA=4')

import ply.lex

from ..errors import NumericParseError

__all__ = ['PolicyNumberLexer']

class PolicyNumberLexer(object):
    """
    Token lexer for numeric values in alignment policy strings.

    Each comma-separated token on the right-hand side of a policy clause is lexed separately and
    must be exactly one number token.
    """
    lexer: ply.lex.lex
    tokens: tuple[str]

    def __init__(self,
        **kwdargs: dict
    ):
        """
        Initialize lexer.

        :param kwdargs: Passed to `ply.lex.lex`
        """
        self.lexer = ply.lex.lex(module=self, **kwdargs)

    tokens = (
        'T_INF',
        'T_FLOAT_EXP',
        'T_FLOAT',
        'T_INT',
    )

    INT_TOKENS = frozenset({'T_INT'})
    FLOAT_TOKENS = frozenset(tokens)

    # Parse numbers
    def parse_int(self,
        str_val: str
    ) -> int:
        """
        Parse an integer token.

        :param str_val: String.

        :return: Integer value.

        :raises NumericParseError: If `str_val` is not a single integer token.
        """
        return self._parse(str_val, self.INT_TOKENS, 'integer')

    def parse_float(self,
        str_val: str
    ) -> float:
        """
        Parse a floating point token. Integers, exponents, and infinities ("inf", "-Infinity") are
        accepted.

        :param str_val: String.

        :return: Float value.

        :raises NumericParseError: If `str_val` is not a single number token.
        """
        return float(self._parse(str_val, self.FLOAT_TOKENS, 'number'))

    def token_list(self,
        str_val: str
    ) -> list[ply.lex.LexToken]:
        """
        Lex a string.

        :param str_val: String.

        :return: A list of tokens.
        """
        self.lexer.input(str_val)

        return list(iter(self.lexer.token, None))

    def _parse(self,
        str_val: str,
        expected: frozenset[str],
        type_name: str
    ) -> int | float:

        if str_val is None or str_val == '':
            raise NumericParseError(f'Expected {type_name}, found an empty token', token=str_val)

        tok_list = self.token_list(str_val)

        if len(tok_list) != 1 or tok_list[0].type not in expected:
            raise NumericParseError(f'Expected {type_name}', token=str_val)

        return tok_list[0].value

    # Number tokens. Defined as functions to guarantee precedence in ply.
    def t_T_INF(self, t):
        r'[+-]?[iI][nN][fF]([iI][nN][iI][tT][yY])?'
        t.value = float(t.value)
        return t

    def t_T_FLOAT_EXP(self, t):
        r'[+-]?(([0-9]+\.?[0-9]*)|(\.[0-9]+))[eE][+-]?[0-9]+'
        t.value = float(t.value)
        return t

    def t_T_FLOAT(self, t):
        r'[+-]?(([0-9]+\.[0-9]*)|(\.[0-9]+))'
        t.value = float(t.value)
        return t

    def t_T_INT(self, t):
        r'[+-]?[0-9]+'
        t.value = int(t.value)
        return t

    # Handle errors
    def t_error(self, t):
        raise NumericParseError(
            'Illegal character "{}" at position {}'.format(
                t.value[0],
                t.lexpos + 1
            ),
            token=t.lexer.lexdata
        )

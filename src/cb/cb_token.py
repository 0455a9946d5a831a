# cb_token.py
"""Token categories and the keyword table for the CB language."""

from dataclasses import dataclass
from types import MappingProxyType

# Special
ILLEGAL = "ILLEGAL"
EOF = "EOF"

# Identifiers and literals
IDENT = "IDENT"  # add, foobar, x, y
INT = "INT"      # 12345

# Operators
ASSIGN = "="
PLUS = "+"
MINUS = "-"
BANG = "!"
ASTERISK = "*"
SLASH = "/"

LT = "<"
GT = ">"

EQ = "=="
NOT_EQ = "!="

# Delimiters
COMMA = ","
SEMICOLON = ";"

LPAREN = "("
RPAREN = ")"
LBRACE = "{"
RBRACE = "}"

# Keywords
FUNCTION = "FUNCTION"
LET = "LET"
TRUE = "TRUE"
FALSE = "FALSE"
IF = "IF"
ELSE = "ELSE"
RETURN = "RETURN"

TOKEN_TYPES = frozenset({
    ILLEGAL, EOF, IDENT, INT,
    ASSIGN, PLUS, MINUS, BANG, ASTERISK, SLASH, LT, GT, EQ, NOT_EQ,
    COMMA, SEMICOLON, LPAREN, RPAREN, LBRACE, RBRACE,
    FUNCTION, LET, TRUE, FALSE, IF, ELSE, RETURN,
})

KEYWORDS = MappingProxyType({
    "fn": FUNCTION,
    "let": LET,
    "true": TRUE,
    "false": FALSE,
    "if": IF,
    "else": ELSE,
    "return": RETURN,
})


@dataclass(frozen=True)
class Token:
    type: str
    literal: str

    def __str__(self):
        return f"{{Type:{self.type} Literal:{self.literal}}}"


def lookup_ident(ident):
    """Return the keyword category for ``ident``, or IDENT if it is not reserved."""
    return KEYWORDS.get(ident, IDENT)

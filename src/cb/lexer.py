# lexer.py
import logging

from .cb_token import *
from .errors import IllegalCharacterError

logger = logging.getLogger("cb.lexer")

_WHITESPACE = (' ', '\t', '\n', '\r')

_SINGLE_CHAR_TOKENS = {
    ';': SEMICOLON,
    '(': LPAREN,
    ')': RPAREN,
    '{': LBRACE,
    '}': RBRACE,
    ',': COMMA,
    '+': PLUS,
    '-': MINUS,
    '*': ASTERISK,
    '/': SLASH,
    '<': LT,
    '>': GT,
}

# First char -> (type when followed by '=', type when alone)
_EQUALS_PAIRS = {
    '=': (EQ, ASSIGN),
    '!': (NOT_EQ, BANG),
}


class Lexer:
    """Turns CB source text into tokens, one ``next_token()`` call at a time.

    Every byte is one unit of input. Text is encoded as UTF-8 first, so a
    non-ASCII character yields one ILLEGAL token per byte; anything that
    is not ASCII punctuation, a letter, a digit or whitespace comes back as
    an ILLEGAL token.
    """

    def __init__(self, source_code):
        # Scan bytes, not code points: each byte becomes one Latin-1 char
        if isinstance(source_code, str):
            source_code = source_code.encode("utf-8")
        source_code = bytes(source_code).decode("latin-1")
        self.input = source_code
        self.position = 0       # points at the char in self.ch
        self.read_position = 0  # points at the next unread char
        self.ch = ""            # "" marks end of input
        self.token_start = 0    # offset of the last token returned
        self.read_char()

    def __iter__(self):
        tok = self.next_token()
        while tok.type != EOF:
            yield tok
            tok = self.next_token()

    def read_char(self):
        if self.read_position >= len(self.input):
            self.ch = ""
        else:
            self.ch = self.input[self.read_position]

        # Once at the end, position stays pinned to len(input)
        self.position = min(self.read_position, len(self.input))
        self.read_position = self.position + 1

    def peek_char(self):
        if self.read_position >= len(self.input):
            return ""
        return self.input[self.read_position]

    def next_token(self):
        self.skip_whitespace()
        self.token_start = self.position

        if self.ch in _EQUALS_PAIRS:
            paired, alone = _EQUALS_PAIRS[self.ch]
            if self.peek_char() == '=':
                ch = self.ch
                self.read_char()
                tok = Token(paired, ch + self.ch)
            else:
                tok = Token(alone, self.ch)
        elif self.ch in _SINGLE_CHAR_TOKENS:
            tok = Token(_SINGLE_CHAR_TOKENS[self.ch], self.ch)
        elif self.ch == "":
            tok = Token(EOF, "")
        elif self.is_letter(self.ch):
            literal = self.read_identifier()
            return Token(lookup_ident(literal), literal)
        elif self.is_digit(self.ch):
            return Token(INT, self.read_number())
        else:
            logger.debug("illegal character %r at offset %d", self.ch, self.position)
            tok = Token(ILLEGAL, self.ch)

        self.read_char()
        return tok

    def read_identifier(self):
        start_position = self.position
        while self.is_letter(self.ch):
            self.read_char()
        return self.input[start_position:self.position]

    def read_number(self):
        start_position = self.position
        while self.is_digit(self.ch):
            self.read_char()
        return self.input[start_position:self.position]

    def is_letter(self, char):
        return 'a' <= char <= 'z' or 'A' <= char <= 'Z' or char == '_'

    def is_digit(self, char):
        return '0' <= char <= '9'

    def skip_whitespace(self):
        while self.ch in _WHITESPACE:
            self.read_char()


def tokenize(source_code, strict=False):
    """Scan ``source_code`` to the end and return every token, EOF included.

    With ``strict`` set, the first ILLEGAL token raises IllegalCharacterError
    instead of being returned.
    """
    lexer = Lexer(source_code)
    tokens = []
    while True:
        tok = lexer.next_token()
        if strict and tok.type == ILLEGAL:
            raise IllegalCharacterError(tok, lexer.token_start)
        tokens.append(tok)
        if tok.type == EOF:
            return tokens

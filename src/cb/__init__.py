"""CB language front end: tokens, lexer and the token REPL."""

__version__ = "0.1.0"

from .cb_token import Token, lookup_ident
from .lexer import Lexer, tokenize

__all__ = ["Token", "Lexer", "lookup_ident", "tokenize", "__version__"]

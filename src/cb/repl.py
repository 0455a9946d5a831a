# repl.py
import logging

from .cb_token import EOF
from .lexer import Lexer

logger = logging.getLogger("cb.repl")

PROMPT = ">>"


def start(in_stream, out_stream, prompt=PROMPT):
    """Read lines from ``in_stream`` and write each line's tokens to ``out_stream``.

    Every line gets a fresh lexer. Tokens are printed until EOF, then the
    prompt is shown again. Returns when ``in_stream`` runs out.
    """
    lines = 0
    while True:
        out_stream.write(prompt)
        out_stream.flush()

        line = in_stream.readline()
        if not line:
            logger.debug("input exhausted after %d line(s)", lines)
            return
        lines += 1

        lexer = Lexer(line)
        tok = lexer.next_token()
        while tok.type != EOF:
            out_stream.write(f"{tok}\n")
            tok = lexer.next_token()

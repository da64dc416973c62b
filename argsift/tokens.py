"""
Argsift tokenizer: raw argument strings → primitive tokens.

Rules (evaluated on the first character of the current raw string)
- '='        → a one-character "=" token.
- '"'        → the quoted interior (quotes stripped), consumed through the closing quote;
               an unterminated quote yields the rest of the string.
- otherwise  → everything up to (not including) the first '=', or the whole string.

A raw string is consumed piecewise; once it is empty the cursor advances to the next
one. Content is never joined across raw strings, so "--name=" "value" yields
"--name", "=", "value" while "--name=value" yields the same three tokens from one string.
"""
from collections import deque, namedtuple

from .utils import mirror

QUOTE = '"'
EQUALS = "="

Token = namedtuple("Token", ("text", "length", "index"))
Token.__doc__ = """
one primitive lexical unit.

- text: the token text (quotes already stripped)
- length: number of characters consumed from the raw argument
- index: 1-based position of the raw argument the token was cut from
"""


def unescape(argument, /):
    r"""
    undo the backslash-quote escaping some shell layers apply to arguments.

    - a leading \" loses its backslash ( \"abc → "abc )
    - a trailing \" becomes a bare quote ( abc\" → abc" )
    """
    if not isinstance(argument, str):
        raise TypeError("argument must be a string, not %r" % type(argument).__name__)
    if argument.startswith('\\"'):
        argument = argument[1:]
    if argument.endswith('\\"'):
        argument = argument[:-2] + QUOTE
    return argument


class Tokenizer:
    """
    Incremental tokenizer over a sequence of raw argument strings.

    The tokenizer is its own iterator: every next() call cuts one token off the
    front of the current raw argument, and StopIteration marks the end of input.
    An empty raw argument produces one empty token.
    """

    remaining = mirror("args")

    def __init__(self, args=(), /):
        self._args = deque(args)
        self._index = 1

    @property
    def index(self):
        """1-based position of the raw argument under the cursor."""
        return self._index

    def __iter__(self):
        return self

    def __next__(self):
        if not self._args:
            raise StopIteration

        source = self._args[0]

        if source.startswith(EQUALS):
            text, length = EQUALS, 1
        elif source.startswith(QUOTE):
            end = source.find(QUOTE, 1)
            if end < 0:
                text, length = source[1:], len(source)
            else:
                text, length = source[1:end], end + 1
        else:
            end = source.find(EQUALS)
            if end < 0:
                text, length = source, len(source)
            else:
                text, length = source[:end], end

        token = Token(text, length, self._index)

        # consume the token; advance once the raw argument is used up
        if rest := source[length:]:
            self._args[0] = rest
        else:
            self._args.popleft()
            self._index += 1

        return token

    def __repr__(self):
        return "Tokenizer(%r)" % (tuple(self._args),)

    def __rich_repr__(self):
        yield "remaining", tuple(self._args)
        yield "index", self._index


__all__ = (
    "Token",
    "Tokenizer",
    "unescape",
    "QUOTE",
    "EQUALS",
)

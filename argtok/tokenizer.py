"""Single-pass tokenizer for POSIX/GNU style argument vectors.

Arguments are read in order and classified as keys, values or the IO marker:

* Arguments starting with "-" or "--" are keys. A single hyphen introduces
  one-character keys, which may be bundled ("-key" is "-k -e -y"); a double
  hyphen introduces a key of at least two characters ("--verbose").
* A short key may carry its value directly ("-kvalue") or after an equal
  sign ("-k=value"). A long key takes its value after an equal sign
  ("--foo=bar") or from the next argument ("--foo bar").
* Arguments not starting with a hyphen are values.
* A lone "-" stands for STDIN/STDOUT and must be the last argument.
* A lone "--" ends key processing; everything after it is a value.

Whether a key takes a value is up to the caller, who asks for it right
after the key is reported::

    tokenizer = Tokenizer(sys.argv[1:])
    for token in tokenizer:
        if token.kind is TokenType.KEY and token.text in ('o', 'output'):
            output = tokenizer.take_value()
        elif token.kind is TokenType.KEY and token.text in ('e', 'encrypt'):
            cipher = tokenizer.take_attached_value()
        elif token.kind is TokenType.VALUE:
            inputs.append(token.text)
        elif token.kind is TokenType.IO:
            use_stdio = True
"""

from collections import deque
from typing import Iterable, Iterator, Optional, Tuple

from .models import Token, TokenType
from .errors import MalformedArguments


class Tokenizer:
    """Classifies an argument vector one token at a time.

    The tokenizer owns a queue of the remaining arguments. Bundles and
    "="-attached values are split lazily: the unread part is pushed back onto
    the front of the queue, where ``take_value`` can claim it for the key
    that was just reported. The queue only ever grows by such shorter
    remainders, so a parse always terminates.
    """

    def __init__(self, args: Iterable[str]):
        self._args = deque(args)
        self._expecting_keys = True
        self._expecting_io = False
        self._in_bundle = False
        self._before_optional = False

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.next()
        if token is None:
            raise StopIteration
        return token

    @property
    def has_more(self) -> bool:
        """True while there are arguments left to read."""
        return len(self._args) > 0

    @property
    def expecting_keys(self) -> bool:
        """False once "--" (or a lone "-") has been consumed."""
        return self._expecting_keys

    @property
    def expecting_io(self) -> bool:
        return self._expecting_io

    @property
    def remaining(self) -> Tuple[str, ...]:
        """Snapshot of the unread arguments, re-injected remainders included."""
        return tuple(self._args)

    def next(self) -> Optional[Token]:
        """Read and classify the next token.

        Returns None once the arguments are exhausted, and keeps returning
        None on later calls.

        Raises:
            MalformedArguments: If a lone hyphen is followed by more
                arguments, or a double hyphen introduces a one-character key.
        """
        if not self._args:
            return None

        text, is_value = self._next()

        if is_value:
            return Token(self.take_value(), TokenType.VALUE)
        if self._expecting_io:
            return Token(None, TokenType.IO)
        if text is None:
            # a trailing "--" consumed the rest of the vector
            return None
        if self._expecting_keys:
            return Token(text, TokenType.KEY)
        return Token(text, TokenType.VALUE)

    def _next(self) -> Tuple[Optional[str], bool]:
        """Extract the next raw token.

        Returns a ``(text, is_value)`` pair. ``is_value`` is set for a plain
        argument while keys are still expected; it is left on the queue so
        that ``next`` pulls it the same way a key pulls its value.
        """
        while self._args:
            front = self._args[0]

            if front == '-':
                self._expecting_io = True
                self._expecting_keys = False
                self._args.popleft()
                if self._args:
                    raise MalformedArguments(
                        "Expected input or output, but found command line "
                        "arguments after hyphen ('-') token."
                    )
                return None, False

            if not self._expecting_keys:
                return self._args.popleft(), False

            if front == '--':
                self._expecting_keys = False
                self._args.popleft()
                continue

            if front.startswith('-'):
                return self._split_key(self._args.popleft()), False

            return None, True

        return None, False

    def _split_key(self, o: str) -> str:
        eq = o.find('=')
        if eq > -1:
            remainder = o[eq + 1:]
            o = o[:eq]
            if remainder:
                self._before_optional = True
                self._args.appendleft(remainder)

        if o.startswith('--'):
            if len(o) < 4:
                raise MalformedArguments(
                    f"Expected a multi-character key to follow a double "
                    f"hyphen ('--'), but found a single character key '{o}'."
                )
            return o[2:]

        if len(o) == 2:
            self._in_bundle = False
            return o[1:]

        # "-abc": report "a" now, leave "-bc" for the next read
        self._in_bundle = True
        self._args.appendleft('-' + o[2:])
        return o[1:2]

    def take_value(self) -> Optional[str]:
        """Take the value of the key just reported.

        Use this when the key requires a value. The value is either attached
        to the key ("-kvalue", "-k=value", "--foo=bar") or the next argument
        ("-k value", "--foo bar").

        Returns:
            The value, or None if the arguments are exhausted or the next
            argument is itself a key.
        """
        self._before_optional = False

        if not self._args or (not self._in_bundle and self._args[0].startswith('-')):
            return None

        value = self._args.popleft()

        if self._in_bundle:
            self._in_bundle = False
            return value[1:]

        return value

    def take_attached_value(self) -> Optional[str]:
        """Take the value of the key just reported, only if it is attached.

        Use this when the key accepts, but does not require, a value. Only
        a value that is textually part of the key's argument ("-kvalue",
        "--foo=bar") is taken; a separate following argument never is.
        """
        if self._before_optional or self._in_bundle:
            return self.take_value()
        return None

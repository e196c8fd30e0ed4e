"""Whitespace-separated integer tokens from a text source."""

import io
from collections import deque
from typing import Iterable, Iterator, Optional, TextIO, Union

from torchpoly.polynomial._exceptions import TruncatedInputError


class TokenReader:
    """Read whitespace-separated tokens from text.

    A text stream (any object with ``read``) is consumed one character at a
    time and only up to the whitespace ending the last token read, so the
    rest of the stream stays available to other readers. Any other iterable
    is consumed one line at a time; tokens left on a line stay buffered in
    the reader, so reuse the same reader to read them.

    Parameters
    ----------
    source : str, TextIO, or iterable of str
        Text to tokenize. A ``str`` is read as a whole document.

    Examples
    --------
    >>> reader = TokenReader("3 2 -1 -1\\n4 0 -1 -1")
    >>> polynomial_read(reader).coeffs
    tensor([0, 0, 3])
    >>> polynomial_read(reader).coeffs
    tensor([4])
    """

    def __init__(self, source: Union[str, TextIO, Iterable[str]]):
        if isinstance(source, str):
            source = io.StringIO(source)

        self._stream: Optional[TextIO] = None
        self._lines: Optional[Iterator[str]] = None
        if hasattr(source, "read"):
            self._stream = source
        else:
            self._lines = iter(source)

        self._tokens: deque = deque()

    def __iter__(self) -> "TokenReader":
        return self

    def __next__(self) -> str:
        if self._tokens:
            return self._tokens.popleft()

        if self._stream is not None:
            return self._read_token()

        while not self._tokens:
            self._tokens.extend(next(self._lines).split())
        return self._tokens.popleft()

    def _read_token(self) -> str:
        chars = []
        while True:
            char = self._stream.read(1)
            if not char:
                if chars:
                    break
                raise StopIteration
            if char.isspace():
                if chars:
                    break
                continue
            chars.append(char)

        return "".join(chars)

    def read_int(self) -> int:
        """Read the next token as an integer.

        Raises
        ------
        TruncatedInputError
            If the source has no tokens left.
        ValueError
            If the token is not an integer literal.
        """
        try:
            token = next(self)
        except StopIteration:
            raise TruncatedInputError(
                "Input ended before the -1 -1 terminator"
            ) from None

        return int(token)

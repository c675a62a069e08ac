"""quotesplit tokenizer: single-pass state machine over a command line.

Design decisions:
- Only U+0020 separates arguments; tabs and newlines are ordinary characters.
- Single quotes preserve everything up to the closing quote.
- Inside double quotes a backslash escapes only ``"`` and ``\\``; before any
  other character it is dropped.
- Quoted empty pairs (``''``, ``""``) do not produce a token on their own.
- The machine never raises. Unterminated quotes are reported through the
  end state, and ``parse(..., strict=True)`` turns that into an error.
"""

from __future__ import annotations

from quotesplit.tokenizer.states import (
    BACKSLASH,
    DOUBLE_QUOTE,
    ESCAPABLE_IN_DOUBLE_QUOTE,
    QUOTE_STATES,
    SINGLE_QUOTE,
    SPACE,
    State,
)


class UnterminatedQuoteError(ValueError):
    """Raised in strict mode when input ends inside a quoted segment."""

    def __init__(self, quote: str, position: int) -> None:
        self.quote = quote
        self.position = position
        kind = "single" if quote == SINGLE_QUOTE else "double"
        super().__init__(f"Unterminated {kind} quote at position {position}")


class Tokenizer:
    """Splits a command line into argument strings.

    Usage::

        tokenizer = Tokenizer("ls -l 'my file'")
        args = tokenizer.tokenize()   # ['ls', '-l', 'my file']
    """

    def __init__(self, line: str) -> None:
        self.line = line
        self.pos = 0
        self.state = State.NORMAL
        self.quote_start: int | None = None
        self._current: list[str] = []
        self._args: list[str] = []

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def tokenize(self) -> list[str]:
        """Consume the whole line and return the argument list."""
        self.pos = 0
        self.state = State.NORMAL
        self.quote_start = None
        self._current = []
        self._args = []

        handlers = {
            State.NORMAL: self._handle_normal,
            State.IN_SINGLE_QUOTE: self._handle_single_quote,
            State.IN_DOUBLE_QUOTE: self._handle_double_quote,
        }

        while not self._at_end():
            ch = self._advance()
            handlers[self.state](ch)

        self._flush()
        return list(self._args)

    @property
    def tokens(self) -> tuple[str, ...]:
        """Arguments produced by the last call to `tokenize`."""
        return tuple(self._args)

    # ------------------------------------------------------------------
    # Per-state handlers
    # ------------------------------------------------------------------

    def _handle_normal(self, ch: str) -> None:
        if ch in QUOTE_STATES:
            self._open_quote(ch)
        elif ch == SPACE:
            self._flush()
        else:
            self._current.append(ch)

    def _handle_single_quote(self, ch: str) -> None:
        if ch == SINGLE_QUOTE:
            self._close_quote()
        else:
            self._current.append(ch)

    def _handle_double_quote(self, ch: str) -> None:
        if ch == DOUBLE_QUOTE:
            self._close_quote()
        elif ch == BACKSLASH:
            # Anything else after the backslash is left for the next iteration
            if self._peek() in ESCAPABLE_IN_DOUBLE_QUOTE:
                self._current.append(self._advance())
        else:
            self._current.append(ch)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _open_quote(self, quote: str) -> None:
        self.state = QUOTE_STATES[quote]
        self.quote_start = self.pos - 1

    def _close_quote(self) -> None:
        self.state = State.NORMAL
        self.quote_start = None

    def _flush(self) -> None:
        """Move the accumulated characters into the argument list, if any."""
        if self._current:
            self._args.append("".join(self._current))
            self._current = []

    def _peek(self) -> str | None:
        """Return the next character without consuming it, or None at the end."""
        if self._at_end():
            return None
        return self.line[self.pos]

    def _advance(self) -> str:
        """Consume and return the next character."""
        ch = self.line[self.pos]
        self.pos += 1
        return ch

    def _at_end(self) -> bool:
        return self.pos >= len(self.line)


def parse(line: str, *, strict: bool = False) -> list[str]:
    """
    Split a command line into arguments.

    Rules:
    - Spaces outside quotes separate arguments
    - Single quotes (') group text verbatim
    - Double quotes (") group text; \\" and \\\\ are unescaped inside them
    - Quote characters are removed from arguments
    - Quoted segments glued to other text join the same argument

    Args:
        line: The command line to split
        strict: Reject input that ends inside a quoted segment

    Returns:
        List of arguments, in order of appearance

    Raises:
        UnterminatedQuoteError: If strict is set and a quote is left open
    """
    tokenizer = Tokenizer(line)
    args = tokenizer.tokenize()
    if strict and tokenizer.state is not State.NORMAL:
        raise UnterminatedQuoteError(line[tokenizer.quote_start], tokenizer.quote_start)
    return args


# shlex-style name
split = parse

"""Tokenizer modes and the metacharacters that drive transitions between them."""

from __future__ import annotations

from enum import Enum, auto


class State(Enum):
    """The quoting context the tokenizer is currently in.

    Quotes never nest, so exactly one mode is active at any time and no
    stack is needed.
    """

    NORMAL = auto()
    IN_SINGLE_QUOTE = auto()
    IN_DOUBLE_QUOTE = auto()


SINGLE_QUOTE = "'"
DOUBLE_QUOTE = '"'
BACKSLASH = "\\"
SPACE = " "

# Characters a backslash may escape inside double quotes
ESCAPABLE_IN_DOUBLE_QUOTE: frozenset[str] = frozenset({DOUBLE_QUOTE, BACKSLASH})

# Map the opening quote character to the mode it enters
QUOTE_STATES: dict[str, State] = {
    SINGLE_QUOTE: State.IN_SINGLE_QUOTE,
    DOUBLE_QUOTE: State.IN_DOUBLE_QUOTE,
}
